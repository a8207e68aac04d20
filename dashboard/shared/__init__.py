"""Shared dashboard utilities."""

# --- Configuration, constants & formatting ---
from .config import ConfigError, DashboardConfig, load_config
from .constants import DELTA_COLORS, NOT_AVAILABLE
from .formatters import (
    delta_color,
    format_delta,
    format_gap,
    format_improvement,
    format_lap_time,
    format_speed,
    format_weather_summary,
)

# --- Data layer ---
from .data import RaceDataError, RaceDataRepository, get_repository

# --- Service layer ---
from .services import (
    DriverLapsService,
    LapComparisonService,
    RaceResultsService,
    SelectionGeneration,
)

__all__ = [
    "ConfigError",
    "DELTA_COLORS",
    "DashboardConfig",
    "DriverLapsService",
    "LapComparisonService",
    "NOT_AVAILABLE",
    "RaceDataError",
    "RaceDataRepository",
    "RaceResultsService",
    "SelectionGeneration",
    "delta_color",
    "format_delta",
    "format_gap",
    "format_improvement",
    "format_lap_time",
    "format_speed",
    "format_weather_summary",
    "get_repository",
    "load_config",
]
