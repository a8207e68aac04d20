"""lapmetrics: lap timing and telemetry derived metrics."""

from lapmetrics._filters import Filter
from lapmetrics.client import AsyncRaceDataClient, RaceDataClient
from lapmetrics.delta import DELTA_EPSILON, classify_delta, compute_delta
from lapmetrics.exceptions import (
    DataAPIError,
    DataConnectionError,
    DataTimeoutError,
    DataValidationError,
    LapMetricsError,
    LapMetricsTypeError,
    LapSequenceError,
)
from lapmetrics.metrics import (
    AVERAGE_SPEED,
    LAP_TIME,
    SECTOR_1,
    SECTOR_2,
    SECTOR_3,
    TOP_SPEED,
    TRACKED_METRICS,
    Metric,
    Polarity,
)
from lapmetrics.reference import resolve_best, resolve_scoped
from lapmetrics.series import (
    analyze_driver_race,
    compare_lap_to_field,
    enrich_laps,
    theoretical_best_lap,
)
from lapmetrics.stats import (
    extremum,
    mean,
    population_std_dev,
    summarize_lap_times,
    summarize_weather,
)
from lapmetrics.timecodec import format_seconds, parse_duration, parse_gap_interval, to_seconds

__all__ = [
    "AVERAGE_SPEED",
    "AsyncRaceDataClient",
    "DELTA_EPSILON",
    "DataAPIError",
    "DataConnectionError",
    "DataTimeoutError",
    "DataValidationError",
    "Filter",
    "LAP_TIME",
    "LapMetricsError",
    "LapMetricsTypeError",
    "LapSequenceError",
    "Metric",
    "Polarity",
    "RaceDataClient",
    "SECTOR_1",
    "SECTOR_2",
    "SECTOR_3",
    "TOP_SPEED",
    "TRACKED_METRICS",
    "analyze_driver_race",
    "classify_delta",
    "compare_lap_to_field",
    "compute_delta",
    "enrich_laps",
    "extremum",
    "format_seconds",
    "mean",
    "parse_duration",
    "parse_gap_interval",
    "population_std_dev",
    "resolve_best",
    "resolve_scoped",
    "summarize_lap_times",
    "summarize_weather",
    "theoretical_best_lap",
    "to_seconds",
]

__version__ = "0.1.0"
