"""Service layer: business logic for the telemetry dashboard."""

from .driver_laps import DriverLapsKPIs, DriverLapsService, DriverRaceData
from .lap_comparison import DriverBestLap, DriverBestsComparison, LapComparisonService
from .race_results import RaceResultsService
from .refresh import GenerationToken, SelectionGeneration

__all__ = [
    "DriverBestLap",
    "DriverBestsComparison",
    "DriverLapsKPIs",
    "DriverLapsService",
    "DriverRaceData",
    "GenerationToken",
    "LapComparisonService",
    "RaceResultsService",
    "SelectionGeneration",
]
