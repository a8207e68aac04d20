"""Lap metrics data models."""

from lapmetrics.models.delta import Classification, DeltaResult
from lapmetrics.models.lap import EnrichedLapRecord, LapRecord, PreviousLapDelta
from lapmetrics.models.race import Driver, Race
from lapmetrics.models.race_result import RaceResult
from lapmetrics.models.reference import MetricReference, ReferenceScope
from lapmetrics.models.stats import Extremum, LapTimeStats
from lapmetrics.models.views import DriverRaceView, FieldLapEntry, FieldLapView
from lapmetrics.models.weather import RainStatus, WeatherSample, WeatherSummary

__all__ = [
    "Classification",
    "DeltaResult",
    "Driver",
    "DriverRaceView",
    "EnrichedLapRecord",
    "Extremum",
    "FieldLapEntry",
    "FieldLapView",
    "LapRecord",
    "LapTimeStats",
    "MetricReference",
    "PreviousLapDelta",
    "Race",
    "RaceResult",
    "RainStatus",
    "ReferenceScope",
    "WeatherSample",
    "WeatherSummary",
]
