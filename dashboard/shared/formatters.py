"""Formatting helpers for the telemetry dashboard."""

from __future__ import annotations

from lapmetrics import format_seconds, parse_duration
from lapmetrics.models import Classification, DeltaResult, WeatherSummary

from .constants import DELTA_COLORS, IMPROVEMENT_MARKERS, NOT_AVAILABLE, SPEED_UNIT


def format_lap_time(seconds: float | None) -> str:
    """Format seconds as m:ss.fff or 'N/A' if None."""
    if seconds is None:
        return NOT_AVAILABLE
    return format_seconds(seconds)


def format_speed(kph: float | None) -> str:
    if kph is None:
        return NOT_AVAILABLE
    return f"{kph:.2f} {SPEED_UNIT}"


def format_delta(result: DeltaResult | None, unit: str = "s") -> str:
    """Format a normalized delta as '+0.123s' (slower) or '-0.123s' (faster)."""
    if result is None or result.delta is None:
        return NOT_AVAILABLE
    sign = "+" if result.delta >= 0 else ""
    return f"{sign}{result.delta:.3f}{unit}"


def delta_color(result: DeltaResult | None) -> str:
    """Return the display colour for a delta classification."""
    if result is None:
        return DELTA_COLORS[Classification.UNAVAILABLE]
    return DELTA_COLORS[result.classification]


def format_improvement(improvement: float | None) -> str:
    """Format a previous-lap delta; positive means this lap was faster."""
    if improvement is None:
        return NOT_AVAILABLE
    if improvement > 0:
        marker = IMPROVEMENT_MARKERS["faster"]
    elif improvement < 0:
        marker = IMPROVEMENT_MARKERS["slower"]
    else:
        marker = IMPROVEMENT_MARKERS["same"]
    text = f"{improvement:+.3f}s"
    return f"{text} {marker}" if marker else text


def format_gap(gap: str | None) -> str:
    """Render a normalized ``00:MM:SS.fff`` gap as m:ss.fff."""
    if gap is None:
        return NOT_AVAILABLE
    seconds = parse_duration(gap)
    return format_seconds(seconds) if seconds is not None else gap


def _one_decimal(value: float | None, suffix: str) -> str:
    return NOT_AVAILABLE if value is None else f"{value:.1f}{suffix}"


def format_weather_summary(summary: WeatherSummary | None) -> dict[str, str] | None:
    """Return the weather card's label -> text mapping, rounded to 0.1."""
    if summary is None:
        return None
    return {
        "Air Temp": _one_decimal(summary.avg_air_temp, "°C"),
        "Track Temp": _one_decimal(summary.avg_track_temp, "°C"),
        "Humidity": _one_decimal(summary.avg_humidity, "%"),
        "Wind Speed": _one_decimal(summary.avg_wind_speed, f" {SPEED_UNIT}"),
        "Pressure": _one_decimal(summary.avg_pressure, " hPa"),
        "Rain": summary.rain_status.value,
    }
