"""Aggregate statistics over lap-time and weather series.

Every function ignores None/NaN entries and returns None when nothing is
left, so callers can tell "no data" apart from a real zero.
"""

from __future__ import annotations

import statistics
from collections.abc import Iterable, Sequence

from lapmetrics.metrics import LAP_TIME, Polarity, clean_value, coerce_polarity
from lapmetrics.models.lap import LapRecord
from lapmetrics.models.stats import Extremum, LapTimeStats
from lapmetrics.models.weather import RainStatus, WeatherSample, WeatherSummary


def _clean(xs: Iterable[float | None]) -> list[float]:
    return [v for v in map(clean_value, xs) if v is not None]


def mean(xs: Iterable[float | None]) -> float | None:
    """Arithmetic mean, or None for an empty series."""
    values = _clean(xs)
    return statistics.fmean(values) if values else None


def population_std_dev(xs: Iterable[float | None]) -> float | None:
    """Population standard deviation (divides by N), or None if empty."""
    values = _clean(xs)
    return statistics.pstdev(values) if values else None


def extremum(xs: Sequence[float | None], polarity: Polarity | str) -> Extremum | None:
    """Smallest or largest value with the index of its first occurrence."""
    polarity = coerce_polarity(polarity)
    found: Extremum | None = None
    for index, raw in enumerate(xs):
        value = clean_value(raw)
        if value is None:
            continue
        if (
            found is None
            or (polarity is Polarity.MIN and value < found.value)
            or (polarity is Polarity.MAX and value > found.value)
        ):
            found = Extremum(value=value, index=index)
    return found


def summarize_lap_times(laps: Sequence[LapRecord]) -> LapTimeStats | None:
    """Mean, spread and fastest/slowest lap over laps with a lap time."""
    timed = [lap for lap in laps if LAP_TIME(lap) is not None]
    if not timed:
        return None

    times = [LAP_TIME(lap) for lap in timed]
    best = extremum(times, Polarity.MIN)
    worst = extremum(times, Polarity.MAX)
    if best is None or worst is None:
        return None
    return LapTimeStats(
        count=len(times),
        mean=statistics.fmean(times),
        std_dev=statistics.pstdev(times),
        best=best,
        worst=worst,
        best_lap_number=timed[best.index].lap_number,
        worst_lap_number=timed[worst.index].lap_number,
    )


def rain_status(rain_flags: Sequence[int]) -> RainStatus:
    """Tri-state rain classification from per-sample 0/1 flags."""
    wet = sum(1 for flag in rain_flags if flag)
    if wet == 0:
        return RainStatus.NO_RAIN
    if wet == len(rain_flags):
        return RainStatus.CONSTANT_RAIN
    return RainStatus.INTERMITTENT_RAIN


def summarize_weather(samples: Sequence[WeatherSample]) -> WeatherSummary | None:
    """Average each weather field over a race and classify rain."""
    if not samples:
        return None

    flags = [s.rain_flag for s in samples]
    return WeatherSummary(
        sample_count=len(samples),
        rain_sample_count=sum(1 for flag in flags if flag),
        rain_status=rain_status(flags),
        avg_air_temp=mean(s.air_temp for s in samples),
        avg_track_temp=mean(s.track_temp for s in samples),
        avg_humidity=mean(s.humidity for s in samples),
        avg_pressure=mean(s.pressure for s in samples),
        avg_wind_speed=mean(s.wind_speed for s in samples),
        avg_wind_direction=mean(s.wind_direction for s in samples),
    )
