"""Shared test fixtures and sample database rows."""

from __future__ import annotations

import pytest

from lapmetrics.models import LapRecord, WeatherSample

PROJECT_URL = "https://demo-project.supabase.co"
API_KEY = "test-anon-key"
BASE_URL = f"{PROJECT_URL}/rest/v1"


SAMPLE_RACE = {"id": "race-1", "name": "Barber Race 1", "date": "2023-05-19"}

SAMPLE_DRIVER = {"id": "drv-13", "number": 13, "name": "Driver Thirteen"}

SAMPLE_LAP_ROW = {
    "race_id": "race-1",
    "driver_id": "drv-13",
    "lap_number": 5,
    "lap_time": "1:39.412",
    "s1": "26.881",
    "s2": "43.025",
    "s3": "29.506",
    "s1_seconds": 26.881,
    "s2_seconds": 43.025,
    "s3_seconds": 29.506,
    "kph": 134.2,
    "top_speed": 187.9,
    "crossing_finish_line_in_pit": False,
    "flag_at_fl": "GF",
}

SAMPLE_WEATHER_ROW = {
    "race_id": "race-1",
    "time_utc_seconds": 1757170800,
    "time_utc_str": "9/6/2025 3:00:00 PM",
    "air_temp": 29.4,
    "track_temp": 41.2,
    "humidity": 56.0,
    "pressure": 992.1,
    "wind_speed": 6.1,
    "wind_direction": 189,
    "rain": 0,
}

SAMPLE_RESULT_ROW = {
    "race_id": "race-1",
    "driver_id": "drv-13",
    "class_type": "Am",
    "position": 2,
    "position_in_class": 1,
    "vehicle": "Toyota GR86",
    "laps": 27,
    "elapsed_time": "45:15.035",
    "gap_to_first": "1'02.345",
    "gap_to_previous": "1.234",
    "best_lap_number": 12,
    "best_lap_time": "1:38.326",
    "best_lap_speed_kph": 135.7,
}


def _make_lap(
    lap_number: int,
    lap_time: float | None = 99.0,
    s1: float | None = 27.0,
    s2: float | None = 43.0,
    s3: float | None = 29.0,
    kph: float | None = 134.0,
    top_speed: float | None = 188.0,
    driver_id: str = "drv-13",
    race_id: str = "race-1",
    in_pit: bool = False,
) -> LapRecord:
    return LapRecord(
        race_id=race_id,
        driver_id=driver_id,
        lap_number=lap_number,
        lap_time=lap_time,
        sector1=s1,
        sector2=s2,
        sector3=s3,
        average_speed=kph,
        top_speed=top_speed,
        crossed_finish_in_pit=in_pit,
    )


def _make_weather(rain: int = 0, air_temp: float | None = 30.0, **overrides: object) -> WeatherSample:
    data = {**SAMPLE_WEATHER_ROW, "rain": rain, "air_temp": air_temp, **overrides}
    return WeatherSample.model_validate(data)


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def make_lap():
    """Factory fixture for creating LapRecords."""
    return _make_lap


@pytest.fixture
def make_weather():
    """Factory fixture for creating WeatherSamples."""
    return _make_weather


@pytest.fixture
def driver_laps() -> list[LapRecord]:
    """Six laps for one driver: an out lap, a missing time and a pit lap."""
    return [
        _make_lap(1, lap_time=112.5, s1=31.0, s2=48.2, s3=33.3, kph=118.4, top_speed=171.0),
        _make_lap(2, lap_time=99.8, s1=27.1, s2=43.4, s3=29.3, kph=133.5, top_speed=187.2),
        _make_lap(3, lap_time=99.2, s1=26.9, s2=43.3, s3=29.0, kph=134.3, top_speed=188.4),
        _make_lap(4, lap_time=None, s1=27.0, s2=None, s3=None, kph=None, top_speed=187.9),
        _make_lap(5, lap_time=99.412, s1=26.881, s2=43.025, s3=29.506, kph=134.2, top_speed=189.1),
        _make_lap(6, lap_time=131.0, s1=27.4, s2=43.9, s3=59.7, kph=101.7, top_speed=186.0, in_pit=True),
    ]
