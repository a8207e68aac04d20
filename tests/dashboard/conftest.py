"""Shared fixtures for dashboard tests."""

from __future__ import annotations

import datetime
import sys
from collections.abc import Iterable
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# ── Mock streamlit before any dashboard imports ──────────────────────────────

_mock_st = MagicMock()
_mock_st.cache_data = lambda **kw: (lambda fn: fn)  # passthrough decorator
sys.modules.setdefault("streamlit", _mock_st)

# Add dashboard to path so `shared` is importable
_dashboard_dir = str(Path(__file__).resolve().parent.parent.parent / "dashboard")
if _dashboard_dir not in sys.path:
    sys.path.insert(0, _dashboard_dir)

from lapmetrics.models import (  # noqa: E402
    Driver,
    LapRecord,
    Race,
    RaceResult,
    WeatherSample,
)
from shared.data.base import RaceDataRepository  # noqa: E402


class FakeRepository(RaceDataRepository):
    """In-memory repository serving canned rows."""

    def __init__(
        self,
        laps: list[LapRecord] | None = None,
        weather: list[WeatherSample] | None = None,
        results: list[RaceResult] | None = None,
        races: list[Race] | None = None,
    ) -> None:
        self.laps = laps or []
        self.races = races or []
        self.weather = weather or []
        self.results = results or []
        self.calls: list[str] = []

    def get_races(self, year: int | None = None) -> list[Race]:
        self.calls.append("get_races")
        races = [r for r in self.races if year is None or r.season == year]
        return sorted(races, key=lambda r: r.date or datetime.date.min, reverse=True)

    def get_drivers(self) -> list[Driver]:
        self.calls.append("get_drivers")
        return [Driver(id=d) for d in sorted({lap.driver_id for lap in self.laps})]

    def get_race_drivers(self, race_id: str) -> list[Driver]:
        self.calls.append("get_race_drivers")
        ids = dict.fromkeys(r.driver_id for r in self.results if r.race_id == race_id)
        return [Driver(id=d) for d in ids]

    def get_driver_laps(self, race_id: str, driver_id: str) -> list[LapRecord]:
        self.calls.append("get_driver_laps")
        return [
            lap for lap in self.laps
            if lap.race_id == race_id and lap.driver_id == driver_id
        ]

    def get_lap_across_drivers(self, race_id: str, lap_number: int) -> list[LapRecord]:
        self.calls.append("get_lap_across_drivers")
        return [
            lap for lap in self.laps
            if lap.race_id == race_id and lap.lap_number == lap_number
        ]

    def get_race_laps(self, race_id: str) -> list[LapRecord]:
        self.calls.append("get_race_laps")
        return [lap for lap in self.laps if lap.race_id == race_id]

    def get_laps_for_drivers(
        self, race_id: str, driver_ids: Iterable[str],
    ) -> dict[str, list[LapRecord]]:
        self.calls.append("get_laps_for_drivers")
        return {d: self.get_driver_laps(race_id, d) for d in dict.fromkeys(driver_ids)}

    def get_weather(self, race_id: str) -> list[WeatherSample]:
        self.calls.append("get_weather")
        return [w for w in self.weather if w.race_id == race_id]

    def get_race_results(self, race_id: str) -> list[RaceResult]:
        self.calls.append("get_race_results")
        return [r for r in self.results if r.race_id == race_id]


@pytest.fixture(autouse=True)
def _log_to_tmp(tmp_path):
    """Keep service and repository logging out of the source tree."""
    import shared.api_logging as mod

    original_dir = mod._log_path.parent
    mod.set_log_dir(tmp_path / "logs")
    yield
    mod.set_log_dir(original_dir)


@pytest.fixture
def race_laps(make_lap) -> list[LapRecord]:
    """Three drivers over three laps of race-1, stored out of lap order."""
    return [
        make_lap(3, lap_time=99.0, s1=26.8, driver_id="drv-7", top_speed=188.5),
        make_lap(1, lap_time=104.0, s1=29.0, driver_id="drv-7", top_speed=180.0),
        make_lap(2, lap_time=99.6, s1=27.1, driver_id="drv-7", top_speed=187.0),
        make_lap(1, lap_time=103.1, s1=28.7, driver_id="drv-13", top_speed=181.2),
        make_lap(2, lap_time=98.4, s1=26.6, driver_id="drv-13", top_speed=189.9),
        make_lap(3, lap_time=None, s1=26.9, driver_id="drv-13", top_speed=186.0),
        make_lap(1, lap_time=105.2, driver_id="drv-22", top_speed=179.4),
        make_lap(2, lap_time=100.3, driver_id="drv-22", top_speed=186.2),
        make_lap(3, lap_time=99.9, driver_id="drv-22", top_speed=190.4, in_pit=True),
    ]


@pytest.fixture
def fake_repo(race_laps, make_weather) -> FakeRepository:
    return FakeRepository(
        laps=race_laps,
        weather=[make_weather(rain=0, air_temp=28.0), make_weather(rain=1, air_temp=27.0)],
    )


@pytest.fixture
def repository_cls() -> type[FakeRepository]:
    """The in-memory repository class, for tests that subclass it."""
    return FakeRepository
