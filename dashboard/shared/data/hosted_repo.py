"""Hosted database repository implementation."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable

import streamlit as st

from lapmetrics import AsyncRaceDataClient, Filter, RaceDataClient
from lapmetrics.models import Driver, LapRecord, Race, RaceResult, WeatherSample

from ..api_logging import log_api_call
from ..config import DashboardConfig
from .base import RaceDataRepository
from .errors import RaceDataError


def _client(config: DashboardConfig) -> RaceDataClient:
    return RaceDataClient(config.project_url, config.api_key, timeout=config.timeout)


# ── Fetch helpers (wrapped with st.cache_data per repository) ────────────────


def _fetch_races(config: DashboardConfig, year: int | None) -> list[Race]:
    filters: dict[str, Filter] = {}
    if year is not None:
        filters["date"] = Filter(gte=f"{year}-01-01", lte=f"{year}-12-31")
    try:
        with _client(config) as db:
            return db.races(order="date.desc", **filters)
    except Exception as exc:
        raise RaceDataError(f"Failed to fetch races: {exc}") from exc


def _fetch_drivers(config: DashboardConfig) -> list[Driver]:
    try:
        with _client(config) as db:
            return db.drivers(order="number.asc")
    except Exception as exc:
        raise RaceDataError(f"Failed to fetch drivers: {exc}") from exc


def _fetch_race_drivers(config: DashboardConfig, race_id: str) -> list[Driver]:
    try:
        with _client(config) as db:
            results = db.race_results(race_id=race_id)
            driver_ids = list(dict.fromkeys(r.driver_id for r in results))
            if not driver_ids:
                return []
            drivers = {d.id: d for d in db.drivers(id=Filter(in_=tuple(driver_ids)))}
    except Exception as exc:
        raise RaceDataError(f"Failed to fetch drivers for race {race_id}: {exc}") from exc
    return [drivers[d] for d in driver_ids if d in drivers]


def _fetch_driver_laps(config: DashboardConfig, race_id: str, driver_id: str) -> list[LapRecord]:
    try:
        with _client(config) as db:
            return db.laps(race_id=race_id, driver_id=driver_id)
    except Exception as exc:
        raise RaceDataError(
            f"Failed to fetch laps for driver {driver_id} in race {race_id}: {exc}",
        ) from exc


def _fetch_lap_across_drivers(
    config: DashboardConfig, race_id: str, lap_number: int,
) -> list[LapRecord]:
    try:
        with _client(config) as db:
            return db.laps(order="driver_id.asc", race_id=race_id, lap_number=lap_number)
    except Exception as exc:
        raise RaceDataError(
            f"Failed to fetch lap {lap_number} of race {race_id}: {exc}",
        ) from exc


def _fetch_race_laps(config: DashboardConfig, race_id: str) -> list[LapRecord]:
    try:
        with _client(config) as db:
            return db.laps(order="driver_id.asc,lap_number.asc", race_id=race_id)
    except Exception as exc:
        raise RaceDataError(f"Failed to fetch laps for race {race_id}: {exc}") from exc


async def _gather_driver_laps(
    config: DashboardConfig, race_id: str, driver_ids: tuple[str, ...],
) -> dict[str, list[LapRecord]]:
    async with AsyncRaceDataClient(
        config.project_url,
        config.api_key,
        timeout=config.timeout,
        max_concurrency=config.max_concurrency,
    ) as db:
        return await db.laps_for_drivers(race_id, driver_ids)


def _fetch_laps_for_drivers(
    config: DashboardConfig, race_id: str, driver_ids: tuple[str, ...],
) -> dict[str, list[LapRecord]]:
    try:
        return asyncio.run(_gather_driver_laps(config, race_id, driver_ids))
    except Exception as exc:
        raise RaceDataError(
            f"Failed to fetch laps for drivers {list(driver_ids)} in race {race_id}: {exc}",
        ) from exc


def _fetch_weather(config: DashboardConfig, race_id: str) -> list[WeatherSample]:
    try:
        with _client(config) as db:
            return db.weather(race_id=race_id)
    except Exception as exc:
        raise RaceDataError(f"Failed to fetch weather for race {race_id}: {exc}") from exc


def _fetch_race_results(config: DashboardConfig, race_id: str) -> list[RaceResult]:
    try:
        with _client(config) as db:
            return db.race_results(race_id=race_id)
    except Exception as exc:
        raise RaceDataError(f"Failed to fetch results for race {race_id}: {exc}") from exc


# ── Repository class ─────────────────────────────────────────────────────────


class HostedRaceRepository(RaceDataRepository):
    """Race data repository backed by the hosted database REST API.

    Each repository opens a short-lived client per fetch; responses are cached
    for ``config.cache_ttl`` seconds.
    """

    def __init__(self, config: DashboardConfig) -> None:
        self._config = config
        cache = st.cache_data(ttl=config.cache_ttl)
        self._races = cache(_fetch_races)
        self._drivers = cache(_fetch_drivers)
        self._race_drivers = cache(_fetch_race_drivers)
        self._driver_laps = cache(_fetch_driver_laps)
        self._lap_across_drivers = cache(_fetch_lap_across_drivers)
        self._race_laps = cache(_fetch_race_laps)
        self._laps_for_drivers = cache(_fetch_laps_for_drivers)
        self._weather = cache(_fetch_weather)
        self._race_results = cache(_fetch_race_results)

    @log_api_call
    def get_races(self, year: int | None = None) -> list[Race]:
        return self._races(self._config, year)

    @log_api_call
    def get_drivers(self) -> list[Driver]:
        return self._drivers(self._config)

    @log_api_call
    def get_race_drivers(self, race_id: str) -> list[Driver]:
        return self._race_drivers(self._config, race_id)

    @log_api_call
    def get_driver_laps(self, race_id: str, driver_id: str) -> list[LapRecord]:
        return self._driver_laps(self._config, race_id, driver_id)

    @log_api_call
    def get_lap_across_drivers(self, race_id: str, lap_number: int) -> list[LapRecord]:
        return self._lap_across_drivers(self._config, race_id, int(lap_number))

    @log_api_call
    def get_race_laps(self, race_id: str) -> list[LapRecord]:
        return self._race_laps(self._config, race_id)

    @log_api_call
    def get_laps_for_drivers(
        self, race_id: str, driver_ids: Iterable[str],
    ) -> dict[str, list[LapRecord]]:
        return self._laps_for_drivers(self._config, race_id, tuple(driver_ids))

    @log_api_call
    def get_weather(self, race_id: str) -> list[WeatherSample]:
        return self._weather(self._config, race_id)

    @log_api_call
    def get_race_results(self, race_id: str) -> list[RaceResult]:
        return self._race_results(self._config, race_id)
