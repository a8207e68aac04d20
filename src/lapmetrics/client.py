"""Public client classes for the hosted race database REST API."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from dataclasses import dataclass
from functools import cached_property
from typing import Any

from pydantic import TypeAdapter, ValidationError

from lapmetrics._filters import build_query_params
from lapmetrics._http import DEFAULT_TIMEOUT, AsyncTransport, Params, Rows, SyncTransport
from lapmetrics.exceptions import DataValidationError
from lapmetrics.models.lap import LapRecord
from lapmetrics.models.race import Driver, Race
from lapmetrics.models.race_result import RaceResult
from lapmetrics.models.weather import WeatherSample

DEFAULT_MAX_CONCURRENCY = 5


@dataclass(frozen=True)
class _Table[T]:
    """A database table: its endpoint, row model and default ordering."""

    endpoint: str
    model: type[T]
    order: str | None = None

    @cached_property
    def _adapter(self) -> TypeAdapter[list[T]]:
        return TypeAdapter(list[self.model])

    def params(self, filters: dict[str, Any]) -> Params:
        if self.order is not None:
            filters = {"order": self.order, **filters}
        return build_query_params(**filters)

    def parse(self, rows: Rows) -> list[T]:
        try:
            return self._adapter.validate_python(rows)
        except ValidationError as exc:
            raise DataValidationError(
                f"Failed to validate {self.model.__name__} rows from {self.endpoint}: {exc}"
            ) from exc


RACES = _Table("/races", Race)
DRIVERS = _Table("/drivers", Driver)
LAPS = _Table("/laps", LapRecord, order="lap_number.asc")
WEATHER = _Table("/weather", WeatherSample, order="time_utc_seconds.asc")
RACE_RESULTS = _Table("/race_results", RaceResult, order="position.asc")


class RaceDataClient:
    """Synchronous client for the race database.

    Keyword filters follow :func:`build_query_params`: plain values match
    exactly, :class:`Filter` values compare, and ``order``/``limit``/
    ``select``/``offset`` pass through.

    Usage:
        with RaceDataClient(project_url, api_key) as db:
            laps = db.laps(race_id="r1", driver_id="d7")
    """

    def __init__(
        self,
        project_url: str,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = SyncTransport(project_url, api_key, timeout=timeout)

    def __enter__(self) -> RaceDataClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        self._transport.close()

    def _fetch[T](self, table: _Table[T], filters: dict[str, Any]) -> list[T]:
        return table.parse(self._transport.get(table.endpoint, table.params(filters)))

    def races(self, **filters: Any) -> list[Race]:
        return self._fetch(RACES, filters)

    def drivers(self, **filters: Any) -> list[Driver]:
        return self._fetch(DRIVERS, filters)

    def laps(self, **filters: Any) -> list[LapRecord]:
        """Lap timing rows, by lap number unless ``order`` says otherwise."""
        return self._fetch(LAPS, filters)

    def weather(self, **filters: Any) -> list[WeatherSample]:
        """Weather samples in time order."""
        return self._fetch(WEATHER, filters)

    def race_results(self, **filters: Any) -> list[RaceResult]:
        """Official classification rows with normalized gap columns."""
        return self._fetch(RACE_RESULTS, filters)


class AsyncRaceDataClient:
    """Asynchronous client for the race database.

    At most ``max_concurrency`` requests are in flight at once, however many
    coroutines share the client.

    Usage:
        async with AsyncRaceDataClient(project_url, api_key) as db:
            by_driver = await db.laps_for_drivers("r1", ["d7", "d13"])
    """

    def __init__(
        self,
        project_url: str,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
    ) -> None:
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self._transport = AsyncTransport(project_url, api_key, timeout=timeout)
        self._semaphore = asyncio.Semaphore(max_concurrency)

    async def __aenter__(self) -> AsyncRaceDataClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self._transport.close()

    async def _fetch[T](self, table: _Table[T], filters: dict[str, Any]) -> list[T]:
        params = table.params(filters)
        async with self._semaphore:
            rows = await self._transport.get(table.endpoint, params)
        return table.parse(rows)

    async def races(self, **filters: Any) -> list[Race]:
        return await self._fetch(RACES, filters)

    async def drivers(self, **filters: Any) -> list[Driver]:
        return await self._fetch(DRIVERS, filters)

    async def laps(self, **filters: Any) -> list[LapRecord]:
        return await self._fetch(LAPS, filters)

    async def weather(self, **filters: Any) -> list[WeatherSample]:
        return await self._fetch(WEATHER, filters)

    async def race_results(self, **filters: Any) -> list[RaceResult]:
        return await self._fetch(RACE_RESULTS, filters)

    async def laps_for_drivers(
        self, race_id: str, driver_ids: Iterable[str],
    ) -> dict[str, list[LapRecord]]:
        """Fetch several drivers' laps concurrently, keyed by driver id.

        Duplicate ids are fetched once; keys keep first-seen order.
        """
        ids = list(dict.fromkeys(driver_ids))
        results = await asyncio.gather(
            *(self.laps(race_id=race_id, driver_id=d) for d in ids)
        )
        return dict(zip(ids, results))
