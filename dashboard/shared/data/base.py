"""Abstract base repository for race data access."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from lapmetrics.models import Driver, LapRecord, Race, RaceResult, WeatherSample


class RaceDataRepository(ABC):
    """Storage-agnostic interface for race data access."""

    @abstractmethod
    def get_races(self, year: int | None = None) -> list[Race]:
        """Races newest first, limited to one season when ``year`` is given."""

    @abstractmethod
    def get_drivers(self) -> list[Driver]: ...

    @abstractmethod
    def get_race_drivers(self, race_id: str) -> list[Driver]:
        """Drivers classified in a race, in finishing order."""

    @abstractmethod
    def get_driver_laps(self, race_id: str, driver_id: str) -> list[LapRecord]: ...

    @abstractmethod
    def get_lap_across_drivers(self, race_id: str, lap_number: int) -> list[LapRecord]: ...

    @abstractmethod
    def get_race_laps(self, race_id: str) -> list[LapRecord]: ...

    @abstractmethod
    def get_laps_for_drivers(
        self, race_id: str, driver_ids: Iterable[str],
    ) -> dict[str, list[LapRecord]]: ...

    @abstractmethod
    def get_weather(self, race_id: str) -> list[WeatherSample]: ...

    @abstractmethod
    def get_race_results(self, race_id: str) -> list[RaceResult]: ...
