"""Single-driver lap analysis service: the driver laps deep dive."""

from __future__ import annotations

from dataclasses import dataclass

from lapmetrics import TOP_SPEED, analyze_driver_race, summarize_weather
from lapmetrics.models import (
    Classification,
    Driver,
    DriverRaceView,
    LapRecord,
    Race,
    WeatherSample,
    WeatherSummary,
)

from ..api_logging import log_service_call
from ..constants import NOT_AVAILABLE
from ..data.base import RaceDataRepository
from ..data.types import LapTableRow
from ..formatters import (
    delta_color,
    format_delta,
    format_improvement,
    format_lap_time,
    format_speed,
)
from .common import drop_duplicate_laps, race_seasons
from .refresh import SelectionGeneration


@dataclass(frozen=True)
class DriverLapsKPIs:
    total_laps: int
    best_lap: str
    best_lap_number: int | None
    average_lap: str
    lap_time_std_dev: str
    theoretical_best: str
    top_speed: str
    top_speed_lap_number: int | None


@dataclass(frozen=True)
class DriverRaceData:
    view: DriverRaceView
    weather: WeatherSummary | None


class DriverLapsService:
    """Encapsulates the business logic for one driver's race laps."""

    def __init__(self, repo: RaceDataRepository) -> None:
        self._repo = repo

    @log_service_call
    def seasons(self) -> list[int]:
        return race_seasons(self._repo.get_races())

    @log_service_call
    def races_for_season(self, year: int) -> list[Race]:
        """Races of one season, newest first."""
        return self._repo.get_races(year)

    @log_service_call
    def race_drivers(self, race_id: str) -> list[Driver]:
        """Only the drivers classified in the race are selectable."""
        return self._repo.get_race_drivers(race_id)

    @log_service_call
    def fetch_driver_data(
        self,
        race_id: str,
        driver_id: str,
    ) -> tuple[list[LapRecord], list[WeatherSample]]:
        """Fetch a driver's laps and the race weather."""
        laps = self._repo.get_driver_laps(race_id, driver_id)
        weather = self._repo.get_weather(race_id)
        return laps, weather

    @log_service_call
    def build_view(self, laps: list[LapRecord]) -> DriverRaceView:
        """Enrich laps and resolve the driver's personal bests."""
        unique = drop_duplicate_laps(laps)
        return analyze_driver_race(sorted(unique, key=lambda lap: lap.lap_number))

    @log_service_call
    def summarize_weather(self, samples: list[WeatherSample]) -> WeatherSummary | None:
        return summarize_weather(samples)

    def load(
        self,
        race_id: str,
        driver_id: str,
        generation: SelectionGeneration,
    ) -> DriverRaceData | None:
        """Fetch and analyze, or return None if the selection changed meanwhile."""
        token = generation.begin((race_id, driver_id))
        laps, weather = self.fetch_driver_data(race_id, driver_id)
        if not generation.is_current(token):
            return None
        return DriverRaceData(
            view=self.build_view(laps),
            weather=self.summarize_weather(weather),
        )

    @log_service_call
    def compute_kpis(self, view: DriverRaceView) -> DriverLapsKPIs:
        """Headline figures for the KPI cards."""
        stats = view.lap_time_stats
        top = view.references.get(TOP_SPEED.name)
        return DriverLapsKPIs(
            total_laps=len(view.laps),
            best_lap=format_lap_time(stats.best.value if stats else None),
            best_lap_number=stats.best_lap_number if stats else None,
            average_lap=format_lap_time(stats.mean if stats else None),
            lap_time_std_dev=f"{stats.std_dev:.3f}s" if stats else NOT_AVAILABLE,
            theoretical_best=format_lap_time(view.theoretical_best),
            top_speed=format_speed(top.value if top else None),
            top_speed_lap_number=top.owner_lap_number if top else None,
        )

    @log_service_call
    def lap_table(self, view: DriverRaceView) -> list[LapTableRow]:
        """One display row per lap, deltas to personal best and previous lap."""
        rows: list[LapTableRow] = []
        for lap in view.laps:
            lap_delta = lap.deltas.get("lap_time")
            prev = lap.previous_lap_delta
            rows.append({
                "lap_number": lap.lap_number,
                "lap_time": format_lap_time(lap.lap_time),
                "lap_delta": format_delta(lap_delta),
                "lap_color": delta_color(lap_delta),
                "lap_improvement": format_improvement(prev.lap_time),
                "s1": format_lap_time(lap.sector1),
                "s1_improvement": format_improvement(prev.sector1),
                "s2": format_lap_time(lap.sector2),
                "s2_improvement": format_improvement(prev.sector2),
                "s3": format_lap_time(lap.sector3),
                "s3_improvement": format_improvement(prev.sector3),
                "top_speed": format_speed(lap.top_speed),
                "average_speed": format_speed(lap.average_speed),
                "in_pit": lap.crossed_finish_in_pit,
                "is_personal_best": (
                    lap_delta is not None
                    and lap_delta.classification is Classification.AT_REFERENCE
                ),
            })
        return rows
