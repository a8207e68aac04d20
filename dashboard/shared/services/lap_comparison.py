"""Field comparison service: one lap across drivers, and driver bests."""

from __future__ import annotations

from dataclasses import dataclass

from lapmetrics import LAP_TIME, compare_lap_to_field, compute_delta, resolve_scoped
from lapmetrics.models import (
    DeltaResult,
    FieldLapView,
    LapRecord,
    MetricReference,
    ReferenceScope,
)

from ..api_logging import log_service_call
from ..data.base import RaceDataRepository
from ..data.types import FieldTableRow
from ..formatters import delta_color, format_delta, format_lap_time, format_speed
from .common import drop_duplicate_laps


@dataclass(frozen=True)
class DriverBestLap:
    driver_id: str
    best_lap: float | None
    best_lap_number: int | None
    delta: DeltaResult


@dataclass(frozen=True)
class DriverBestsComparison:
    race_best: MetricReference | None
    drivers: list[DriverBestLap]


def _lap_time_sort_key(row: tuple[float | None, str]) -> tuple[bool, float, str]:
    lap_time, driver_id = row
    return (lap_time is None, lap_time or 0.0, driver_id)


class LapComparisonService:
    """Encapsulates the business logic for comparing drivers with the field."""

    def __init__(self, repo: RaceDataRepository) -> None:
        self._repo = repo

    @log_service_call
    def fetch_lap(self, race_id: str, lap_number: int) -> list[LapRecord]:
        return self._repo.get_lap_across_drivers(race_id, lap_number)

    @log_service_call
    def build_view(self, laps: list[LapRecord]) -> FieldLapView:
        """Deltas of every driver on the lap to the best in the field."""
        return compare_lap_to_field(drop_duplicate_laps(laps))

    @log_service_call
    def field_table(self, view: FieldLapView) -> list[FieldTableRow]:
        """Display rows ordered fastest first, drivers without a time last."""
        entries = sorted(
            view.entries,
            key=lambda e: _lap_time_sort_key((e.record.lap_time, e.record.driver_id)),
        )
        rows: list[FieldTableRow] = []
        for entry in entries:
            lap = entry.record
            rows.append({
                "driver_id": lap.driver_id,
                "lap_time": format_lap_time(lap.lap_time),
                "lap_delta": format_delta(entry.deltas.get("lap_time")),
                "lap_color": delta_color(entry.deltas.get("lap_time")),
                "s1_delta": format_delta(entry.deltas.get("sector1")),
                "s2_delta": format_delta(entry.deltas.get("sector2")),
                "s3_delta": format_delta(entry.deltas.get("sector3")),
                "top_speed": format_speed(lap.top_speed),
                "top_speed_delta": format_delta(entry.deltas.get("top_speed"), unit=" kph"),
            })
        return rows

    @log_service_call
    def compare_driver_bests(
        self,
        race_id: str,
        driver_ids: list[str],
    ) -> DriverBestsComparison:
        """Each selected driver's best lap against the best of the selection."""
        by_driver = self._repo.get_laps_for_drivers(race_id, driver_ids)
        all_laps = [lap for laps in by_driver.values() for lap in laps]
        race_best = resolve_scoped(all_laps, LAP_TIME, ReferenceScope.ALL_DRIVERS_THIS_RACE)

        drivers: list[DriverBestLap] = []
        for driver_id, laps in by_driver.items():
            own = resolve_scoped(
                laps, LAP_TIME, ReferenceScope.THIS_DRIVER_THIS_RACE, driver_id=driver_id,
            )
            drivers.append(DriverBestLap(
                driver_id=driver_id,
                best_lap=own.value if own else None,
                best_lap_number=own.owner_lap_number if own else None,
                delta=compute_delta(
                    own.value if own else None,
                    race_best.value if race_best else None,
                    LAP_TIME.polarity,
                ),
            ))
        drivers.sort(key=lambda d: _lap_time_sort_key((d.best_lap, d.driver_id)))
        return DriverBestsComparison(race_best=race_best, drivers=drivers)
