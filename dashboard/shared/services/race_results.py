"""Race results service: official classification with normalized gaps."""

from __future__ import annotations

from lapmetrics.models import RaceResult

from ..api_logging import log_service_call
from ..data.base import RaceDataRepository
from ..data.types import ResultRow
from ..formatters import format_gap, format_lap_time, format_speed

_UNCLASSIFIED = 10_000


def _position_key(result: RaceResult) -> tuple[int, str]:
    return (result.position if result.position is not None else _UNCLASSIFIED, result.driver_id)


def _class_position_key(result: RaceResult) -> tuple[int, int, str]:
    pic = result.position_in_class
    return (pic if pic is not None else _UNCLASSIFIED, *_position_key(result))


class RaceResultsService:
    """Encapsulates the business logic for the race results page."""

    def __init__(self, repo: RaceDataRepository) -> None:
        self._repo = repo

    @log_service_call
    def fetch_results(self, race_id: str) -> list[RaceResult]:
        return sorted(self._repo.get_race_results(race_id), key=_position_key)

    @log_service_call
    def results_by_class(self, results: list[RaceResult]) -> dict[str, list[RaceResult]]:
        """Group results by class, each ordered by position in class."""
        groups: dict[str, list[RaceResult]] = {}
        for result in results:
            groups.setdefault(result.class_type or "Overall", []).append(result)
        return {cls: sorted(rows, key=_class_position_key) for cls, rows in groups.items()}

    @log_service_call
    def result_rows(self, results: list[RaceResult]) -> list[ResultRow]:
        """Display rows with gaps and best laps in m:ss.fff."""
        rows: list[ResultRow] = []
        for r in results:
            rows.append({
                "position": r.position,
                "position_in_class": r.position_in_class,
                "class_type": r.class_type,
                "driver_id": r.driver_id,
                "vehicle": r.vehicle,
                "laps": r.laps,
                "elapsed_time": r.elapsed_time,
                "gap_to_first": format_gap(r.gap_to_first),
                "gap_to_previous": format_gap(r.gap_to_previous),
                "best_lap_number": r.best_lap_number,
                "best_lap_time": format_gap(r.best_lap_time),
                "best_lap_speed": format_speed(r.best_lap_speed_kph),
            })
        return rows
