"""Lap series processing: the enriched lap views every dashboard page shows."""

from __future__ import annotations

from collections.abc import Sequence

from lapmetrics.delta import compute_delta
from lapmetrics.exceptions import LapSequenceError
from lapmetrics.metrics import SECTOR_METRICS, TIME_METRICS, TRACKED_METRICS, Metric
from lapmetrics.models.delta import DeltaResult
from lapmetrics.models.lap import EnrichedLapRecord, LapRecord, PreviousLapDelta
from lapmetrics.models.reference import MetricReference, ReferenceScope
from lapmetrics.models.views import DriverRaceView, FieldLapEntry, FieldLapView
from lapmetrics.reference import resolve_best
from lapmetrics.stats import summarize_lap_times

_LAP_FIELDS = set(LapRecord.model_fields)


def _check_driver_sequence(laps: Sequence[LapRecord]) -> None:
    """Laps must belong to one race and driver, in ascending lap order."""
    first = laps[0]
    for prev, lap in zip(laps, laps[1:]):
        if lap.race_id != first.race_id or lap.driver_id != first.driver_id:
            raise LapSequenceError(
                f"lap {lap.lap_number} belongs to race {lap.race_id!r} / driver "
                f"{lap.driver_id!r}, expected {first.race_id!r} / {first.driver_id!r}"
            )
        if lap.lap_number <= prev.lap_number:
            raise LapSequenceError(
                f"laps out of order: {lap.lap_number} follows {prev.lap_number}"
            )


def _check_single_lap(laps: Sequence[LapRecord]) -> None:
    """Laps must share one race and lap number, one record per driver."""
    first = laps[0]
    seen: set[str] = set()
    for lap in laps:
        if lap.race_id != first.race_id or lap.lap_number != first.lap_number:
            raise LapSequenceError(
                f"expected lap {first.lap_number} of race {first.race_id!r}, "
                f"got lap {lap.lap_number} of race {lap.race_id!r}"
            )
        if lap.driver_id in seen:
            raise LapSequenceError(f"driver {lap.driver_id!r} appears twice")
        seen.add(lap.driver_id)


def _resolve_all(
    laps: Sequence[LapRecord],
    metrics: Sequence[Metric],
    scope: ReferenceScope,
) -> dict[str, MetricReference | None]:
    return {m.name: resolve_best(laps, m, scope=scope) for m in metrics}


def _deltas(
    lap: LapRecord,
    metrics: Sequence[Metric],
    references: dict[str, MetricReference | None],
) -> dict[str, DeltaResult]:
    result: dict[str, DeltaResult] = {}
    for m in metrics:
        ref = references[m.name]
        result[m.name] = compute_delta(m(lap), ref.value if ref is not None else None, m.polarity)
    return result


def _previous_lap_delta(prev: LapRecord, lap: LapRecord) -> PreviousLapDelta:
    values: dict[str, float | None] = {}
    for m in TIME_METRICS:
        before, now = m(prev), m(lap)
        values[m.name] = None if before is None or now is None else before - now
    return PreviousLapDelta(**values)


def enrich_laps(
    laps: Sequence[LapRecord],
    metrics: Sequence[Metric] = TRACKED_METRICS,
) -> list[EnrichedLapRecord]:
    """Add reference and previous-lap deltas to one driver's ordered laps.

    Reference deltas are against the driver's own best in the race. The
    previous-lap delta is ``previous - current`` for the time metrics, so
    positive means this lap was faster; it is empty for the first lap.

    Raises:
        LapSequenceError: if laps mix races or drivers, or are not in
            strictly ascending lap order.
    """
    if not laps:
        return []
    _check_driver_sequence(laps)
    references = _resolve_all(laps, metrics, ReferenceScope.THIS_DRIVER_THIS_RACE)
    return _enrich(laps, metrics, references)


def _enrich(
    laps: Sequence[LapRecord],
    metrics: Sequence[Metric],
    references: dict[str, MetricReference | None],
) -> list[EnrichedLapRecord]:
    enriched: list[EnrichedLapRecord] = []
    prev: LapRecord | None = None
    for lap in laps:
        enriched.append(
            EnrichedLapRecord(
                **lap.model_dump(include=_LAP_FIELDS),
                deltas=_deltas(lap, metrics, references),
                previous_lap_delta=(
                    PreviousLapDelta() if prev is None else _previous_lap_delta(prev, lap)
                ),
            )
        )
        prev = lap
    return enriched


def compare_lap_to_field(
    laps: Sequence[LapRecord],
    metrics: Sequence[Metric] = TRACKED_METRICS,
) -> FieldLapView:
    """Compare every driver on one lap number with the best in the field.

    One reference per metric is resolved over all drivers and shared by
    every entry.
    """
    if not laps:
        return FieldLapView()
    _check_single_lap(laps)

    references = _resolve_all(laps, metrics, ReferenceScope.ALL_DRIVERS_THIS_LAP)
    return FieldLapView(
        race_id=laps[0].race_id,
        lap_number=laps[0].lap_number,
        references=references,
        entries=[
            FieldLapEntry(record=lap, deltas=_deltas(lap, metrics, references))
            for lap in laps
        ],
    )


def theoretical_best_lap(laps: Sequence[LapRecord]) -> float | None:
    """Best sector 1 + best sector 2 + best sector 3, or None if one is missing."""
    total = 0.0
    for m in SECTOR_METRICS:
        ref = resolve_best(laps, m)
        if ref is None:
            return None
        total += ref.value
    return total


def analyze_driver_race(
    laps: Sequence[LapRecord],
    metrics: Sequence[Metric] = TRACKED_METRICS,
) -> DriverRaceView:
    """Build the full driver deep-dive view from one driver's ordered laps."""
    if not laps:
        return DriverRaceView()
    _check_driver_sequence(laps)
    references = _resolve_all(laps, metrics, ReferenceScope.THIS_DRIVER_THIS_RACE)
    return DriverRaceView(
        laps=_enrich(laps, metrics, references),
        references=references,
        lap_time_stats=summarize_lap_times(laps),
        theoretical_best=theoretical_best_lap(laps),
    )
