"""Best-value resolution for a metric over a group of laps."""

from __future__ import annotations

from collections.abc import Iterable

from lapmetrics.exceptions import LapMetricsTypeError
from lapmetrics.metrics import Metric, MetricSelector, Polarity, clean_value, coerce_polarity
from lapmetrics.models.lap import LapRecord
from lapmetrics.models.reference import MetricReference, ReferenceScope


def _metric_name(metric: MetricSelector) -> str:
    if isinstance(metric, Metric):
        return metric.name
    return getattr(metric, "__name__", "custom")


def resolve_best(
    records: Iterable[LapRecord],
    metric: MetricSelector,
    polarity: Polarity | str | None = None,
    *,
    scope: ReferenceScope | None = None,
) -> MetricReference | None:
    """Return the best value of a metric and the lap that set it.

    Records without a value are skipped. Ties keep the first record seen.
    Returns None when no record has a value.
    """
    if not callable(metric):
        raise LapMetricsTypeError(f"metric must be callable, got {type(metric).__name__}")
    if polarity is None:
        if not isinstance(metric, Metric):
            raise LapMetricsTypeError("polarity is required for a plain selector")
        polarity = metric.polarity
    polarity = coerce_polarity(polarity)

    best_value: float | None = None
    best_record: LapRecord | None = None
    for record in records:
        value = clean_value(metric(record))
        if value is None:
            continue
        if (
            best_value is None
            or (polarity is Polarity.MIN and value < best_value)
            or (polarity is Polarity.MAX and value > best_value)
        ):
            best_value = value
            best_record = record

    if best_record is None or best_value is None:
        return None
    return MetricReference(
        metric=_metric_name(metric),
        value=best_value,
        owner_driver_id=best_record.driver_id,
        owner_lap_number=best_record.lap_number,
        scope=scope,
    )


def resolve_scoped(
    records: Iterable[LapRecord],
    metric: MetricSelector,
    scope: ReferenceScope,
    *,
    driver_id: str | None = None,
    lap_number: int | None = None,
    polarity: Polarity | str | None = None,
) -> MetricReference | None:
    """Resolve the best value over the records that fall inside a scope.

    THIS_DRIVER_THIS_RACE needs ``driver_id``; ALL_DRIVERS_THIS_LAP needs
    ``lap_number``; ALL_DRIVERS_THIS_RACE uses every record given.
    """
    scope = ReferenceScope(scope)
    if scope is ReferenceScope.THIS_DRIVER_THIS_RACE:
        if driver_id is None:
            raise LapMetricsTypeError("driver_id is required for THIS_DRIVER_THIS_RACE")
        records = (r for r in records if r.driver_id == driver_id)
    elif scope is ReferenceScope.ALL_DRIVERS_THIS_LAP:
        if lap_number is None:
            raise LapMetricsTypeError("lap_number is required for ALL_DRIVERS_THIS_LAP")
        records = (r for r in records if r.lap_number == lap_number)
    return resolve_best(records, metric, polarity, scope=scope)
