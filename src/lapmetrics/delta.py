"""Signed deltas to a reference value, normalized so positive means worse."""

from __future__ import annotations

from lapmetrics.metrics import Polarity, clean_value, coerce_polarity
from lapmetrics.models.delta import Classification, DeltaResult

DELTA_EPSILON = 0.001

_UNAVAILABLE = DeltaResult(delta=None, classification=Classification.UNAVAILABLE)


def classify_delta(delta: float | None, epsilon: float = DELTA_EPSILON) -> Classification:
    """Classify a normalized delta, absorbing float noise within epsilon."""
    delta = clean_value(delta)
    if delta is None:
        return Classification.UNAVAILABLE
    if delta < -epsilon:
        return Classification.BETTER
    if delta > epsilon:
        return Classification.WORSE
    return Classification.AT_REFERENCE


def compute_delta(
    current: float | None,
    reference: float | None,
    polarity: Polarity | str,
) -> DeltaResult:
    """Compare a value with its reference.

    For MIN metrics (times) the delta is ``current - reference``; for MAX
    metrics (speeds) it is ``reference - current``. Either way a positive
    delta means slower or worse.
    """
    polarity = coerce_polarity(polarity)
    current = clean_value(current)
    reference = clean_value(reference)
    if current is None or reference is None:
        return _UNAVAILABLE

    if polarity is Polarity.MIN:
        delta = current - reference
    else:
        delta = reference - current
    return DeltaResult(delta=delta, classification=classify_delta(delta))
