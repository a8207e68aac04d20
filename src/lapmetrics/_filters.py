"""Query filter builder for PostgREST comparison operators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Parameters passed through verbatim instead of becoming column filters
_RESERVED_PARAMS = frozenset({"select", "order", "limit", "offset"})


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class Filter:
    """Represents a comparison filter for a column.

    Usage:
        # Greater than or equal
        Filter(gte=5)  # produces: lap_number=gte.5

        # Range filter
        Filter(gte=5, lte=10)  # produces: lap_number=gte.5&lap_number=lte.10

        # Membership
        Filter(in_=("a", "b"))  # produces: driver_id=in.(a,b)
    """

    gt: int | float | str | None = None
    gte: int | float | str | None = None
    lt: int | float | str | None = None
    lte: int | float | str | None = None
    neq: int | float | str | bool | None = None
    in_: tuple[Any, ...] | None = None

    def to_params(self, key: str) -> list[tuple[str, str]]:
        """Convert this filter to a list of (column, operator.value) pairs."""
        params: list[tuple[str, str]] = []
        for op in ("gt", "gte", "lt", "lte", "neq"):
            value = getattr(self, op)
            if value is not None:
                params.append((key, f"{op}.{_render(value)}"))
        if self.in_ is not None:
            joined = ",".join(_render(v) for v in self.in_)
            params.append((key, f"in.({joined})"))
        return params


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Build a list of query parameter tuples from keyword arguments.

    Plain values become ``eq`` filters and Filter instances become comparison
    operators. ``select``, ``order``, ``limit`` and ``offset`` pass through.

    Args:
        **kwargs: Column names mapped to plain values, Filter instances or
                  None (skipped).

    Returns:
        List of (key, value) tuples suitable for httpx params.
    """
    params: list[tuple[str, str]] = []
    for key, value in kwargs.items():
        if value is None:
            continue
        if key in _RESERVED_PARAMS:
            params.append((key, _render(value)))
        elif isinstance(value, Filter):
            params.extend(value.to_params(key))
        else:
            params.append((key, f"eq.{_render(value)}"))
    return params
