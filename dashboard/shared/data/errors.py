"""Data access error surfaced to the UI."""

from __future__ import annotations


class RaceDataError(Exception):
    """Race data fetch error. UI catches only this."""
