"""Shared pure functions for the service layer (no Streamlit dependency)."""

from __future__ import annotations

from lapmetrics.models import LapRecord, Race


def drop_duplicate_laps(laps: list[LapRecord]) -> list[LapRecord]:
    """Keep the first row per (driver, lap number).

    Re-running an upload leaves repeated rows in the store.
    """
    seen: set[tuple[str, int]] = set()
    unique: list[LapRecord] = []
    for lap in laps:
        key = (lap.driver_id, lap.lap_number)
        if key not in seen:
            seen.add(key)
            unique.append(lap)
    return unique


def race_seasons(races: list[Race]) -> list[int]:
    """Distinct seasons of dated races, newest first."""
    return sorted({race.season for race in races if race.season is not None}, reverse=True)
