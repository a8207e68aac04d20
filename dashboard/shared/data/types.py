"""Display row contracts produced by the service layer."""

from __future__ import annotations

from typing import TypedDict


class LapTableRow(TypedDict):
    lap_number: int
    lap_time: str
    lap_delta: str
    lap_color: str
    lap_improvement: str
    s1: str
    s1_improvement: str
    s2: str
    s2_improvement: str
    s3: str
    s3_improvement: str
    top_speed: str
    average_speed: str
    in_pit: bool
    is_personal_best: bool


class FieldTableRow(TypedDict):
    driver_id: str
    lap_time: str
    lap_delta: str
    lap_color: str
    s1_delta: str
    s2_delta: str
    s3_delta: str
    top_speed: str
    top_speed_delta: str


class ResultRow(TypedDict):
    position: int | None
    position_in_class: int | None
    class_type: str | None
    driver_id: str
    vehicle: str | None
    laps: int | None
    elapsed_time: str | None
    gap_to_first: str
    gap_to_previous: str
    best_lap_number: int | None
    best_lap_time: str
    best_lap_speed: str
