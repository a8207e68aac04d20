"""Tests for row models and their column mapping."""

from __future__ import annotations

import datetime

import pytest
from pydantic import ValidationError

from lapmetrics.models import (
    DeltaResult,
    Driver,
    LapRecord,
    Race,
    RaceResult,
    WeatherSample,
)
from tests.conftest import (
    SAMPLE_DRIVER,
    SAMPLE_LAP_ROW,
    SAMPLE_RACE,
    SAMPLE_RESULT_ROW,
    SAMPLE_WEATHER_ROW,
)


class TestLapRecord:
    def test_from_row(self) -> None:
        lap = LapRecord.model_validate(SAMPLE_LAP_ROW)
        assert lap.race_id == "race-1"
        assert lap.driver_id == "drv-13"
        assert lap.lap_number == 5
        assert lap.lap_time == pytest.approx(99.412)
        assert lap.sector1 == pytest.approx(26.881)
        assert lap.sector3 == pytest.approx(29.506)
        assert lap.average_speed == pytest.approx(134.2)
        assert lap.top_speed == pytest.approx(187.9)
        assert lap.crossed_finish_in_pit is False
        assert lap.flag_at_finish == "GF"

    def test_seconds_column_wins(self) -> None:
        row = {**SAMPLE_LAP_ROW, "s1": "27.000", "s1_seconds": 26.881}
        assert LapRecord.model_validate(row).sector1 == pytest.approx(26.881)

    def test_falls_back_to_text_column(self) -> None:
        row = {**SAMPLE_LAP_ROW, "s2_seconds": None, "s2": "0:43.025"}
        assert LapRecord.model_validate(row).sector2 == pytest.approx(43.025)

    def test_interval_lap_time(self) -> None:
        row = {**SAMPLE_LAP_ROW, "lap_time": "00:01:39.412"}
        assert LapRecord.model_validate(row).lap_time == pytest.approx(99.412)

    def test_missing_values(self) -> None:
        row = {
            "race_id": "race-1",
            "driver_id": "drv-13",
            "lap_number": 1,
            "lap_time": "-",
            "kph": "",
            "crossing_finish_line_in_pit": None,
        }
        lap = LapRecord.model_validate(row)
        assert lap.lap_time is None
        assert lap.sector1 is None
        assert lap.average_speed is None
        assert lap.crossed_finish_in_pit is False
        assert lap.sector_sum is None

    def test_numeric_ids(self) -> None:
        lap = LapRecord.model_validate({**SAMPLE_LAP_ROW, "race_id": 4, "driver_id": 13})
        assert lap.race_id == "4"
        assert lap.driver_id == "13"

    def test_speed_as_text(self) -> None:
        lap = LapRecord.model_validate({**SAMPLE_LAP_ROW, "top_speed": "187.9"})
        assert lap.top_speed == pytest.approx(187.9)

    def test_sector_sum(self) -> None:
        lap = LapRecord.model_validate(SAMPLE_LAP_ROW)
        assert lap.sector_sum == pytest.approx(99.412)

    def test_frozen(self) -> None:
        lap = LapRecord.model_validate(SAMPLE_LAP_ROW)
        with pytest.raises(ValidationError):
            lap.lap_time = 1.0  # type: ignore[misc]

    def test_lap_number_required(self) -> None:
        row = {k: v for k, v in SAMPLE_LAP_ROW.items() if k != "lap_number"}
        with pytest.raises(ValidationError):
            LapRecord.model_validate(row)

    @pytest.mark.parametrize(
        "cell",
        [{"lap_time": True}, {"s1": ["x"], "s1_seconds": None}, {"lap_time": {"m": 1}}],
    )
    def test_malformed_timing_cell_is_validation_error(self, cell: dict) -> None:
        with pytest.raises(ValidationError):
            LapRecord.model_validate({**SAMPLE_LAP_ROW, **cell})


class TestWeatherSample:
    def test_from_row(self) -> None:
        sample = WeatherSample.model_validate(SAMPLE_WEATHER_ROW)
        assert sample.air_temp == 29.4
        assert sample.wind_direction == 189.0
        assert sample.rain_flag == 0

    def test_rain_column(self) -> None:
        sample = WeatherSample.model_validate({**SAMPLE_WEATHER_ROW, "rain": 1})
        assert sample.rain_flag == 1

    def test_missing_rain_is_dry(self) -> None:
        sample = WeatherSample.model_validate({**SAMPLE_WEATHER_ROW, "rain": None})
        assert sample.rain_flag == 0


class TestRaceResult:
    def test_from_row(self) -> None:
        result = RaceResult.model_validate(SAMPLE_RESULT_ROW)
        assert result.position == 2
        assert result.class_type == "Am"
        assert result.gap_to_first == "00:01:02.345"
        assert result.gap_to_previous == "1.234"
        assert result.best_lap_speed_kph == 135.7

    def test_lap_deficit_gap(self) -> None:
        result = RaceResult.model_validate({**SAMPLE_RESULT_ROW, "gap_to_first": "2 Laps"})
        assert result.gap_to_first is None

    def test_leader_has_no_gap(self) -> None:
        result = RaceResult.model_validate({**SAMPLE_RESULT_ROW, "gap_to_first": "-"})
        assert result.gap_to_first is None


class TestRaceAndDriver:
    def test_race(self) -> None:
        race = Race.model_validate(SAMPLE_RACE)
        assert race.name == "Barber Race 1"
        assert race.date == datetime.date(2023, 5, 19)
        assert race.season == 2023

    def test_race_without_date(self) -> None:
        race = Race.model_validate({"id": 4})
        assert race.id == "4"
        assert race.season is None

    def test_driver_display_name(self) -> None:
        driver = Driver.model_validate(SAMPLE_DRIVER)
        assert driver.display_name == "Driver Thirteen (#13)"

    def test_driver_without_name(self) -> None:
        assert Driver(id="drv-7", number=7).display_name == "#7"
        assert Driver(id="drv-7").display_name == "drv-7"


class TestDeltaResult:
    def test_default_is_unavailable(self) -> None:
        result = DeltaResult()
        assert result.delta is None
        assert not result.available
