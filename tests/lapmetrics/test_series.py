"""Tests for lap enrichment and the driver and field views."""

from __future__ import annotations

import pytest

from lapmetrics.exceptions import LapSequenceError
from lapmetrics.metrics import LAP_TIME
from lapmetrics.models import Classification, EnrichedLapRecord, ReferenceScope
from lapmetrics.series import (
    analyze_driver_race,
    compare_lap_to_field,
    enrich_laps,
    theoretical_best_lap,
)


class TestEnrichLaps:
    def test_previous_lap_delta_and_best(self, make_lap) -> None:
        laps = [
            make_lap(1, lap_time=90.000),
            make_lap(2, lap_time=88.500),
            make_lap(3, lap_time=89.000),
        ]
        enriched = enrich_laps(laps)

        assert enriched[0].previous_lap_delta.is_empty
        assert enriched[1].previous_lap_delta.lap_time == pytest.approx(1.5)
        assert enriched[2].previous_lap_delta.lap_time == pytest.approx(-0.5)

        lap_two = enriched[1].deltas["lap_time"]
        assert lap_two.classification is Classification.AT_REFERENCE
        assert enriched[0].deltas["lap_time"].delta == pytest.approx(1.5)
        assert enriched[2].deltas["lap_time"].classification is Classification.WORSE

    def test_keeps_lap_fields(self, driver_laps) -> None:
        enriched = enrich_laps(driver_laps)
        assert len(enriched) == len(driver_laps)
        assert all(isinstance(lap, EnrichedLapRecord) for lap in enriched)
        assert enriched[5].crossed_finish_in_pit is True
        assert enriched[4].sector1 == pytest.approx(26.881)

    def test_missing_values_are_unavailable(self, driver_laps) -> None:
        enriched = enrich_laps(driver_laps)
        lap_four = enriched[3]
        assert lap_four.deltas["lap_time"].classification is Classification.UNAVAILABLE
        assert lap_four.deltas["average_speed"].delta is None
        assert lap_four.previous_lap_delta.lap_time is None
        assert lap_four.previous_lap_delta.sector1 == pytest.approx(-0.1)
        assert enriched[4].previous_lap_delta.sector2 is None

    def test_speed_deltas_positive_when_slower(self, driver_laps) -> None:
        enriched = enrich_laps(driver_laps)
        top = enriched[0].deltas["top_speed"]
        assert top.delta == pytest.approx(189.1 - 171.0)
        assert top.classification is Classification.WORSE
        assert enriched[4].deltas["top_speed"].classification is Classification.AT_REFERENCE

    def test_custom_metrics(self, driver_laps) -> None:
        enriched = enrich_laps(driver_laps, metrics=(LAP_TIME,))
        assert set(enriched[0].deltas) == {"lap_time"}

    def test_empty(self) -> None:
        assert enrich_laps([]) == []

    def test_out_of_order(self, make_lap) -> None:
        with pytest.raises(LapSequenceError):
            enrich_laps([make_lap(2), make_lap(1)])

    def test_duplicate_lap_number(self, make_lap) -> None:
        with pytest.raises(LapSequenceError):
            enrich_laps([make_lap(1), make_lap(1)])

    def test_mixed_drivers(self, make_lap) -> None:
        with pytest.raises(LapSequenceError):
            enrich_laps([make_lap(1, driver_id="drv-7"), make_lap(2, driver_id="drv-13")])

    def test_lap_sequence_error_is_value_error(self, make_lap) -> None:
        with pytest.raises(ValueError):
            enrich_laps([make_lap(3), make_lap(2)])


class TestCompareLapToField:
    @pytest.fixture
    def lap_five(self, make_lap):
        return [
            make_lap(5, lap_time=99.4, top_speed=188.0, driver_id="drv-7"),
            make_lap(5, lap_time=98.7, top_speed=186.5, driver_id="drv-13"),
            make_lap(5, lap_time=None, top_speed=191.2, driver_id="drv-22"),
        ]

    def test_field_references(self, lap_five) -> None:
        view = compare_lap_to_field(lap_five)
        assert view.race_id == "race-1"
        assert view.lap_number == 5
        assert view.references["lap_time"].owner_driver_id == "drv-13"
        assert view.references["lap_time"].scope is ReferenceScope.ALL_DRIVERS_THIS_LAP
        assert view.references["top_speed"].owner_driver_id == "drv-22"

    def test_entry_deltas(self, lap_five) -> None:
        view = compare_lap_to_field(lap_five)
        by_driver = {e.record.driver_id: e for e in view.entries}
        assert by_driver["drv-7"].deltas["lap_time"].delta == pytest.approx(0.7)
        assert by_driver["drv-13"].deltas["lap_time"].classification is (
            Classification.AT_REFERENCE
        )
        assert by_driver["drv-22"].deltas["lap_time"].classification is (
            Classification.UNAVAILABLE
        )
        assert by_driver["drv-13"].deltas["top_speed"].delta == pytest.approx(4.7)

    def test_keeps_input_order(self, lap_five) -> None:
        view = compare_lap_to_field(lap_five)
        assert [e.record.driver_id for e in view.entries] == ["drv-7", "drv-13", "drv-22"]

    def test_empty(self) -> None:
        view = compare_lap_to_field([])
        assert view.entries == []
        assert view.lap_number is None

    def test_mixed_lap_numbers(self, make_lap) -> None:
        with pytest.raises(LapSequenceError):
            compare_lap_to_field([make_lap(5, driver_id="a"), make_lap(6, driver_id="b")])

    def test_duplicate_driver(self, make_lap) -> None:
        with pytest.raises(LapSequenceError):
            compare_lap_to_field([make_lap(5), make_lap(5)])


class TestTheoreticalBestLap:
    def test_sum_of_best_sectors(self, driver_laps) -> None:
        assert theoretical_best_lap(driver_laps) == pytest.approx(26.881 + 43.025 + 29.0)

    def test_missing_sector(self, make_lap) -> None:
        assert theoretical_best_lap([make_lap(1, s3=None), make_lap(2, s3=None)]) is None

    def test_empty(self) -> None:
        assert theoretical_best_lap([]) is None


class TestAnalyzeDriverRace:
    def test_view(self, driver_laps) -> None:
        view = analyze_driver_race(driver_laps)
        assert view.driver_id == "drv-13"
        assert len(view.laps) == 6
        assert view.references["lap_time"].owner_lap_number == 3
        assert view.references["sector1"].owner_lap_number == 5
        assert view.lap_time_stats is not None
        assert view.lap_time_stats.count == 5
        assert view.theoretical_best == pytest.approx(98.906)

    def test_empty(self) -> None:
        view = analyze_driver_race([])
        assert view.laps == []
        assert view.driver_id is None
        assert view.lap_time_stats is None
