"""Tests for the coefficient table."""

from __future__ import annotations

import dataclasses

import pytest

from diamond_estimator.constants import CUT_GRADES, COLOR_GRADES, CLARITY_GRADES
from diamond_estimator.data import BASELINE_LEVELS, COEFFICIENTS, coefficient_frame


class TestCoefficientTable:
    def test_headline_weights(self) -> None:
        assert COEFFICIENTS.intercept == -8444.03
        assert COEFFICIENTS.carat == 7756.43
        assert COEFFICIENTS.depth == 115.82
        assert COEFFICIENTS.table == -92.97
        assert (COEFFICIENTS.x, COEFFICIENTS.y, COEFFICIENTS.z) == (817.13, 60.63, -341.99)

    def test_levels_cover_the_form_options(self) -> None:
        assert set(COEFFICIENTS.cut) == set(CUT_GRADES)
        assert set(COEFFICIENTS.color) == set(COLOR_GRADES)
        assert set(COEFFICIENTS.clarity) == set(CLARITY_GRADES)

    def test_baselines_are_real_zero_entries(self) -> None:
        for name, level in BASELINE_LEVELS.items():
            assert COEFFICIENTS.category_offset(name, level) == 0.0

    def test_unknown_level_is_none(self) -> None:
        assert COEFFICIENTS.category_offset("cut", "Excellent") is None
        assert COEFFICIENTS.category_offset("cut", None) is None
        assert COEFFICIENTS.category_offset("polish", "EX") is None

    def test_continuous_weight_lookup(self) -> None:
        assert COEFFICIENTS.continuous_weight("depth") == 115.82
        assert COEFFICIENTS.continuous_weight("z") == -341.99
        assert COEFFICIENTS.continuous_weight("cut") is None

    def test_table_is_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            COEFFICIENTS.intercept = 0.0
        with pytest.raises(TypeError):
            COEFFICIENTS.cut["Ideal"] = 0.0

    def test_offsets_rise_with_grade(self) -> None:
        assert [COEFFICIENTS.cut[g] for g in CUT_GRADES] == sorted(COEFFICIENTS.cut.values())
        assert [COEFFICIENTS.color[g] for g in COLOR_GRADES] == sorted(COEFFICIENTS.color.values(), reverse=True)
        assert [COEFFICIENTS.clarity[g] for g in CLARITY_GRADES] == sorted(COEFFICIENTS.clarity.values(), reverse=True)


class TestCoefficientFrame:
    def test_one_row_per_weight(self) -> None:
        frame = coefficient_frame()
        assert list(frame.columns) == ["Term", "Level", "Weight"]
        assert len(frame) == 1 + 6 + len(CUT_GRADES) + len(COLOR_GRADES) + len(CLARITY_GRADES)

    def test_baselines_are_labelled(self) -> None:
        frame = coefficient_frame()
        labelled = frame[frame["Level"].str.endswith("(baseline)")]
        assert sorted(labelled["Level"]) == ["Fair (baseline)", "I1 (baseline)", "J (baseline)"]
        assert (labelled["Weight"] == 0.0).all()
