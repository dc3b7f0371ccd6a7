"""Tests for axis domains and band placement."""

import pytest

from coverage_matrix.axes import BandScale, category_domain, goal_domain
from coverage_matrix.models import CategoryField, Goal, Program


def _programs(*values):
    return [Program(f"P{i}", "", {"cat": v} if v is not None else {}) for i, v in enumerate(values)]


class TestGoalDomain:
    def test_preserves_framework_order(self, three_goals):
        assert goal_domain(three_goals) == ["G-01", "G-02", "G-03"]

    def test_stable_across_calls(self, three_goals):
        assert goal_domain(three_goals) == goal_domain(three_goals)

    def test_duplicate_id_keeps_first(self):
        goals = [Goal("B", "b"), Goal("A", "a"), Goal("B", "again")]
        assert goal_domain(goals) == ["B", "A"]


class TestCategoryDomain:
    def test_sorted_distinct(self):
        assert category_domain(_programs("Medium", "High", "High"), "cat") == ["High", "Medium"]

    def test_excludes_missing_and_blank(self):
        assert category_domain(_programs("Low", None, "", "  "), "cat") == ["Low"]

    def test_lexical_not_numeric(self):
        assert category_domain(_programs("10", "9", "2"), "cat") == ["10", "2", "9"]

    def test_accepts_category_field(self):
        programs = _programs("B", "A")
        assert category_domain(programs, CategoryField("cat")) == ["A", "B"]

    def test_no_programs(self):
        assert category_domain([], "cat") == []


class TestBandScale:
    def test_step_and_bandwidth(self):
        scale = BandScale(["a", "b", "c", "d"], 400, padding_inner=0.1)
        assert scale.step == pytest.approx(100.0)
        assert scale.bandwidth == pytest.approx(90.0)

    def test_positions_are_equal_slots(self):
        scale = BandScale(["a", "b", "c"], 300)
        assert scale.position("a") == pytest.approx(0.0)
        assert scale.position("b") == pytest.approx(100.0)
        assert scale.position("c") == pytest.approx(200.0)

    def test_center_is_middle_of_band(self):
        scale = BandScale(["a", "b"], 200, padding_inner=0.2)
        # bandwidth = 100 * 0.8 = 80
        assert scale.center("b") == pytest.approx(100.0 + 40.0)

    def test_ticks_match_cell_positions(self):
        scale = BandScale(["x", "y", "z"], 500)
        for value, center in scale.ticks():
            start = scale.position(value)
            assert start <= center <= start + scale.bandwidth

    def test_bands_do_not_overlap(self):
        scale = BandScale([f"v{i}" for i in range(7)], 500)
        starts = [scale.position(v) for v in scale.domain]
        for a, b in zip(starts, starts[1:]):
            assert a + scale.bandwidth <= b

    def test_unknown_value(self):
        scale = BandScale(["a"], 100)
        assert scale.position("zzz") is None
        assert scale.center("zzz") is None
        assert "zzz" not in scale
        assert "a" in scale

    def test_empty_domain(self):
        scale = BandScale([], 500)
        assert scale.step == 0.0
        assert scale.bandwidth == 0.0
        assert scale.ticks() == []
        assert len(scale) == 0

    def test_zero_padding_fills_extent(self):
        scale = BandScale(["a", "b"], 100, padding_inner=0.0)
        assert scale.bandwidth == pytest.approx(50.0)

    def test_invalid_padding(self):
        with pytest.raises(ValueError, match="padding_inner"):
            BandScale(["a"], 100, padding_inner=1.0)

    def test_negative_extent(self):
        with pytest.raises(ValueError, match="extent"):
            BandScale(["a"], -1)
