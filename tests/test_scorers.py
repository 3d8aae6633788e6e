"""Tests for the per-category scorers."""
import pytest

from scoring.interdental import InterdentalScorer
from scoring.perio import PerioScorer, band_depth
from scoring.plaque import PlaqueScorer
from scoring.single import ArchScorer, MotorScorer, SensitivityScorer


class TestPlaque:
    def test_all_level_three(self):
        out = PlaqueScorer().score([3, 3, 3, 3, 3, 3])
        assert out == {"total": 18, "max": 18, "warning": True}

    def test_warning_is_strictly_above_six(self):
        assert PlaqueScorer().score([1, 1, 1, 1, 1, 1])["warning"] is False
        assert PlaqueScorer().score([2, 1, 1, 1, 1, 1])["warning"] is True

    def test_out_of_range_values_propagate(self):
        out = PlaqueScorer().score([9, 0, 0, 0, 0, -1])
        assert out["total"] == 8
        assert out["warning"] is True


class TestPerio:
    @pytest.mark.parametrize("depth,points", [(0, 0), (3, 0), (4, 1), (5, 1), (6, 2), (10, 2), (None, 0)])
    def test_banding(self, depth, points):
        assert band_depth(depth) == points

    def test_all_three_mm(self):
        out = PerioScorer().score(["3"] * 24)
        assert out == {"total": 0, "max": 48, "warning": False}

    def test_one_deep_pocket(self):
        depths = ["3"] * 24
        depths[7] = "6"
        out = PerioScorer().score(depths)
        assert out["total"] == 2
        assert out["warning"] is True

    def test_four_and_five_do_not_warn(self):
        out = PerioScorer().score(["4", "5"] + [""] * 22)
        assert out["total"] == 2
        assert out["warning"] is False

    def test_non_numeric_entries_contribute_zero(self):
        out = PerioScorer().score(["abc", "", "x6", "6"] + [""] * 20)
        assert out["total"] == 2
        assert out["warning"] is True

    def test_all_six(self):
        assert PerioScorer().score(["6"] * 24)["total"] == 48

    def test_fullwidth_digits_are_not_depths(self):
        out = PerioScorer().score(["\uff16", "\u0666"] + [""] * 22)
        assert out == {"total": 0, "max": 48, "warning": False}


class TestInterdental:
    def test_sum_and_no_warning(self):
        assert InterdentalScorer().score([1, 1, 1, 1]) == {"total": 4, "max": 12, "warning": False}

    def test_single_entry_at_two_warns(self):
        assert InterdentalScorer().score([0, 0, 2, 0])["warning"] is True


class TestSingleItems:
    @pytest.mark.parametrize("value,warning", [(0, False), (1, False), (2, True), (3, True)])
    def test_sensitivity(self, value, warning):
        out = SensitivityScorer().score(value)
        assert out == {"total": value, "max": 3, "warning": warning}

    @pytest.mark.parametrize("value,warning", [(0, False), (1, False), (2, True), (3, False)])
    def test_arch_warns_only_at_two(self, value, warning):
        assert ArchScorer().score(value)["warning"] is warning

    @pytest.mark.parametrize("value,warning", [(0, False), (1, True), (2, False)])
    def test_motor_warns_only_at_one(self, value, warning):
        assert MotorScorer().score(value)["warning"] is warning
