"""Tests for the Assessment aggregate."""
import dataclasses

import pytest

from scoring.assessment import Assessment
from scoring.constants import MAX_SCORES


def test_defaults(empty_assessment):
    assert empty_assessment.plaque == (0,) * 6
    assert empty_assessment.perio == ("",) * 24
    assert empty_assessment.interdental == (0,) * 4
    assert (empty_assessment.sensitivity, empty_assessment.arch, empty_assessment.motor) == (0, 0, 0)


def test_setters_return_new_instance(empty_assessment):
    updated = empty_assessment.set_plaque(2, 3)
    assert updated is not empty_assessment
    assert updated.plaque == (0, 0, 3, 0, 0, 0)
    assert empty_assessment.plaque == (0,) * 6


def test_is_frozen(empty_assessment):
    with pytest.raises(dataclasses.FrozenInstanceError):
        empty_assessment.name = "x"


def test_set_identity_only_changes_given_fields():
    a = Assessment(name="김", chart_number="7", date="2026-01-01").set_identity(chart_number="8")
    assert (a.name, a.chart_number, a.date) == ("김", "8", "2026-01-01")


def test_fields_mutate_independently():
    a = Assessment().set_motor(1).set_perio(23, "5").set_interdental(0, 2).set_arch(2)
    assert a.perio[23] == "5"
    assert a.interdental == (2, 0, 0, 0)
    assert (a.arch, a.motor, a.sensitivity) == (2, 1, 0)


def test_round_trip_through_dict(full_assessment):
    data = full_assessment.to_dict()
    assert isinstance(data["perio"], list)
    assert Assessment.from_dict(data) == full_assessment


def test_from_dict_fills_missing_keys():
    assert Assessment.from_dict({"name": "이"}) == Assessment(name="이")


def test_maxima_are_read_only():
    with pytest.raises(TypeError):
        MAX_SCORES["plaque"] = 99


@pytest.mark.parametrize("setter,index,value", [
    ("set_plaque", -1, 3),
    ("set_plaque", 6, 3),
    ("set_perio", -24, "4"),
    ("set_perio", 24, "4"),
    ("set_interdental", -1, 2),
    ("set_interdental", 4, 2),
])
def test_site_index_out_of_range_raises(empty_assessment, setter, index, value):
    with pytest.raises(IndexError):
        getattr(empty_assessment, setter)(index, value)
    assert empty_assessment == Assessment()
