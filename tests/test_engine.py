"""Tests for compute_report."""
from scoring.assessment import Assessment
from scoring.constants import MAX_SCORES, TOTAL_MAX
from scoring.engine import compute_report, format_percent


def test_empty_assessment_scores_zero(empty_assessment):
    report = compute_report(empty_assessment)
    assert report.total_score == 0
    assert report.total_max == 84
    assert report.total_percent == "0.0"
    assert report.warning_labels == []
    assert all(v == 0.0 for v in report.normalized.values())


def test_full_assessment_hits_every_maximum(full_assessment):
    report = compute_report(full_assessment)
    assert report.actual_scores == dict(MAX_SCORES)
    assert report.total_score == 84
    assert report.total_percent == "100.0"
    assert all(report.warnings.values())
    assert all(v == 100.0 for v in report.normalized.values())


def test_warning_labels_follow_fixed_category_order():
    a = Assessment().set_motor(1).set_sensitivity(2).set_plaque(0, 3).set_plaque(1, 3).set_plaque(2, 3)
    report = compute_report(a)
    assert report.warning_labels == ["치면세정능력", "민감성", "손 운동기능"]


def test_normalized_values_are_not_rounded():
    a = Assessment(plaque=(1, 0, 0, 0, 0, 0))
    report = compute_report(a)
    assert report.normalized["plaque"] == 1 / 18 * 100


def test_total_percent_has_one_decimal():
    a = Assessment(plaque=(1, 0, 0, 0, 0, 0))
    assert compute_report(a).total_percent == "1.2"
    assert format_percent(42) == "50.0"


def test_total_max_is_constant_regardless_of_input():
    a = Assessment(plaque=(9,) * 6, sensitivity=-5)
    report = compute_report(a)
    assert report.total_max == TOTAL_MAX == 84
    assert report.total_score == 54 - 5


def test_negative_inputs_give_negative_normalized_value():
    report = compute_report(Assessment(sensitivity=-3))
    assert report.category("sensitivity").normalized == -100.0
    assert report.category("sensitivity").warning is False


def test_compute_is_idempotent(full_assessment):
    assert compute_report(full_assessment) == compute_report(full_assessment)


def test_interdental_non_numeric_counts_as_zero():
    report = compute_report(Assessment(interdental=("abc", 2, None, 1)))
    assert report.category("interdental").actual == 3
    assert report.category("interdental").warning is True
