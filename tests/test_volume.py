import pytest

from workout_analytics.metrics.volume import finite_or_zero, work_score
from workout_analytics.models.types import RawSet


def test_weighted_set_uses_weight_reps_sets():
    assert work_score(RawSet(weight_kg=80, reps=8, sets_repeat=3)) == 1920


def test_weight_wins_over_every_other_field():
    raw = RawSet(weight_kg=50, reps=10, sets_repeat=2, time_seconds=600, distance_meters=2000, custom_metrics={"x": 9})
    assert work_score(raw) == 1000


def test_timed_set():
    assert work_score(RawSet(time_seconds=600, distance_meters=2000)) == pytest.approx(900.0)


def test_distance_set():
    assert work_score(RawSet(distance_meters=5000, reps=20)) == pytest.approx(2500.0)


def test_bodyweight_reps():
    assert work_score(RawSet(reps=12, sets_repeat=3)) == pytest.approx(1080.0)


def test_custom_metrics_sum():
    assert work_score(RawSet(custom_metrics={"saltos": 40, "burpees": 20})) == pytest.approx(30.0)


def test_negative_custom_sum_never_goes_below_zero():
    assert work_score(RawSet(custom_metrics={"delta": -10})) == 0.0


def test_empty_set_scores_zero():
    assert work_score(RawSet()) == 0.0
    assert work_score(RawSet(custom_metrics={})) == 0.0


def test_overflowing_products_score_zero():
    assert work_score(RawSet(weight_kg=1e308, reps=10, sets_repeat=3)) == 0.0
    assert work_score(RawSet(time_seconds=1.5e308)) == 0.0
    assert work_score(RawSet(distance_meters=1e308)) == pytest.approx(5e307)
    assert work_score(RawSet(reps=1e307, sets_repeat=1e3)) == 0.0
    assert work_score(RawSet(custom_metrics={"a": 1.7e308, "b": 1.7e308})) == 0.0


def test_finite_or_zero():
    assert finite_or_zero(12.5) == 12.5
    assert finite_or_zero(float("inf")) == 0.0
    assert finite_or_zero(float("nan")) == 0.0
