from datetime import datetime

import pytest

from conftest import make_log
from workout_analytics.io.session_loader import load_sessions
from workout_analytics.metrics.strength import best_lifts, estimate_one_rep_max, round_half_up
from workout_analytics.report import classify_sessions


@pytest.mark.parametrize("weight", [0, 60, 82.5, 140])
def test_single_rep_is_the_max(weight):
    assert estimate_one_rep_max(weight, 1) == weight


def test_zero_reps_has_no_estimate():
    assert estimate_one_rep_max(100, 0) == 0


def test_epley_rounding():
    assert estimate_one_rep_max(100, 10) == 133
    assert estimate_one_rep_max(80, 8) == 101
    assert estimate_one_rep_max(100, 5) == 117


def test_degenerate_inputs_short_circuit():
    assert estimate_one_rep_max(float("nan"), 5) == 0
    assert estimate_one_rep_max(100, float("inf")) == 0
    assert estimate_one_rep_max(-50, 5) == 0


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(2.4999) == 2
    assert round_half_up(float("inf")) == 0
    assert round_half_up(float("nan")) == 0


def test_overflowing_estimate_is_zero():
    assert estimate_one_rep_max(1.5e308, 30) == 0
    assert estimate_one_rep_max(1.7e308, 10) == 0


def test_best_lift_per_exercise(mixed_sessions):
    records = best_lifts(mixed_sessions)
    assert records[0].exercise_name == "Sentadilla"
    assert records[0].estimated_1rm == 133
    assert records[0].best_lift.weight == 100
    assert records[0].best_lift.reps == 10
    assert records[0].best_lift.date == datetime(2024, 1, 8, 7, 30)


def test_ties_keep_first_seen_and_order(mixed_sessions):
    names = [r.exercise_name for r in best_lifts(mixed_sessions)]
    assert names == ["Sentadilla", "Correr cinta", "Dominadas", "Circuito"]


def test_equal_estimate_does_not_replace_record():
    payload = [
        {"started_at": "2024-02-01T10:00:00", "workout_logs": [make_log(weight_kg=100, reps=1, exercise={"name": "Peso muerto"})]},
        {"started_at": "2024-02-08T10:00:00", "workout_logs": [make_log(weight_kg=100, reps=1, exercise={"name": "Peso muerto"})]},
    ]
    record = best_lifts(classify_sessions(load_sessions(payload)))[0]
    assert record.best_lift.date == datetime(2024, 2, 1, 10, 0)


def test_sets_without_name_are_ignored_and_limit_applies(mixed_sessions):
    assert len(best_lifts(mixed_sessions, limit=2)) == 2
    assert best_lifts(mixed_sessions, limit=0) == []
    assert best_lifts(()) == []
