import pytest

from workout_analytics.io.session_loader import load_sessions
from workout_analytics.report import classify_sessions


def make_log(**overrides):
    row = {
        "weight_kg": None,
        "reps": None,
        "sets": None,
        "time": None,
        "distance": None,
        "metrics_data": None,
        "category_snapshot": None,
        "exercise": None,
    }
    row.update(overrides)
    return row


@pytest.fixture
def bench_payload():
    return {
        "sessions": [
            {
                "started_at": "2024-01-10T18:00:00",
                "end_time": "2024-01-10T19:15:00",
                "workout_logs": [
                    make_log(
                        weight_kg=80,
                        reps=8,
                        sets=3,
                        category_snapshot="pectorales",
                        exercise={"name": "Press Banca", "target_muscle_group": "Pecho"},
                    )
                ],
            }
        ]
    }


@pytest.fixture
def mixed_payload():
    return {
        "sessions": [
            {
                "started_at": "2024-01-07T10:00:00",  # Sunday
                "end_time": "2024-01-07T11:00:00",
                "workout_logs": [
                    make_log(weight_kg=100, reps=5, sets=5, exercise={"name": "Sentadilla"}),
                    make_log(time=1200, exercise={"name": "Correr cinta"}),
                ],
            },
            {
                "started_at": "2024-01-08T07:30:00",  # Monday
                "end_time": "2024-01-08T08:00:00",
                "workout_logs": [
                    make_log(weight_kg=100, reps=10, sets=1, exercise={"name": "Sentadilla"}),
                    make_log(reps=12, sets=3, exercise={"name": "Dominadas"}),
                ],
            },
            {
                "started_at": "2024-01-10T23:50:00",  # Wednesday, late evening
                "workout_logs": [
                    make_log(distance=5000, category_snapshot="cardio"),
                ],
            },
            {
                "started_at": "2024-01-10T06:00:00",
                "end_time": "2024-01-10T05:00:00",  # clock skew, clamps to zero
                "workout_logs": [
                    make_log(metrics_data={"saltos": 40, "burpees": 20}, exercise={"name": "Circuito"}),
                ],
            },
        ]
    }


@pytest.fixture
def mixed_sessions(mixed_payload):
    return classify_sessions(load_sessions(mixed_payload))
