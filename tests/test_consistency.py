from datetime import date, timedelta, timezone

from conftest import make_log
from workout_analytics.aggregation.consistency import as_date_map, daily_activity
from workout_analytics.io.session_loader import load_sessions


def test_same_day_sessions_merge_into_one_entry(mixed_sessions):
    activity = daily_activity(mixed_sessions)
    assert [(a.calendar_date, a.session_count) for a in activity] == [
        (date(2024, 1, 7), 1),
        (date(2024, 1, 8), 1),
        (date(2024, 1, 10), 2),
    ]


def test_late_evening_counts_on_local_day():
    eastern = timezone(timedelta(hours=-5))
    sessions = load_sessions([{"started_at": "2024-01-11T04:50:00Z", "workout_logs": [make_log(reps=10)]}], tz=eastern)
    assert as_date_map(daily_activity(sessions)) == {"2024-01-10": 1}


def test_counts_are_not_capped():
    payload = [{"started_at": f"2024-03-01T0{h}:00:00"} for h in range(5)]
    assert as_date_map(daily_activity(load_sessions(payload))) == {"2024-03-01": 5}


def test_empty_collection_is_empty_map():
    assert daily_activity(()) == []
    assert daily_activity(load_sessions([{"started_at": None}])) == []
    assert as_date_map([]) == {}
