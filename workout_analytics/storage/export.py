from __future__ import annotations

from typing import Sequence

import pandas as pd

from ..models.types import (
    ClassifiedSession,
    DayActivity,
    LiftRecord,
    MuscleBalanceEntry,
    WeeklyVolumeBucket,
)

_SET_COLUMNS = [
    "session_index",
    "started_at",
    "exercise_name",
    "muscle_group",
    "work_score",
    "weight_kg",
    "reps",
    "sets_repeat",
    "time_seconds",
    "distance_meters",
    "category_snapshot",
]


def classified_sets_frame(sessions: Sequence[ClassifiedSession]) -> pd.DataFrame:
    """One row per logged set with its resolved group and WorkScore."""
    rows = []
    for idx, s in enumerate(sessions):
        for c in s.sets:
            raw = c.raw
            rows.append(
                {
                    "session_index": idx,
                    "started_at": s.started_at,
                    "exercise_name": raw.equipment_ref.name,
                    "muscle_group": c.muscle_group.value,
                    "work_score": c.work_score,
                    "weight_kg": raw.weight_kg,
                    "reps": raw.reps,
                    "sets_repeat": raw.sets_repeat,
                    "time_seconds": raw.time_seconds,
                    "distance_meters": raw.distance_meters,
                    "category_snapshot": raw.category_snapshot,
                }
            )
    return pd.DataFrame(rows, columns=_SET_COLUMNS)


def muscle_balance_frame(entries: Sequence[MuscleBalanceEntry]) -> pd.DataFrame:
    rows = [
        {"group": e.group.value, "work_score_sum": e.work_score_sum, "axis_scale": e.axis_scale}
        for e in entries
    ]
    return pd.DataFrame(rows, columns=["group", "work_score_sum", "axis_scale"])


def weekly_volume_frame(buckets: Sequence[WeeklyVolumeBucket]) -> pd.DataFrame:
    rows = [
        {"week_start": b.week_start, "label": b.label, "total_work_score": b.total_work_score}
        for b in buckets
    ]
    return pd.DataFrame(rows, columns=["week_start", "label", "total_work_score"])


def consistency_frame(activity: Sequence[DayActivity]) -> pd.DataFrame:
    rows = [{"date": a.calendar_date, "session_count": a.session_count} for a in activity]
    return pd.DataFrame(rows, columns=["date", "session_count"])


def lift_records_frame(records: Sequence[LiftRecord]) -> pd.DataFrame:
    rows = []
    for rank, r in enumerate(records, start=1):
        rows.append(
            {
                "rank": rank,
                "exercise_name": r.exercise_name,
                "estimated_1rm": r.estimated_1rm,
                "best_weight_kg": r.best_lift.weight,
                "best_reps": r.best_lift.reps,
                "best_date": r.best_lift.date,
            }
        )
    return pd.DataFrame(
        rows, columns=["rank", "exercise_name", "estimated_1rm", "best_weight_kg", "best_reps", "best_date"]
    )
