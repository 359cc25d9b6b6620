from __future__ import annotations

from typing import Sequence

from ..metrics.strength import round_half_up
from ..models.types import ClassifiedSession, SessionSummary


def summarize_sessions(sessions: Sequence[ClassifiedSession]) -> SessionSummary:
    """Headline totals for dashboard cards and the share card."""
    total_work = sum(s.work_score for s in sessions)
    total_minutes = 0.0
    for s in sessions:
        minutes = s.session.duration_minutes
        if minutes is not None:
            total_minutes += minutes

    count = len(sessions)
    rounded_minutes = round_half_up(total_minutes)
    avg_minutes = round_half_up(rounded_minutes / count) if count else 0
    return SessionSummary(
        total_workouts=count,
        total_work_score=round_half_up(total_work),
        total_time_minutes=rounded_minutes,
        avg_minutes_per_session=avg_minutes,
    )
