from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import List, Optional, Sequence

import pandas as pd

from ..config import DEFAULT_TREND_WEEKS
from ..metrics.volume import finite_or_zero
from ..models.types import ClassifiedSession, WeeklyVolumeBucket

log = logging.getLogger(__name__)

# Fixed English abbreviations keep labels independent of the process locale
_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def week_start(moment: datetime) -> date:
    """Monday of the local calendar week containing ``moment``; Sunday belongs to the week before."""
    day = moment.date() if isinstance(moment, datetime) else moment
    return day - timedelta(days=day.weekday())


def week_label(start: date) -> str:
    return f"{start.day} {_MONTH_ABBR[start.month - 1]}"


def weekly_volume(
    sessions: Sequence[ClassifiedSession],
    weeks: Optional[int] = DEFAULT_TREND_WEEKS,
) -> List[WeeklyVolumeBucket]:
    """Sum WorkScore into Monday-start weekly buckets, oldest first.

    Only the most recent ``weeks`` buckets are returned (all when None).
    Undated sessions are skipped; a dated session without sets still opens its week.
    """
    rows = [
        {"week_start": week_start(s.started_at), "work_score": s.work_score}
        for s in sessions
        if s.started_at is not None
    ]
    df = pd.DataFrame(rows, columns=["week_start", "work_score"])
    if df.empty:
        return []

    grouped = df.groupby("week_start", sort=True)["work_score"].sum()
    if weeks is not None:
        grouped = grouped.iloc[-weeks:] if weeks > 0 else grouped.iloc[:0]
    log.debug("Built %d weekly volume buckets from %d dated sessions", len(grouped), len(df))
    return [
        WeeklyVolumeBucket(week_start=start, total_work_score=finite_or_zero(total), label=week_label(start))
        for start, total in grouped.items()
    ]
