from __future__ import annotations

from typing import Dict, List, Sequence, Union

import pandas as pd

from ..models.types import ClassifiedSession, DayActivity, Session


def daily_activity(sessions: Sequence[Union[ClassifiedSession, Session]]) -> List[DayActivity]:
    """Sparse session count per local calendar day, ascending by date.

    Days without sessions have no entry; counts are not capped.
    """
    dates = [s.started_at.date() for s in sessions if s.started_at is not None]
    if not dates:
        return []
    counts = pd.Series(dates, dtype="object").value_counts().sort_index()
    return [DayActivity(calendar_date=day, session_count=int(n)) for day, n in counts.items()]


def as_date_map(activity: Sequence[DayActivity]) -> Dict[str, int]:
    """``{"YYYY-MM-DD": count}`` view for calendar heatmaps."""
    return {a.calendar_date.isoformat(): a.session_count for a in activity}
