from __future__ import annotations

from typing import Dict, List, Sequence

from ..config import AXIS_HEADROOM, EMPTY_AXIS_SCALE
from ..metrics.volume import finite_or_zero
from ..models.types import ClassifiedSession, MuscleBalanceEntry, MuscleGroup


def muscle_balance(sessions: Sequence[ClassifiedSession]) -> List[MuscleBalanceEntry]:
    """WorkScore per canonical group, all eight groups always present.

    ``axis_scale`` is the largest sum plus 20% headroom, or a flat 10 when
    nothing was logged so the radar never collapses to a point.
    """
    totals: Dict[MuscleGroup, float] = {group: 0.0 for group in MuscleGroup}
    for session in sessions:
        for classified in session.sets:
            totals[classified.muscle_group] += classified.work_score
    totals = {group: finite_or_zero(total) for group, total in totals.items()}

    peak = max(totals.values())
    axis_scale = finite_or_zero(peak * AXIS_HEADROOM) or EMPTY_AXIS_SCALE
    return [
        MuscleBalanceEntry(group=group, work_score_sum=total, axis_scale=axis_scale)
        for group, total in totals.items()
    ]
