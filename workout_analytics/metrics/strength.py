from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Sequence

from ..config import EPLEY_REP_DIVISOR
from ..models.types import BestLift, ClassifiedSession, LiftRecord

log = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round halves toward +inf (0.5 -> 1, 2.5 -> 3), unlike built-in ``round``.

    Non-finite values round to 0.
    """
    if not math.isfinite(value):
        return 0
    return int(math.floor(value + 0.5))


def estimate_one_rep_max(weight: float, reps: float) -> float:
    """Estimated one-rep max using the Epley formula: weight x (1 + reps / 30).

    A single rep is the max itself and zero reps carry no estimate. Negative or
    non-finite inputs short-circuit to 0.
    """
    if not (math.isfinite(weight) and math.isfinite(reps)) or weight < 0 or reps < 0:
        return 0.0
    if reps == 1:
        return float(weight)
    if reps == 0:
        return 0.0
    estimate = weight * (1 + reps / EPLEY_REP_DIVISOR)
    if not math.isfinite(estimate):
        return 0.0
    return float(round_half_up(estimate))


def best_lifts(sessions: Sequence[ClassifiedSession], limit: Optional[int] = None) -> List[LiftRecord]:
    """Best estimated max per exercise name, strongest first.

    Sets without an exercise name are skipped. A later set only replaces the
    record when its estimate is strictly higher, so ties keep the first-seen lift.
    """
    records: Dict[str, LiftRecord] = {}
    for session in sessions:
        for classified in session.sets:
            raw = classified.raw
            name = raw.equipment_ref.name
            if not name:
                continue
            estimate = estimate_one_rep_max(raw.weight_kg, raw.reps)
            current = records.get(name)
            if current is None or estimate > current.estimated_1rm:
                records[name] = LiftRecord(
                    exercise_name=name,
                    estimated_1rm=estimate,
                    best_lift=BestLift(weight=raw.weight_kg, reps=raw.reps, date=session.started_at),
                )

    ranked = sorted(records.values(), key=lambda r: r.estimated_1rm, reverse=True)
    log.debug("Ranked %d exercises by estimated 1RM", len(ranked))
    if limit is not None:
        ranked = ranked[: max(0, limit)]
    return ranked
