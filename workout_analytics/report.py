from __future__ import annotations

import logging
from datetime import tzinfo
from typing import Any, Iterable, Optional, Sequence, Tuple

from .aggregation.balance import muscle_balance
from .aggregation.consistency import daily_activity
from .aggregation.summary import summarize_sessions
from .aggregation.trends import weekly_volume
from .config import DEFAULT_TOP_LIFTS, DEFAULT_TREND_WEEKS
from .io.session_loader import load_sessions
from .metrics.strength import best_lifts
from .metrics.volume import work_score
from .models.types import AnalyticsReport, ClassifiedSession, ClassifiedSet, RawSet, Session
from .recognition.muscle_groups import CLASSIFIER_VERSION, classify_set

log = logging.getLogger(__name__)


def classify(raw_set: RawSet) -> ClassifiedSet:
    return ClassifiedSet(raw=raw_set, muscle_group=classify_set(raw_set), work_score=work_score(raw_set))


def classify_sessions(sessions: Iterable[Session]) -> Tuple[ClassifiedSession, ...]:
    return tuple(ClassifiedSession(session=s, sets=tuple(classify(r) for r in s.sets)) for s in sessions)


def build_report(
    sessions: Sequence[Session],
    weeks: Optional[int] = DEFAULT_TREND_WEEKS,
    top_lifts: Optional[int] = DEFAULT_TOP_LIFTS,
) -> AnalyticsReport:
    """Recompute every aggregate from the full session collection.

    Each call classifies all sets once and derives the aggregates from that
    single pass; nothing is cached between calls.
    """
    classified = classify_sessions(sessions)
    report = AnalyticsReport(
        muscle_balance=muscle_balance(classified),
        volume_trend=weekly_volume(classified, weeks=weeks),
        consistency=daily_activity(classified),
        lift_records=best_lifts(classified, limit=top_lifts),
        summary=summarize_sessions(classified),
        classifier_version=CLASSIFIER_VERSION,
    )
    log.info(
        "Analyzed %d sessions: %d trend weeks, %d active days, %d lift records",
        len(classified),
        len(report.volume_trend),
        len(report.consistency),
        len(report.lift_records),
    )
    return report


def analyze_payload(
    payload: Any,
    weeks: Optional[int] = DEFAULT_TREND_WEEKS,
    top_lifts: Optional[int] = DEFAULT_TOP_LIFTS,
    tz: Optional[tzinfo] = None,
) -> AnalyticsReport:
    return build_report(load_sessions(payload, tz=tz), weeks=weeks, top_lifts=top_lifts)
