from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple


class MuscleGroup(str, Enum):
    CHEST = "Chest"
    BACK = "Back"
    LEGS = "Legs"
    SHOULDERS = "Shoulders"
    BICEPS = "Biceps"
    TRICEPS = "Triceps"
    CORE = "Core"
    CARDIO = "Cardio"


def _empty_metrics() -> Mapping[str, float]:
    return MappingProxyType({})


@dataclass(frozen=True)
class EquipmentRef:
    name: Optional[str] = None
    target_muscle_group: Optional[str] = None


@dataclass(frozen=True)
class RawSet:
    """One logged set after field resolution; every numeric is finite and >= 0."""
    weight_kg: float = 0.0
    reps: float = 0.0
    sets_repeat: float = 1.0
    time_seconds: float = 0.0
    distance_meters: float = 0.0
    custom_metrics: Mapping[str, float] = field(default_factory=_empty_metrics)
    category_snapshot: Optional[str] = None
    equipment_ref: EquipmentRef = field(default_factory=EquipmentRef)


@dataclass(frozen=True)
class Session:
    started_at: Optional[datetime]  # local wall-clock time
    ended_at: Optional[datetime] = None
    sets: Tuple[RawSet, ...] = ()

    @property
    def duration_minutes(self) -> Optional[float]:
        if self.started_at is None or self.ended_at is None:
            return None
        return max(0.0, (self.ended_at - self.started_at).total_seconds() / 60.0)


@dataclass(frozen=True)
class ClassifiedSet:
    raw: RawSet
    muscle_group: MuscleGroup
    work_score: float


@dataclass(frozen=True)
class ClassifiedSession:
    session: Session
    sets: Tuple[ClassifiedSet, ...] = ()

    @property
    def started_at(self) -> Optional[datetime]:
        return self.session.started_at

    @property
    def work_score(self) -> float:
        return sum(s.work_score for s in self.sets)


@dataclass(frozen=True)
class BestLift:
    weight: float
    reps: float
    date: Optional[datetime]


@dataclass(frozen=True)
class LiftRecord:
    exercise_name: str
    estimated_1rm: float
    best_lift: BestLift


@dataclass(frozen=True)
class WeeklyVolumeBucket:
    week_start: date  # local Monday
    total_work_score: float
    label: str  # e.g. "8 Jan"


@dataclass(frozen=True)
class DayActivity:
    calendar_date: date
    session_count: int


@dataclass(frozen=True)
class MuscleBalanceEntry:
    group: MuscleGroup
    work_score_sum: float
    axis_scale: float


@dataclass(frozen=True)
class SessionSummary:
    total_workouts: int
    total_work_score: int
    total_time_minutes: int
    avg_minutes_per_session: int


@dataclass
class AnalyticsReport:
    muscle_balance: List[MuscleBalanceEntry] = field(default_factory=list)
    volume_trend: List[WeeklyVolumeBucket] = field(default_factory=list)
    consistency: List[DayActivity] = field(default_factory=list)
    lift_records: List[LiftRecord] = field(default_factory=list)
    summary: Optional[SessionSummary] = None
    classifier_version: Optional[int] = None  # muscle-group tables used for this report
