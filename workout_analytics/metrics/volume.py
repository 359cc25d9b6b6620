from __future__ import annotations

import math

from ..config import (
    BODYWEIGHT_REP_SECONDS,
    BODYWEIGHT_WORK_FACTOR,
    CUSTOM_METRIC_WORK_FACTOR,
    DISTANCE_WORK_FACTOR,
    TIME_WORK_FACTOR,
)
from ..models.types import RawSet


def finite_or_zero(value: float) -> float:
    """Overflowed (inf) or undefined (NaN) arithmetic collapses to 0.0."""
    return float(value) if math.isfinite(value) else 0.0


def _modality_score(raw_set: RawSet) -> float:
    if raw_set.weight_kg > 0:
        return raw_set.weight_kg * raw_set.reps * raw_set.sets_repeat
    if raw_set.time_seconds > 0:
        return raw_set.time_seconds * TIME_WORK_FACTOR
    if raw_set.distance_meters > 0:
        return raw_set.distance_meters * DISTANCE_WORK_FACTOR
    if raw_set.reps > 0:
        return raw_set.reps * BODYWEIGHT_REP_SECONDS * raw_set.sets_repeat * BODYWEIGHT_WORK_FACTOR
    if raw_set.custom_metrics:
        custom_sum = sum(raw_set.custom_metrics.values())
        return max(0.0, custom_sum) * CUSTOM_METRIC_WORK_FACTOR
    return 0.0


def work_score(raw_set: RawSet) -> float:
    """Unitless training volume for one normalized set.

    The first matching modality wins; rules never blend:
    - weighted: weight x reps x sets
    - timed: seconds x 1.5
    - distance: meters x 0.5
    - bodyweight reps: reps x 60 x sets x 0.5
    - custom metrics: sum of values x 0.5

    A product that overflows the float range scores 0.
    """
    return finite_or_zero(_modality_score(raw_set))
