"""Resolve every logged set to exactly one of the eight canonical muscle groups.

Resolution stops at the first step that succeeds:

A. the category snapshot captured at log time,
B. the equipment's current ``target_muscle_group``,
C. keyword matching on the lower-cased exercise name,
D. Cardio, unconditionally.

Tags in ``IGNORED_TAGS`` describe equipment kinds rather than muscles and never
resolve in steps A or B. The tables are ordered and immutable; bump
``CLASSIFIER_VERSION`` whenever any of them changes.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from ..models.types import MuscleGroup, RawSet

CLASSIFIER_VERSION: int = 1

IGNORED_TAGS = frozenset(
    {"free_weight", "strength_machine", "cable", "accessory", "custom", "other", "unknown"}
)

_SYNONYMS = {
    # Chest
    "chest": MuscleGroup.CHEST,
    "pecho": MuscleGroup.CHEST,
    "pectorales": MuscleGroup.CHEST,
    # Back
    "back": MuscleGroup.BACK,
    "espalda": MuscleGroup.BACK,
    "dorsales": MuscleGroup.BACK,
    # Legs
    "legs": MuscleGroup.LEGS,
    "pierna": MuscleGroup.LEGS,
    "cuádriceps": MuscleGroup.LEGS,
    "isquios": MuscleGroup.LEGS,
    "glúteos": MuscleGroup.LEGS,
    # Shoulders
    "shoulders": MuscleGroup.SHOULDERS,
    "hombro": MuscleGroup.SHOULDERS,
    "deltoides": MuscleGroup.SHOULDERS,
    # Arms
    "biceps": MuscleGroup.BICEPS,
    "bíceps": MuscleGroup.BICEPS,
    "triceps": MuscleGroup.TRICEPS,
    "tríceps": MuscleGroup.TRICEPS,
    # Core
    "core": MuscleGroup.CORE,
    "abs": MuscleGroup.CORE,
    "abdominales": MuscleGroup.CORE,
    # Cardio
    "cardio": MuscleGroup.CARDIO,
}
SYNONYMS: Mapping[str, MuscleGroup] = MappingProxyType(_SYNONYMS)

# Checked top to bottom; "curl femoral" must stay ahead of the bare "curl".
NAME_KEYWORDS: Tuple[Tuple[Tuple[str, ...], MuscleGroup], ...] = (
    (("jalon", "remo", "dominadas", "polea", "pull"), MuscleGroup.BACK),
    (("press", "banco", "pec", "cruce", "chest"), MuscleGroup.CHEST),
    (("sentadilla", "prensa", "extension", "curl femoral", "zancada", "squat", "leg"), MuscleGroup.LEGS),
    (("militar", "lateral", "hombro", "shoulder"), MuscleGroup.SHOULDERS),
    (("curl", "biceps", "bíceps"), MuscleGroup.BICEPS),
    (("triceps", "tríceps", "copa", "fondos"), MuscleGroup.TRICEPS),
    (("abs", "crunch", "plancha", "core"), MuscleGroup.CORE),
    (("correr", "elíptica", "bici", "cardio"), MuscleGroup.CARDIO),
)

FALLBACK_GROUP = MuscleGroup.CARDIO


def normalize_tag(tag: Optional[str]) -> Optional[MuscleGroup]:
    """Map a free-text muscle tag onto a canonical group, or None."""
    if not isinstance(tag, str):
        return None
    key = tag.strip().lower()
    if not key or key in IGNORED_TAGS:
        return None
    return SYNONYMS.get(key)


def match_exercise_name(name: Optional[str]) -> Optional[MuscleGroup]:
    if not isinstance(name, str):
        return None
    lowered = name.lower()
    if not lowered.strip():
        return None
    for keywords, group in NAME_KEYWORDS:
        if any(k in lowered for k in keywords):
            return group
    return None


def classify_set(raw_set: RawSet) -> MuscleGroup:
    group = normalize_tag(raw_set.category_snapshot)
    if group is None:
        group = normalize_tag(raw_set.equipment_ref.target_muscle_group)
    if group is None:
        group = match_exercise_name(raw_set.equipment_ref.name)
    return group if group is not None else FALLBACK_GROUP
