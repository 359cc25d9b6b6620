from __future__ import annotations

import logging
from datetime import date, datetime, tzinfo
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

import numpy as np
import pandas as pd

from ..models.types import EquipmentRef, RawSet, Session

log = logging.getLogger(__name__)

# Join keys under which the exercise/equipment row may arrive
_EQUIPMENT_KEYS = ("exercise", "equipment")

# Relative literals pandas resolves against the wall clock
_CLOCK_LITERALS = frozenset({"now", "today", "tomorrow", "yesterday"})


def coerce_number(value: Any) -> float:
    """Return ``value`` as a finite float, or 0.0 when missing or unusable.

    Numeric strings are accepted ("12.5"); booleans, NaN and infinities are not.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if not np.isfinite(number):
        return 0.0
    return number


def _non_negative(value: Any) -> float:
    number = coerce_number(value)
    return number if number > 0 else 0.0


def _coerce_sets_repeat(value: Any) -> float:
    number = coerce_number(value)
    return number if number > 0 else 1.0


def coerce_timestamp(value: Any, tz: Optional[tzinfo] = None) -> Optional[datetime]:
    """Parse ``value`` into a naive local datetime.

    Aware values are shifted into ``tz`` (host local zone when ``tz`` is None)
    before the offset is dropped; naive values are taken as already local.
    """
    if value is None or not isinstance(value, (str, date, pd.Timestamp)):
        return None
    if isinstance(value, str) and value.strip().lower() in _CLOCK_LITERALS:
        log.debug("Ignoring clock-relative timestamp %r", value)
        return None
    try:
        ts = pd.Timestamp(value)
    except (TypeError, ValueError) as e:
        log.debug("Unparseable timestamp %r (%s)", value, e)
        return None
    if pd.isna(ts):
        return None
    dt = ts.to_pydatetime()
    if dt.tzinfo is not None:
        dt = dt.astimezone(tz).replace(tzinfo=None)
    return dt


def _first_mapping(value: Any) -> Mapping[str, Any]:
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    return value if isinstance(value, Mapping) else {}


def _optional_text(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def _equipment_ref(entry: Mapping[str, Any]) -> EquipmentRef:
    for key in _EQUIPMENT_KEYS:
        data = _first_mapping(entry.get(key))
        if data:
            return EquipmentRef(
                name=_optional_text(data.get("name")),
                target_muscle_group=_optional_text(data.get("target_muscle_group")),
            )
    return EquipmentRef()


def _custom_metrics(value: Any) -> Mapping[str, float]:
    if not isinstance(value, Mapping):
        return MappingProxyType({})
    return MappingProxyType({str(k): coerce_number(v) for k, v in value.items()})


def normalize_set(entry: Any) -> RawSet:
    """Resolve one raw workout-log row into a ``RawSet``. Never raises."""
    if not isinstance(entry, Mapping):
        log.debug("Replacing non-mapping log entry %r with an empty set", type(entry).__name__)
        return RawSet()

    metrics = _custom_metrics(entry.get("metrics_data"))
    time_seconds = _non_negative(entry.get("time")) or _non_negative(metrics.get("time"))
    distance_meters = _non_negative(entry.get("distance")) or _non_negative(metrics.get("distance"))

    return RawSet(
        weight_kg=_non_negative(entry.get("weight_kg")),
        reps=_non_negative(entry.get("reps")),
        sets_repeat=_coerce_sets_repeat(entry.get("sets")),
        time_seconds=time_seconds,
        distance_meters=distance_meters,
        custom_metrics=metrics,
        category_snapshot=_optional_text(entry.get("category_snapshot")),
        equipment_ref=_equipment_ref(entry),
    )


def normalize_session(entry: Any, tz: Optional[tzinfo] = None) -> Session:
    if not isinstance(entry, Mapping):
        log.debug("Replacing non-mapping session entry %r with an empty session", type(entry).__name__)
        return Session(started_at=None)

    ended_raw = entry.get("end_time", entry.get("ended_at"))
    logs = entry.get("workout_logs", entry.get("sets"))
    if not isinstance(logs, (list, tuple)):
        logs = []
    return Session(
        started_at=coerce_timestamp(entry.get("started_at"), tz),
        ended_at=coerce_timestamp(ended_raw, tz),
        sets=tuple(normalize_set(row) for row in logs),
    )


def load_sessions(payload: Any, tz: Optional[tzinfo] = None) -> Tuple[Session, ...]:
    """Normalize a ``{"sessions": [...]}`` payload (or a bare list of sessions).

    Raises ``TypeError`` only when the payload has neither shape.
    """
    if payload is None:
        return ()
    if isinstance(payload, Mapping):
        if "sessions" not in payload:
            raise TypeError("payload mapping must contain a 'sessions' key")
        rows: Iterable[Any] = payload.get("sessions")
        if not isinstance(rows, (list, tuple)):
            log.debug("Ignoring non-list 'sessions' value of type %s", type(rows).__name__)
            rows = []
    elif isinstance(payload, (str, bytes)) or not isinstance(payload, Iterable):
        raise TypeError(f"unsupported payload type: {type(payload).__name__}")
    else:
        rows = payload

    sessions = tuple(normalize_session(row, tz) for row in rows)
    counts: Dict[str, int] = {
        "sessions": len(sessions),
        "sets": sum(len(s.sets) for s in sessions),
        "undated": sum(1 for s in sessions if s.started_at is None),
    }
    log.debug("Loaded %(sessions)d sessions, %(sets)d sets (%(undated)d undated)", counts)
    return sessions
