"""
calcal.record
-------------
JSON form of the calendar-erased DateRecord:

    {"calendar": "gregorian", "components": [2022, 6, 15],
     "componentNames": ["year", "month", "day"], "monthNames": [...]}

Decoding only looks at "calendar" and "components"; names are informative.
"""

from __future__ import annotations

import json
from typing import Any, Dict

from .core.errors import RecordError, UnknownCalendarError
from .core.types import Calendar, DateRecord

_CALENDAR_TAGS = {c.value for c in Calendar}


def as_component(c: Any) -> int:
    """An integral date component; bools pass as 0/1, integral floats are accepted."""
    if isinstance(c, int):
        return int(c)
    if isinstance(c, float) and c.is_integer():
        return int(c)
    raise RecordError(f"Date components must be integers, got {c!r}")


def record_to_dict(rec: DateRecord) -> Dict[str, Any]:
    return {
        "calendar": rec.calendar,
        "components": list(rec.components),
        "componentNames": list(rec.component_names),
        "monthNames": list(rec.month_names),
    }


def record_from_dict(obj: Dict[str, Any]) -> DateRecord:
    if not isinstance(obj, dict):
        raise RecordError(f"Expected a JSON object, got {type(obj).__name__}")
    calendar = obj.get("calendar")
    if not isinstance(calendar, str):
        raise RecordError(f"'calendar' must be a string, got {calendar!r}")
    if calendar not in _CALENDAR_TAGS:
        raise UnknownCalendarError(f"Unknown calendar {calendar!r}. Available: {sorted(_CALENDAR_TAGS)}")
    components = obj.get("components")
    if not isinstance(components, list):
        raise RecordError("'components' must be a list of numbers")
    comps = tuple(as_component(c) for c in components)
    return DateRecord(
        calendar=calendar,
        components=comps,
        component_names=tuple(obj.get("componentNames") or ()),
        month_names=tuple(obj.get("monthNames") or ()),
    )


def record_to_json(rec: DateRecord, *, indent: int | None = None) -> str:
    return json.dumps(record_to_dict(rec), ensure_ascii=False, indent=indent)


def record_from_json(text: str) -> DateRecord:
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise RecordError(f"Malformed JSON: {e}") from e
    return record_from_dict(obj)
