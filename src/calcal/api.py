from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from .core.engine import CalendarEngine, CalendarRegistry, NameT
from .core.errors import CalendarError
from .core.types import CalendarDate, DateRecord
from .core.time import day_of_week
from .engines.names import WEEKDAYS
from .holidays.registry import compute_holidays

_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def _engine_for(d: Any) -> CalendarEngine:
    cal = getattr(type(d), "CALENDAR", None)
    if cal is None:
        raise TypeError(f"Not a calendar date: {type(d).__name__}")
    return _reg().get(cal)

# ============================================================
# Registry
# ============================================================

def list_calendars() -> List[str]:
    return _reg().list()

def calendar_info(name: NameT) -> Dict[str, Any]:
    return _reg().get(name).info()

def get_calendar(name: NameT) -> CalendarEngine:
    return _reg().get(name)

def register_calendar(name: NameT, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Conversion
# ============================================================

def to_rd(d: CalendarDate) -> int:
    """Absolute date of a calendar date; the calendar is taken from the date's type."""
    return _engine_for(d).to_rd(d)

def from_rd(rd: int, calendar: NameT) -> CalendarDate:
    return _reg().get(calendar).from_rd(rd)

def convert(rd: int, calendar: NameT) -> CalendarDate:
    """Alias of from_rd: the date of `calendar` on which absolute day `rd` falls."""
    return from_rd(rd, calendar)

def convert_date(d: CalendarDate, calendar: NameT) -> CalendarDate:
    return from_rd(to_rd(d), calendar)

def format_date(d: CalendarDate) -> str:
    return _engine_for(d).format(d)

# ============================================================
# Records
# ============================================================

def to_record(d: CalendarDate) -> DateRecord:
    return _engine_for(d).to_record(d)

def date_from_record(rec: DateRecord) -> CalendarDate:
    return _reg().get(rec.calendar).from_record(rec)

def rd_from_record(rec: DateRecord) -> int:
    return to_rd(date_from_record(rec))

# ============================================================
# Overviews
# ============================================================

def day_info(rd: int, *, calendars: Sequence[NameT] = ()) -> Dict[str, Any]:
    """
    The given absolute day in every (or the selected) calendar.

    Each calendar maps to {"date", "text"}; a calendar that cannot express the
    day (before its epoch) maps to {"error": message} instead.
    """
    names = [str(c) for c in calendars] if calendars else list_calendars()
    out: Dict[str, Any] = {"rd": rd, "weekday": WEEKDAYS[day_of_week(rd)], "calendars": {}}
    for name in names:
        eng = _reg().get(name)
        try:
            d = eng.from_rd(rd)
        except CalendarError as e:
            out["calendars"][name] = {"error": str(e)}
            continue
        out["calendars"][name] = {"date": d, "text": eng.format(d)}
    return out

def holidays(year: int, names: Sequence[str] = ()) -> Dict[str, List[int]]:
    return compute_holidays(year, names)
