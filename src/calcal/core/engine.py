from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Protocol, Union

from .errors import UnknownCalendarError
from .types import Calendar, DateRecord

class CalendarEngine(Protocol):
    def info(self) -> Dict[str, Any]: ...
    def from_rd(self, rd: int) -> Any: ...
    def to_rd(self, d: Any) -> int: ...
    def format(self, d: Any) -> str: ...
    def to_record(self, d: Any) -> DateRecord: ...
    def from_record(self, rec: DateRecord) -> Any: ...

NameT = Union[str, Calendar]

def calendar_key(name: NameT) -> str:
    return name.value if isinstance(name, Calendar) else str(name)

@dataclass
class CalendarRegistry:
    _engines: Dict[str, CalendarEngine]

    def get(self, name: NameT) -> CalendarEngine:
        key = calendar_key(name)
        if key not in self._engines:
            raise UnknownCalendarError(f"Unknown calendar '{key}'. Available: {sorted(self._engines)}")
        return self._engines[key]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: NameT, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        key = calendar_key(name)
        if (not overwrite) and (key in self._engines):
            raise KeyError(f"Calendar '{key}' already exists. Use overwrite=True to replace.")
        self._engines[key] = engine
