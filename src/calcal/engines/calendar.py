"""
calcal.engines.calendar
-----------------------
The Orchestrator. Binds one CalendarSpec's conversion pair, name tables and
formatter into a live engine that the registry and the record layer talk to.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Any, Dict, Sequence

from calcal.core.errors import NotInvertibleError, RecordError
from calcal.core.types import CalendarSpec, DateRecord
from calcal.record import as_component


class CalendarEngine:
    """
    Converts between absolute dates and one calendar's dates, and between
    that calendar's dates and the calendar-erased DateRecord.
    """
    def __init__(self, spec: CalendarSpec):
        self.spec = spec
        self.calendar = spec.calendar
        self._fields = fields(spec.date_type)

    @property
    def cyclic(self) -> bool:
        return self.spec.cyclic

    def info(self) -> Dict[str, Any]:
        return {
            "name": self.calendar.value,
            "date_type": self.spec.date_type.__name__,
            "components": list(self.spec.component_names),
            "months": len(self.spec.month_names),
            "epoch": self.spec.epoch,
            "cyclic": self.cyclic,
            **self.spec.meta,
        }

    # ---------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------

    def _check(self, d: Any) -> None:
        if not isinstance(d, self.spec.date_type):
            raise TypeError(
                f"{self.calendar.value} engine expects {self.spec.date_type.__name__}, got {type(d).__name__}"
            )

    def from_rd(self, rd: int) -> Any:
        return self.spec.from_rd(int(rd))

    def to_rd(self, d: Any) -> int:
        self._check(d)
        if self.spec.to_rd is None:
            raise NotInvertibleError(
                f"{self.calendar.value} is a cyclic calendar; a date in it does not fix an absolute day"
            )
        return self.spec.to_rd(d)

    def format(self, d: Any) -> str:
        self._check(d)
        return self.spec.formatter(d)

    # ---------------------------------------------------------
    # Generic records
    # ---------------------------------------------------------

    def to_record(self, d: Any) -> DateRecord:
        self._check(d)
        return DateRecord(
            calendar=self.calendar.value,
            components=tuple(d.components()),
            component_names=self.spec.component_names,
            month_names=self.spec.month_names,
        )

    def from_components(self, components: Sequence[int]) -> Any:
        if len(components) != len(self._fields):
            raise RecordError(
                f"{self.calendar.value} dates have {len(self._fields)} components, got {len(components)}"
            )
        values = []
        for f, c in zip(self._fields, components):
            values.append(bool(as_component(c)) if f.type in (bool, "bool") else as_component(c))
        return self.spec.date_type(*values)

    def from_record(self, rec: DateRecord) -> Any:
        if rec.calendar != self.calendar.value:
            raise RecordError(f"Record is for '{rec.calendar}', not '{self.calendar.value}'")
        return self.from_components(rec.components)
