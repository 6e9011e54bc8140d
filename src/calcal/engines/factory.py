"""
calcal.engines.factory
----------------------
Turns CalendarSpec data into live CalendarEngine objects.
"""

from __future__ import annotations

from typing import Dict

from calcal.core.types import CalendarSpec
from calcal.engines.calendar import CalendarEngine


def make_engine(spec: CalendarSpec) -> CalendarEngine:
    """The universal entry point."""
    if not isinstance(spec, CalendarSpec):
        raise TypeError(f"Unknown spec type: {type(spec)}")
    return CalendarEngine(spec)


def build_engines() -> Dict[str, CalendarEngine]:
    from calcal.engines.specs import ALL_SPECS
    return {cal.value: make_engine(spec) for cal, spec in ALL_SPECS.items()}
