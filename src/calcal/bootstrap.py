from __future__ import annotations
from calcal.core.engine import CalendarRegistry
from calcal.engines.factory import build_engines

def build_registry() -> CalendarRegistry:
    return CalendarRegistry(build_engines())
