from __future__ import annotations
from typing import Callable, Dict, List, Sequence, Union

HolidayFunc = Callable[[int], Union[int, List[int]]]
_REGISTRY: Dict[str, HolidayFunc] = {}

def register_holiday(name: str, fn: HolidayFunc) -> None:
    _REGISTRY[name] = fn

def list_holidays() -> List[str]:
    return sorted(_REGISTRY)

def compute_holidays(year: int, names: Sequence[str] = ()) -> Dict[str, List[int]]:
    """
    Absolute dates of the named holidays in a Gregorian year.
    Every value is a list: some holidays occur zero, one or two times a year.
    """
    out: Dict[str, List[int]] = {}
    for name in (names or list_holidays()):
        if name not in _REGISTRY:
            raise KeyError(f"Unknown holiday '{name}'. Available: {sorted(_REGISTRY)}")
        rds = _REGISTRY[name](year)
        out[name] = list(rds) if isinstance(rds, list) else [rds]
    return out
