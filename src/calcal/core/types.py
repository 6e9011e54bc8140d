from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, ClassVar, Dict, Optional, Tuple, Union


class Calendar(str, Enum):
    """Closed set of supported calendars. Values are the external string tags."""
    GREGORIAN = "gregorian"
    ISO = "iso"
    JULIAN = "julian"
    ISLAMIC = "islamic"
    HEBREW = "hebrew"
    MAYAN_LONG_COUNT = "mayanLongCount"
    MAYAN_HAAB = "mayanHaab"
    MAYAN_TZOLKIN = "mayanTzolkin"
    FRENCH = "french"
    OLD_HINDU_SOLAR = "oldHinduSolar"
    OLD_HINDU_LUNAR = "oldHinduLunar"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class GregorianDate:
    CALENDAR: ClassVar[Calendar] = Calendar.GREGORIAN
    year: int
    month: int
    day: int

    def components(self) -> Tuple[int, ...]:
        return (self.year, self.month, self.day)


@dataclass(frozen=True)
class JulianDate:
    CALENDAR: ClassVar[Calendar] = Calendar.JULIAN
    year: int
    month: int
    day: int

    def components(self) -> Tuple[int, ...]:
        return (self.year, self.month, self.day)


@dataclass(frozen=True)
class IsoDate:
    CALENDAR: ClassVar[Calendar] = Calendar.ISO
    year: int
    week: int
    day: int  # 1=Monday .. 7=Sunday

    def components(self) -> Tuple[int, ...]:
        return (self.year, self.week, self.day)


@dataclass(frozen=True)
class IslamicDate:
    CALENDAR: ClassVar[Calendar] = Calendar.ISLAMIC
    year: int
    month: int
    day: int

    def components(self) -> Tuple[int, ...]:
        return (self.year, self.month, self.day)


@dataclass(frozen=True)
class HebrewDate:
    """Months are numbered from Nisan (1); the year begins at Tishri (7)."""
    CALENDAR: ClassVar[Calendar] = Calendar.HEBREW
    year: int
    month: int
    day: int

    def components(self) -> Tuple[int, ...]:
        return (self.year, self.month, self.day)


@dataclass(frozen=True)
class MayanLongCount:
    CALENDAR: ClassVar[Calendar] = Calendar.MAYAN_LONG_COUNT
    baktun: int
    katun: int
    tun: int
    uinal: int
    kin: int

    def components(self) -> Tuple[int, ...]:
        return (self.baktun, self.katun, self.tun, self.uinal, self.kin)


@dataclass(frozen=True)
class MayanHaabDate:
    """Position in the 365-day haab: day 0..19, month 1..19 (19 = Uayeb, 5 days)."""
    CALENDAR: ClassVar[Calendar] = Calendar.MAYAN_HAAB
    day: int
    month: int

    def components(self) -> Tuple[int, ...]:
        return (self.day, self.month)


@dataclass(frozen=True)
class MayanTzolkinDate:
    """Position in the 260-day tzolkin: number 1..13, name 1..20."""
    CALENDAR: ClassVar[Calendar] = Calendar.MAYAN_TZOLKIN
    number: int
    name: int

    def components(self) -> Tuple[int, ...]:
        return (self.number, self.name)


@dataclass(frozen=True)
class FrenchDate:
    """Month 13 holds the complementary days (5, or 6 in leap years)."""
    CALENDAR: ClassVar[Calendar] = Calendar.FRENCH
    year: int
    month: int
    day: int

    def components(self) -> Tuple[int, ...]:
        return (self.year, self.month, self.day)


@dataclass(frozen=True)
class OldHinduSolarDate:
    CALENDAR: ClassVar[Calendar] = Calendar.OLD_HINDU_SOLAR
    year: int
    month: int
    day: int

    def components(self) -> Tuple[int, ...]:
        return (self.year, self.month, self.day)


@dataclass(frozen=True)
class OldHinduLunarDate:
    CALENDAR: ClassVar[Calendar] = Calendar.OLD_HINDU_LUNAR
    year: int
    month: int
    leap_month: bool
    day: int

    def components(self) -> Tuple[int, ...]:
        return (self.year, self.month, int(self.leap_month), self.day)


CalendarDate = Union[
    GregorianDate,
    JulianDate,
    IsoDate,
    IslamicDate,
    HebrewDate,
    MayanLongCount,
    MayanHaabDate,
    MayanTzolkinDate,
    FrenchDate,
    OldHinduSolarDate,
    OldHinduLunarDate,
]


@dataclass(frozen=True)
class DateRecord:
    """Calendar-erased date used by the JSON layer."""
    calendar: str
    components: Tuple[int, ...]
    component_names: Tuple[str, ...] = ()
    month_names: Tuple[str, ...] = ()


@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload describing one calendar's conversion pair and tables."""
    calendar: Calendar
    date_type: type
    from_rd: Callable[[int], Any]
    to_rd: Optional[Callable[[Any], int]]
    component_names: Tuple[str, ...]
    month_names: Tuple[str, ...]
    formatter: Callable[[Any], str]
    epoch: Optional[int] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    @property
    def cyclic(self) -> bool:
        return self.to_rd is None
