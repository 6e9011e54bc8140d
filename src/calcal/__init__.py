"""calcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    to_rd,
    from_rd,
    convert,
    convert_date,
    format_date,
    list_calendars,
    calendar_info,
    get_calendar,
    register_calendar,
    to_record,
    date_from_record,
    rd_from_record,
    day_info,
    holidays,
)
from .record import record_to_json, record_from_json
from .core.errors import (
    CalendarError,
    OutOfDomainError,
    NoSolutionError,
    UnknownCalendarError,
    NotInvertibleError,
    RecordError,
)
from .core.types import (
    Calendar,
    DateRecord,
    GregorianDate,
    IsoDate,
    JulianDate,
    IslamicDate,
    HebrewDate,
    MayanLongCount,
    MayanHaabDate,
    MayanTzolkinDate,
    FrenchDate,
    OldHinduSolarDate,
    OldHinduLunarDate,
)

__all__ = [
    "to_rd",
    "from_rd",
    "convert",
    "convert_date",
    "format_date",
    "list_calendars",
    "calendar_info",
    "get_calendar",
    "register_calendar",
    "to_record",
    "date_from_record",
    "rd_from_record",
    "record_to_json",
    "record_from_json",
    "day_info",
    "holidays",
    "CalendarError",
    "OutOfDomainError",
    "NoSolutionError",
    "UnknownCalendarError",
    "NotInvertibleError",
    "RecordError",
    "Calendar",
    "DateRecord",
    "GregorianDate",
    "IsoDate",
    "JulianDate",
    "IslamicDate",
    "HebrewDate",
    "MayanLongCount",
    "MayanHaabDate",
    "MayanTzolkinDate",
    "FrenchDate",
    "OldHinduSolarDate",
    "OldHinduLunarDate",
]
