"""
Calendar Utilities

Provides the ISO 8601 week date value type and converters built on top of it.
"""

# Use absolute import for the calendar modules
from iso_weekdate.calendar.iso_week_date import (
    ISOWeekDate,
    OutOfRangeError,
    weeks_in_iso_year,
    day_offset_of,
    weekday_name,
)
from iso_weekdate.calendar.iso_converters import ISOWeekDateConverter

__all__ = [
    "ISOWeekDate",
    "OutOfRangeError",
    "weeks_in_iso_year",
    "day_offset_of",
    "weekday_name",
    "ISOWeekDateConverter",
]
