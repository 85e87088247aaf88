"""
iso_weekdate

ISO 8601 week date value type with Gregorian conversion, arithmetic and ordering.
"""

from iso_weekdate.calendar.iso_week_date import ISOWeekDate, OutOfRangeError, weeks_in_iso_year

__version__ = "1.0.0"
__all__ = ["ISOWeekDate", "OutOfRangeError", "weeks_in_iso_year"]
