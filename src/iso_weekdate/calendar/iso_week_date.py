"""
ISO Week Date value type (iso_week_date.py)

An immutable representation of a calendar date in the ISO 8601 week-date
calendar: (ISO year, ISO week, day offset), with conversion to and from
proleptic Gregorian dates, day/week arithmetic and total ordering.

ISO 8601 Week Date Rules:
- Weeks start on Monday (day offset 0) and end on Sunday (day offset 6)
- Week 1 is the week containing the first Thursday of the year
- January 4th is always in week 1
- Years have 52 or 53 weeks
"""
# %%
# -----------------------------------------------------------------------------
# Author: Evgeni Nikolaev
# emails: evgeni.nikolaev@ricoh-usa.com
# -----------------------------------------------------------------------------
# UPDATED ON: 2025-09-02
# CREATED ON: 2025-08-27
# -----------------------------------------------------------------------------
# COPYRIGHT @ 2025 Ricoh-USA. All rights reserved.
# The information contained herein is copyright and proprietary to
# Ricoh-USA and may not be reproduced, disclosed, or used in
# any manner without prior written permission from Ricoh-USA
# -----------------------------------------------------------------------------
# %%
from dataclasses import dataclass
from datetime import date, datetime, timedelta, MINYEAR, MAXYEAR
from typing import Any, Optional, Tuple, Union

# Day offset <-> weekday lookup (0 = Monday ... 6 = Sunday)
WEEKDAY_NAMES: Tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
WEEKDAY_FULL_NAMES: Tuple[str, ...] = (
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"
)
_OFFSETS_BY_NAME = {name.lower(): offset for offset, name in enumerate(WEEKDAY_NAMES)}
_OFFSETS_BY_NAME.update({name: offset for offset, name in enumerate(WEEKDAY_FULL_NAMES)})

MIN_WEEK = 1
MAX_WEEK = 53
MIN_DAY_OFFSET = 0
MAX_DAY_OFFSET = 6


class OutOfRangeError(ValueError):
    """Raised when an ISO week date component is outside its valid range.

    Attributes:
        field: Name of the offending component ('year', 'week' or 'day_offset')
        value: The offending value
        max_value: Valid upper bound for the component, when it depends on the year
    """

    def __init__(self, field: str, value: Any, message: str, max_value: Optional[int] = None) -> None:
        super().__init__(f"{field}={value!r}: {message}")
        self.field = field
        self.value = value
        self.max_value = max_value


def day_offset_of(value: Union[date, str]) -> int:
    """Map a date (its weekday) or a weekday name to a day offset (Monday=0 ... Sunday=6)."""
    if isinstance(value, date):
        return value.weekday()
    try:
        return _OFFSETS_BY_NAME[value.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown weekday name: {value!r}") from None


def weekday_name(day_offset: int) -> str:
    """Map a day offset (0-6) to its 3-letter weekday abbreviation."""
    if not MIN_DAY_OFFSET <= day_offset <= MAX_DAY_OFFSET:
        raise OutOfRangeError("day_offset", day_offset, "Day offset must be between 0 (Monday) and 6 (Sunday).")
    return WEEKDAY_NAMES[day_offset]


def _week1_monday(iso_year: int) -> date:
    """Monday that starts week 1 of the given ISO year."""
    jan_4 = date(iso_year, 1, 4)
    return jan_4 - timedelta(days=day_offset_of(jan_4))


def _iso_year_and_week(value: date) -> Tuple[int, int]:
    """ISO (year, week) of a Gregorian date.

    The ISO year is the Gregorian year of the Thursday in the same week, which
    moves late-December dates forward and early-January dates back.
    """
    thursday = value + timedelta(days=3 - day_offset_of(value))
    iso_year = thursday.year
    days_since_week1 = (value - _week1_monday(iso_year)).days
    return iso_year, days_since_week1 // 7 + 1


def _check_year(year: int) -> None:
    if not MINYEAR <= year <= MAXYEAR:
        raise OutOfRangeError("year", year, f"Year must be between {MINYEAR} and {MAXYEAR}.")


def weeks_in_iso_year(year: int) -> int:
    """
    Get the number of ISO weeks in a given year (52 or 53).

    Derives the ISO week of December 31st. If December 31st was moved into
    week 1 of the following ISO year, the year has 52 weeks.

    Args:
        year: The ISO year to check.

    Returns:
        int: Either 52 or 53.

    Example:
        >>> weeks_in_iso_year(2020)
        53
        >>> weeks_in_iso_year(2025)
        52
    """
    _check_year(year)
    iso_year, week = _iso_year_and_week(date(year, 12, 31))
    if iso_year == year:
        return week
    return 52


@dataclass(frozen=True, order=True)
class ISOWeekDate:
    """
    An immutable date given by its ISO year, ISO week and day offset.

    Equality, hashing and ordering are structural on (year, week, day_offset),
    which matches the chronological order of the corresponding dates.

    Args:
        year: The ISO week-numbering year.
        week: The ISO week number (1-52 or 1-53, depending on the year).
        day_offset: The day offset within the week (0 = Monday, 6 = Sunday).

    Raises:
        OutOfRangeError: If week is not between 1 and 53, day_offset is not
            between 0 and 6, or week 53 is requested for a 52-week year.

    Example:
        >>> d = ISOWeekDate(2025, 1, 0)
        >>> str(d)
        '2025-W01-0 (Mon)'
        >>> d.to_date()
        datetime.date(2024, 12, 30)
        >>> ISOWeekDate.from_date(date(2025, 1, 1))
        ISOWeekDate(year=2025, week=1, day_offset=2)
    """

    year: int
    week: int
    day_offset: int

    def __post_init__(self) -> None:
        if not MIN_WEEK <= self.week <= MAX_WEEK:
            raise OutOfRangeError("week", self.week, "Week must be between 1 and 53.")
        if not MIN_DAY_OFFSET <= self.day_offset <= MAX_DAY_OFFSET:
            raise OutOfRangeError(
                "day_offset", self.day_offset, "Day offset must be between 0 (Monday) and 6 (Sunday)."
            )
        _check_year(self.year)

        max_weeks = weeks_in_iso_year(self.year)
        if self.week > max_weeks:
            raise OutOfRangeError(
                "week", self.week, f"Year {self.year} has only {max_weeks} ISO weeks.", max_value=max_weeks
            )

        # 9999-W52 runs past date.max on Saturday and Sunday
        if self._ordinal() > date.max.toordinal():
            raise OutOfRangeError(
                "day_offset", self.day_offset, f"{self.isoformat()} is after {date.max.isoformat()}."
            )

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    @classmethod
    def from_date(cls, value: date) -> "ISOWeekDate":
        """Create an ISOWeekDate from a date (a datetime's time part is ignored)."""
        if isinstance(value, datetime):
            value = value.date()
        iso_year, week = _iso_year_and_week(value)
        return cls(iso_year, week, day_offset_of(value))

    @classmethod
    def today(cls) -> "ISOWeekDate":
        """ISO week date of the current local date."""
        return cls.from_date(date.today())

    @staticmethod
    def weeks_in_year(year: int) -> int:
        """Get the number of ISO weeks in a given year (52 or 53)."""
        return weeks_in_iso_year(year)

    def _ordinal(self) -> int:
        return _week1_monday(self.year).toordinal() + (self.week - 1) * 7 + self.day_offset

    def to_date(self) -> date:
        """Convert this ISO week date to a Gregorian date."""
        return date.fromordinal(self._ordinal())

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add_days(self, days: int) -> "ISOWeekDate":
        """
        Add a number of days (may be negative).

        Raises:
            OverflowError: If the result falls outside the representable date range.
        """
        return ISOWeekDate.from_date(self.to_date() + timedelta(days=days))

    def add_weeks(self, weeks: int) -> "ISOWeekDate":
        """Add a number of weeks (may be negative)."""
        return self.add_days(weeks * 7)

    def __add__(self, other: Any) -> "ISOWeekDate":
        if isinstance(other, timedelta):
            return self.add_days(other.days)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Any) -> Union["ISOWeekDate", timedelta]:
        if isinstance(other, timedelta):
            return self.add_days(-other.days)
        if isinstance(other, ISOWeekDate):
            return timedelta(days=self._ordinal() - other._ordinal())
        return NotImplemented

    # ------------------------------------------------------------------
    # Ordering & formatting
    # ------------------------------------------------------------------

    def compare_to(self, other: Optional["ISOWeekDate"]) -> int:
        """Return -1, 0 or 1 as this date is before, equal to or after other.

        None sorts before every date, so comparing against None returns 1.
        """
        if other is None:
            return 1
        return (self > other) - (self < other)

    @property
    def iso_weekday(self) -> int:
        """ISO weekday number (1 = Monday, 7 = Sunday)."""
        return self.day_offset + 1

    @property
    def weekday_name(self) -> str:
        return WEEKDAY_NAMES[self.day_offset]

    @property
    def yyyywk(self) -> int:
        """Year and week in YYYYWW form (e.g. 202501)."""
        return self.year * 100 + self.week

    def isoformat(self) -> str:
        """ISO 8601 week date text, e.g. '2025-W01-1'."""
        return f"{self.year:04d}-W{self.week:02d}-{self.iso_weekday}"

    def __str__(self) -> str:
        return f"{self.year}-W{self.week:02d}-{self.day_offset} ({self.weekday_name})"
