"""Proleptic Gregorian calendar helpers and the CalendarDate model."""

from __future__ import annotations

import datetime

from pydantic import BaseModel, model_validator

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_MONTH_LENGTHS: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Divisible by 4, except centuries not divisible by 400.

    Examples:
        >>> is_leap_year(2000), is_leap_year(1900), is_leap_year(2024)
        (True, False, True)
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    """Number of days in *month* of *year* (28, 29, 30 or 31)."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def month_name(month: int) -> str:
    """English name for a 1-based month number."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    return MONTH_NAMES[month - 1]


def normalize_date(year: int, month: int, day: int) -> datetime.date:
    """Build a date the lenient way: overflowing days roll into the next month.

    ``normalize_date(2023, 4, 31)`` is May 1st and ``normalize_date(2025, 2, 29)``
    is March 1st.  *month* must already be in range.
    """
    first = datetime.date(year, month, 1)
    return first + datetime.timedelta(days=day - 1)


class CalendarDate(BaseModel):
    """A date that exists in the proleptic Gregorian calendar.

    Immutable once constructed; construction rejects Feb 30, Apr 31 and
    friends.
    """

    model_config = {"frozen": True}

    year: int
    month: int
    day: int

    @model_validator(mode="after")
    def _must_exist(self) -> CalendarDate:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be in 1..12, got {self.month}")
        limit = days_in_month(self.month, self.year)
        if not 1 <= self.day <= limit:
            raise ValueError(
                f"day must be in 1..{limit} for {month_name(self.month)} {self.year}, "
                f"got {self.day}"
            )
        return self

    @classmethod
    def from_date(cls, value: datetime.date) -> CalendarDate:
        return cls(year=value.year, month=value.month, day=value.day)

    @classmethod
    def parse(cls, text: str) -> CalendarDate:
        """Parse an ISO ``YYYY-MM-DD`` string."""
        return cls.from_date(datetime.date.fromisoformat(text))

    def to_date(self) -> datetime.date:
        return datetime.date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return self.to_date().isoformat()

    def __str__(self) -> str:
        return self.isoformat()

    def __lt__(self, other: CalendarDate) -> bool:
        return self.to_date() < other.to_date()

    def __le__(self, other: CalendarDate) -> bool:
        return self.to_date() <= other.to_date()

    def __gt__(self, other: CalendarDate) -> bool:
        return self.to_date() > other.to_date()

    def __ge__(self, other: CalendarDate) -> bool:
        return self.to_date() >= other.to_date()
