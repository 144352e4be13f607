"""Age arithmetic — calendar-borrow decomposition and next-birthday projection.

Two independently defined quantities come out of :func:`compute_age`:

- ``years/months/days`` use the calendar-borrow rule: a negative day
  difference borrows the length of the month before the reference month,
  a negative month difference borrows 12 months from the years.
- ``total_days`` is the plain count of calendar days between the dates.

They are not reconciled with each other.
"""

from __future__ import annotations

import datetime

from pydantic import BaseModel, Field

from agecalc.domain.calendar import CalendarDate, days_in_month, normalize_date
from agecalc.domain.errors import FutureDateError


class AgeResult(BaseModel):
    """Elapsed time between a birth date and a reference date."""

    model_config = {"frozen": True}

    years: int = Field(ge=0)
    months: int = Field(ge=0, le=11)
    days: int = Field(ge=0, le=30)
    total_days: int = Field(ge=0)
    days_to_next_birthday: int = Field(ge=0, le=366)
    next_birthday: CalendarDate

    @property
    def is_birthday(self) -> bool:
        return self.days_to_next_birthday == 0


def _previous_month(year: int, month: int) -> tuple[int, int]:
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_birthday(birth: datetime.date, reference: datetime.date) -> datetime.date:
    """First anniversary of *birth* on or after *reference*.

    A Feb 29 birthday rolls over to Mar 1 in common years.
    """
    candidate = normalize_date(reference.year, birth.month, birth.day)
    if candidate < reference:
        candidate = normalize_date(reference.year + 1, birth.month, birth.day)
    return candidate


def compute_age(birth_date: CalendarDate, reference_date: CalendarDate) -> AgeResult:
    """Compute the age at *reference_date* of someone born on *birth_date*.

    Raises:
        FutureDateError: *birth_date* is after *reference_date*.
    """
    birth = birth_date.to_date()
    reference = reference_date.to_date()
    if birth > reference:
        raise FutureDateError()

    years = reference.year - birth.year
    months = reference.month - birth.month
    days = reference.day - birth.day

    # Borrow from the month(s) preceding the reference month.  A second
    # borrow only happens after a short February (e.g. Jan 31 -> Mar 1).
    borrow_year, borrow_month = reference.year, reference.month
    while days < 0:
        borrow_year, borrow_month = _previous_month(borrow_year, borrow_month)
        months -= 1
        days += days_in_month(borrow_month, borrow_year)

    if months < 0:
        years -= 1
        months += 12

    total_days = (reference - birth).days

    upcoming = next_birthday(birth, reference)

    return AgeResult(
        years=years,
        months=months,
        days=days,
        total_days=total_days,
        days_to_next_birthday=(upcoming - reference).days,
        next_birthday=CalendarDate.from_date(upcoming),
    )
