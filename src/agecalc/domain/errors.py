"""Input error taxonomy for date validation.

Single-field violations carry the offending field so callers can render
them next to the input.  Cross-field failures (a date that does not exist,
a birth date in the future) are not field-scoped.

INVARIANT: every error here is recoverable by re-prompting for input, or
for YearRangeError by changing the reference date or minimum year.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

CALENDAR_MESSAGE = "Please enter a valid date. The date you entered does not exist."
FUTURE_MESSAGE = "Birth date cannot be in the future. Please enter a valid date."


class DateField(StrEnum):
    """The three raw input fields."""

    DAY = "day"
    MONTH = "month"
    YEAR = "year"


class DateInputError(ValueError):
    """Base class for all rejected date input."""


class FieldError(DateInputError):
    """A single field is out of range or not a whole number."""

    def __init__(self, field: DateField | str, reason: str) -> None:
        self.field = DateField(field)
        self.reason = reason
        super().__init__(f"{self.field}: {reason}")


class FieldErrors(DateInputError):
    """Several fields failed independent validation."""

    def __init__(self, errors: Iterable[FieldError]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(str(e) for e in self.errors))

    def as_dict(self) -> dict[str, str]:
        """Map field name to reason, in day/month/year order."""
        return {str(e.field): e.reason for e in self.errors}


class CalendarError(DateInputError):
    """The fields do not form a date that exists (e.g. Feb 30)."""

    def __init__(self, message: str = CALENDAR_MESSAGE) -> None:
        super().__init__(message)


class FutureDateError(DateInputError):
    """The birth date is later than the reference date."""

    def __init__(self, message: str = FUTURE_MESSAGE) -> None:
        super().__init__(message)


class YearRangeError(DateInputError):
    """The configured minimum year is later than the reference year.

    No birth year can pass, so this is reported once instead of as a
    year field error with an empty range.
    """

    def __init__(self, min_year: int, reference_year: int) -> None:
        self.min_year = min_year
        self.reference_year = reference_year
        super().__init__(
            f"No birth year is possible: the minimum year {min_year} is after "
            f"the reference year {reference_year}"
        )
