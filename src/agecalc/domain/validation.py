"""Field and calendar validation for birth-date input.

Each check raises the most specific error immediately.  Per-field checks
raise :class:`FieldError`; cross-field checks raise :class:`CalendarError`
or :class:`FutureDateError`.  Nothing is coerced: a value that is not a
whole number in range is rejected, never clamped or treated as zero.
"""

from __future__ import annotations

import datetime
import re

from agecalc.domain.calendar import CalendarDate, days_in_month, month_name, normalize_date
from agecalc.domain.errors import (
    CalendarError,
    DateField,
    FieldError,
    FieldErrors,
    FutureDateError,
    YearRangeError,
)

MIN_YEAR = 1900

_INTEGER = re.compile(r"^[+-]?\d+$")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_field(field: DateField | str, raw: object) -> int:
    """Parse a raw field value into an int, strictly.

    Accepts ints and decimal strings (surrounding whitespace allowed).
    Anything else, including ``""``, ``"12.5"``, ``"15abc"`` and booleans,
    is a FieldError for *field*.
    """
    field = DateField(field)
    if _is_int(raw):
        return raw  # type: ignore[return-value]
    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            raise FieldError(field, f"Please enter a value for {field}")
        if _INTEGER.match(text):
            return int(text)
    raise FieldError(field, f"Please enter a whole number for {field}")


def validate_day(day: object, month: int | None = None, year: int | None = None) -> None:
    """Day must be in 1..31, and within the month when month and year are known."""
    if not _is_int(day) or not 1 <= day <= 31:  # type: ignore[operator]
        raise FieldError(DateField.DAY, "Please enter a valid day (1-31)")
    if month is not None and year is not None and 1 <= month <= 12:
        limit = days_in_month(month, year)
        if day > limit:  # type: ignore[operator]
            raise FieldError(DateField.DAY, f"{month_name(month)} {year} only has {limit} days")


def validate_month(month: object) -> None:
    if not _is_int(month) or not 1 <= month <= 12:  # type: ignore[operator]
        raise FieldError(DateField.MONTH, "Please select a valid month")


def validate_year(year: object, current_year: int, *, min_year: int = MIN_YEAR) -> None:
    """Year must be in ``min_year..current_year`` inclusive.

    *current_year* is supplied by the caller so the check stays pure.
    """
    if min_year > current_year:
        raise YearRangeError(min_year, current_year)
    if not _is_int(year) or not min_year <= year <= current_year:  # type: ignore[operator]
        raise FieldError(
            DateField.YEAR, f"Please enter a valid year ({min_year}-{current_year})"
        )


def validate_calendar_date(
    day: object,
    month: object,
    year: object,
    *,
    current_year: int | None = None,
    min_year: int = MIN_YEAR,
) -> CalendarDate:
    """Check that (day, month, year) names a real date and return it.

    Runs the field-level checks first (the year range only when
    *current_year* is given), then builds the date leniently and requires
    the same (y, m, d) back.  A rollover such as Apr 31 becoming May 1 is a
    CalendarError.
    """
    validate_month(month)
    if current_year is not None:
        validate_year(year, current_year, min_year=min_year)
    elif not _is_int(year):
        raise FieldError(DateField.YEAR, "Please enter a whole number for year")
    # Bounds only: the month-length check is what the round-trip is for.
    validate_day(day)

    try:
        built = normalize_date(year, month, day)  # type: ignore[arg-type]
    except (ValueError, OverflowError) as exc:
        raise CalendarError() from exc
    if (built.year, built.month, built.day) != (year, month, day):
        raise CalendarError()
    return CalendarDate.from_date(built)


def validate_not_future(
    date: CalendarDate | datetime.date, reference_date: CalendarDate | datetime.date
) -> None:
    """Reject a birth date later than the reference date."""
    if _as_date(date) > _as_date(reference_date):
        raise FutureDateError()


def validate_fields(
    day: object,
    month: object,
    year: object,
    *,
    current_year: int,
    min_year: int = MIN_YEAR,
) -> tuple[int, int, int]:
    """Parse and validate each raw field independently, then compose.

    Every failing field is reported together in one :class:`FieldErrors`.
    The day is checked against the month length only when month and year
    are themselves valid.

    Raises:
        YearRangeError: *min_year* is after *current_year*, so no year
            could pass.
        FieldErrors: one or more fields are invalid.

    Returns:
        The parsed ``(day, month, year)``.
    """
    if min_year > current_year:
        raise YearRangeError(min_year, current_year)

    errors: list[FieldError] = []
    parsed: dict[DateField, int] = {}

    for field, raw in ((DateField.DAY, day), (DateField.MONTH, month), (DateField.YEAR, year)):
        try:
            parsed[field] = parse_field(field, raw)
        except FieldError as exc:
            errors.append(exc)

    valid_month: int | None = None
    valid_year: int | None = None

    if DateField.MONTH in parsed:
        try:
            validate_month(parsed[DateField.MONTH])
            valid_month = parsed[DateField.MONTH]
        except FieldError as exc:
            errors.append(exc)

    if DateField.YEAR in parsed:
        try:
            validate_year(parsed[DateField.YEAR], current_year, min_year=min_year)
            valid_year = parsed[DateField.YEAR]
        except FieldError as exc:
            errors.append(exc)

    if DateField.DAY in parsed:
        try:
            validate_day(parsed[DateField.DAY], valid_month, valid_year)
        except FieldError as exc:
            errors.append(exc)

    if errors:
        order = list(DateField)
        errors.sort(key=lambda e: order.index(e.field))
        raise FieldErrors(errors)

    return parsed[DateField.DAY], parsed[DateField.MONTH], parsed[DateField.YEAR]


def _as_date(value: CalendarDate | datetime.date) -> datetime.date:
    if isinstance(value, CalendarDate):
        return value.to_date()
    return value
