"""AgeService — validate raw birth-date fields and compute age.

Pipeline: PARSE → VALIDATE FIELDS → CALENDAR → NOT FUTURE → COMPUTE → RESPOND

Each stage raises a DateInputError subclass on rejection; the service
turns it into a failed ServiceResult so callers never see exceptions for
bad input.
"""

from __future__ import annotations

import datetime
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog

from agecalc.domain.age import AgeResult, compute_age
from agecalc.domain.calendar import CalendarDate, days_in_month, is_leap_year, month_name
from agecalc.domain.errors import (
    CalendarError,
    DateField,
    DateInputError,
    FieldError,
    FieldErrors,
    FutureDateError,
    YearRangeError,
)
from agecalc.domain.validation import (
    parse_field,
    validate_calendar_date,
    validate_fields,
    validate_month,
    validate_not_future,
    validate_year,
)
from agecalc.services._helpers import today
from agecalc.services.result import ServiceError, ServiceResult
from agecalc.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from agecalc.config.settings import AgeCalcSettings

log = structlog.get_logger(__name__)

_ERROR_CODES: dict[type[DateInputError], str] = {
    FieldErrors: "INVALID_FIELDS",
    CalendarError: "INVALID_DATE",
    FutureDateError: "FUTURE_DATE",
    YearRangeError: "INVALID_RANGE",
}


def _failure(op: str, exc: DateInputError) -> ServiceResult:
    code = _ERROR_CODES.get(type(exc), "INVALID_INPUT")
    detail: dict[str, Any] = {}
    if isinstance(exc, FieldErrors):
        detail["fields"] = exc.as_dict()
        message = "; ".join(exc.as_dict().values())
    else:
        message = str(exc)
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=detail),
    )


def age_payload(birth: CalendarDate, reference: CalendarDate, age: AgeResult) -> dict[str, Any]:
    """Flatten an AgeResult into ServiceResult data."""
    return {
        "birth_date": birth.isoformat(),
        "reference_date": reference.isoformat(),
        "years": age.years,
        "months": age.months,
        "days": age.days,
        "total_days": age.total_days,
        "days_to_next_birthday": age.days_to_next_birthday,
        "next_birthday": age.next_birthday.isoformat(),
        "is_birthday": age.is_birthday,
    }


class AgeService:
    """Validation and age computation over raw day/month/year input.

    The reference date comes from *clock* unless a call overrides it.
    Stateless apart from settings: every call is independent.
    """

    def __init__(
        self,
        settings: AgeCalcSettings,
        *,
        clock: Callable[[], datetime.date] = today,
    ) -> None:
        self._settings = settings
        self._clock = clock

    @property
    def min_year(self) -> int:
        return self._settings.validation.min_year

    def _reference(self, reference: datetime.date | None) -> CalendarDate:
        return CalendarDate.from_date(reference if reference is not None else self._clock())

    def _birth_date(
        self, day: object, month: object, year: object, reference: CalendarDate
    ) -> CalendarDate:
        """Run every validation stage and return the birth date."""
        with trace_span("validate_fields") as span:
            try:
                d, m, y = validate_fields(
                    day, month, year, current_year=reference.year, min_year=self.min_year
                )
            except FieldErrors as exc:
                if span is not None:
                    span.annotate("invalid_fields", list(exc.as_dict()))
                raise
        with trace_span("validate_calendar_date"):
            birth = validate_calendar_date(d, m, y)
        with trace_span("validate_not_future"):
            validate_not_future(birth, reference)
        return birth

    @traced
    def validate(
        self,
        day: object,
        month: object,
        year: object,
        *,
        reference: datetime.date | None = None,
    ) -> ServiceResult:
        """Check that the raw fields form an acceptable birth date."""
        op = "validate_date"
        ref = self._reference(reference)
        try:
            birth = self._birth_date(day, month, year, ref)
        except DateInputError as exc:
            log.debug("date.rejected", op=op, error=str(exc))
            return _failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "birth_date": birth.isoformat(),
                "reference_date": ref.isoformat(),
                "valid": True,
            },
        )

    @traced
    def calculate(
        self,
        day: object,
        month: object,
        year: object,
        *,
        reference: datetime.date | None = None,
    ) -> ServiceResult:
        """Validate the raw fields and compute the age at the reference date."""
        op = "calculate_age"
        ref = self._reference(reference)
        try:
            birth = self._birth_date(day, month, year, ref)
        except DateInputError as exc:
            log.debug("date.rejected", op=op, error=str(exc))
            return _failure(op, exc)

        with trace_span("compute_age"):
            age = compute_age(birth, ref)

        log.debug(
            "age.computed",
            birth_date=birth.isoformat(),
            reference_date=ref.isoformat(),
            years=age.years,
            months=age.months,
            days=age.days,
        )
        return ServiceResult(ok=True, op=op, data=age_payload(birth, ref, age))

    @traced
    def month_info(self, month: object, year: object) -> ServiceResult:
        """Name, length and leap-year flag for any month in years 1-9999."""
        op = "month_info"
        try:
            m = parse_field(DateField.MONTH, month)
            validate_month(m)
            y = parse_field(DateField.YEAR, year)
            validate_year(y, datetime.MAXYEAR, min_year=datetime.MINYEAR)
        except FieldError as exc:
            return _failure(op, FieldErrors([exc]))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "month": m,
                "year": y,
                "month_name": month_name(m),
                "days": days_in_month(m, y),
                "leap_year": is_leap_year(y),
            },
        )
