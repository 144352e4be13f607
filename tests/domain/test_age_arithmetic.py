"""Tests for compute_age and next-birthday projection."""

import datetime

import pytest
from pydantic import ValidationError

from agecalc.domain.age import AgeResult, compute_age, next_birthday
from agecalc.domain.calendar import CalendarDate
from agecalc.domain.errors import FutureDateError


def _age(birth: str, reference: str) -> AgeResult:
    return compute_age(CalendarDate.parse(birth), CalendarDate.parse(reference))


class TestComputeAge:
    def test_exact_anniversary(self) -> None:
        age = _age("2000-01-01", "2024-01-01")
        assert (age.years, age.months, age.days) == (24, 0, 0)
        assert age.days_to_next_birthday == 0
        assert age.is_birthday
        assert age.next_birthday == CalendarDate.parse("2024-01-01")

    def test_borrow_across_december(self) -> None:
        age = _age("2000-06-15", "2024-01-01")
        assert (age.years, age.months, age.days) == (23, 6, 17)
        expected = (datetime.date(2024, 6, 15) - datetime.date(2024, 1, 1)).days
        assert age.days_to_next_birthday == expected == 166
        assert age.next_birthday == CalendarDate.parse("2024-06-15")

    def test_same_day_is_zero(self) -> None:
        age = _age("2024-06-15", "2024-06-15")
        assert (age.years, age.months, age.days) == (0, 0, 0)
        assert age.total_days == 0
        assert age.days_to_next_birthday == 0
        assert age.is_birthday

    def test_day_before_birthday(self) -> None:
        age = _age("1990-06-16", "2024-06-15")
        assert (age.years, age.months, age.days) == (33, 11, 30)
        assert age.days_to_next_birthday == 1

    def test_day_after_birthday(self) -> None:
        age = _age("1990-06-14", "2024-06-15")
        assert (age.years, age.months, age.days) == (34, 0, 1)
        assert age.days_to_next_birthday == 364
        assert age.next_birthday == CalendarDate.parse("2025-06-14")

    def test_borrow_uses_previous_month_length(self) -> None:
        # Reference in March 2024 borrows February 2024 (29 days).
        age = _age("2000-01-30", "2024-03-10")
        assert (age.years, age.months, age.days) == (24, 1, 9)

    def test_double_borrow_after_short_february(self) -> None:
        # Jan 31 to Mar 1 is 30 days: February alone cannot cover the deficit.
        age = _age("2024-01-31", "2024-03-01")
        assert (age.years, age.months, age.days) == (0, 0, 30)

    def test_double_borrow_across_year(self) -> None:
        age = _age("2000-12-31", "2024-03-01")
        assert (age.years, age.months, age.days) == (23, 1, 30)

    def test_total_days(self) -> None:
        age = _age("2000-06-15", "2024-01-01")
        assert age.total_days == 8600

    def test_total_days_counts_leap_days(self) -> None:
        assert _age("2000-01-01", "2001-01-01").total_days == 366
        assert _age("1900-01-01", "1901-01-01").total_days == 365

    def test_total_days_independent_of_borrow(self) -> None:
        """The two quantities are computed separately and may not agree."""
        age = _age("2024-01-31", "2024-03-01")
        assert age.total_days == 30
        assert (age.months, age.days) == (0, 30)

    def test_idempotent(self) -> None:
        birth = CalendarDate.parse("1987-09-23")
        ref = CalendarDate.parse("2024-02-29")
        assert compute_age(birth, ref) == compute_age(birth, ref)

    def test_future_birth_date_rejected(self) -> None:
        with pytest.raises(FutureDateError):
            _age("2024-06-16", "2024-06-15")

    @pytest.mark.parametrize(
        "birth",
        ["1900-01-01", "1999-12-31", "2000-02-29", "2010-03-31", "2023-08-31", "2023-01-31"],
    )
    @pytest.mark.parametrize(
        "reference",
        ["2024-01-01", "2024-02-29", "2024-03-01", "2024-03-31", "2024-12-31", "2025-03-01"],
    )
    def test_result_ranges(self, birth: str, reference: str) -> None:
        age = _age(birth, reference)
        assert age.years >= 0
        assert 0 <= age.months <= 11
        assert 0 <= age.days <= 30
        assert age.total_days >= 0
        assert 0 <= age.days_to_next_birthday <= 366


class TestNextBirthday:
    def test_later_this_year(self) -> None:
        assert next_birthday(datetime.date(1990, 12, 25), datetime.date(2024, 6, 15)) == (
            datetime.date(2024, 12, 25)
        )

    def test_already_passed_moves_to_next_year(self) -> None:
        assert next_birthday(datetime.date(1990, 1, 2), datetime.date(2024, 6, 15)) == (
            datetime.date(2025, 1, 2)
        )

    def test_today_is_the_birthday(self) -> None:
        assert next_birthday(datetime.date(1990, 6, 15), datetime.date(2024, 6, 15)) == (
            datetime.date(2024, 6, 15)
        )

    def test_leap_day_in_common_year_rolls_to_march_1(self) -> None:
        assert next_birthday(datetime.date(2000, 2, 29), datetime.date(2025, 1, 10)) == (
            datetime.date(2025, 3, 1)
        )

    def test_leap_day_after_march_1_goes_to_next_year(self) -> None:
        assert next_birthday(datetime.date(2000, 2, 29), datetime.date(2024, 3, 1)) == (
            datetime.date(2025, 3, 1)
        )

    def test_leap_day_birthday_age(self) -> None:
        age = _age("2000-02-29", "2024-02-29")
        assert age.days_to_next_birthday == 0
        assert (age.years, age.months, age.days) == (24, 0, 0)


class TestAgeResult:
    def test_frozen(self) -> None:
        age = _age("2000-01-01", "2024-01-01")
        with pytest.raises(ValidationError):
            age.years = 1  # type: ignore[misc]

    def test_range_constraints(self) -> None:
        with pytest.raises(ValidationError):
            AgeResult(
                years=1,
                months=12,
                days=0,
                total_days=400,
                days_to_next_birthday=0,
                next_birthday=CalendarDate.parse("2024-01-01"),
            )
