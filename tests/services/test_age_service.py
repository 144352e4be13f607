"""Tests for AgeService — raw input through to ServiceResult."""

import datetime

from agecalc.config.settings import AgeCalcSettings
from agecalc.services.age import AgeService
from agecalc.services.telemetry import disable_telemetry, enable_telemetry


class TestCalculate:
    def test_success(self, service: AgeService) -> None:
        result = service.calculate("15", "6", "2000")
        assert result.ok is True
        assert result.op == "calculate_age"
        assert result.data["birth_date"] == "2000-06-15"
        assert result.data["reference_date"] == "2024-06-15"
        assert (result.data["years"], result.data["months"], result.data["days"]) == (24, 0, 0)
        assert result.data["is_birthday"] is True
        assert result.data["days_to_next_birthday"] == 0

    def test_accepts_ints(self, service: AgeService) -> None:
        result = service.calculate(1, 1, 2000)
        assert result.ok is True
        assert result.data["years"] == 24

    def test_reference_override(self, service: AgeService) -> None:
        result = service.calculate("15", "6", "2000", reference=datetime.date(2024, 1, 1))
        assert result.ok is True
        assert (result.data["years"], result.data["months"], result.data["days"]) == (23, 6, 17)
        assert result.data["days_to_next_birthday"] == 166
        assert result.data["next_birthday"] == "2024-06-15"
        assert result.data["total_days"] == 8600

    def test_field_errors(self, service: AgeService) -> None:
        result = service.calculate("0", "13", "1800")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_FIELDS"
        assert set(result.error.detail["fields"]) == {"day", "month", "year"}
        assert "Please select a valid month" in result.error.message

    def test_day_past_month_end(self, service: AgeService) -> None:
        result = service.calculate("30", "2", "2023")
        assert result.ok is False
        assert result.error is not None
        assert result.error.detail["fields"] == {"day": "February 2023 only has 28 days"}

    def test_future_date(self, service: AgeService) -> None:
        result = service.calculate("16", "6", "2024")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "FUTURE_DATE"
        assert result.error.message.startswith("Birth date cannot be in the future")

    def test_year_bound_follows_reference(self, service: AgeService) -> None:
        result = service.calculate("1", "1", "2024", reference=datetime.date(2023, 12, 31))
        assert result.ok is False
        assert result.error is not None
        assert result.error.detail["fields"] == {"year": "Please enter a valid year (1900-2023)"}

    def test_birthday_today(self, service: AgeService) -> None:
        result = service.calculate("15", "6", "2024")
        assert result.ok is True
        assert result.data["total_days"] == 0
        assert result.data["is_birthday"] is True

    def test_no_meta_without_telemetry(self, service: AgeService) -> None:
        assert service.calculate("1", "1", "2000").meta is None

    def test_min_year_from_settings(self, tmp_path) -> None:
        (tmp_path / "agecalc.toml").write_text("[validation]\nmin_year = 1800\n")
        settings = AgeCalcSettings.from_cli(search_from=tmp_path)
        svc = AgeService(settings, clock=lambda: datetime.date(2024, 6, 15))
        assert svc.calculate("1", "1", "1850").ok is True


class TestValidate:
    def test_valid(self, service: AgeService) -> None:
        result = service.validate("29", "2", "2000")
        assert result.ok is True
        assert result.op == "validate_date"
        assert result.data == {
            "birth_date": "2000-02-29",
            "reference_date": "2024-06-15",
            "valid": True,
        }

    def test_feb_29_in_common_year(self, service: AgeService) -> None:
        result = service.validate("29", "2", "2023")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_FIELDS"

    def test_non_numeric(self, service: AgeService) -> None:
        result = service.validate("ten", "6", "2000")
        assert result.ok is False
        assert result.error is not None
        assert result.error.detail["fields"] == {"day": "Please enter a whole number for day"}

    def test_future(self, service: AgeService) -> None:
        result = service.validate("16", "6", "2024")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "FUTURE_DATE"


class TestMonthInfo:
    def test_leap_february(self, service: AgeService) -> None:
        result = service.month_info("2", "2000")
        assert result.ok is True
        assert result.data == {
            "month": 2,
            "year": 2000,
            "month_name": "February",
            "days": 29,
            "leap_year": True,
        }

    def test_century_february(self, service: AgeService) -> None:
        result = service.month_info(2, 1900)
        assert result.data["days"] == 28
        assert result.data["leap_year"] is False

    def test_future_year_allowed(self, service: AgeService) -> None:
        assert service.month_info("2", "2400").data["days"] == 29

    def test_invalid_month(self, service: AgeService) -> None:
        result = service.month_info("13", "2024")
        assert result.ok is False
        assert result.error is not None
        assert result.error.detail["fields"] == {"month": "Please select a valid month"}


class TestTelemetry:
    def test_verbose_injects_span_tree(self, service: AgeService) -> None:
        enable_telemetry()
        try:
            result = service.calculate("15", "6", "2000")
        finally:
            disable_telemetry()
        assert result.meta is not None
        span = result.meta["telemetry"]
        assert span["name"] == "AgeService.calculate"
        child_names = [c["name"] for c in span["children"]]
        assert child_names == [
            "validate_fields",
            "validate_calendar_date",
            "validate_not_future",
            "compute_age",
        ]

    def test_failed_fields_annotated(self, service: AgeService) -> None:
        enable_telemetry()
        try:
            result = service.calculate("32", "6", "abc")
        finally:
            disable_telemetry()
        assert result.ok is False
        assert result.meta is not None
        (fields_span,) = result.meta["telemetry"]["children"]
        assert fields_span["name"] == "validate_fields"
        assert fields_span["annotations"] == {"invalid_fields": ["day", "year"]}


class TestYearRange:
    def test_min_year_after_reference_year(self, tmp_path) -> None:
        (tmp_path / "agecalc.toml").write_text("[validation]\nmin_year = 1950\n")
        settings = AgeCalcSettings.from_cli(search_from=tmp_path)
        svc = AgeService(settings, clock=lambda: datetime.date(1940, 6, 1))
        result = svc.calculate("1", "1", "1945")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_RANGE"
        assert "minimum year 1950 is after the reference year 1940" in result.error.message
        assert "fields" not in result.error.detail

    def test_reference_before_default_min_year(self, service: AgeService) -> None:
        result = service.validate("1", "1", "1890", reference=datetime.date(1899, 12, 31))
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_RANGE"
