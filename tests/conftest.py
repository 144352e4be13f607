"""Shared pytest fixtures for agecalc tests."""

from __future__ import annotations

import datetime
import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from agecalc.config.settings import AgeCalcSettings
from agecalc.domain.calendar import CalendarDate
from agecalc.services.age import AgeService
from agecalc.services.telemetry import disable_telemetry

# Fixed "today" for deterministic service and CLI tests.
REFERENCE_DAY = datetime.date(2024, 6, 15)


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's AGECALC_* environment out of the tests."""
    for name in ("AGECALC_CONFIG", "AGECALC_QUIET", "AGECALC_VERBOSE", "AGECALC_JSON_OUTPUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_process_state() -> Generator[None]:
    """Undo the logging and telemetry setup a CLI invocation leaves behind."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    root_level = root.level
    pkg_level = logging.getLogger("agecalc").level
    yield
    disable_telemetry()
    root.handlers = handlers
    root.setLevel(root_level)
    logging.getLogger("agecalc").setLevel(pkg_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no agecalc.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path: Path) -> AgeCalcSettings:
    """Default settings with config discovery rooted in an empty temp dir."""
    return AgeCalcSettings.from_cli(search_from=tmp_path)


@pytest.fixture
def service(settings: AgeCalcSettings) -> AgeService:
    """AgeService whose clock is pinned to REFERENCE_DAY."""
    return AgeService(settings, clock=lambda: REFERENCE_DAY)


@pytest.fixture
def make_date() -> Callable[[str], CalendarDate]:
    """Build a CalendarDate from an ISO string."""
    return CalendarDate.parse
