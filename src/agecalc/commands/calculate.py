"""Command: age in years, months and days from a birth date."""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING

import click

from agecalc.commands._base import AgeCommand, today_option

if TYPE_CHECKING:
    from agecalc.commands._context import AppContext


@click.command(
    cls=AgeCommand,
    examples="""\
  agecalc calculate 15 6 2000
  agecalc calculate 29 2 2004 --today 2025-03-01
  agecalc --json calculate 1 1 2000
  agecalc -q calculate 31 12 1999""",
)
@click.argument("day")
@click.argument("month")
@click.argument("year")
@today_option
@click.pass_obj
def calculate(
    app: AppContext, day: str, month: str, year: str, today: datetime.datetime | None
) -> None:
    """Calculate age from DAY MONTH YEAR of birth."""
    reference = today.date() if today is not None else None
    app.emit(app.service.calculate(day, month, year, reference=reference))
