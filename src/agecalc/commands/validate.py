"""Command: check a birth date without computing an age."""

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
  agecalc validate 30 2 2023
  agecalc validate 31 4 2023
  agecalc --json validate 16 6 2024 --today 2024-06-15""",
)
@click.argument("day")
@click.argument("month")
@click.argument("year")
@today_option
@click.pass_obj
def validate(
    app: AppContext, day: str, month: str, year: str, today: datetime.datetime | None
) -> None:
    """Check that DAY MONTH YEAR is an existing, non-future birth date."""
    reference = today.date() if today is not None else None
    app.emit(app.service.validate(day, month, year, reference=reference))
