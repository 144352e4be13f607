"""Command: number of days in a month."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from agecalc.commands._base import AgeCommand

if TYPE_CHECKING:
    from agecalc.commands._context import AppContext


@click.command(
    "month-days",
    cls=AgeCommand,
    examples="""\
  agecalc month-days 2 2024
  agecalc month-days 2 1900""",
)
@click.argument("month")
@click.argument("year")
@click.pass_obj
def month_days(app: AppContext, month: str, year: str) -> None:
    """Show how many days MONTH has in YEAR."""
    app.emit(app.service.month_info(month, year))
