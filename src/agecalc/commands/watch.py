"""Command: live recalculation while fields are edited on stdin."""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING

import click

from agecalc.commands._base import AgeCommand, today_option
from agecalc.domain.errors import DateField

if TYPE_CHECKING:
    from agecalc.commands._context import AppContext
    from agecalc.services.form import FormSnapshot

_FIELD_NAMES = {f.value for f in DateField}


@click.command(
    cls=AgeCommand,
    examples="""\
  printf 'day 15\\nmonth 6\\nyear 2000\\n' | agecalc watch
  agecalc watch --debounce-ms 250
  agecalc watch --today 2024-01-01

  Input lines:
    day 15 | month 6 | year 2000   set a field
    calculate                      recalculate now
    reset                          clear all fields""",
)
@click.option(
    "--debounce-ms",
    type=click.IntRange(min=0),
    default=None,
    help="Quiet window before recalculating (default from [watch] config).",
)
@today_option
@click.pass_obj
def watch(app: AppContext, debounce_ms: int | None, today: datetime.datetime | None) -> None:
    """Recalculate age as day/month/year edits arrive on stdin.

    Every edit schedules a recalculation after the quiet window, replacing
    any pending one.  Nothing is calculated until all three fields have a
    value.  End of input runs whatever is still pending.
    """
    from agecalc.services.debounce import Debouncer
    from agecalc.services.form import AgeForm

    reference = today.date() if today is not None else None
    delay = (
        debounce_ms / 1000 if debounce_ms is not None else app.settings.watch.debounce_seconds
    )

    def recalculate(snapshot: FormSnapshot, *, force: bool = False) -> None:
        if not force and not snapshot.is_complete:
            return
        app.show(
            app.service.calculate(
                snapshot.day, snapshot.month, snapshot.year, reference=reference
            )
        )

    form = AgeForm()
    debouncer = Debouncer(delay, recalculate)
    stdin = click.get_text_stream("stdin")

    for raw_line in stdin:
        line = raw_line.strip()
        if not line:
            continue
        command, _, value = line.partition(" ")
        command = command.lower()

        if command in _FIELD_NAMES:
            debouncer.trigger(form.update(command, value.strip()))
        elif command == "calculate":
            debouncer.cancel()
            recalculate(form.snapshot, force=True)
        elif command == "reset":
            debouncer.cancel()
            form.reset()
            click.echo("Form cleared.")
        else:
            click.echo(
                f"Unknown input: {line!r} (expected day, month, year, calculate or reset)",
                err=True,
            )

    debouncer.flush()
