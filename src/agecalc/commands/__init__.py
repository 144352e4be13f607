"""Subcommand modules for agecalc.

Provides register_commands() which uses deferred imports to keep
``agecalc --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from agecalc.commands.calculate import calculate
    from agecalc.commands.month_days import month_days
    from agecalc.commands.validate import validate
    from agecalc.commands.watch import watch

    cli.add_command(calculate)
    cli.add_command(validate)
    cli.add_command(month_days)
    cli.add_command(watch)
