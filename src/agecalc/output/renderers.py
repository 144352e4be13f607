"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from agecalc.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from agecalc.services.result import ServiceResult

HAPPY_BIRTHDAY = "🎉 Happy Birthday! Today is your special day!"


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    thousands_separator: bool = True,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    opts = _RenderOptions(verbose=verbose, thousands_separator=thousands_separator)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, opts)
    else:
        _render_error(result, console, opts)

    if verbose:
        _render_meta(console, result)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op == "calculate_age":
        d = result.data
        return f"{d['years']} {d['months']} {d['days']}"
    return f"OK: {result.op}"


def days_lived_line(total_days: int, *, thousands_separator: bool = True) -> str:
    count = f"{total_days:,}" if thousands_separator else str(total_days)
    return f"You have lived for {count} days"


def next_birthday_line(days_to_next_birthday: int) -> str:
    if days_to_next_birthday == 0:
        return HAPPY_BIRTHDAY
    unit = "day" if days_to_next_birthday == 1 else "days"
    return f"Your next birthday is in {days_to_next_birthday} {unit}"


# ── Helpers ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class _RenderOptions:
    verbose: bool = False
    thousands_separator: bool = True


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="age.ok")
    op = Text(f"  {result.op}", style="age.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="age.key")
    style = "age.date" if key.endswith("date") or key == "next_birthday" else ""
    console.print(k, Text(str(value), style=style), end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the telemetry span tree (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            _render_span(console, value, indent=4)
        else:
            console.print(f"    {key}: {value}")


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    prefix = " " * indent
    line = Text(f"{prefix}{span.get('name', '?')} ")
    line.append(f"{span.get('duration_ms', 0.0):.3f}ms", style="dim")
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, indent + 2)


# ── Op renderers ──────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, opts: _RenderOptions) -> None:
    label = Text("ERROR", style="age.error")
    op = Text(f"  {result.op}", style="age.op")
    console.print(label, op, end="")
    console.print()
    if result.error is None:
        console.print("  Unknown error")
        return

    fields: dict[str, str] = result.error.detail.get("fields", {})
    if fields:
        for name, reason in fields.items():
            console.print(Text(f"  {name}: ", style="age.field"), Text(reason), end="")
            console.print()
    else:
        console.print(f"  {result.error.message}")

    if opts.verbose:
        console.print(Text(f"  code: {result.error.code}", style="dim"))


def _render_age(result: ServiceResult, console: Console, opts: _RenderOptions) -> None:
    d = result.data
    _status_line(console, result)

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    for heading in ("Years", "Months", "Days"):
        table.add_column(heading, justify="right")
    table.add_row(
        Text(str(d["years"]), style="age.number"),
        Text(str(d["months"]), style="age.number"),
        Text(str(d["days"]), style="age.number"),
    )
    console.print(table)

    lived = days_lived_line(d["total_days"], thousands_separator=opts.thousands_separator)
    console.print(f"  {lived}")
    style = "age.birthday" if d["days_to_next_birthday"] == 0 else ""
    console.print(Text(f"  {next_birthday_line(d['days_to_next_birthday'])}", style=style))

    if opts.verbose:
        for key in ("birth_date", "reference_date", "next_birthday"):
            _field(console, key, d[key])


def _render_validate(result: ServiceResult, console: Console, opts: _RenderOptions) -> None:
    _status_line(console, result)
    console.print(f"  {result.data['birth_date']} is a valid birth date")
    if opts.verbose:
        _field(console, "reference_date", result.data["reference_date"])


def _render_month_info(result: ServiceResult, console: Console, opts: _RenderOptions) -> None:
    d = result.data
    _status_line(console, result)
    line = f"  {d['month_name']} {d['year']} has {d['days']} days"
    if d["leap_year"]:
        line += f" ({d['year']} is a leap year)"
    console.print(line)


def _render_generic(result: ServiceResult, console: Console, opts: _RenderOptions) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console, _RenderOptions], None]] = {
    "calculate_age": _render_age,
    "validate_date": _render_validate,
    "month_info": _render_month_info,
}
