"""Human and JSON rendering of ServiceResult.

The CLI renders results for humans (Rich styling, one field per line)
or for machines (--json). ``--quiet`` prints only the result value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.text import Text

from seqtools.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from seqtools.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Rendering switches derived from the global CLI flags."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    no_color: bool = False
    width: int = 120


def format_value(value: Any) -> str:
    """Compact display form of a result value.

    Tuples render with parentheses and lists with brackets, nested
    arbitrarily, e.g. ``[(0, 1), (1, 4)]``.
    """
    if isinstance(value, tuple):
        inner = ", ".join(format_value(v) for v in value)
        return f"({inner},)" if len(value) == 1 else f"({inner})"
    if isinstance(value, list):
        return "[" + ", ".join(format_value(v) for v in value) + "]"
    if isinstance(value, str):
        return repr(value)
    return str(value)


def _field(console: Console, key: str, value: Any) -> None:
    line = Text(f"  {key}: ", style="seq.key")
    line.append(format_value(value), style="seq.result" if key == "result" else "")
    console.print(line)


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            _render_timing(console, value)
        else:
            console.print(Text(f"    {key}: {value}"))


def _render_timing(console: Console, timing: dict[str, Any]) -> None:
    line = Text(f"    {timing.get('duration_ms', 0.0):>8.3f}ms  {timing.get('name', '?')}")
    if timing.get("ok", True):
        line.append("  ok")
    else:
        line.append(f"  failed ({timing.get('code', '?')})")
    console.print(line, style="dim")


def render_human(result: ServiceResult, settings: OutputSettings) -> str:
    """Render a result as styled ``OK: op`` / ``ERROR: op - message`` text."""
    console = create_console(no_color=settings.no_color, width=settings.width)
    if result.ok:
        status = Text("OK", style="seq.ok")
        status.append(": ")
        status.append(result.op, style="seq.op")
        console.print(status)
        for key, value in result.data.items():
            _field(console, key, value)
    else:
        err = result.error
        msg = err.message if err else "Unknown error"
        status = Text("ERROR", style="seq.error")
        status.append(": ")
        status.append(result.op, style="seq.op")
        status.append(f" - {msg}")
        console.print(status)
        if err and settings.verbose:
            console.print(Text(f"  code: {err.code}", style="seq.code"))
            for key, value in err.detail.items():
                console.print(Text(f"  {key}: {value}"))
    if settings.verbose:
        _render_meta(console, result)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output: just the result value, or a one-line error."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    if "result" in result.data:
        return format_value(result.data["result"])
    return f"OK: {result.op}"


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_human(result, settings)
