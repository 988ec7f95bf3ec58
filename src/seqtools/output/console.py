"""Rich Console factory and theme for seqtools output.

Consoles render to a StringIO buffer so formatters keep a plain
``-> str`` contract. In non-TTY environments (tests, pipes) Rich
disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SEQ_THEME = Theme(
    {
        "seq.ok": "bold green",
        "seq.error": "bold red",
        "seq.warning": "bold yellow",
        "seq.op": "bold cyan",
        "seq.key": "dim",
        "seq.result": "bold",
        "seq.code": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=SEQ_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
