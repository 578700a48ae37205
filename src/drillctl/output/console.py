"""Rich Console factory and theme for drillctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DRILL_THEME = Theme(
    {
        "drill.ok": "bold green",
        "drill.error": "bold red",
        "drill.warning": "bold yellow",
        "drill.op": "bold cyan",
        "drill.key": "dim",
        "drill.node": "bold blue",
        "drill.valid": "green",
        "drill.invalid": "red",
        "drill.locked": "yellow",
        "drill.unlocked": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=DRILL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_validity(valid: bool) -> str:
    """Return the Rich style name for a literal check outcome."""
    return "drill.valid" if valid else "drill.invalid"


def style_for_lock(locked: bool) -> str:
    """Return the Rich style name for a box lock state."""
    return "drill.locked" if locked else "drill.unlocked"
