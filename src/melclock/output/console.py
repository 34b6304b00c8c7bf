"""Rich Console factory and theme for melclock output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

MEL_THEME = Theme(
    {
        "mel.ok": "bold green",
        "mel.error": "bold red",
        "mel.warning": "bold yellow",
        "mel.op": "bold cyan",
        "mel.key": "dim",
        "mel.deadline": "bold",
        "mel.remaining": "bold green",
        "mel.expired": "bold white on red",
        "mel.pending": "bold blue",
        "mel.cat.A": "red",
        "mel.cat.B": "dark_orange",
        "mel.cat.C": "yellow",
        "mel.cat.D": "green",
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
        theme=MEL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def create_live_console() -> Console:
    """Console bound to the real stdout, used by ``rich.live.Live``."""
    return Console(theme=MEL_THEME, highlight=False)


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_category(category: str) -> str:
    """Return the Rich style name for a MEL category letter."""
    return f"mel.cat.{category}" if category in {"A", "B", "C", "D"} else ""
