"""Rich Console factory and theme for rulepred output.

Consoles render to a StringIO buffer, preserving the
``format_result() -> str`` contract. In non-TTY environments (tests,
pipes) Rich disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

RULEPRED_THEME = Theme(
    {
        "rp.ok": "bold green",
        "rp.error": "bold red",
        "rp.op": "bold cyan",
        "rp.key": "dim",
        "rp.uid": "bold blue",
        "rp.namespace": "magenta",
        "rp.none": "dim italic",
        "rp.tag": "green",
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
        theme=RULEPRED_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
