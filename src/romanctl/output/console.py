"""Rich Console factory and theme for romanctl output.

Consoles render to a StringIO buffer, preserving the
``format_result() -> str`` contract. In non-TTY environments (tests,
pipes) Rich drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ROMAN_THEME = Theme(
    {
        "roman.ok": "bold green",
        "roman.error": "bold red",
        "roman.warning": "bold yellow",
        "roman.op": "bold cyan",
        "roman.key": "dim",
        "roman.numeral": "bold magenta",
        "roman.value": "bold blue",
        "roman.place.thousands": "red",
        "roman.place.hundreds": "yellow",
        "roman.place.tens": "green",
        "roman.place.units": "cyan",
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
        theme=ROMAN_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_place(place: str) -> str:
    """Return the Rich style name for a decimal place."""
    return f"roman.place.{place}" if place in ("thousands", "hundreds", "tens", "units") else ""
