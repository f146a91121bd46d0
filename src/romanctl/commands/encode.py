"""Command: integer to Roman numeral."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from romanctl.commands._base import RomanCommand

if TYPE_CHECKING:
    from romanctl.commands._context import AppContext


@click.command(
    cls=RomanCommand,
    examples="""\
  romanctl encode 3999
  romanctl -q encode 42
  romanctl --json encode 1984""",
)
@click.argument("value", type=int)
@click.pass_obj
def encode(app: AppContext, value: int) -> None:
    """Encode an integer VALUE (1..3999) as a Roman numeral."""
    app.emit(app.service.encode(value))
