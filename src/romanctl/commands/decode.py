"""Command: Roman numeral to integer."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from romanctl.commands._base import RomanCommand

if TYPE_CHECKING:
    from romanctl.commands._context import AppContext


@click.command(
    cls=RomanCommand,
    examples="""\
  romanctl decode MMMCMXCIX
  romanctl -q decode XLII
  romanctl --json decode MCMLXXXIV""",
)
@click.argument("numeral")
@click.pass_obj
def decode(app: AppContext, numeral: str) -> None:
    """Decode a canonical Roman NUMERAL into an integer."""
    app.emit(app.service.decode(numeral))
