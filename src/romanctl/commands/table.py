"""Command: print the symbol table."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from romanctl.commands._base import RomanCommand

if TYPE_CHECKING:
    from romanctl.commands._context import AppContext


@click.command(
    cls=RomanCommand,
    examples="""\
  romanctl table
  romanctl --json table""",
)
@click.pass_obj
def table(app: AppContext) -> None:
    """List every symbol cluster by decimal place."""
    app.emit(app.service.table())
