"""Command: report whether a numeral is canonical."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from romanctl.commands._base import RomanCommand

if TYPE_CHECKING:
    from romanctl.commands._context import AppContext


@click.command(
    cls=RomanCommand,
    examples="""\
  romanctl check XIV
  romanctl check IIII
  romanctl --json check IIV""",
)
@click.argument("numeral")
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with status 1 when the numeral is not canonical.",
)
@click.pass_obj
def check(app: AppContext, numeral: str, strict: bool) -> None:
    """Check whether NUMERAL is a canonical Roman numeral."""
    result = app.service.check(numeral)
    app.emit(result)
    if strict and not result.data["canonical"]:
        raise SystemExit(1)
