"""Command: convert a batch of tokens in either direction."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from romanctl.commands._base import RomanCommand

if TYPE_CHECKING:
    from romanctl.commands._context import AppContext


@click.command(
    cls=RomanCommand,
    examples="""\
  romanctl convert 1984 MMXXVI XLII
  printf 'IV\\n9\\n' | romanctl -q convert
  romanctl --json convert 0 IIII X""",
)
@click.argument("tokens", nargs=-1)
@click.pass_obj
def convert(app: AppContext, tokens: tuple[str, ...]) -> None:
    """Convert TOKENS: integers are encoded, everything else decoded.

    With no TOKENS, reads one token per line from stdin. Blank lines
    are skipped.
    """
    if not tokens:
        stdin = click.get_text_stream("stdin")
        tokens = tuple(line.rstrip("\n") for line in stdin if line.strip())
    app.emit(app.service.convert(tokens))
