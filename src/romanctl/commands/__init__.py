"""Subcommand modules for romanctl."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every subcommand on the root CLI group."""
    from romanctl.commands.check import check
    from romanctl.commands.convert import convert
    from romanctl.commands.decode import decode
    from romanctl.commands.encode import encode
    from romanctl.commands.table import table

    cli.add_command(decode)
    cli.add_command(encode)
    cli.add_command(convert)
    cli.add_command(check)
    cli.add_command(table)
