"""Subcommand modules for measurectl.

register_commands() imports each command lazily so ``measurectl --help``
stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from measurectl.commands.check import check
    from measurectl.commands.compose import compose
    from measurectl.commands.match import match

    cli.add_command(check)
    cli.add_command(compose)
    cli.add_command(match)
