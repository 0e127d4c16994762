"""Subcommand modules for toyrobot.

Provides register_commands() which uses deferred imports to keep
``toyrobot --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from toyrobot.commands.repl import repl
    from toyrobot.commands.run import run

    cli.add_command(repl)
    cli.add_command(run)
