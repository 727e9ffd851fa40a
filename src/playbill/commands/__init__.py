"""Subcommand modules for playbill.

Provides register_commands() which uses deferred imports to keep
``playbill --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from playbill.commands.statement import statement

    cli.add_command(statement)
