"""Subcommand modules for melclock.

Provides register_commands() which uses deferred imports to keep
``melclock --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from melclock.commands.calc import calc
    from melclock.commands.categories import categories
    from melclock.commands.watch import watch

    cli.add_command(calc)
    cli.add_command(watch)
    cli.add_command(categories)
