"""Command: MEL category reference."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from melclock.commands._base import MelCommand

if TYPE_CHECKING:
    from melclock.commands._context import AppContext


@click.command(
    cls=MelCommand,
    examples="""\
  melclock categories
  melclock -v categories
  melclock --json categories""",
)
@click.pass_obj
def categories(app: AppContext) -> None:
    """List MEL categories, their repair intervals and the interval rules."""
    app.emit(app.service.categories())
