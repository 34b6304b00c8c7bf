"""Command: one-shot repair deadline calculation."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from melclock.commands._base import MelCommand, discovery_options, resolve_inputs

if TYPE_CHECKING:
    from melclock.commands._context import AppContext

NOW_FORMATS = ["%Y-%m-%dT%H:%M:%S", "%Y-%m-%dT%H:%M", "%Y-%m-%d %H:%M"]


@click.command(
    cls=MelCommand,
    examples="""\
  melclock calc
  melclock calc --date 2024-03-10 --time 08:00
  melclock calc --date 2024-03-10 --time 08:00 --a-days 15
  melclock calc --date 2024-03-10 --time 08:00 --now 2024-03-15T08:00
  melclock --json calc --date 2024-01-01 --time 23:59""",
)
@discovery_options
@click.option(
    "--now",
    "now",
    type=click.DateTime(formats=NOW_FORMATS),
    default=None,
    help="Measure remaining time from this UTC instant instead of the clock.",
)
@click.pass_obj
def calc(
    app: AppContext,
    discovery_date: str | None,
    discovery_time: str | None,
    a_days: int | None,
    now: datetime | None,
) -> None:
    """Calculate repair deadlines for all MEL categories."""
    inputs = resolve_inputs(app, discovery_date, discovery_time, a_days)
    app.emit(app.service.calculate(inputs, now=now))
