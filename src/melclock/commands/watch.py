"""Command: live deadline board refreshed on a fixed cadence."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click
from rich.live import Live

from melclock.commands._base import MelCommand, discovery_options, resolve_inputs
from melclock.output.console import create_live_console
from melclock.output.formatters import format_result
from melclock.output.renderers import deadline_board
from melclock.services.board import DeadlineBoard
from melclock.services.clock import LiveClock

if TYPE_CHECKING:
    from melclock.commands._context import AppContext
    from melclock.services.result import ServiceResult

logger = logging.getLogger(__name__)


@click.command(
    cls=MelCommand,
    examples="""\
  melclock watch
  melclock watch --date 2024-03-10 --time 08:00 --a-days 15
  melclock watch --interval 5 --ticks 12
  melclock --json watch --ticks 3""",
)
@discovery_options
@click.option(
    "--interval",
    type=click.FloatRange(min=0.01),
    default=None,
    help="Seconds between refreshes. Defaults to clock.refresh_seconds (60).",
)
@click.option(
    "--ticks",
    type=click.IntRange(min=0),
    default=None,
    help="Stop after this many refreshes. Runs until Ctrl-C by default.",
)
@click.pass_obj
def watch(
    app: AppContext,
    discovery_date: str | None,
    discovery_time: str | None,
    a_days: int | None,
    interval: float | None,
    ticks: int | None,
) -> None:
    """Show a live countdown for all MEL categories."""
    inputs = resolve_inputs(app, discovery_date, discovery_time, a_days)
    first = app.service.calculate(inputs)
    if not first.ok:
        app.emit(first)

    period = interval if interval is not None else app.settings.clock.refresh_seconds
    verbose = app.settings.verbose

    if app.settings.json_output or app.settings.quiet:
        board = DeadlineBoard(app.service, inputs, on_change=lambda r: _echo_frame(app, r))
        _run_clock(board, period, ticks)
        app.emit_warnings(board.result)
        return

    with Live(
        deadline_board(first, verbose=verbose),
        console=create_live_console(),
        auto_refresh=False,
        transient=False,
    ) as live:
        board = DeadlineBoard(
            app.service,
            inputs,
            on_change=lambda r: live.update(deadline_board(r, verbose=verbose), refresh=True),
        )
        _run_clock(board, period, ticks)
    app.emit_warnings(board.result)


def _echo_frame(app: AppContext, result: ServiceResult) -> None:
    """Print one refresh; JSON mode writes one document per line."""
    if app.settings.json_output:
        click.echo(result.model_dump_json())
    else:
        click.echo(format_result(result, settings=app.output_settings))


def _run_clock(board: DeadlineBoard, period: float, ticks: int | None) -> None:
    with LiveClock(board.refresh, period_seconds=period) as clock:
        try:
            clock.run(max_ticks=ticks)
        except KeyboardInterrupt:
            logger.debug("watch interrupted after %d ticks", clock.tick_count)
