"""Custom Click base classes and shared discovery options.

MelCommand accepts an ``examples`` parameter; ``--examples`` prints them
and exits, keeping ``--help`` concise.  :func:`discovery_options` adds the
discovery date/time and Category A interval inputs shared by ``calc`` and
``watch``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

import click

if TYPE_CHECKING:
    from melclock.commands._context import AppContext
    from melclock.services.deadline import DiscoveryInputs

F = TypeVar("F", bound=Callable[..., Any])


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class MelCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def discovery_options(func: F) -> F:
    """Add ``--date``, ``--time`` and ``--a-days`` to a command."""
    func = click.option(
        "--a-days",
        "a_days",
        type=click.IntRange(min=0),
        default=None,
        help="Category A repair interval in days (MEL Remarks/Exceptions column 5).",
    )(func)
    func = click.option(
        "--time",
        "discovery_time",
        default=None,
        metavar="HH:MM",
        help="Discovery time (UTC). Defaults to the current UTC time.",
    )(func)
    func = click.option(
        "--date",
        "discovery_date",
        default=None,
        metavar="YYYY-MM-DD",
        help="Discovery date (UTC). Defaults to today's UTC date.",
    )(func)
    return func


def resolve_inputs(
    app: AppContext,
    discovery_date: str | None,
    discovery_time: str | None,
    a_days: int | None,
) -> DiscoveryInputs:
    """Merge CLI inputs over the session defaults (now, config A interval).

    Raises:
        click.BadParameter: If *a_days* exceeds ``deadlines.max_custom_days``.
    """
    limit = app.settings.deadlines.max_custom_days
    if a_days is not None and a_days > limit:
        msg = f"{a_days} is larger than the maximum of {limit} days."
        raise click.BadParameter(msg, param_hint="'--a-days'")

    defaults = app.service.default_inputs()
    return defaults.model_copy(
        update={
            "discovery_date": discovery_date or defaults.discovery_date,
            "discovery_time": discovery_time or defaults.discovery_time,
            "category_a_days": a_days if a_days is not None else defaults.category_a_days,
        }
    )
