"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.  The deadline
board renderable is shared with ``melclock watch``, which hands it to
``rich.live.Live`` instead.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.console import Group
from rich.table import Table
from rich.text import Text

from melclock.output.console import create_console, get_output, style_for_category

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console, RenderableType

    from melclock.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op)
        if renderer is None:
            msg = f"No renderer for operation {result.op!r}"
            raise ValueError(msg)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Deadline results print one ``<category>: <remaining>`` line each.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    categories = result.data.get("categories")
    if categories:
        return "\n".join(f"{key}: {item['remaining']}" for key, item in categories.items())

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item.get("category", "")) for item in items)

    return f"OK: {result.op}"


def deadline_board(result: ServiceResult, *, verbose: bool = False) -> RenderableType:
    """Build the deadline board: header lines, category table and per-category notes."""
    data = result.data
    header = Text()
    header.append("Current time: ", style="mel.key")
    header.append(str(data.get("current_time", "")))
    parts: list[RenderableType] = [header]

    categories: dict[str, dict[str, Any]] = data.get("categories") or {}
    if not categories:
        parts.append(Text("Enter discovery date and time to calculate deadlines.", style="dim"))
        return Group(*parts)

    discovery = Text()
    discovery.append("Discovery:    ", style="mel.key")
    discovery.append(str(data.get("discovery", "")))
    parts.append(discovery)
    parts.append(_deadline_table(categories))
    parts.append(_deadline_notes(categories, verbose=verbose))
    return Group(*parts)


# ── Helpers ───────────────────────────────────────────────────────────


def _status_cell(item: dict[str, Any]) -> Text:
    if item.get("needs_input"):
        return Text("NEEDS INPUT", style="mel.pending")
    if item.get("is_expired"):
        return Text("EXPIRED", style="mel.expired")
    return Text("OPEN", style="mel.ok")


def _deadline_table(categories: dict[str, dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Cat", no_wrap=True)
    table.add_column("Interval", justify="right")
    table.add_column("Deadline", style="mel.deadline", no_wrap=True)
    table.add_column("Remaining")
    table.add_column("Status", no_wrap=True)

    for key, item in categories.items():
        days = item.get("interval_days")
        interval = f"{days} d" if days is not None else "—"
        remaining_style = "mel.expired" if item.get("is_expired") else "mel.remaining"
        if item.get("needs_input"):
            remaining_style = "mel.pending"
        table.add_row(
            Text(key, style=style_for_category(key)),
            interval,
            item.get("formatted_deadline") or "—",
            Text(str(item.get("remaining", "")), style=remaining_style),
            _status_cell(item),
        )
    return table


def _deadline_notes(categories: dict[str, dict[str, Any]], *, verbose: bool) -> Group:
    """One note line per category, plus the discovery-to-deadline summary when verbose."""
    lines: list[Text] = []
    for key, item in categories.items():
        line = Text(f"{key}  ", style=style_for_category(key))
        line.append(str(item.get("note", "")), style="dim italic")
        lines.append(line)
        summary = item.get("summary")
        if verbose and summary:
            lines.append(Text(f"   {summary}", style="dim"))
    return Group(*lines)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="mel.error")
    op = Text(f"  {result.op}", style="mel.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Deadline renderers ────────────────────────────────────────────────


def _render_calculate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(deadline_board(result, verbose=verbose))


def _render_categories(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Cat", no_wrap=True)
    table.add_column("Description")
    table.add_column("Standard time")
    table.add_column("Hours", justify="right")
    if verbose:
        table.add_column("Note", style="dim")

    for item in result.data.get("items", []):
        key = str(item.get("category", ""))
        row: list[Any] = [
            Text(str(item.get("name", key)), style=style_for_category(key)),
            str(item.get("description", "")),
            str(item.get("repair_time", "")),
            str(item.get("repair_hours", "")),
        ]
        if verbose:
            row.append(str(item.get("note", "")))
        table.add_row(*row)
    console.print(table)

    rules = result.data.get("rules", [])
    if rules:
        console.print()
        console.print(Text("MEL repair interval rules:", style="bold"))
        for rule in rules:
            console.print(f"  • {rule}")


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "calculate": _render_calculate,
    "categories": _render_categories,
}
