"""Output mode dispatch for ServiceResult.

The CLI renders ServiceResult for humans (Rich tables and colors), for
scripts (``--quiet``, one line per category) or for machines (``--json``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from melclock.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from melclock.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags. JSON wins over quiet, quiet over verbose."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display in the requested output mode."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
