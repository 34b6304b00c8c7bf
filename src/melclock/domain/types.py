"""MEL category enum.

The four fixed categories of a minimum equipment list. Interval policy
for each member lives in :mod:`melclock.domain.categories`.
"""

from __future__ import annotations

from enum import StrEnum


class MelCategory(StrEnum):
    """Repair categories for deferred MEL items."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
