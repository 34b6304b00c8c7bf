"""Per-category repair interval policy and reference data.

Each MEL category carries an invariant interval policy: B, C and D have a
fixed number of calendar days; A takes its interval from the MEL
Remarks/Exceptions column and has no default.

INVARIANT: Intervals are counted from midnight UTC of the discovery day.
"""

from __future__ import annotations

from pydantic import BaseModel

from melclock.domain.types import MelCategory

_EXCLUDES_DISCOVERY_DAY = "Excludes day of discovery - begins at midnight UTC on discovery day"


class CategoryPolicy(BaseModel):
    """Interval policy and display metadata for one MEL category.

    Attributes:
        fixed_days: Calendar days allowed for repair, or None when the
            interval is externally supplied (Category A).
    """

    model_config = {"frozen": True}

    category: MelCategory
    name: str
    description: str
    repair_time: str
    repair_hours: str
    operational_limit: str
    note: str
    fixed_days: int | None = None

    @property
    def needs_custom_interval(self) -> bool:
        return self.fixed_days is None


CATEGORY_POLICIES: dict[MelCategory, CategoryPolicy] = {
    MelCategory.A: CategoryPolicy(
        category=MelCategory.A,
        name="Category A",
        description="Items required for safe operation",
        repair_time="Per MEL Remarks/Exceptions (Column 5)",
        repair_hours="Variable",
        operational_limit="Must be repaired within specified time in MEL",
        note="Time interval excludes day of discovery for calendar/flight days",
    ),
    MelCategory.B: CategoryPolicy(
        category=MelCategory.B,
        name="Category B",
        description="Items with operational and/or maintenance relief",
        repair_time="3 consecutive calendar days",
        repair_hours="72 hours",
        operational_limit="Repair required within 3 calendar days",
        note=_EXCLUDES_DISCOVERY_DAY,
        fixed_days=3,
    ),
    MelCategory.C: CategoryPolicy(
        category=MelCategory.C,
        name="Category C",
        description="Items with operational relief",
        repair_time="10 consecutive calendar days",
        repair_hours="240 hours",
        operational_limit="Repair required within 10 calendar days",
        note=_EXCLUDES_DISCOVERY_DAY,
        fixed_days=10,
    ),
    MelCategory.D: CategoryPolicy(
        category=MelCategory.D,
        name="Category D",
        description="Items with extended operational relief",
        repair_time="120 consecutive calendar days",
        repair_hours="2880 hours",
        operational_limit="Repair required within 120 calendar days",
        note=_EXCLUDES_DISCOVERY_DAY,
        fixed_days=120,
    ),
}

INTERVAL_RULES: tuple[str, ...] = (
    "Day of discovery is excluded from calendar day calculations",
    "Time intervals begin at midnight UTC on discovery day",
    "Category A follows specific MEL Remarks/Exceptions",
    "All times calculated in UTC per aviation regulations",
)


def get_policy(category: MelCategory | str) -> CategoryPolicy:
    """Look up the policy for *category*.

    Raises:
        ValueError: If *category* is not one of A, B, C, D.
    """
    return CATEGORY_POLICIES[MelCategory(category)]
