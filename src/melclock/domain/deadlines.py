"""Pure repair-deadline calculation.

The current instant is always passed in explicitly; nothing here reads
the system clock. Given the same (category, discovery, now, custom days)
the engine returns an equal, immutable :class:`DeadlineResult`.

Rules:
- The interval starts at midnight UTC of the discovery day, so the time
  of day of the discovery never moves the deadline.
- The deadline is 23:59:59.999 UTC on the N-th day after the start.
- Remaining time is rounded up (days above one day, hours otherwise) so
  the display never understates the time left.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

from pydantic import BaseModel

from melclock.domain.categories import get_policy
from melclock.domain.timefmt import as_utc, format_utc
from melclock.domain.types import MelCategory

END_OF_DAY = time(23, 59, 59, 999000)

EXPIRED = "EXPIRED"
NEEDS_INPUT_REMAINING = "Enter days to calculate"
NEEDS_INPUT_NOTE = "Specify days per MEL Remarks/Exceptions Column 5"

_US_PER_HOUR = 3600 * 1_000_000
_US_PER_DAY = 24 * _US_PER_HOUR


class DeadlineResult(BaseModel):
    """Outcome of one deadline calculation.

    When ``needs_input`` is True (Category A without an interval) the
    deadline fields are None and ``remaining`` holds guidance text.
    """

    model_config = {"frozen": True}

    category: MelCategory
    needs_input: bool = False
    is_expired: bool = False
    interval_start: datetime
    interval_days: int | None = None
    deadline: datetime | None = None
    formatted_deadline: str | None = None
    formatted_discovery: str
    remaining: str
    note: str
    summary: str | None = None


def interval_start(discovery: datetime) -> datetime:
    """Midnight UTC of the discovery day."""
    return as_utc(discovery).replace(hour=0, minute=0, second=0, microsecond=0)


def deadline_for(start: datetime, days: int) -> datetime:
    """End of day (23:59:59.999 UTC) *days* calendar days after *start*."""
    end_day = start.date() + timedelta(days=days)
    return datetime.combine(end_day, END_OF_DAY, tzinfo=start.tzinfo)


def describe_remaining(remaining: timedelta) -> str:
    """Render a signed duration as a countdown string.

    ``EXPIRED`` at or below zero, ceiling days above one day, ceiling
    hours otherwise.
    """
    micros = (remaining.days * 86400 + remaining.seconds) * 1_000_000 + remaining.microseconds
    if micros <= 0:
        return EXPIRED
    if micros > _US_PER_DAY:
        return f"{-(-micros // _US_PER_DAY)} days remaining"
    return f"{-(-micros // _US_PER_HOUR)} hours remaining"


def compute(
    category: MelCategory | str,
    discovery: datetime | None,
    now: datetime,
    custom_days: int | None = None,
) -> DeadlineResult | None:
    """Compute the repair deadline for one category.

    Args:
        category: MEL category (A-D).
        discovery: Discovery instant. None suppresses the calculation.
        now: The instant remaining time is measured from.
        custom_days: Category A repair interval. Ignored for B, C and D.

    Returns:
        The result, or None when *discovery* is None.

    Raises:
        OverflowError: If the interval pushes the deadline outside the
            representable date range.
    """
    if discovery is None:
        return None

    policy = get_policy(category)
    discovered = as_utc(discovery)
    start = interval_start(discovered)
    formatted_discovery = format_utc(discovered)

    days = custom_days if policy.needs_custom_interval else policy.fixed_days
    if days is None:
        return DeadlineResult(
            category=policy.category,
            needs_input=True,
            interval_start=start,
            formatted_discovery=formatted_discovery,
            remaining=NEEDS_INPUT_REMAINING,
            note=NEEDS_INPUT_NOTE,
        )

    deadline = deadline_for(start, days)
    if policy.needs_custom_interval:
        note = f"{days} day interval per MEL specification"
    else:
        note = f"Interval begins at midnight UTC on {start.date().isoformat()}"
    remaining = deadline - as_utc(now)
    formatted_deadline = format_utc(deadline)
    return DeadlineResult(
        category=policy.category,
        is_expired=remaining <= timedelta(0),
        interval_start=start,
        interval_days=days,
        deadline=deadline,
        formatted_deadline=formatted_deadline,
        formatted_discovery=formatted_discovery,
        remaining=describe_remaining(remaining),
        note=note,
        summary=f"Discovery: {formatted_discovery} → Deadline: {formatted_deadline}",
    )


def compute_all(
    discovery: datetime | None,
    now: datetime,
    custom_days: int | None = None,
) -> dict[MelCategory, DeadlineResult]:
    """Compute every category from the same discovery and current instant.

    Returns an empty dict when *discovery* is None.
    """
    results: dict[MelCategory, DeadlineResult] = {}
    for category in MelCategory:
        result = compute(category, discovery, now, custom_days)
        if result is not None:
            results[category] = result
    return results


def parse_discovery(date_str: str | None, time_str: str | None) -> datetime | None:
    """Combine UI date and time strings into a UTC discovery instant.

    Accepts ``YYYY-MM-DD`` and ``HH:MM`` (``HH:MM:SS`` also accepted).
    Returns None when either value is missing or blank.

    Raises:
        ValueError: If either string is malformed.
    """
    if not date_str or not date_str.strip() or not time_str or not time_str.strip():
        return None
    day = date.fromisoformat(date_str.strip())
    clock_time = time.fromisoformat(time_str.strip())
    if clock_time.tzinfo is not None:
        raise ValueError(f"Discovery time must be UTC without an offset: {time_str!r}")
    return as_utc(datetime.combine(day, clock_time))
