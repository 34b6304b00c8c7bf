"""DeadlineService: evaluate all four MEL categories for one set of inputs.

Parses the UI-level inputs (date and time strings, Category A days),
runs the deadline engine for every category against the same current
instant, and packages the outcome as a ServiceResult.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from melclock.domain.categories import CATEGORY_POLICIES, INTERVAL_RULES
from melclock.domain.deadlines import compute_all, interval_start, parse_discovery
from melclock.domain.timefmt import as_utc, format_utc, utc_now
from melclock.domain.types import MelCategory
from melclock.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from melclock.config.settings import MelSettings

logger = logging.getLogger(__name__)


class DiscoveryInputs(BaseModel):
    """Values supplied by the presentation layer."""

    model_config = {"frozen": True, "extra": "forbid"}

    discovery_date: str | None = None
    discovery_time: str | None = None
    category_a_days: int | None = None

    @classmethod
    def starting_at(cls, now: datetime, category_a_days: int | None = None) -> DiscoveryInputs:
        """Default inputs: discovery at the current UTC date and minute."""
        current = as_utc(now)
        return cls(
            discovery_date=current.strftime("%Y-%m-%d"),
            discovery_time=current.strftime("%H:%M"),
            category_a_days=category_a_days,
        )


class DeadlineService:
    """Stateless deadline evaluation over MelSettings."""

    def __init__(self, settings: MelSettings) -> None:
        self._settings = settings

    def default_inputs(self, now: datetime | None = None) -> DiscoveryInputs:
        """Inputs for a fresh session, pre-filled from config."""
        return DiscoveryInputs.starting_at(
            now or utc_now(),
            category_a_days=self._settings.deadlines.category_a_days,
        )

    def calculate(self, inputs: DiscoveryInputs, now: datetime | None = None) -> ServiceResult:
        """Compute deadlines for every category.

        Missing date or time yields an ok result with no categories.
        """
        op = "calculate"
        current = as_utc(now) if now is not None else utc_now()
        data: dict[str, Any] = {
            "current_time": format_utc(current),
            "discovery": None,
            "interval_start": None,
            "categories": {},
        }

        try:
            discovery = parse_discovery(inputs.discovery_date, inputs.discovery_time)
        except ValueError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="INVALID_DISCOVERY",
                    message=f"Invalid discovery date/time: {exc}",
                    detail={
                        "discovery_date": inputs.discovery_date,
                        "discovery_time": inputs.discovery_time,
                    },
                ),
            )

        if discovery is None:
            logger.debug("discovery date/time missing; calculation skipped")
            return ServiceResult(ok=True, op=op, data=data)

        try:
            results = compute_all(discovery, current, inputs.category_a_days)
        except OverflowError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="DEADLINE_OUT_OF_RANGE",
                    message=f"Repair interval puts the deadline out of range: {exc}",
                    detail={"category_a_days": inputs.category_a_days},
                ),
            )

        warnings: list[str] = []
        for category, result in results.items():
            data["categories"][category.value] = result.model_dump(mode="json")
            if result.needs_input:
                warnings.append(f"Category {category} needs a repair interval (--a-days)")
            elif result.is_expired:
                warnings.append(f"Category {category} deadline expired at {result.formatted_deadline}")

        data["discovery"] = format_utc(discovery)
        data["interval_start"] = interval_start(discovery).date().isoformat()
        logger.debug(
            "calculated %d categories for discovery %s",
            len(results),
            data["discovery"],
        )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def categories(self) -> ServiceResult:
        """Reference data for every category plus the interval rules."""
        items = []
        for category in MelCategory:
            policy = CATEGORY_POLICIES[category]
            items.append(policy.model_dump(mode="json"))
        return ServiceResult(
            ok=True,
            op="categories",
            data={"items": items, "rules": list(INTERVAL_RULES), "count": len(items)},
        )
