"""DeadlineBoard: the live session state behind ``melclock watch``.

Holds the current inputs and the latest result. Recomputes on every
input change (:meth:`update`) and every clock tick (:meth:`refresh`).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

from melclock.domain.timefmt import utc_now
from melclock.services.deadline import DeadlineService, DiscoveryInputs
from melclock.services.result import ServiceResult

logger = logging.getLogger(__name__)


class DeadlineBoard:
    """Current inputs plus their most recent evaluation.

    Args:
        service: Evaluates inputs into a ServiceResult.
        inputs: Starting inputs.
        clock: Source of the current instant for :meth:`update`.
        on_change: Called with every freshly computed result.
    """

    def __init__(
        self,
        service: DeadlineService,
        inputs: DiscoveryInputs,
        *,
        clock: Callable[[], datetime] = utc_now,
        on_change: Callable[[ServiceResult], object] | None = None,
    ) -> None:
        self._service = service
        self._inputs = inputs
        self._clock = clock
        self._on_change = on_change
        self._now = clock()
        self._result = self._recompute()

    @property
    def inputs(self) -> DiscoveryInputs:
        return self._inputs

    @property
    def now(self) -> datetime:
        """Instant the current result was computed against."""
        return self._now

    @property
    def result(self) -> ServiceResult:
        return self._result

    def update(self, **changes: Any) -> ServiceResult:
        """Apply input changes and recompute against the current instant."""
        self._inputs = DiscoveryInputs.model_validate({**self._inputs.model_dump(), **changes})
        self._now = self._clock()
        logger.debug("inputs changed: %s", sorted(changes))
        self._result = self._recompute()
        return self._result

    def refresh(self, now: datetime) -> ServiceResult:
        """Recompute the unchanged inputs for a new instant (tick callback)."""
        self._now = now
        self._result = self._recompute()
        return self._result

    def _recompute(self) -> ServiceResult:
        result = self._service.calculate(self._inputs, now=self._now)
        if self._on_change is not None:
            self._on_change(result)
        return result
