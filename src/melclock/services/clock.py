"""LiveClock: periodic wall-clock tick driving deadline recomputation.

The clock owns no deadline state. Each tick reads the current instant
from an injectable clock function and hands it to ``on_tick``; the
callback decides what to recompute.

The loop can run in the foreground (``run``) or on a daemon thread
(``start``/``stop``). Either way it must be stopped when the session
ends; the context manager does that.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import datetime
from types import TracebackType

from melclock.domain.timefmt import utc_now

logger = logging.getLogger(__name__)

DEFAULT_PERIOD_SECONDS = 60.0


class LiveClock:
    """Fixed-cadence tick generator.

    Usage::

        with LiveClock(board.refresh, period_seconds=60) as clock:
            clock.run(max_ticks=10)
    """

    def __init__(
        self,
        on_tick: Callable[[datetime], object],
        *,
        period_seconds: float = DEFAULT_PERIOD_SECONDS,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        if period_seconds <= 0:
            msg = f"period_seconds must be positive, got {period_seconds}"
            raise ValueError(msg)
        self._on_tick = on_tick
        self._period_seconds = float(period_seconds)
        self._clock = clock
        self._stop_evt = threading.Event()
        self._thread: threading.Thread | None = None
        self._tick_count = 0

    @property
    def period_seconds(self) -> float:
        return self._period_seconds

    @property
    def tick_count(self) -> int:
        return self._tick_count

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def tick(self) -> datetime:
        """Read the clock once and invoke the callback synchronously."""
        now = self._clock()
        self._tick_count += 1
        logger.debug("tick %d at %s", self._tick_count, now.isoformat())
        self._on_tick(now)
        return now

    def run(self, max_ticks: int | None = None) -> int:
        """Tick every period on the calling thread.

        Waits one period before each tick. Returns the number of ticks
        fired, after *max_ticks* ticks or once :meth:`stop` is called.
        A clock stopped before ``run`` fires nothing; only :meth:`start`
        re-arms it.
        """
        stop_evt = self._stop_evt
        fired = 0
        while max_ticks is None or fired < max_ticks:
            if stop_evt.wait(self._period_seconds):
                break
            self.tick()
            fired += 1
        return fired

    def start(self) -> None:
        """Run the tick loop on a daemon thread. No-op if already running.

        Every start gets a fresh stop event, so a loop left behind by an
        earlier :meth:`stop` can never be re-armed.
        """
        if self.running:
            return
        stop_evt = threading.Event()
        self._stop_evt = stop_evt
        self._thread = threading.Thread(
            target=self._run_background,
            args=(stop_evt,),
            name="melclock-tick",
            daemon=True,
        )
        self._thread.start()
        logger.debug("live clock started (period=%.3fs)", self._period_seconds)

    def stop(self) -> None:
        """Stop the loop and join the background thread. Idempotent."""
        self._stop_evt.set()
        thread, self._thread = self._thread, None
        if thread is None or thread is threading.current_thread():
            return
        thread.join(timeout=max(1.0, self._period_seconds))
        if thread.is_alive():
            logger.warning("tick callback still running after stop; it will not tick again")
        else:
            logger.debug("live clock stopped after %d ticks", self._tick_count)

    def _run_background(self, stop_evt: threading.Event) -> None:
        while not stop_evt.wait(self._period_seconds):
            try:
                self.tick()
            except Exception:
                logger.exception("tick callback failed; stopping live clock")
                stop_evt.set()

    def __enter__(self) -> LiveClock:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()
