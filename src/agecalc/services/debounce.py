"""Trailing-edge debounce with a single owned timer slot.

Each new trigger cancels the pending call and schedules a fresh one, so a
burst of input results in one call after the stream goes quiet.  The
Debouncer owns exactly one timer for its lifetime; it never spawns a new
debounced closure per event.
"""

from __future__ import annotations

import contextvars
import functools
import logging
import threading
from collections.abc import Callable
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class TimerLike(Protocol):
    def start(self) -> None: ...

    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], TimerLike]


def _thread_timer(delay: float, fn: Callable[[], None]) -> TimerLike:
    timer = threading.Timer(delay, fn)
    timer.daemon = True
    return timer


class Debouncer:
    """Run *callback* once input has been quiet for *delay* seconds.

    Usage::

        debouncer = Debouncer(0.5, recalculate)
        for edit in edits:
            debouncer.trigger(edit)
        debouncer.flush()

    Args:
        delay: Quiescence window in seconds.
        callback: Called with the arguments of the most recent trigger.
        timer_factory: Builds the timer; defaults to a daemon
            ``threading.Timer``.  Tests inject a manual timer.
    """

    def __init__(
        self,
        delay: float,
        callback: Callable[..., Any],
        *,
        timer_factory: TimerFactory = _thread_timer,
    ) -> None:
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        self.delay = delay
        self._callback = callback
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._idle = threading.Condition(self._lock)
        self._running = False
        self._generation = 0
        self._timer: TimerLike | None = None
        self._pending: tuple[contextvars.Context, tuple[Any, ...], dict[str, Any]] | None = None

    @property
    def pending(self) -> bool:
        """True while a call is scheduled and has not run yet."""
        with self._lock:
            return self._pending is not None

    def trigger(self, *args: Any, **kwargs: Any) -> None:
        """Cancel any pending call and schedule a new one."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            # Carry the caller's context (telemetry flag, bound log vars)
            # into the timer thread.
            self._pending = (contextvars.copy_context(), args, kwargs)
            self._generation += 1
            fire = functools.partial(self._fire, self._generation)
            self._timer = self._timer_factory(self.delay, fire)
            self._timer.start()

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._pending = None

    def flush(self) -> bool:
        """Run the pending call now, on the calling thread.

        A call the timer thread has already started is waited for first, so
        when this returns no debounced call is still running.

        Returns:
            True if a call was pending and has been run here.
        """
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
        return self._fire()

    def _fire(self, generation: int | None = None) -> bool:
        """Run the pending call.  *generation* is set for timer firings only."""
        with self._idle:
            while self._running:
                self._idle.wait()
            # A timer cancelled too late to stop its thread must not run a
            # call scheduled by a later trigger.
            if generation is not None and generation != self._generation:
                return False
            pending = self._pending
            self._pending = None
            self._timer = None
            if pending is None:
                return False
            self._running = True

        ctx, args, kwargs = pending
        logger.debug("Debounced call fired after %.3fs quiet window", self.delay)
        try:
            ctx.run(self._callback, *args, **kwargs)
        finally:
            with self._idle:
                self._running = False
                self._idle.notify_all()
        return True
