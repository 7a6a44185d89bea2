"""Debounced autosave coordination for the post editor."""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol

from clubdesk.core.events import EventBus

logger = logging.getLogger(__name__)

SAVED_EVENT = "saved"
SAVE_FAILED_EVENT = "save_failed"


class Timer(Protocol):
    """Subset of threading.Timer used by the coordinator."""

    def start(self) -> None:
        ...

    def cancel(self) -> None:
        ...


TimerFactory = Callable[[float, Callable[[], None]], Timer]


def thread_timer(interval: float, function: Callable[[], None]) -> threading.Timer:
    """Daemon threading.Timer; fires regardless of the scheduling request."""
    timer = threading.Timer(interval, function)
    timer.daemon = True
    return timer


def saved_topic(key: str) -> str:
    return f"post_saved:{key}"


@dataclass
class _PendingSave:
    key: str
    action: Callable[[], Any]
    topic: str
    timer: Optional[Timer] = None


class AutosaveCoordinator:
    """
    Coalesces bursts of edits into one delayed write per key.

    Each key is idle or pending. schedule() replaces any pending write for
    the key and restarts its quiet period; when the period elapses the last
    scheduled action runs once and observers of the key's topic are told.

    At most one job is alive per key. A timer that was superseded after it
    had already started firing finds a different job in the table and does
    nothing.
    """

    def __init__(
        self,
        delay_seconds: float,
        event_bus: EventBus,
        timer_factory: TimerFactory = thread_timer,
    ):
        self._delay = delay_seconds
        self._bus = event_bus
        self._timer_factory = timer_factory
        self._pending: dict[str, _PendingSave] = {}
        self._lock = threading.Lock()
        self._closed = False

    @property
    def delay_seconds(self) -> float:
        return self._delay

    def schedule(
        self,
        key: str,
        action: Callable[[], Any],
        topic: Optional[str] = None,
    ) -> None:
        """Schedule action for key, superseding any pending action."""
        job = _PendingSave(key=key, action=action, topic=topic or saved_topic(key))
        job.timer = self._timer_factory(self._delay, lambda: self._fire(job))

        with self._lock:
            if self._closed:
                raise RuntimeError("Autosave coordinator is shut down")
            previous = self._pending.get(key)
            self._pending[key] = job
            if previous is not None and previous.timer is not None:
                previous.timer.cancel()
            job.timer.start()

        if previous is not None:
            logger.debug("Autosave for %s superseded by newer edit", key)

    def is_pending(self, key: str) -> bool:
        with self._lock:
            return key in self._pending

    def pending_keys(self) -> list[str]:
        with self._lock:
            return list(self._pending)

    def cancel(self, key: str) -> bool:
        """Drop the pending write for key without running it."""
        with self._lock:
            job = self._pending.pop(key, None)
        if job is None:
            return False
        if job.timer is not None:
            job.timer.cancel()
        return True

    def flush(self, key: str) -> bool:
        """Run the pending write for key now. Returns False if none was pending."""
        with self._lock:
            job = self._pending.get(key)
        if job is None:
            return False
        if job.timer is not None:
            job.timer.cancel()
        self._fire(job)
        return True

    def shutdown(self, flush: bool = True) -> None:
        """Stop accepting edits; run (or drop) whatever is still pending."""
        with self._lock:
            self._closed = True
            keys = list(self._pending)
        for key in keys:
            if flush:
                self.flush(key)
            else:
                self.cancel(key)

    def _fire(self, job: _PendingSave) -> None:
        with self._lock:
            if self._pending.get(job.key) is not job:
                return
            del self._pending[job.key]

        try:
            job.action()
        except Exception:
            # No retry: the stored record keeps its previous value
            logger.exception("Autosave failed for %s", job.key)
            self._bus.publish(job.topic, SAVE_FAILED_EVENT, job.key)
            return

        logger.info("Autosaved %s", job.key)
        self._bus.publish(job.topic, SAVED_EVENT, job.key)
