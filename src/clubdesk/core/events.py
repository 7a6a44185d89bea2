"""In-process publish/subscribe bus for editor notifications."""

import logging
import threading
from typing import Any, Callable, NamedTuple

from clubdesk.core.timezone import now_utc

logger = logging.getLogger(__name__)


class BusEvent(NamedTuple):
    topic: str
    event: str
    payload: Any
    ts: str


Handler = Callable[[BusEvent], Any]


class EventBus:
    """
    Topic-addressed notification bus.

    Publishers and subscribers may live on different threads (autosave
    timers publish, request handlers subscribe), so the subscriber table is
    guarded by a lock and handlers are invoked outside of it.
    """

    def __init__(self):
        self._subscribers: dict[str, list[Handler]] = {}
        self._lock = threading.Lock()

    def subscribe(self, topic: str, handler: Handler) -> None:
        with self._lock:
            self._subscribers.setdefault(topic, []).append(handler)

    def unsubscribe(self, topic: str, handler: Handler) -> None:
        with self._lock:
            handlers = self._subscribers.get(topic)
            if handlers and handler in handlers:
                handlers.remove(handler)
                if not handlers:
                    del self._subscribers[topic]

    def subscriber_count(self, topic: str) -> int:
        with self._lock:
            return len(self._subscribers.get(topic, []))

    def publish(self, topic: str, event: str, payload: Any = None) -> int:
        """
        Deliver an event to every subscriber of a topic.

        Returns the number of handlers that ran without raising. A failing
        handler is logged and does not stop delivery to the others.
        """
        with self._lock:
            handlers = list(self._subscribers.get(topic, []))

        message = BusEvent(topic=topic, event=event, payload=payload, ts=now_utc().isoformat())
        delivered = 0
        for handler in handlers:
            try:
                handler(message)
                delivered += 1
            except Exception:
                logger.exception("Subscriber failed for %s/%s", topic, event)
        return delivered
