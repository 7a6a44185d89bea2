"""
Unit tests for EventBus.

Tests cover:
- Topic routing
- Unsubscribe
- Failing handlers do not stop delivery
"""

from clubdesk.core.events import EventBus


class TestEventBus:
    def test_delivers_to_topic_subscribers_only(self):
        bus = EventBus()
        a, b = [], []
        bus.subscribe("post_saved:1", a.append)
        bus.subscribe("post_saved:2", b.append)

        delivered = bus.publish("post_saved:1", "saved", "1")

        assert delivered == 1
        assert [m.payload for m in a] == ["1"]
        assert b == []
        assert a[0].ts

    def test_unsubscribe(self):
        bus = EventBus()
        received = []
        bus.subscribe("t", received.append)
        bus.unsubscribe("t", received.append)

        assert bus.publish("t", "saved") == 0
        assert received == []
        assert bus.subscriber_count("t") == 0

    def test_unsubscribe_unknown_handler_is_noop(self):
        bus = EventBus()
        bus.unsubscribe("t", print)

        assert bus.subscriber_count("t") == 0

    def test_failing_handler_does_not_stop_delivery(self):
        """
        GIVEN two subscribers where the first raises
        WHEN an event is published
        THEN the second still receives it
        """
        bus = EventBus()
        received = []

        def broken(message):
            raise ValueError("boom")

        bus.subscribe("t", broken)
        bus.subscribe("t", received.append)

        delivered = bus.publish("t", "saved", "x")

        assert delivered == 1
        assert len(received) == 1
