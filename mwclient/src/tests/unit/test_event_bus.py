"""
Unit tests for the client event bus.
"""

from mwclient.src.core.event_bus import EventBus, EventType


class TestEventBus:

    def test_subscribe_and_emit(self):
        bus = EventBus()
        received = []
        bus.subscribe(EventType.CONNECTED, received.append)

        bus.emit(EventType.CONNECTED, {"slot_name": "Farmer"})

        assert len(received) == 1
        assert received[0].type == EventType.CONNECTED
        assert received[0].data == {"slot_name": "Farmer"}

    def test_once_handler_runs_once(self):
        bus = EventBus()
        received = []
        bus.subscribe_once(EventType.DISCONNECTED, received.append)

        bus.emit(EventType.DISCONNECTED)
        bus.emit(EventType.DISCONNECTED)

        assert len(received) == 1

    def test_unsubscribe(self):
        bus = EventBus()
        received = []
        bus.subscribe(EventType.RECONNECTED, received.append)
        bus.unsubscribe(EventType.RECONNECTED, received.append)

        bus.emit(EventType.RECONNECTED)

        assert received == []

    def test_failing_handler_does_not_block_others(self):
        bus = EventBus()
        received = []

        def broken(event):
            raise ValueError("boom")

        bus.subscribe(EventType.CONNECTION_ERROR, broken)
        bus.subscribe(EventType.CONNECTION_ERROR, received.append)

        bus.emit(EventType.CONNECTION_ERROR)

        assert len(received) == 1

    def test_clear(self):
        bus = EventBus()
        received = []
        bus.subscribe(EventType.CONNECTED, received.append)
        bus.clear()

        bus.emit(EventType.CONNECTED)

        assert received == []
