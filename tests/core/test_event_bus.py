"""Tests for the event bus system."""

from dataclasses import dataclass

import pytest

from navcharge.core.event_bus import Event, EventBus, EventPriority


@dataclass(frozen=True)
class SampleEvent(Event):
    """Test event with data."""

    data: str = ""


@dataclass(frozen=True)
class OtherEvent(Event):
    """Another test event."""

    value: int = 0


class TestEventBus:
    """Test suite for EventBus."""

    def test_subscribe_and_publish(self) -> None:
        bus = EventBus()
        received = []

        bus.subscribe(SampleEvent, received.append)
        event = SampleEvent(data="test")
        bus.publish(event)

        assert received == [event]

    def test_event_has_timestamp(self) -> None:
        assert SampleEvent(data="x").timestamp > 0

    def test_only_matching_type_receives(self) -> None:
        bus = EventBus()
        received = []

        bus.subscribe(OtherEvent, received.append)
        bus.publish(SampleEvent(data="test"))

        assert received == []

    def test_priority_order(self) -> None:
        bus = EventBus()
        calls = []

        bus.subscribe(SampleEvent, lambda e: calls.append("low"), EventPriority.LOW)
        bus.subscribe(SampleEvent, lambda e: calls.append("critical"), EventPriority.CRITICAL)
        bus.subscribe(SampleEvent, lambda e: calls.append("normal"))
        bus.publish(SampleEvent())

        assert calls == ["critical", "normal", "low"]

    def test_same_priority_keeps_subscription_order(self) -> None:
        bus = EventBus()
        calls = []

        bus.subscribe(SampleEvent, lambda e: calls.append(1))
        bus.subscribe(SampleEvent, lambda e: calls.append(2))
        bus.publish(SampleEvent())

        assert calls == [1, 2]

    def test_handler_exception_propagates(self) -> None:
        bus = EventBus()

        def failing(event: SampleEvent) -> None:
            raise RuntimeError("boom")

        bus.subscribe(SampleEvent, failing)

        with pytest.raises(RuntimeError, match="boom"):
            bus.publish(SampleEvent())
