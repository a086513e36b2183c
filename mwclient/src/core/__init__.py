"""Core systems for the multiworld client."""

from .event_bus import EventBus, EventType, Event

__all__ = [
    "EventBus",
    "EventType",
    "Event",
]
