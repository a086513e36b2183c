"""
Core event bus for client lifecycle notifications.

Provides a pub/sub system so game integrations and UIs can react to
connection changes without the orchestrator knowing about them.
"""

from typing import Callable, Dict, List, Any, Optional
from enum import Enum, auto
from dataclasses import dataclass, field

from ..logging_config import get_logger

logger = get_logger(__name__)


class EventType(Enum):
    """Client event types."""
    # Connection events
    CONNECTED = auto()
    DISCONNECTED = auto()
    CONNECTION_ERROR = auto()
    RECONNECTED = auto()
    RECONNECT_FAILED = auto()
    
    # Death link events
    DEATH_LINK_RECEIVED = auto()
    DEATH_LINK_SENT = auto()


@dataclass
class Event:
    """Event data structure."""
    type: EventType
    data: Dict[str, Any] = field(default_factory=dict)
    source: Optional[str] = None


class EventBus:
    """Central event bus for client notifications."""
    
    def __init__(self):
        self._handlers: Dict[EventType, List[Callable]] = {}
        self._once_handlers: Dict[EventType, List[Callable]] = {}
    
    def subscribe(self, event_type: EventType, handler: Callable[[Event], None]) -> None:
        """Subscribe a handler to an event type."""
        if event_type not in self._handlers:
            self._handlers[event_type] = []
        self._handlers[event_type].append(handler)
    
    def subscribe_once(self, event_type: EventType, handler: Callable[[Event], None]) -> None:
        """Subscribe a handler that will be called only once."""
        if event_type not in self._once_handlers:
            self._once_handlers[event_type] = []
        self._once_handlers[event_type].append(handler)
    
    def unsubscribe(self, event_type: EventType, handler: Callable[[Event], None]) -> None:
        """Unsubscribe a handler from an event type."""
        if event_type in self._handlers and handler in self._handlers[event_type]:
            self._handlers[event_type].remove(handler)
        
        if event_type in self._once_handlers and handler in self._once_handlers[event_type]:
            self._once_handlers[event_type].remove(handler)
    
    def emit(self, event_type: EventType, data: Optional[Dict[str, Any]] = None, source: Optional[str] = None) -> None:
        """
        Emit an event to all subscribers.
        
        A failing handler is logged and does not stop the others.
        """
        event = Event(type=event_type, data=data or {}, source=source)
        
        for handler in list(self._handlers.get(event_type, [])):
            try:
                handler(event)
            except Exception:
                logger.exception(f"Error in event handler for {event_type.name}")
        
        once_handlers = self._once_handlers.pop(event_type, [])
        for handler in once_handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(f"Error in once handler for {event_type.name}")
    
    def clear(self, event_type: Optional[EventType] = None) -> None:
        """Clear all handlers for an event type, or all handlers if None."""
        if event_type:
            self._handlers.pop(event_type, None)
            self._once_handlers.pop(event_type, None)
        else:
            self._handlers.clear()
            self._once_handlers.clear()
