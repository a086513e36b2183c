"""Protocol session boundary and bounded waits."""

from .bounded import BoundedResult, WaitStatus, wait_bounded
from .session import (
    DeathLinkService,
    ProtocolSession,
    SessionEvent,
    SessionFactory,
    SubscriptionHandle,
)

__all__ = [
    "BoundedResult",
    "WaitStatus",
    "wait_bounded",
    "DeathLinkService",
    "ProtocolSession",
    "SessionEvent",
    "SessionFactory",
    "SubscriptionHandle",
]
