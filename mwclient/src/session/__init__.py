"""
Session orchestrator mixins.

These mixins provide the domain-specific operations of the
SessionOrchestrator class. Compose them together to build the client.
"""

from .base_mixin import BaseSessionMixin, ConnectionState
from .lifecycle_mixin import LifecycleMixin
from .resolution_mixin import ResolutionMixin
from .players_mixin import PlayersMixin
from .items_mixin import ReceivedItemsMixin
from .scouting_mixin import ScoutingMixin, classify_item
from .deathlink_mixin import DeathLinkMixin
from .messaging_mixin import MessagingMixin

__all__ = [
    "BaseSessionMixin",
    "ConnectionState",
    "LifecycleMixin",
    "ResolutionMixin",
    "PlayersMixin",
    "ReceivedItemsMixin",
    "ScoutingMixin",
    "classify_item",
    "DeathLinkMixin",
    "MessagingMixin",
]
