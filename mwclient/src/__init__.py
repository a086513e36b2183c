"""Resilient multiworld session client with offline name resolution."""

from .data_package import OfflineNameCache, load_entities
from .integration import GameIntegration
from .orchestrator import SessionOrchestrator
from .results import ConnectResult
from .session import ConnectionState, classify_item

__all__ = [
    "OfflineNameCache",
    "load_entities",
    "GameIntegration",
    "SessionOrchestrator",
    "ConnectResult",
    "ConnectionState",
    "classify_item",
]
