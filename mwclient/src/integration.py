"""
Game integration capability.

Everything game-specific the orchestrator needs (identity, slot data
parsing, reactions to items, messages and death links) is supplied by one
GameIntegration object handed to the orchestrator.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from mwcommon.src.models import SlotData
from mwcommon.src.protocol import DeathLink, LogMessage, NetworkItem


class GameIntegration(ABC):
    """Per-game behavior consumed by the SessionOrchestrator."""

    @property
    @abstractmethod
    def game_name(self) -> str:
        """Game identity sent on login and used to scope location lookups."""

    @property
    @abstractmethod
    def mod_name(self) -> str: ...

    @property
    @abstractmethod
    def mod_version(self) -> str:
        """Dotted version; its major component must match the multiworld version."""

    def parse_slot_data(self, slot_name: str, fields: Dict[str, Any]) -> SlotData:
        return SlotData.from_fields(slot_name, fields)

    @abstractmethod
    def on_item_received(self, item: NetworkItem) -> None: ...

    def on_message(self, message: LogMessage) -> None:
        pass

    @abstractmethod
    def on_death_link_kill(self, death_link: DeathLink) -> None:
        """Kill the local player in response to an honored death link."""
