"""
Client-side data models.

Named entities loaded from the offline data package, connection settings,
slot data and the records the client hands back to game integrations.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class DeathLinkPreference(str, Enum):
    """Whether this client honors death links. UNSET defers to the slot default."""
    UNSET = "unset"
    ENABLED = "enabled"
    DISABLED = "disabled"

    @classmethod
    def from_bool(cls, value: Optional[bool]) -> "DeathLinkPreference":
        if value is None:
            return cls.UNSET
        return cls.ENABLED if value else cls.DISABLED


class NamedEntity(BaseModel):
    """An item or location entry of the data package."""
    model_config = ConfigDict(frozen=True)

    name: str
    id: int


class ConnectionInfo(BaseModel):
    host_url: str
    port: int
    slot_name: str
    password: Optional[str] = None
    death_link: DeathLinkPreference = DeathLinkPreference.UNSET

    @property
    def address(self) -> str:
        return f"{self.host_url}:{self.port}"


class SlotData(BaseModel):
    """
    Per-slot configuration sent by the server on login.

    Games add their own fields; unknown keys are kept as extras.
    """
    model_config = ConfigDict(extra="allow")

    slot_name: str
    multiworld_version: str = ""
    death_link: bool = False

    @classmethod
    def from_fields(cls, slot_name: str, fields: Dict[str, Any]) -> "SlotData":
        data = dict(fields or {})
        data["slot_name"] = slot_name
        data["death_link"] = bool(data.get("death_link", False))
        data["multiworld_version"] = str(data.get("multiworld_version", ""))
        return cls(**data)


class ScoutedLocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    location_name: str
    item_name: Optional[str]
    player_slot_name: Optional[str]
    location_id: int
    item_id: int
    player_slot: int
    classification: str


class ReceivedItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    location_name: Optional[str]
    item_name: Optional[str]
    player_name: str
    location_id: int
    item_id: int
    player_slot: int
    unique_id: int
