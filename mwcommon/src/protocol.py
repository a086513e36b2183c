"""
Shared protocol definitions.
Using Pydantic models for structure and validation.

Only the packets and session-side records the client exchanges with a
protocol session are described here; framing is the session's business.
"""

from enum import Enum, IntEnum, IntFlag
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class PacketType(str, Enum):
    # Client to Server
    SYNC = "Sync"
    SAY = "Say"
    LOCATION_CHECKS = "LocationChecks"
    STATUS_UPDATE = "StatusUpdate"


class ItemsHandling(IntFlag):
    NONE = 0
    REMOTE = 0b001
    OWN_WORLD = 0b010
    STARTING_INVENTORY = 0b100
    ALL = REMOTE | OWN_WORLD | STARTING_INVENTORY


class ItemFlags(IntFlag):
    NONE = 0
    ADVANCEMENT = 0b001
    NEVER_EXCLUDE = 0b010
    TRAP = 0b100


class ClientStatus(IntEnum):
    UNKNOWN = 0
    CONNECTED = 5
    READY = 10
    PLAYING = 20
    GOAL = 30


# --- Outbound Packets ---


class Packet(BaseModel):
    cmd: PacketType


class SyncPacket(Packet):
    cmd: PacketType = PacketType.SYNC


class SayPacket(Packet):
    cmd: PacketType = PacketType.SAY
    text: str


class LocationChecksPacket(Packet):
    cmd: PacketType = PacketType.LOCATION_CHECKS
    locations: List[int]


class StatusUpdatePacket(Packet):
    cmd: PacketType = PacketType.STATUS_UPDATE
    status: ClientStatus


# --- Session Records ---


class NetworkItem(BaseModel):
    """An item as reported by the session: who sent it, from where."""
    model_config = ConfigDict(frozen=True)

    item: int
    location: int
    player: int
    flags: int = 0  # ItemFlags bits
    item_name: Optional[str] = None
    location_name: Optional[str] = None


class ScoutedItemInfo(NetworkItem):
    """Result of scouting one location."""


class PlayerInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    team: int
    slot: int
    name: str
    alias: Optional[str] = None
    game: Optional[str] = None


class Hint(BaseModel):
    model_config = ConfigDict(frozen=True)

    receiving_player: int
    finding_player: int
    location: int
    item: int
    found: bool = False
    entrance: str = ""
    item_flags: int = 0  # ItemFlags bits


class DeathLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: str
    cause: Optional[str] = None
    time: Optional[float] = None


class LogMessage(BaseModel):
    """A message-log line delivered by the session (chat, item sends, joins...)."""
    text: str
    kind: str = "chat"
    data: Dict[str, Any] = Field(default_factory=dict)


# --- Login Results ---


class LoginSuccess(BaseModel):
    successful: bool = True
    team: int
    slot: int
    slot_data: Dict[str, Any] = Field(default_factory=dict)


class LoginFailure(BaseModel):
    successful: bool = False
    errors: List[str] = Field(default_factory=list)
    error_codes: List[str] = Field(default_factory=list)


LoginResult = Union[LoginSuccess, LoginFailure]
