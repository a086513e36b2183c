"""
Protocol session boundary.

The wire protocol (handshake, framing, encryption) lives in an external
session object. This module declares the capabilities the orchestrator
consumes from it, so any transport implementing them can be plugged in
through a SessionFactory.
"""

from concurrent.futures import Future
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence

from mwcommon.src.protocol import (
    DeathLink,
    Hint,
    ItemsHandling,
    LoginResult,
    NetworkItem,
    Packet,
    PlayerInfo,
    ScoutedItemInfo,
)


class SessionEvent(str, Enum):
    """Events a session delivers to subscribers."""
    ITEM_RECEIVED = "item_received"
    MESSAGE_RECEIVED = "message_received"
    SOCKET_ERROR = "socket_error"
    SOCKET_CLOSED = "socket_closed"


class SubscriptionHandle(Protocol):
    """Returned by every subscription; revoking it detaches the handler."""

    def revoke(self) -> None: ...


class DeathLinkService(Protocol):
    def enable(self) -> None: ...

    def disable(self) -> None: ...

    def send(self, death_link: DeathLink) -> None: ...

    def on_received(self, handler: Callable[[DeathLink], None]) -> SubscriptionHandle: ...


class ProtocolSession(Protocol):
    """
    A live connection to a multiworld server.

    Handler signatures per event:
    - ITEM_RECEIVED: handler(item: NetworkItem)
    - MESSAGE_RECEIVED: handler(message: LogMessage)
    - SOCKET_ERROR: handler(error: Exception, message: str)
    - SOCKET_CLOSED: handler(reason: str)
    """

    @property
    def team(self) -> int: ...

    @property
    def slot(self) -> int: ...

    def login(
        self,
        game: str,
        slot_name: str,
        items_handling: ItemsHandling,
        minimum_version: str,
        tags: Sequence[str],
        password: Optional[str],
    ) -> LoginResult: ...

    def send_packet(self, packet: Packet) -> None: ...

    def subscribe(self, event: SessionEvent, handler: Callable[..., Any]) -> SubscriptionHandle: ...

    def disconnect_async(self) -> None: ...

    def checked_locations(self) -> List[int]: ...

    def missing_locations(self) -> List[int]: ...

    def all_locations(self) -> List[int]: ...

    def received_items(self) -> List[NetworkItem]: ...

    def get_location_name(self, location_id: int) -> Optional[str]: ...

    def get_location_id(self, game: str, location_name: str) -> int: ...

    def get_item_name(self, item_id: int) -> Optional[str]: ...

    def all_players(self) -> List[PlayerInfo]: ...

    def get_player_name(self, slot: int) -> Optional[str]: ...

    def scout_locations(
        self, location_ids: Sequence[int], create_as_hint: bool
    ) -> "Future[Dict[int, ScoutedItemInfo]]": ...

    def get_hints(self) -> "Future[List[Hint]]": ...

    def create_death_link_service(self) -> DeathLinkService: ...


SessionFactory = Callable[[str, int], ProtocolSession]
