"""
In-memory doubles for the protocol session boundary.
"""

from concurrent.futures import Future
from typing import Any, Callable, Dict, List, Optional, Sequence

from mwcommon.src.protocol import (
    DeathLink,
    Hint,
    LoginFailure,
    LoginSuccess,
    NetworkItem,
    Packet,
    PlayerInfo,
    ScoutedItemInfo,
)
from mwcommon.src.models import SlotData

from mwclient.src.integration import GameIntegration
from mwclient.src.network.session import SessionEvent


def settled(value: Any) -> Future:
    future = Future()
    future.set_result(value)
    return future


def failed(error: BaseException) -> Future:
    future = Future()
    future.set_exception(error)
    return future


class FakeHandle:
    def __init__(self, registry: Dict[Any, List[Callable]], key: Any, handler: Callable):
        self._registry = registry
        self._key = key
        self._handler = handler
        self.revoked = False

    def revoke(self) -> None:
        if not self.revoked:
            self._registry[self._key].remove(self._handler)
            self.revoked = True


class FakeDeathLinkService:
    def __init__(self):
        self.enabled: Optional[bool] = None
        self.sent: List[DeathLink] = []
        self._handlers: Dict[str, List[Callable]] = {"received": []}

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def send(self, death_link: DeathLink) -> None:
        self.sent.append(death_link)

    def on_received(self, handler: Callable[[DeathLink], None]) -> FakeHandle:
        self._handlers["received"].append(handler)
        return FakeHandle(self._handlers, "received", handler)

    def deliver(self, death_link: DeathLink) -> None:
        for handler in list(self._handlers["received"]):
            handler(death_link)

    @property
    def handler_count(self) -> int:
        return len(self._handlers["received"])


class FakeProtocolSession:
    """
    Scriptable session. Tests set the login outcome and the live data
    package, then inspect what the client sent.
    """

    def __init__(self, host: str, port: int, server: "FakeServer"):
        self.host = host
        self.port = port
        self.server = server
        self.team = server.team
        self.slot = server.slot
        self.sent_packets: List[Packet] = []
        self.login_calls: List[Dict[str, Any]] = []
        self.scout_calls: List[Sequence[int]] = []
        self.disconnect_calls = 0
        self.handlers: Dict[SessionEvent, List[Callable]] = {event: [] for event in SessionEvent}
        self.death_link_service = FakeDeathLinkService()

    def login(self, game, slot_name, items_handling, minimum_version, tags, password):
        self.login_calls.append({
            "game": game,
            "slot_name": slot_name,
            "items_handling": items_handling,
            "minimum_version": minimum_version,
            "tags": list(tags),
            "password": password,
        })
        outcome = self.server.next_login()
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    def send_packet(self, packet: Packet) -> None:
        if self.server.send_error is not None:
            raise self.server.send_error
        self.sent_packets.append(packet)

    def subscribe(self, event: SessionEvent, handler: Callable) -> FakeHandle:
        if event in self.server.subscribe_errors:
            raise self.server.subscribe_errors[event]
        self.handlers[event].append(handler)
        return FakeHandle(self.handlers, event, handler)

    def disconnect_async(self) -> None:
        self.disconnect_calls += 1

    def emit(self, event: SessionEvent, *args) -> None:
        for handler in list(self.handlers[event]):
            handler(*args)

    def subscriber_count(self) -> int:
        return sum(len(handlers) for handlers in self.handlers.values())

    def checked_locations(self) -> List[int]:
        return list(self.server.checked_locations)

    def missing_locations(self) -> List[int]:
        return list(self.server.missing_locations)

    def all_locations(self) -> List[int]:
        return list(self.server.checked_locations) + list(self.server.missing_locations)

    def received_items(self) -> List[NetworkItem]:
        return list(self.server.received_items)

    def get_location_name(self, location_id: int) -> Optional[str]:
        return self.server.location_names.get(location_id)

    def get_location_id(self, game: str, location_name: str) -> int:
        self.server.location_id_queries.append((game, location_name))
        return self.server.location_ids.get((game, location_name), -1)

    def get_item_name(self, item_id: int) -> Optional[str]:
        return self.server.item_names.get(item_id)

    def all_players(self) -> List[PlayerInfo]:
        return list(self.server.players)

    def get_player_name(self, slot: int) -> Optional[str]:
        return next((p.name for p in self.server.players if p.slot == slot), None)

    def scout_locations(self, location_ids, create_as_hint) -> Future:
        self.scout_calls.append(list(location_ids))
        if self.server.scout_future is not None:
            return self.server.scout_future
        return settled({
            location_id: self.server.scouts[location_id]
            for location_id in location_ids
            if location_id in self.server.scouts
        })

    def get_hints(self) -> Future:
        if self.server.hints_future is not None:
            return self.server.hints_future
        return settled(list(self.server.hints))

    def create_death_link_service(self) -> FakeDeathLinkService:
        if self.server.death_link_error is not None:
            raise self.server.death_link_error
        return self.death_link_service


class FakeServer:
    """Room state shared by every session a factory creates."""

    def __init__(self):
        self.team = 0
        self.slot = 1
        self.slot_data: Dict[str, Any] = {"multiworld_version": "1.2.3", "death_link": False}
        self.login_outcomes: List[Any] = []
        self.item_names: Dict[int, str] = {}
        self.location_names: Dict[int, str] = {}
        self.location_ids: Dict[tuple, int] = {}
        self.location_id_queries: List[tuple] = []
        self.checked_locations: List[int] = []
        self.missing_locations: List[int] = []
        self.received_items: List[NetworkItem] = []
        self.players: List[PlayerInfo] = []
        self.scouts: Dict[int, ScoutedItemInfo] = {}
        self.scout_future: Optional[Future] = None
        self.hints: List[Hint] = []
        self.hints_future: Optional[Future] = None
        self.send_error: Optional[Exception] = None
        self.subscribe_errors: Dict[SessionEvent, Exception] = {}
        self.death_link_error: Optional[Exception] = None
        self.sessions: List[FakeProtocolSession] = []

    def next_login(self):
        if self.login_outcomes:
            return self.login_outcomes.pop(0)
        return LoginSuccess(team=self.team, slot=self.slot, slot_data=dict(self.slot_data))

    def refuse(self, *errors: str, codes: Sequence[str] = ()) -> None:
        self.login_outcomes.append(LoginFailure(errors=list(errors), error_codes=list(codes)))

    def factory(self, host: str, port: int) -> FakeProtocolSession:
        session = FakeProtocolSession(host, port, self)
        self.sessions.append(session)
        return session

    @property
    def last_session(self) -> FakeProtocolSession:
        return self.sessions[-1]


class FakeIntegration(GameIntegration):
    def __init__(self, mod_version: str = "1.4.0"):
        self._mod_version = mod_version
        self.items: List[NetworkItem] = []
        self.messages: List[Any] = []
        self.kills: List[DeathLink] = []

    @property
    def game_name(self) -> str:
        return "Stardew Valley"

    @property
    def mod_name(self) -> str:
        return "StardewArchipelago"

    @property
    def mod_version(self) -> str:
        return self._mod_version

    def parse_slot_data(self, slot_name: str, fields: Dict[str, Any]) -> SlotData:
        return SlotData.from_fields(slot_name, fields)

    def on_item_received(self, item: NetworkItem) -> None:
        self.items.append(item)

    def on_message(self, message) -> None:
        self.messages.append(message)

    def on_death_link_kill(self, death_link: DeathLink) -> None:
        self.kills.append(death_link)
