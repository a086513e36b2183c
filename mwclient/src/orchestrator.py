"""
Session orchestrator.

Owns the connection to a multiworld server on behalf of one game
integration: connection state, reconnect backoff, the scouted-location
cache and two-tier name resolution. Calls on one instance are expected
to come from a single update loop; only the session callbacks may arrive
on transport threads.
"""

import threading
from typing import Dict, Optional

from mwcommon.src.models import ConnectionInfo, ScoutedLocation, SlotData

from .config import ConnectionConfig, get_config
from .core.event_bus import EventBus
from .data_package import OfflineNameCache
from .integration import GameIntegration
from .logging_config import get_logger
from .metrics import init_metrics
from .network.session import ProtocolSession, SessionFactory
from .session import (
    ConnectionState,
    DeathLinkMixin,
    LifecycleMixin,
    MessagingMixin,
    PlayersMixin,
    ReceivedItemsMixin,
    ResolutionMixin,
    ScoutingMixin,
)

logger = get_logger(__name__)


class SessionOrchestrator(
    LifecycleMixin,
    MessagingMixin,
    ResolutionMixin,
    PlayersMixin,
    ReceivedItemsMixin,
    ScoutingMixin,
    DeathLinkMixin,
):
    """Resilient multiworld client for one game integration."""
    
    def __init__(
        self,
        integration: GameIntegration,
        offline_cache: OfflineNameCache,
        session_factory: SessionFactory,
        connection_config: Optional[ConnectionConfig] = None,
        event_bus: Optional[EventBus] = None,
    ):
        self._integration = integration
        self._offline = offline_cache
        self._session_factory = session_factory
        self._connection_config = connection_config or get_config().connection
        self.events = event_bus or EventBus()
        
        self._session = None
        self._connection_info = None
        self._slot_data = None
        self._is_connected = False
        self._subscriptions = []
        self._death_link_service = None
        self._last_connect_failure = 0.0
        self._lock = threading.RLock()
        self.scouted_locations: Dict[str, ScoutedLocation] = {}
        
        init_metrics(integration.game_name, integration.mod_version)
    
    @property
    def is_connected(self) -> bool:
        return self._is_connected
    
    @property
    def state(self) -> ConnectionState:
        return ConnectionState.CONNECTED if self._is_connected else ConnectionState.DISCONNECTED
    
    @property
    def session(self) -> Optional[ProtocolSession]:
        return self._session
    
    @property
    def connection_info(self) -> Optional[ConnectionInfo]:
        return self._connection_info
    
    @property
    def slot_data(self) -> Optional[SlotData]:
        return self._slot_data
    
    @property
    def game_name(self) -> str:
        return self._integration.game_name
