"""
Base mixin providing the shared state and packet helper used by every
orchestrator mixin.
"""

import threading
from enum import Enum, auto
from typing import Dict, List, Optional

from mwcommon.src.models import ConnectionInfo, ScoutedLocation, SlotData
from mwcommon.src.protocol import Packet

from ..config import ConnectionConfig
from ..core.event_bus import EventBus
from ..data_package import OfflineNameCache
from ..integration import GameIntegration
from ..logging_config import get_logger
from ..network.session import (
    DeathLinkService,
    ProtocolSession,
    SessionFactory,
    SubscriptionHandle,
)

logger = get_logger(__name__)


class ConnectionState(Enum):
    """Externally observable connection states."""
    DISCONNECTED = auto()
    CONNECTED = auto()


class BaseSessionMixin:
    """
    Shared orchestrator state.
    
    Expects the following attributes on the composed class:
    - _integration: Per-game behavior
    - _offline: Offline data package for the local game
    - _session_factory: Creates a protocol session for host and port
    - _connection_config: Thresholds and timeouts
    - events: Lifecycle event bus
    """
    
    _integration: GameIntegration
    _offline: OfflineNameCache
    _session_factory: SessionFactory
    _connection_config: ConnectionConfig
    events: EventBus
    
    _session: Optional[ProtocolSession]
    _connection_info: Optional[ConnectionInfo]
    _slot_data: Optional[SlotData]
    _is_connected: bool
    _subscriptions: List[SubscriptionHandle]
    _death_link_service: Optional[DeathLinkService]
    _last_connect_failure: float
    _lock: threading.RLock
    scouted_locations: Dict[str, ScoutedLocation]
    
    def _send_packet(self, packet: Packet) -> bool:
        """Hand a packet to the live session. Failures are logged, not raised."""
        session = self._session
        if session is None:
            logger.warning(f"Cannot send {packet.cmd.value}: no session")
            return False
        
        try:
            session.send_packet(packet)
            return True
        except Exception as e:
            logger.error(f"Failed to send {packet.cmd.value} packet: {e}")
            return False
