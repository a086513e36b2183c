"""
Connection lifecycle mixin.

Handles login, version compatibility, teardown and the rate-limited
reconnect guard every other operation funnels through.
"""

import time
from typing import List, Optional

from mwcommon.src.constants import BASE_TAGS, DEATH_LINK_TAG
from mwcommon.src.models import ConnectionInfo, DeathLinkPreference, SlotData
from mwcommon.src.protocol import ItemsHandling, LoginFailure, LogMessage, NetworkItem

from ..core.event_bus import EventType
from ..logging_config import get_logger
from ..metrics import metrics
from ..network.session import SessionEvent
from ..results import LOGIN_FAILED, VERSION_MISMATCH, ConnectResult
from .base_mixin import BaseSessionMixin

logger = get_logger(__name__)


def _root_message(error: BaseException) -> str:
    """Message of the innermost cause of ``error``."""
    while error.__cause__ is not None:
        error = error.__cause__
    return str(error) or error.__class__.__name__


class LifecycleMixin(BaseSessionMixin):
    """Connect, reconnect and disconnect."""
    
    def connect(self, connection_info: ConnectionInfo) -> ConnectResult[SlotData]:
        """
        Connect to a multiworld server, replacing any previous session.
        
        Args:
            connection_info: Server address, slot credentials and death link preference
            
        Returns:
            Successful result carrying the slot data, or a failure whose
            message can be shown to the player as is
        """
        self.disconnect_permanently()
        self.scouted_locations.clear()
        
        result = self.try_connect(connection_info)
        if not result.success:
            self.disconnect_permanently()
            return result
        
        if not self.is_multiworld_version_supported():
            generic_version = self._slot_data.multiworld_version.replace("0", "x")
            mod_name = self._integration.mod_name
            message = (
                f"This Multiworld has been created for {mod_name} version {generic_version},\n"
                f"but this is {mod_name} version {self._integration.mod_version}.\n"
                f"Please update to a compatible mod version."
            )
            logger.error(message)
            self.disconnect_permanently()
            return ConnectResult.failure(message, VERSION_MISMATCH)
        
        return result
    
    def try_connect(self, connection_info: ConnectionInfo) -> ConnectResult[SlotData]:
        """
        Make one login attempt. Never raises.
        
        On success the session is live and subscribed; on failure any
        session opened for the attempt is torn down again.
        """
        self.disconnect_and_cleanup()
        
        try:
            self._init_session(connection_info)
            info = self._connection_info
            tags = list(BASE_TAGS)
            if info.death_link == DeathLinkPreference.ENABLED:
                tags.append(DEATH_LINK_TAG)
            result = self._session.login(
                self._integration.game_name,
                info.slot_name,
                ItemsHandling.ALL,
                self._connection_config.minimum_protocol_version,
                tags,
                info.password,
            )
        except Exception as e:
            message = _root_message(e)
            result = LoginFailure(errors=[message])
            logger.error(f"An error occurred trying to connect to the multiworld server. Message: {message}")
        
        if not result.successful:
            metrics.track_connection_attempt("failure")
            return self._login_failed(connection_info, result)
        
        info = self._connection_info
        logger.info(f"Connected to multiworld server as {info.slot_name} (Team {result.team}).")
        
        try:
            self._slot_data = self._integration.parse_slot_data(info.slot_name, result.slot_data)
        except Exception as e:
            metrics.track_connection_attempt("failure")
            failure = LoginFailure(errors=[f"Invalid slot data: {_root_message(e)}"])
            return self._login_failed(connection_info, failure)
        
        if info.death_link == DeathLinkPreference.UNSET:
            info.death_link = DeathLinkPreference.from_bool(self._slot_data.death_link)
        
        try:
            self._initialize_after_connection()
        except Exception as e:
            metrics.track_connection_attempt("failure")
            failure = LoginFailure(errors=[f"Could not set up the session: {_root_message(e)}"])
            return self._login_failed(connection_info, failure)
        
        metrics.track_connection_attempt("success")
        return ConnectResult.success_with_data(self._slot_data, f"Connected as {info.slot_name}")
    
    def _init_session(self, connection_info: ConnectionInfo) -> None:
        self._connection_info = connection_info.model_copy()
        self._session = self._session_factory(connection_info.host_url, connection_info.port)
    
    def _login_failed(self, connection_info: ConnectionInfo, failure: LoginFailure) -> ConnectResult[SlotData]:
        message = (
            f"Failed to Connect to {connection_info.host_url}:{connection_info.port} "
            f"as {connection_info.slot_name}:"
        )
        for error in failure.errors:
            message += f"\n    {error}"
        
        detailed_message = message
        for code in failure.error_codes:
            detailed_message += f"\n    {code}"
        
        logger.error(detailed_message)
        self.disconnect_and_cleanup()
        return ConnectResult.failure(message, LOGIN_FAILED)
    
    def _initialize_after_connection(self) -> None:
        """Wire up the session handlers; connected only once all of them are in place."""
        session = self._session
        handlers = (
            (SessionEvent.ITEM_RECEIVED, self._on_item_received),
            (SessionEvent.MESSAGE_RECEIVED, self._on_message_received),
            (SessionEvent.SOCKET_ERROR, self._on_socket_error),
            (SessionEvent.SOCKET_CLOSED, self._on_socket_closed),
        )
        with self._lock:
            self._subscriptions = []
            for event, handler in handlers:
                self._subscriptions.append(session.subscribe(event, handler))
            self._initialize_death_link()
            self._is_connected = True
        
        metrics.set_connected(True)
        self.events.emit(EventType.CONNECTED, {"slot_name": self._connection_info.slot_name})
    
    def is_multiworld_version_supported(self) -> bool:
        """Major version of the mod must match the major version the multiworld was generated for."""
        if self._slot_data is None:
            return False
        
        major_version = self._integration.mod_version.split(".")[0]
        multiworld_version_parts = self._slot_data.multiworld_version.split(".")
        if len(multiworld_version_parts) < 3:
            return False
        
        multiworld_major, multiworld_minor, multiworld_fix = multiworld_version_parts[:3]
        return major_version == multiworld_major
    
    def make_sure_connected(self, threshold: Optional[float] = None) -> bool:
        """
        Return whether a live session is available, reconnecting if allowed.
        
        Args:
            threshold: Seconds that must have passed since the last failure
                before a reconnect is attempted. Defaults to the configured
                retry threshold; 0 always attempts.
        """
        if self._is_connected:
            return True
        
        if self._connection_info is None:
            return False
        
        if threshold is None:
            threshold = self._connection_config.retry_threshold_seconds
        
        time_since_last_failure = time.time() - self._last_connect_failure
        if time_since_last_failure < threshold:
            metrics.track_backoff_skip()
            return False
        
        logger.info(f"Attempting to reconnect to {self._connection_info.address}")
        self.try_connect(self._connection_info)
        if not self._is_connected:
            metrics.track_reconnect_attempt("failure")
            self.events.emit(EventType.RECONNECT_FAILED)
            self._last_connect_failure = time.time()
            return False
        
        metrics.track_reconnect_attempt("success")
        self.events.emit(EventType.RECONNECTED)
        return True
    
    def update(self) -> bool:
        """Periodic heartbeat; retries a lost connection at most once per heartbeat threshold."""
        return self.make_sure_connected(self._connection_config.heartbeat_threshold_seconds)
    
    def disconnect_and_cleanup(self) -> None:
        """Drop the live session but keep the connection info for later reconnects."""
        with self._lock:
            if not self._is_connected and self._session is None:
                return
            
            subscriptions: List = self._subscriptions
            self._subscriptions = []
            for handle in subscriptions:
                handle.revoke()
            
            session = self._session
            self._session = None
            self._death_link_service = None
            was_connected = self._is_connected
            self._is_connected = False
            
            if session is not None:
                try:
                    session.disconnect_async()
                except Exception as e:
                    logger.warning(f"Error closing session: {e}")
        
        metrics.set_connected(False)
        if was_connected:
            logger.info("Disconnected from multiworld server")
            self.events.emit(EventType.DISCONNECTED)
    
    def disconnect_permanently(self) -> None:
        """Disconnect and forget the connection info, disabling automatic reconnects."""
        self.disconnect_and_cleanup()
        self._connection_info = None
        self._slot_data = None
    
    # =========================================================================
    # SESSION CALLBACKS
    # =========================================================================
    
    def _on_item_received(self, item: NetworkItem) -> None:
        if not self.make_sure_connected():
            return
        
        self._integration.on_item_received(item)
    
    def _on_message_received(self, message: LogMessage) -> None:
        self._integration.on_message(message)
    
    def _on_socket_error(self, error: Exception, message: str) -> None:
        logger.error(message)
        self._connection_lost(message)
    
    def _on_socket_closed(self, reason: str) -> None:
        logger.error(f"Connection to multiworld server lost: {reason}")
        self._connection_lost(reason)
    
    def _connection_lost(self, reason: str) -> None:
        self.events.emit(EventType.CONNECTION_ERROR, {"reason": reason})
        with self._lock:
            self._last_connect_failure = time.time()
            self.disconnect_and_cleanup()
