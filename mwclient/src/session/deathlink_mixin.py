"""
Death link mixin.

Death links are honored only when this client explicitly opted in; an
UNSET preference is resolved from the slot default at login.
"""

from mwcommon.src.constants import DEFAULT_DEATH_CAUSE
from mwcommon.src.models import DeathLinkPreference
from mwcommon.src.protocol import DeathLink

from ..core.event_bus import EventType
from ..logging_config import get_logger
from ..metrics import metrics
from .base_mixin import BaseSessionMixin

logger = get_logger(__name__)


class DeathLinkMixin(BaseSessionMixin):
    """Toggle, send and receive death links."""
    
    @property
    def death_link_enabled(self) -> bool:
        info = self._connection_info
        return info is not None and info.death_link == DeathLinkPreference.ENABLED
    
    def _initialize_death_link(self) -> None:
        self._death_link_service = self._session.create_death_link_service()
        self._subscriptions.append(self._death_link_service.on_received(self._receive_death_link))
        if self.death_link_enabled:
            self._death_link_service.enable()
        else:
            self._death_link_service.disable()
    
    def toggle_death_link(self) -> bool:
        """
        Flip the death link preference.
        
        Returns:
            True if death link is now enabled
        """
        info = self._connection_info
        if info is None:
            logger.warning("Cannot toggle death link: not connected")
            return False
        
        service = self._death_link_service
        if self.death_link_enabled:
            if service is not None:
                service.disable()
            info.death_link = DeathLinkPreference.DISABLED
        else:
            if service is not None:
                service.enable()
            info.death_link = DeathLinkPreference.ENABLED
        
        logger.info(f"Death link {'enabled' if self.death_link_enabled else 'disabled'}")
        return self.death_link_enabled
    
    def send_death_link(self, reason: str = DEFAULT_DEATH_CAUSE) -> None:
        if not self.make_sure_connected():
            return
        
        logger.info(f"Sending a death link with reason [{reason}]")
        self._death_link_service.send(DeathLink(source=self.get_player_name(), cause=reason))
        metrics.track_death_link("sent")
        self.events.emit(EventType.DEATH_LINK_SENT, {"cause": reason})
    
    def _receive_death_link(self, death_link: DeathLink) -> None:
        if not self.death_link_enabled:
            return
        
        logger.info(f"You have been killed by {death_link.source} ({death_link.cause})")
        metrics.track_death_link("received")
        self.events.emit(
            EventType.DEATH_LINK_RECEIVED,
            {"source": death_link.source, "cause": death_link.cause},
        )
        self._integration.on_death_link_kill(death_link)
