"""
Outbound packets mixin.

Sync requests, chat, location checks and goal completion.
"""

from typing import Iterable

from mwcommon.src.constants import URGENT_THRESHOLD_SECONDS
from mwcommon.src.protocol import (
    ClientStatus,
    LocationChecksPacket,
    SayPacket,
    StatusUpdatePacket,
    SyncPacket,
)

from .base_mixin import BaseSessionMixin


class MessagingMixin(BaseSessionMixin):
    """Fire-and-forget packets; each is dropped when no session can be had."""
    
    def sync(self) -> bool:
        """Ask the server to resend received items. Reconnects immediately if needed."""
        if not self.make_sure_connected(URGENT_THRESHOLD_SECONDS):
            return False
        
        return self._send_packet(SyncPacket())
    
    def send_message(self, text: str) -> bool:
        if not self.make_sure_connected():
            return False
        
        return self._send_packet(SayPacket(text=text))
    
    def report_checked_locations(self, location_ids: Iterable[int]) -> bool:
        if not self.make_sure_connected():
            return False
        
        return self._send_packet(LocationChecksPacket(locations=list(location_ids)))
    
    def report_goal_completion(self) -> bool:
        if not self.make_sure_connected():
            return False
        
        return self._send_packet(StatusUpdatePacket(status=ClientStatus.GOAL))
