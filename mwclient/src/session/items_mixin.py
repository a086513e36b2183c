"""
Received items mixin.
"""

from collections import Counter
from typing import Dict, List, Optional

from mwcommon.src.models import ReceivedItem

from .base_mixin import BaseSessionMixin


class ReceivedItemsMixin(BaseSessionMixin):
    """Queries over every item this slot has received so far."""
    
    def get_all_received_items(self) -> List[ReceivedItem]:
        if not self.make_sure_connected():
            return []
        
        received_items = []
        for index, item in enumerate(self._session.received_items()):
            received_items.append(ReceivedItem(
                location_name=self.location_name_of(item),
                item_name=self.item_name_of(item),
                player_name=self.get_player_name(item.player),
                location_id=item.location,
                item_id=item.item,
                player_slot=item.player,
                unique_id=index,
            ))
        return received_items
    
    def get_all_received_item_names_and_counts(self) -> Dict[str, int]:
        if not self.make_sure_connected():
            return {}
        
        return dict(Counter(self.item_name_of(item) for item in self._session.received_items()))
    
    def has_received_item(self, item_name: str) -> bool:
        return self.get_received_item_sender(item_name) is not None
    
    def get_received_item_sender(self, item_name: str) -> Optional[str]:
        """Name of the player who sent the first copy of ``item_name``, None if never received."""
        if not self.make_sure_connected():
            return None
        
        for item in self._session.received_items():
            if self.item_name_of(item) != item_name:
                continue
            return self._session.get_player_name(item.player) or ""
        return None
    
    def get_received_item_count(self, item_name: str) -> int:
        if not self.make_sure_connected():
            return 0
        
        return sum(1 for item in self._session.received_items() if self.item_name_of(item) == item_name)
