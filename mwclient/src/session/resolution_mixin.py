"""
Name and id resolution mixin.

Every lookup prefers the live session's data package, which knows every
game in the room, and falls back to the offline tables of the local game
when the live table has no entry or no session is available.
"""

from typing import Dict, List, Optional

from mwcommon.src.constants import ERROR_ITEM_NAME, MISSING_LOCATION_NAME, UNKNOWN_ID
from mwcommon.src.protocol import NetworkItem

from ..logging_config import get_logger
from ..metrics import metrics
from .base_mixin import BaseSessionMixin

logger = get_logger(__name__)


def _is_blank(name: Optional[str]) -> bool:
    return name is None or not name.strip()


class ResolutionMixin(BaseSessionMixin):
    """Items and locations by name or id."""
    
    def get_item_name(self, item_id: int) -> Optional[str]:
        """
        Resolve an item id.
        
        Returns:
            The offline name (or None) while disconnected; when connected,
            ERROR_ITEM_NAME if neither tier knows the id.
        """
        if not self.make_sure_connected():
            metrics.track_name_lookup("item", "offline")
            return self._offline.get_item_name(item_id)
        
        item_name = self._session.get_item_name(item_id)
        if not _is_blank(item_name):
            metrics.track_name_lookup("item", "live")
            return item_name
        
        item_name = self._offline.get_item_name(item_id)
        if not _is_blank(item_name):
            metrics.track_name_lookup("item", "offline")
            return item_name
        
        metrics.track_name_lookup("item", "missing")
        logger.error(
            f"Failed at getting the item name for item {item_id}. "
            f"This is probably due to a corrupted datapackage. Unexpected behaviors may follow"
        )
        return ERROR_ITEM_NAME
    
    def get_item_id(self, item_name: str) -> int:
        return self._offline.get_item_id(item_name)
    
    def item_name_of(self, item: NetworkItem) -> Optional[str]:
        """Name carried by the item itself, resolved from its id otherwise."""
        return item.item_name or self.get_item_name(item.item)
    
    def get_location_name(self, location_id: int, required: bool = True) -> Optional[str]:
        """
        Resolve a location id.
        
        Args:
            location_id: Location to resolve
            required: Log an error when the id cannot be resolved. Speculative
                callers pass False to stay quiet.
        """
        if not self.make_sure_connected():
            metrics.track_name_lookup("location", "offline")
            return self._offline.get_location_name(location_id)
        
        location_name = self._session.get_location_name(location_id)
        if not _is_blank(location_name):
            metrics.track_name_lookup("location", "live")
            return location_name
        
        location_name = self._offline.get_location_name(location_id)
        if not _is_blank(location_name):
            metrics.track_name_lookup("location", "offline")
            return location_name
        
        metrics.track_name_lookup("location", "missing")
        if required:
            logger.error(
                f"Failed at getting the location name for location {location_id}. "
                f"This is probably due to a corrupted datapackage. Unexpected behaviors may follow"
            )
        return MISSING_LOCATION_NAME
    
    def location_name_of(self, item: NetworkItem) -> Optional[str]:
        return item.location_name or self.get_location_name(item.location, True)
    
    def get_location_id(self, location_name: str, game_name: Optional[str] = None) -> int:
        """Resolve a location name within ``game_name`` (this client's game by default)."""
        if not self.make_sure_connected():
            metrics.track_name_lookup("location_id", "offline")
            return self._offline.get_location_id(location_name)
        
        game_name = game_name or self._integration.game_name
        location_id = self._session.get_location_id(game_name, location_name)
        if location_id is not None and location_id > 0:
            metrics.track_name_lookup("location_id", "live")
            return location_id
        
        metrics.track_name_lookup("location_id", "offline")
        return self._offline.get_location_id(location_name)
    
    def location_exists(self, location_name: Optional[str]) -> bool:
        """Whether the location belongs to this slot's world."""
        if location_name is None or not self.make_sure_connected():
            return False
        
        location_id = self.get_location_id(location_name)
        if location_id == UNKNOWN_ID:
            return False
        return location_id in self._session.all_locations()
    
    def get_all_checked_locations(self) -> Dict[str, int]:
        """Checked locations keyed by name."""
        if not self.make_sure_connected():
            return {}
        
        return {
            self.get_location_name(location_id): location_id
            for location_id in self._session.checked_locations()
        }
    
    def get_all_missing_locations(self) -> List[int]:
        if not self.make_sure_connected():
            return []
        
        return list(self._session.missing_locations())
