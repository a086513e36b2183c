"""
Scouting mixin.

Scouted locations are cached per location name the first time they are
scouted and never refreshed; the same name always yields the same object.
"""

from typing import List, Optional

from mwcommon.src.constants import UNKNOWN_ID
from mwcommon.src.models import ScoutedLocation
from mwcommon.src.protocol import Hint, ItemFlags, ScoutedItemInfo

from ..logging_config import get_logger
from ..metrics import metrics
from ..network.bounded import wait_bounded
from .base_mixin import BaseSessionMixin

logger = get_logger(__name__)

PROGRESSION = "Progression"
USEFUL = "Useful"
TRAP = "Trap"
FILLER = "Filler"


def classify_item(flags: int) -> str:
    """Classification of an item from its flags; first match wins."""
    flags = ItemFlags(flags)
    if flags & ItemFlags.ADVANCEMENT:
        return PROGRESSION
    if flags & ItemFlags.NEVER_EXCLUDE:
        return USEFUL
    if flags & ItemFlags.TRAP:
        return TRAP
    return FILLER


class ScoutingMixin(BaseSessionMixin):
    """Location scouting and hints."""
    
    def scout_single_location(self, location_name: str, create_as_hint: bool = False) -> Optional[ScoutedLocation]:
        """
        Find out which item sits at a location without checking it.
        
        Args:
            location_name: Location of this client's game
            create_as_hint: Ask the server to record the scout as a hint
            
        Returns:
            The scouted location, or None if it could not be scouted
        """
        cached = self.scouted_locations.get(location_name)
        if cached is not None:
            metrics.track_scout(True)
            return cached
        
        if not self.make_sure_connected():
            logger.warning(f"Could not scout location \"{location_name}\": not connected.")
            metrics.track_scout(None)
            return None
        
        try:
            location_id = self.get_location_id(location_name)
            if location_id == UNKNOWN_ID:
                logger.warning(f"Could not find the id for location \"{location_name}\".")
                metrics.track_scout(None)
                return None
            
            scouted_item_info = self._scout_location(location_id, create_as_hint)
            if scouted_item_info is None:
                logger.warning(f"Could not scout location \"{location_name}\".")
                metrics.track_scout(None)
                return None
            
            scouted_location = ScoutedLocation(
                location_name=location_name,
                item_name=self.item_name_of(scouted_item_info),
                player_slot_name=self._session.get_player_name(scouted_item_info.player),
                location_id=location_id,
                item_id=scouted_item_info.item,
                player_slot=scouted_item_info.player,
                classification=classify_item(scouted_item_info.flags),
            )
        except Exception as e:
            logger.error(f"Could not scout location \"{location_name}\". Message: {e}")
            metrics.track_scout(None)
            return None
        
        self.scouted_locations[location_name] = scouted_location
        metrics.track_scout(False)
        return scouted_location
    
    def _scout_location(self, location_id: int, create_as_hint: bool) -> Optional[ScoutedItemInfo]:
        future = self._session.scout_locations([location_id], create_as_hint)
        outcome = wait_bounded(future, self._connection_config.scout_timeout_seconds)
        if outcome.error is not None:
            raise outcome.error
        if not outcome.completed:
            logger.warning(f"Scout request for location {location_id} {outcome.status.name.lower()}")
            return None
        
        scouted_items = outcome.value
        if not scouted_items:
            return None
        return next(iter(scouted_items.values()))
    
    def get_hints(self) -> List[Hint]:
        """All hints of this slot, or an empty list if they do not arrive in time."""
        if not self.make_sure_connected():
            return []
        
        try:
            future = self._session.get_hints()
        except Exception as e:
            logger.error(f"Failed to request hints: {e}")
            return []
        
        outcome = wait_bounded(future, self._connection_config.hint_timeout_seconds)
        if not outcome.completed:
            logger.debug(f"Hint request {outcome.status.name.lower()}")
            return []
        return list(outcome.value or [])
    
    def get_my_active_hints(self) -> List[Hint]:
        """Hints for locations this slot has yet to find."""
        if not self.make_sure_connected():
            return []
        
        slot_name = self._slot_data.slot_name if self._slot_data else None
        return [
            hint for hint in self.get_hints()
            if not hint.found and self.get_player_name(hint.finding_player) == slot_name
        ]
