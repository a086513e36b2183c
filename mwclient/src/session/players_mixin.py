"""
Player queries mixin.

Looks up slots, aliases and games of the players sharing the room.
"""

from typing import List, Optional, Union

from mwcommon.src.constants import DEFAULT_PLAYER_NAME
from mwcommon.src.protocol import PlayerInfo

from .base_mixin import BaseSessionMixin


class PlayersMixin(BaseSessionMixin):
    """Team, slot and player lookups."""
    
    def get_team(self) -> int:
        if not self.make_sure_connected():
            return -1
        
        return self._session.team
    
    def get_player_name(self, player_slot: Optional[int] = None) -> str:
        """Display name of ``player_slot``, this client's own slot by default."""
        if not self.make_sure_connected():
            return DEFAULT_PLAYER_NAME
        
        if player_slot is None:
            player_slot = self._session.slot
        return self._session.get_player_name(player_slot) or DEFAULT_PLAYER_NAME
    
    def get_all_players(self) -> List[PlayerInfo]:
        if not self.make_sure_connected():
            return []
        
        return list(self._session.all_players())
    
    def get_current_player(self) -> Optional[PlayerInfo]:
        if not self.make_sure_connected():
            return None
        
        own_slot = self._session.slot
        return next((player for player in self.get_all_players() if player.slot == own_slot), None)
    
    def _find_player(self, player: Union[str, int]) -> Optional[PlayerInfo]:
        players = self.get_all_players()
        if isinstance(player, int):
            return next((p for p in players if p.slot == player), None)
        
        by_name = next((p for p in players if p.name == player), None)
        if by_name is not None:
            return by_name
        return next((p for p in players if p.alias == player), None)
    
    def get_player_alias(self, player_name: str) -> Optional[str]:
        if not self.make_sure_connected():
            return None
        
        player = next((p for p in self.get_all_players() if p.name == player_name), None)
        return player.alias if player else None
    
    def player_exists(self, player_name: str) -> bool:
        """True if a player has this name or alias."""
        if not self.make_sure_connected():
            return False
        
        return self._find_player(player_name) is not None
    
    def get_player_game(self, player: Union[str, int]) -> Optional[str]:
        """Game played by a player given by slot number, name or alias."""
        if not self.make_sure_connected():
            return None
        
        found = self._find_player(player)
        return found.game if found else None
    
    def is_current_game_player(self, player_name: str) -> bool:
        game = self.get_player_game(player_name)
        return game is not None and game == self._integration.game_name
