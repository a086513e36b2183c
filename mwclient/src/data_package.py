"""
Offline data package - permanent name/id tables for the local game.

Loaded once at startup from static JSON tables so names can be resolved
while the server's data package is unavailable. Read-only afterwards.
"""

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from pydantic import TypeAdapter, ValidationError

from mwcommon.src.constants import ITEM_TABLE_SUFFIX, LOCATION_TABLE_SUFFIX, UNKNOWN_ID
from mwcommon.src.models import NamedEntity

from .config import DataPackageConfig
from .exceptions import DataPackageLoadError, DuplicateEntityError
from .logging_config import get_logger

logger = get_logger(__name__)

_ENTITY_LIST = TypeAdapter(List[NamedEntity])


def load_entities(path: Path) -> List[NamedEntity]:
    """Load a JSON array of {name, id} records."""
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise DataPackageLoadError(path, str(e)) from e
    
    try:
        return _ENTITY_LIST.validate_json(raw)
    except ValidationError as e:
        raise DataPackageLoadError(path, f"{e.error_count()} invalid record(s)") from e


def table_path(game_key: str, suffix: str, *search_paths: str) -> Path:
    """Join the search path components with the ``<game_key><suffix>`` file name."""
    return Path(*search_paths, f"{game_key}{suffix}")


def _index(
    kind: str, entities: Iterable[NamedEntity], source: Optional[Path] = None
) -> Tuple[Dict[str, int], Dict[int, str]]:
    by_name: Dict[str, int] = {}
    by_id: Dict[int, str] = {}
    for entity in entities:
        if entity.name in by_name:
            raise DuplicateEntityError(kind, entity.name, source)
        if entity.id in by_id:
            raise DuplicateEntityError(kind, entity.id, source)
        by_name[entity.name] = entity.id
        by_id[entity.id] = entity.name
    return by_name, by_id


class OfflineNameCache:
    """Bidirectional item and location name/id lookup for one game."""

    def __init__(self, game_key: str, *search_paths: str):
        item_path = table_path(game_key, ITEM_TABLE_SUFFIX, *search_paths)
        location_path = table_path(game_key, LOCATION_TABLE_SUFFIX, *search_paths)

        self.game_key = game_key
        self._item_id_by_name, self._item_name_by_id = _index(
            "item", load_entities(item_path), item_path
        )
        self._location_id_by_name, self._location_name_by_id = _index(
            "location", load_entities(location_path), location_path
        )

        logger.info(
            f"Loaded offline data package for {game_key}: "
            f"{len(self._item_name_by_id)} items, {len(self._location_name_by_id)} locations"
        )

    @classmethod
    def from_config(cls, config: DataPackageConfig) -> "OfflineNameCache":
        """Load the tables named by the data_package section of the client config."""
        return cls(config.game_key, *config.search_paths)

    @classmethod
    def from_entities(
        cls,
        items: Iterable[NamedEntity],
        locations: Iterable[NamedEntity],
        game_key: str = "",
    ) -> "OfflineNameCache":
        """Build a cache from already loaded entities."""
        cache = cls.__new__(cls)
        cache.game_key = game_key
        cache._item_id_by_name, cache._item_name_by_id = _index("item", items)
        cache._location_id_by_name, cache._location_name_by_id = _index("location", locations)
        return cache

    @property
    def item_count(self) -> int:
        return len(self._item_name_by_id)

    @property
    def location_count(self) -> int:
        return len(self._location_name_by_id)

    def get_item_name(self, item_id: int) -> Optional[str]:
        return self._item_name_by_id.get(item_id)

    def get_item_id(self, item_name: str) -> int:
        return self._item_id_by_name.get(item_name, UNKNOWN_ID)

    def get_location_name(self, location_id: int) -> Optional[str]:
        return self._location_name_by_id.get(location_id)

    def get_location_id(self, location_name: str) -> int:
        return self._location_id_by_name.get(location_name, UNKNOWN_ID)
