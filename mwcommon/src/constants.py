"""
Client constants and sentinel values.
This file centralizes all magic numbers and fallback strings used by the client.
"""

# Reconnection Constants
RECONNECT_THRESHOLD_SECONDS = 15  # Backoff after a failed connection for ordinary operations
HEARTBEAT_THRESHOLD_SECONDS = 60  # Backoff used by the periodic heartbeat
URGENT_THRESHOLD_SECONDS = 0  # Ungated reconnect attempt
HINT_TIMEOUT_SECONDS = 2.0  # Maximum wait for the hint listing query

# Login Constants
MINIMUM_PROTOCOL_VERSION = "0.4.0"
BASE_TAGS = ("AP",)
DEATH_LINK_TAG = "DeathLink"

# Sentinel Values
UNKNOWN_ID = -1  # Returned when a name cannot be resolved to an id
ERROR_ITEM_NAME = "Error Item"  # Item name that could not be resolved anywhere
MISSING_LOCATION_NAME = "Thin Air"  # Location name that could not be resolved anywhere
DEFAULT_PLAYER_NAME = "Archipelago Player"
DEFAULT_DEATH_CAUSE = "Unknown cause"

# Data Package Files
ITEM_TABLE_SUFFIX = "_item_table.json"
LOCATION_TABLE_SUFFIX = "_location_table.json"
