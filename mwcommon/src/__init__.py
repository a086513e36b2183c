"""Common protocol definitions and models shared by the client and its integrations."""

from .protocol import (
    # Enums
    PacketType,
    ItemsHandling,
    ItemFlags,
    ClientStatus,
    # Packets
    Packet,
    SyncPacket,
    SayPacket,
    LocationChecksPacket,
    StatusUpdatePacket,
    # Session records
    NetworkItem,
    ScoutedItemInfo,
    PlayerInfo,
    Hint,
    DeathLink,
    LogMessage,
    # Login results
    LoginSuccess,
    LoginFailure,
    LoginResult,
)

from .models import (
    DeathLinkPreference,
    NamedEntity,
    ConnectionInfo,
    SlotData,
    ScoutedLocation,
    ReceivedItem,
)

from .constants import (
    # Reconnection
    RECONNECT_THRESHOLD_SECONDS,
    HEARTBEAT_THRESHOLD_SECONDS,
    URGENT_THRESHOLD_SECONDS,
    HINT_TIMEOUT_SECONDS,
    # Login
    MINIMUM_PROTOCOL_VERSION,
    BASE_TAGS,
    DEATH_LINK_TAG,
    # Sentinels
    UNKNOWN_ID,
    ERROR_ITEM_NAME,
    MISSING_LOCATION_NAME,
    DEFAULT_PLAYER_NAME,
    DEFAULT_DEATH_CAUSE,
    # Data package files
    ITEM_TABLE_SUFFIX,
    LOCATION_TABLE_SUFFIX,
)

__version__ = "1.0"
