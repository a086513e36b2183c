"""
Prometheus metrics for the multiworld client.

Tracks connection health, reconnection backoff and how often name
resolution has to fall back to the offline data package.
"""

from typing import Optional

from prometheus_client import (
    Counter,
    Gauge,
    Info,
    CollectorRegistry,
    generate_latest,
)

from .logging_config import get_logger

logger = get_logger(__name__)

# Create a custom registry for our metrics
REGISTRY = CollectorRegistry()

# =============================================================================
# APPLICATION INFO METRICS
# =============================================================================

client_info = Info(
    "mw_client_info", "Multiworld client information", registry=REGISTRY
)

# =============================================================================
# CONNECTION METRICS
# =============================================================================

connection_attempts_total = Counter(
    "mw_connection_attempts_total",
    "Total number of login attempts",
    ["status"],
    registry=REGISTRY,
)

reconnect_attempts_total = Counter(
    "mw_reconnect_attempts_total",
    "Total number of automatic reconnect attempts",
    ["status"],
    registry=REGISTRY,
)

reconnect_backoff_skips_total = Counter(
    "mw_reconnect_backoff_skips_total",
    "Reconnect attempts skipped because the last failure is too recent",
    registry=REGISTRY,
)

connection_active = Gauge(
    "mw_connection_active",
    "Whether the client currently holds a live session",
    registry=REGISTRY,
)

# =============================================================================
# RESOLUTION METRICS
# =============================================================================

name_lookups_total = Counter(
    "mw_name_lookups_total",
    "Name/id lookups by kind and the tier that answered",
    ["kind", "tier"],
    registry=REGISTRY,
)

scout_cache_total = Counter(
    "mw_scout_cache_total",
    "Scout requests by cache result",
    ["result"],
    registry=REGISTRY,
)

# =============================================================================
# DEATH LINK METRICS
# =============================================================================

death_links_total = Counter(
    "mw_death_links_total",
    "Death links by direction",
    ["direction"],
    registry=REGISTRY,
)


def init_metrics(game_name: str, mod_version: str):
    """Initialize metrics with client information."""
    client_info.info({"game": game_name, "mod_version": mod_version})
    logger.debug("Prometheus metrics initialized")


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


# =============================================================================
# HELPER FUNCTIONS FOR MANUAL METRICS
# =============================================================================


class MetricsHelper:
    """Helper class for manual metrics tracking."""

    @staticmethod
    def track_connection_attempt(status: str):
        connection_attempts_total.labels(status=status).inc()

    @staticmethod
    def track_reconnect_attempt(status: str):
        reconnect_attempts_total.labels(status=status).inc()

    @staticmethod
    def track_backoff_skip():
        reconnect_backoff_skips_total.inc()

    @staticmethod
    def set_connected(connected: bool):
        connection_active.set(1 if connected else 0)

    @staticmethod
    def track_name_lookup(kind: str, tier: str):
        """Track which tier (live, offline, missing) answered a lookup."""
        name_lookups_total.labels(kind=kind, tier=tier).inc()

    @staticmethod
    def track_scout(hit: Optional[bool]):
        if hit is True:
            scout_cache_total.labels(result="hit").inc()
        elif hit is False:
            scout_cache_total.labels(result="miss").inc()
        else:
            scout_cache_total.labels(result="failed").inc()

    @staticmethod
    def track_death_link(direction: str):
        death_links_total.labels(direction=direction).inc()


# Global metrics helper instance
metrics = MetricsHelper()
