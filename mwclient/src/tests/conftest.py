"""
Shared fixtures for client tests.

Every orchestrator talks to a FakeServer through its session factory, so
no test opens a socket.
"""

import json

import pytest

from mwcommon.src.models import ConnectionInfo, DeathLinkPreference, NamedEntity

from mwclient.src.config import ConnectionConfig
from mwclient.src.data_package import OfflineNameCache
from mwclient.src.orchestrator import SessionOrchestrator
from mwclient.src.tests.fakes import FakeIntegration, FakeServer


@pytest.fixture
def sample_items():
    return [
        NamedEntity(name="Sword", id=1),
        NamedEntity(name="Shield", id=2),
        NamedEntity(name="Progressive Pickaxe", id=717001),
    ]


@pytest.fixture
def sample_locations():
    return [
        NamedEntity(name="Harvest Amaranth", id=42),
        NamedEntity(name="Complete Spring Crops Bundle", id=717002),
        NamedEntity(name="Copper Hoe Upgrade", id=717003),
    ]


@pytest.fixture
def write_tables(tmp_path):
    """Write item and location tables for a game key and return the folder."""
    def _write(game_key, items, locations):
        (tmp_path / f"{game_key}_item_table.json").write_text(json.dumps(items))
        (tmp_path / f"{game_key}_location_table.json").write_text(json.dumps(locations))
        return tmp_path
    return _write


@pytest.fixture
def offline_cache(sample_items, sample_locations):
    return OfflineNameCache.from_entities(sample_items, sample_locations, game_key="stardew_valley")


@pytest.fixture
def server():
    return FakeServer()


@pytest.fixture
def integration():
    return FakeIntegration(mod_version="1.4.0")


@pytest.fixture
def connection_config():
    return ConnectionConfig()


@pytest.fixture
def orchestrator(integration, offline_cache, server, connection_config):
    return SessionOrchestrator(integration, offline_cache, server.factory, connection_config)


@pytest.fixture
def connection_info():
    return ConnectionInfo(
        host_url="archipelago.gg",
        port=38281,
        slot_name="Farmer",
        password="hunter2",
        death_link=DeathLinkPreference.UNSET,
    )


@pytest.fixture
def connected(orchestrator, connection_info):
    """An orchestrator that completed a successful connect."""
    result = orchestrator.connect(connection_info)
    assert result.success, result.message
    return orchestrator
