"""
Unit tests for client configuration loading.
"""

import yaml

from mwcommon.src.models import DeathLinkPreference

from mwclient.src.config import ClientConfig


class TestClientConfig:

    def test_defaults_when_file_missing(self, tmp_path, monkeypatch):
        for var in ("MW_SERVER_HOST", "MW_SERVER_PORT", "MW_SLOT_NAME", "MW_PASSWORD", "MW_DEATH_LINK", "MW_LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)

        config = ClientConfig.from_yaml(tmp_path / "missing.yml")

        assert config.connection.retry_threshold_seconds == 15
        assert config.connection.heartbeat_threshold_seconds == 60
        assert config.connection.hint_timeout_seconds == 2.0
        assert config.connection.minimum_protocol_version == "0.4.0"
        assert not (tmp_path / "missing.yml").exists()

    def test_yaml_values(self, tmp_path, monkeypatch):
        monkeypatch.delenv("MW_SERVER_PORT", raising=False)
        path = tmp_path / "client_config.yml"
        path.write_text(yaml.safe_dump({
            "server": {"host": "localhost", "port": 38282, "slot_name": "Farmer", "death_link": True},
            "data_package": {"game_key": "stardew_valley", "search_paths": ["mods", "IdTables"]},
        }))

        config = ClientConfig.from_yaml(path)

        assert config.server.port == 38282
        assert config.data_package.search_paths == ["mods", "IdTables"]

    def test_env_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("MW_SERVER_HOST", "archipelago.gg")
        monkeypatch.setenv("MW_SERVER_PORT", "51234")
        monkeypatch.setenv("MW_DEATH_LINK", "no")

        config = ClientConfig.from_yaml(tmp_path / "missing.yml")

        assert config.server.host == "archipelago.gg"
        assert config.server.port == 51234
        assert config.server.death_link is False

    def test_to_connection_info(self):
        config = ClientConfig(server={"host": "archipelago.gg", "port": 38281, "slot_name": "Farmer"})

        info = config.server.to_connection_info()

        assert info.address == "archipelago.gg:38281"
        assert info.slot_name == "Farmer"
        assert info.death_link == DeathLinkPreference.UNSET
