"""
Client configuration management.

Loads configuration from client_config.yml with environment variable overrides.
Uses Pydantic for validation and type safety.
"""

import os
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field

from mwcommon.src.constants import (
    HEARTBEAT_THRESHOLD_SECONDS,
    HINT_TIMEOUT_SECONDS,
    MINIMUM_PROTOCOL_VERSION,
    RECONNECT_THRESHOLD_SECONDS,
)
from mwcommon.src.models import ConnectionInfo, DeathLinkPreference

DEFAULT_CONFIG_PATH = Path(__file__).parent / "client_config.yml"


class ServerConfig(BaseModel):
    """Multiworld server and slot settings."""
    host: str = Field(default="localhost", description="Server hostname or IP")
    port: int = Field(default=38281, description="Server port")
    slot_name: str = Field(default="", description="Slot (player) name to log in as")
    password: Optional[str] = Field(default=None, description="Room password")
    death_link: Optional[bool] = Field(default=None, description="Death link preference, unset defers to the slot")
    
    def to_connection_info(self) -> ConnectionInfo:
        return ConnectionInfo(
            host_url=self.host,
            port=self.port,
            slot_name=self.slot_name,
            password=self.password,
            death_link=DeathLinkPreference.from_bool(self.death_link),
        )


class ConnectionConfig(BaseModel):
    """Reconnection and blocking-wait settings."""
    retry_threshold_seconds: float = Field(
        default=RECONNECT_THRESHOLD_SECONDS, description="Backoff after a failed connection"
    )
    heartbeat_threshold_seconds: float = Field(
        default=HEARTBEAT_THRESHOLD_SECONDS, description="Backoff used by the periodic heartbeat"
    )
    hint_timeout_seconds: float = Field(
        default=HINT_TIMEOUT_SECONDS, description="Maximum wait for the hint listing"
    )
    scout_timeout_seconds: Optional[float] = Field(
        default=None, description="Maximum wait for a scout, unset waits for the session"
    )
    minimum_protocol_version: str = Field(
        default=MINIMUM_PROTOCOL_VERSION, description="Oldest server protocol version accepted"
    )


class DataPackageConfig(BaseModel):
    """Offline data package settings."""
    game_key: str = Field(default="", description="Snake case game key prefixing the table files")
    search_paths: List[str] = Field(default_factory=list, description="Folder components of the table location")


class DebugConfig(BaseModel):
    """Debug and development settings."""
    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")


class ClientConfig(BaseModel):
    """Complete client configuration."""
    server: ServerConfig = Field(default_factory=ServerConfig)
    connection: ConnectionConfig = Field(default_factory=ConnectionConfig)
    data_package: DataPackageConfig = Field(default_factory=DataPackageConfig)
    debug: DebugConfig = Field(default_factory=DebugConfig)
    
    @classmethod
    def from_yaml(cls, path: Optional[Path] = None) -> "ClientConfig":
        """Load configuration from YAML file."""
        path = path or DEFAULT_CONFIG_PATH
        
        data = {}
        if path.exists():
            with open(path, "r") as f:
                data = yaml.safe_load(f) or {}
        
        data = cls._apply_env_overrides(data)
        
        return cls(**data)
    
    @staticmethod
    def _apply_env_overrides(data: dict) -> dict:
        """Apply environment variable overrides to config data."""
        env_mappings = {
            "MW_SERVER_HOST": ("server", "host"),
            "MW_SERVER_PORT": ("server", "port"),
            "MW_SLOT_NAME": ("server", "slot_name"),
            "MW_PASSWORD": ("server", "password"),
            "MW_DEATH_LINK": ("server", "death_link"),
            "MW_LOG_LEVEL": ("debug", "log_level"),
        }
        
        for env_var, (section, key) in env_mappings.items():
            value = os.environ.get(env_var)
            if value is not None:
                if section not in data:
                    data[section] = {}
                
                if key == "port":
                    data[section][key] = int(value)
                elif key == "death_link":
                    data[section][key] = value.lower() in ("true", "1", "yes")
                else:
                    data[section][key] = value
        
        return data


def get_config() -> ClientConfig:
    """Get the singleton configuration instance."""
    if not hasattr(get_config, "_instance"):
        get_config._instance = ClientConfig.from_yaml()
    return get_config._instance


def reload_config(path: Optional[Path] = None) -> ClientConfig:
    """Reload configuration from file."""
    get_config._instance = ClientConfig.from_yaml(path)
    return get_config._instance
