"""Settings loading from environment variables, host plugin config and supaclaw.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path
from typing import Any

_CONFIG_FILENAME = "supaclaw.toml"


@dataclass
class SupabaseSettings:
    """Backend location and service-role credential."""

    url: str = ""
    service_role_key: str = ""

    @property
    def configured(self) -> bool:
        return bool(self.url and self.service_role_key)


@dataclass
class MemorySettings:
    """Memory table settings."""

    table: str = "openclaw_memories"
    default_agent_id: str = "main"
    default_search_limit: int = 10
    max_search_limit: int = 20


@dataclass
class ConfigStoreSettings:
    """Config table settings."""

    table: str = "openclaw_configs"
    key: str = "main_config"


@dataclass
class Settings:
    """Top-level supaclaw settings."""

    supabase: SupabaseSettings = field(default_factory=SupabaseSettings)
    memory: MemorySettings = field(default_factory=MemorySettings)
    config_store: ConfigStoreSettings = field(default_factory=ConfigStoreSettings)
    log_level: str = "INFO"


def plugin_entry(host_config: dict[str, Any] | None, plugin_id: str) -> dict[str, Any]:
    """Return the host's ``plugins.entries.<plugin_id>`` mapping, or {}."""
    if not host_config:
        return {}
    entries = (host_config.get("plugins") or {}).get("entries") or {}
    return entries.get(plugin_id) or {}


def _read_toml(config_path: Path | None) -> dict:
    if config_path and config_path.exists():
        return tomllib.loads(config_path.read_text())
    # Search current dir and ~/.supaclaw/
    for candidate in [Path.cwd() / _CONFIG_FILENAME, Path.home() / ".supaclaw" / _CONFIG_FILENAME]:
        if candidate.exists():
            return tomllib.loads(candidate.read_text())
    return {}


def load_settings(
    config_path: Path | None = None,
    host_config: dict[str, Any] | None = None,
    plugin_id: str | None = None,
) -> Settings:
    """Load settings from the environment, the host's plugin entry and supaclaw.toml.

    Priority: environment variables > host plugin entry > supaclaw.toml > defaults.
    """
    file_data = _read_toml(config_path)
    entry = plugin_entry(host_config, plugin_id) if plugin_id else {}

    supabase_data = file_data.get("supabase", {})
    memory_data = file_data.get("memory", {})
    store_data = file_data.get("config_store", {})

    return Settings(
        supabase=SupabaseSettings(
            url=os.getenv("SUPABASE_URL")
            or entry.get("supabaseUrl")
            or supabase_data.get("url", ""),
            service_role_key=os.getenv("SUPABASE_SERVICE_ROLE_KEY")
            or entry.get("supabaseKey")
            or supabase_data.get("service_role_key", ""),
        ),
        memory=MemorySettings(
            table=os.getenv("SUPACLAW_MEMORY_TABLE", memory_data.get("table", "openclaw_memories")),
            default_agent_id=os.getenv(
                "SUPACLAW_DEFAULT_AGENT", memory_data.get("default_agent_id", "main")
            ),
            default_search_limit=int(memory_data.get("default_search_limit", 10)),
            max_search_limit=int(memory_data.get("max_search_limit", 20)),
        ),
        config_store=ConfigStoreSettings(
            table=os.getenv("SUPACLAW_CONFIG_TABLE", store_data.get("table", "openclaw_configs")),
            key=os.getenv("SUPACLAW_CONFIG_KEY", store_data.get("key", "main_config")),
        ),
        log_level=os.getenv("SUPACLAW_LOG_LEVEL", file_data.get("log_level", "INFO")),
    )
