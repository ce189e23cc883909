"""``supabase-memory`` plugin — registers the memory backend with the host."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from supaclaw.memory.supabase import build_memory_backend
from supaclaw.settings import load_settings

if TYPE_CHECKING:
    from supaclaw.memory.base import MemoryBackend
    from supaclaw.plugins.base import HostAPI
    from supaclaw.settings import Settings

logger = logging.getLogger(__name__)

PLUGIN_ID = "supabase-memory"
KIND = "memory"


def create_backend(settings: Settings) -> MemoryBackend:
    """Active backend when configured, otherwise an inert one. Never raises."""
    backend = build_memory_backend(settings)
    if backend.enabled:
        logger.info("Supabase memory plugin initialized")
    else:
        logger.error("Supabase memory plugin disabled: %s", backend.reason)
    return backend


def register(
    api: HostAPI,
    host_config: dict[str, Any] | None = None,
    settings: Settings | None = None,
) -> MemoryBackend:
    """Register ``add``/``search``/``get`` with the host and return the backend."""
    settings = settings or load_settings(host_config=host_config, plugin_id=PLUGIN_ID)
    backend = create_backend(settings)
    api.register_memory(id=PLUGIN_ID, add=backend.add, search=backend.search, get=backend.get)
    return backend
