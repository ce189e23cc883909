"""Read and update the single config document stored in Supabase."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import aiohttp

from supaclaw.configstore.display import format_config_for_display
from supaclaw.configstore.merge import ConfigDocument, deep_merge
from supaclaw.errors import NotFoundError, SupaclawError
from supaclaw.rest import SupabaseRestClient

if TYPE_CHECKING:
    from supaclaw.settings import Settings

logger = logging.getLogger(__name__)


class ConfigManager:
    """Config document access: get, read-merge-write update, display.

    Updates are two independent round trips with no locking. A concurrent
    writer between the read and the write is overwritten (last write wins).
    """

    def __init__(self, settings: Settings, session: aiohttp.ClientSession | None = None) -> None:
        self._settings = settings
        self._session = session
        self._client: SupabaseRestClient | None = None

    @property
    def client(self) -> SupabaseRestClient:
        # Built on first use so a missing credential surfaces as a command reply
        if self._client is None:
            self._client = SupabaseRestClient(self._settings.supabase, session=self._session)
        return self._client

    @property
    def _table(self) -> str:
        return self._settings.config_store.table

    @property
    def _key_filter(self) -> tuple[str, str]:
        return ("key", f"eq.{self._settings.config_store.key}")

    async def get_current_config(self) -> ConfigDocument | None:
        try:
            data = await self.client.request(
                self._table, params=[self._key_filter, ("select", "value")]
            )
        except (SupaclawError, aiohttp.ClientError) as e:
            logger.error("Error fetching config: %s", e)
            raise
        if isinstance(data, list) and data:
            return data[0].get("value")
        return None

    async def update_config(self, updates: ConfigDocument) -> ConfigDocument:
        current = await self.get_current_config()
        if current is None:
            logger.error("Error updating config: no existing configuration")
            raise NotFoundError("No existing configuration found")

        merged = deep_merge(current, updates)
        try:
            await self.client.request(
                self._table, "PATCH", params=[self._key_filter], body={"value": merged}
            )
        except (SupaclawError, aiohttp.ClientError) as e:
            logger.error("Error updating config: %s", e)
            raise
        logger.info("Config %s updated", self._settings.config_store.key)
        return merged

    def format_for_display(self, config: ConfigDocument, section: str | None = None) -> str:
        return format_config_for_display(config, section)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
