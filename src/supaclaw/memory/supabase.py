"""Supabase-backed memory backend and its disabled stand-in."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from supaclaw.errors import RemoteError
from supaclaw.memory.base import RECORD_COLUMNS, MemoryBackend, MemoryRecord
from supaclaw.rest import SupabaseRestClient

if TYPE_CHECKING:
    from supaclaw.settings import MemorySettings, Settings

logger = logging.getLogger(__name__)

DEFAULT_USER_ID = "unknown"


class SupabaseMemory:
    """Memory records in a PostgREST table, one HTTP round trip per call."""

    def __init__(self, client: SupabaseRestClient, settings: MemorySettings) -> None:
        self._client = client
        self._settings = settings

    @property
    def enabled(self) -> bool:
        return True

    def _clamp_limit(self, limit: int | None) -> int:
        return min(limit or self._settings.default_search_limit, self._settings.max_search_limit)

    # ── Writes ───────────────────────────────────────────────

    async def add(
        self,
        content: str | None,
        *,
        agent_id: str | None = None,
        user_id: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        if not content:
            return
        metadata = metadata or {}
        record = MemoryRecord(
            content=content,
            agent_id=agent_id or self._settings.default_agent_id,
            user_id=user_id or metadata.get("userId") or DEFAULT_USER_ID,
            metadata=metadata,
        )
        await self._client.request(self._settings.table, "POST", body=record.to_payload())

    # ── Reads ────────────────────────────────────────────────

    async def search(
        self,
        query: str | None = None,
        *,
        agent_id: str | None = None,
        limit: int | None = None,
    ) -> list[MemoryRecord]:
        params = [
            ("select", RECORD_COLUMNS),
            ("order", "created_at.desc"),
            ("limit", str(self._clamp_limit(limit))),
            ("agent_id", f"eq.{agent_id or self._settings.default_agent_id}"),
        ]
        if query:
            params.append(("content", f"ilike.*{query}*"))

        data = await self._fetch(params)
        if not isinstance(data, list):
            return []
        return [MemoryRecord.from_row(row) for row in data if isinstance(row, dict)]

    async def get(self, id: str | int | None) -> MemoryRecord | None:
        if not id:
            return None
        data = await self._fetch([("select", RECORD_COLUMNS), ("limit", "1"), ("id", f"eq.{id}")])
        if isinstance(data, list) and data and isinstance(data[0], dict):
            return MemoryRecord.from_row(data[0])
        return None

    async def _fetch(self, params: list[tuple[str, str]]) -> Any:
        """GET the memory table; failures read as an empty result."""
        try:
            return await self._client.request(self._settings.table, params=params)
        except (RemoteError, aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.warning("Memory query failed: %s", e)
            return None

    async def close(self) -> None:
        await self._client.close()


class DisabledMemory:
    """Inert backend used when Supabase credentials are missing."""

    def __init__(self, reason: str = "") -> None:
        self.reason = reason

    @property
    def enabled(self) -> bool:
        return False

    async def add(self, content: str | None, **kwargs: Any) -> None:
        return None

    async def search(self, query: str | None = None, **kwargs: Any) -> list[MemoryRecord]:
        return []

    async def get(self, id: str | int | None) -> MemoryRecord | None:
        return None


def build_memory_backend(
    settings: Settings, session: aiohttp.ClientSession | None = None
) -> MemoryBackend:
    """Pick the active or the disabled backend once, from the settings."""
    if not settings.supabase.configured:
        return DisabledMemory("Supabase URL or Service Role Key is missing")
    client = SupabaseRestClient(settings.supabase, session=session)
    return SupabaseMemory(client, settings.memory)
