"""Supabase REST client — the single HTTP primitive both plugins share.

Wraps one lazily created ``aiohttp.ClientSession``. Every call is one round
trip; there are no retries and no timeouts beyond aiohttp's defaults.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, Sequence

import aiohttp

from supaclaw.errors import ConfigurationError, RemoteError

if TYPE_CHECKING:
    from supaclaw.settings import SupabaseSettings

logger = logging.getLogger(__name__)

QueryParams = Sequence[tuple[str, str]]


class SupabaseRestClient:
    """Thin async client for ``<url>/rest/v1/<table>`` endpoints."""

    def __init__(self, settings: SupabaseSettings, session: aiohttp.ClientSession | None = None) -> None:
        if not settings.configured:
            raise ConfigurationError("Supabase URL or Service Role Key is missing")
        self._base_url = settings.url.rstrip("/")
        self._headers = {
            "apikey": settings.service_role_key,
            "Authorization": f"Bearer {settings.service_role_key}",
            "Content-Type": "application/json",
        }
        self._session = session
        self._owns_session = session is None

    def table_url(self, table: str) -> str:
        return f"{self._base_url}/rest/v1/{table}"

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def request(
        self,
        table: str,
        method: str = "GET",
        *,
        params: QueryParams | None = None,
        body: Any = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Returns None for 204 or an empty body. Raises RemoteError for non-2xx.
        """
        session = self._get_session()
        data = json.dumps(body) if body is not None else None
        async with session.request(
            method,
            self.table_url(table),
            params=list(params) if params else None,
            data=data,
            headers=self._headers,
        ) as resp:
            if not 200 <= resp.status < 300:
                text = await resp.text()
                logger.debug("%s %s -> %d", method, table, resp.status)
                raise RemoteError(resp.status, text)
            if resp.status == 204:
                return None
            text = await resp.text()
            # PostgREST answers inserts with 201 and no body unless asked otherwise
            if not text.strip():
                return None
            return json.loads(text)

    async def close(self) -> None:
        if self._session is not None and self._owns_session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> SupabaseRestClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
