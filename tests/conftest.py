"""Shared fixtures: an in-process fake of the Supabase REST API."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from supaclaw.settings import Settings, SupabaseSettings

SERVICE_KEY = "service-key"


@dataclass
class RecordedRequest:
    method: str
    table: str
    query: dict[str, str]
    body: object = None
    headers: dict[str, str] = field(default_factory=dict)


class FakeSupabase:
    """Just enough PostgREST to serve the memory and config tables."""

    def __init__(self) -> None:
        self.memories: list[dict] = []
        self.configs: dict[str, dict] = {}
        self.requests: list[RecordedRequest] = []
        self.canned: tuple[int, str] | None = None  # (status, body) served for every request
        self._next_id = 1
        self._clock = datetime(2026, 1, 1, tzinfo=timezone.utc)

    def app(self) -> web.Application:
        app = web.Application()
        app.router.add_route("*", "/rest/v1/{table}", self._handle)
        return app

    def seed_memory(self, content: str, agent_id: str = "main", user_id: str = "u1") -> dict:
        row = {
            "id": self._next_id,
            "agent_id": agent_id,
            "user_id": user_id,
            "content": content,
            "metadata": {},
            "created_at": self._clock.isoformat(),
        }
        self._next_id += 1
        self._clock += timedelta(seconds=1)
        self.memories.append(row)
        return row

    async def _handle(self, request: web.Request) -> web.Response:
        body = await request.json() if request.can_read_body else None
        table = request.match_info["table"]
        self.requests.append(
            RecordedRequest(request.method, table, dict(request.query), body, dict(request.headers))
        )
        if self.canned:
            status, text = self.canned
            return web.Response(status=status, text=text)
        if table == "openclaw_memories":
            return self._memories(request.method, request.query, body)
        if table == "openclaw_configs":
            return self._configs(request.method, request.query, body)
        return web.json_response({"message": f"relation {table} does not exist"}, status=404)

    def _memories(self, method: str, query, body) -> web.Response:
        if method == "POST":
            row = self.seed_memory(body["content"], body["agent_id"], body["user_id"])
            row["metadata"] = body["metadata"]
            return web.Response(status=201)

        rows = list(self.memories)
        for column in ("agent_id", "id"):
            if column in query:
                value = query[column].partition(".")[2]
                rows = [r for r in rows if str(r[column]) == value]
        if "content" in query:
            needle = query["content"].partition(".")[2].strip("*").lower()
            rows = [r for r in rows if needle in r["content"].lower()]
        if query.get("order") == "created_at.desc":
            rows.sort(key=lambda r: r["created_at"], reverse=True)
        rows = rows[: int(query.get("limit", len(rows)))]
        columns = query.get("select", "").split(",")
        return web.json_response([{c: r[c] for c in columns if c in r} for r in rows])

    def _configs(self, method: str, query, body) -> web.Response:
        key = query.get("key", "").partition(".")[2]
        if method == "GET":
            if key not in self.configs:
                return web.json_response([])
            return web.json_response([{"value": self.configs[key]}])
        if method == "PATCH":
            if key in self.configs:
                self.configs[key] = body["value"]
            return web.Response(status=204)
        return web.Response(status=405, text="method not allowed")


@pytest.fixture
def fake() -> FakeSupabase:
    return FakeSupabase()


@pytest_asyncio.fixture
async def server(fake: FakeSupabase):
    srv = TestServer(fake.app())
    await srv.start_server()
    yield srv
    await srv.close()


@pytest.fixture
def settings(server: TestServer) -> Settings:
    return Settings(
        supabase=SupabaseSettings(url=str(server.make_url("/")), service_role_key=SERVICE_KEY)
    )
