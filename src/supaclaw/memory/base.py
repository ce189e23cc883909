"""Memory backend protocol and shared types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

# Columns requested for every read
RECORD_COLUMNS = "id,agent_id,user_id,content,metadata,created_at"


@dataclass
class MemoryRecord:
    """A stored text snippet with agent/user attribution."""

    content: str
    agent_id: str = "main"
    user_id: str = "unknown"
    metadata: dict[str, Any] = field(default_factory=dict)
    id: str | int | None = None
    created_at: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> MemoryRecord:
        return cls(
            id=row.get("id"),
            agent_id=row.get("agent_id"),
            user_id=row.get("user_id"),
            content=row.get("content"),
            metadata=row.get("metadata") or {},
            created_at=row.get("created_at"),
        )

    def to_payload(self) -> dict[str, Any]:
        """Body for an insert; id and created_at are assigned by the backend."""
        return {
            "agent_id": self.agent_id,
            "user_id": self.user_id,
            "content": self.content,
            "metadata": self.metadata,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "agentId": self.agent_id,
            "userId": self.user_id,
            "content": self.content,
            "metadata": self.metadata,
            "createdAt": self.created_at,
        }


@runtime_checkable
class MemoryBackend(Protocol):
    """Protocol that both the active and the disabled backend implement."""

    @property
    def enabled(self) -> bool: ...

    async def add(
        self,
        content: str | None,
        *,
        agent_id: str | None = None,
        user_id: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        """Store one record. Empty content is ignored."""
        ...

    async def search(
        self,
        query: str | None = None,
        *,
        agent_id: str | None = None,
        limit: int | None = None,
    ) -> list[MemoryRecord]:
        """Newest-first records for an agent, optionally filtered by substring."""
        ...

    async def get(self, id: str | int | None) -> MemoryRecord | None:
        """Fetch one record by id."""
        ...
