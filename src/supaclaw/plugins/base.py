"""Host plugin API protocol and shared types."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Coroutine, Protocol, runtime_checkable

if TYPE_CHECKING:
    from supaclaw.configstore.commands import Command
    from supaclaw.memory.base import MemoryRecord

# Entry points handed to the host by the memory plugin
AddFn = Callable[..., Coroutine[None, None, None]]
SearchFn = Callable[..., Coroutine[None, None, "list[MemoryRecord]"]]
GetFn = Callable[[Any], Coroutine[None, None, "MemoryRecord | None"]]


@runtime_checkable
class HostAPI(Protocol):
    """What the host platform exposes to plugins at registration time."""

    def register_memory(self, *, id: str, add: AddFn, search: SearchFn, get: GetFn) -> None:
        """Install a memory provider under ``id``."""
        ...

    def register_commands(self, *, name: str, description: str, commands: dict[str, Command]) -> None:
        """Install a named group of chat commands."""
        ...
