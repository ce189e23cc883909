"""Chat commands for viewing and editing the config document.

``config show [section]``, ``config update <path=value>...`` and
``config reload``. Handlers never raise; every failure becomes a reply line.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Coroutine

from supaclaw.configstore.parser import parse_assignments
from supaclaw.errors import ParseError

if TYPE_CHECKING:
    from supaclaw.configstore.manager import ConfigManager

logger = logging.getLogger(__name__)

SKILL_NAME = "supabase-config"
SKILL_DESCRIPTION = "Manage OpenClaw configuration in Supabase"

OK = "✅"
FAIL = "❌"

USAGE = (
    f"{FAIL} Usage: `config update section.key=value`\n"
    "Example: `config update gateway.mode=production`"
)

# Handler signature: (args, context) -> reply text
CommandHandler = Callable[[list[str], Any], Coroutine[None, None, str]]


@dataclass
class Command:
    """A named chat command registered with the host."""

    name: str
    description: str
    handler: CommandHandler


class ConfigCommands:
    """The ``config`` command group bound to one ConfigManager."""

    def __init__(self, manager: ConfigManager) -> None:
        self._manager = manager

    @property
    def commands(self) -> dict[str, Command]:
        return {
            cmd.name: cmd
            for cmd in [
                Command("config show", "Show current configuration", self.show),
                Command(
                    "config update",
                    "Update configuration (format: config update section.key=value)",
                    self.update,
                ),
                Command("config reload", "Reload configuration from Supabase", self.reload),
            ]
        }

    async def show(self, args: list[str], context: Any = None) -> str:
        try:
            config = await self._manager.get_current_config()
            if config is None:
                return f"{FAIL} No configuration found in Supabase"
            section = args[0] if args else None
            return self._manager.format_for_display(config, section)
        except Exception as e:
            return f"{FAIL} Error fetching config: {e}"

    async def update(self, args: list[str], context: Any = None) -> str:
        if not args:
            return USAGE
        try:
            updates = parse_assignments(args)
        except ParseError as e:
            return f"{FAIL} {e}"
        try:
            merged = await self._manager.update_config(updates)
        except Exception as e:
            return f"{FAIL} Error updating config: {e}"
        return (
            f"{OK} Configuration updated successfully!\n\n"
            + self._manager.format_for_display(merged)
        )

    async def reload(self, args: list[str], context: Any = None) -> str:
        logger.info("Config reload requested")
        return f"{OK} Configuration reload requested. Service will restart with new configuration."
