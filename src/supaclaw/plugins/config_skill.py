"""``supabase-config`` skill — registers the config command group with the host."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from supaclaw.configstore.commands import SKILL_DESCRIPTION, SKILL_NAME, ConfigCommands
from supaclaw.configstore.manager import ConfigManager
from supaclaw.settings import load_settings

if TYPE_CHECKING:
    from supaclaw.plugins.base import HostAPI
    from supaclaw.settings import Settings

logger = logging.getLogger(__name__)


def register(
    api: HostAPI,
    host_config: dict[str, Any] | None = None,
    settings: Settings | None = None,
) -> ConfigCommands:
    """Build one ConfigManager and expose its commands to the host."""
    settings = settings or load_settings(host_config=host_config, plugin_id=SKILL_NAME)
    if not settings.supabase.configured:
        logger.warning("Supabase credentials missing; config commands will report errors")

    commands = ConfigCommands(ConfigManager(settings))
    api.register_commands(name=SKILL_NAME, description=SKILL_DESCRIPTION, commands=commands.commands)
    logger.info("Registered %d config commands", len(commands.commands))
    return commands
