"""Entry point: python -m supaclaw <config|memory> <command> [args]

- "config show [section]" / "config update a.b=c ..." / "config reload"
- "memory add <content>" / "memory search [query]" / "memory get <id>"
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys

from supaclaw.settings import Settings, load_settings

USAGE = """\
Usage: python -m supaclaw <group> <command> [args]
  config show [section]          — Show the stored configuration
  config update <path=value>...  — Deep-merge values into the configuration
  config reload                  — Request a service reload
  memory add <content>           — Store a memory for the default agent
  memory search [query]          — List newest memories, optionally filtered
  memory get <id>                — Show one memory by id"""


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


async def _run_config(settings: Settings, command: str, args: list[str]) -> int:
    from supaclaw.configstore.commands import ConfigCommands
    from supaclaw.configstore.manager import ConfigManager

    manager = ConfigManager(settings)
    commands = ConfigCommands(manager).commands
    cmd = commands.get(f"config {command}")
    if cmd is None:
        print(USAGE)
        return 1
    try:
        print(await cmd.handler(args, None))
    finally:
        await manager.close()
    return 0


async def _run_memory(settings: Settings, command: str, args: list[str]) -> int:
    from supaclaw.plugins.memory import create_backend

    backend = create_backend(settings)
    try:
        if command == "add" and args:
            await backend.add(" ".join(args))
            print("Memory stored" if backend.enabled else "Memory plugin disabled, nothing stored")
        elif command == "search":
            records = await backend.search(" ".join(args) or None)
            print(json.dumps([r.to_dict() for r in records], ensure_ascii=False, indent=2))
        elif command == "get" and args:
            record = await backend.get(args[0])
            print(json.dumps(record.to_dict() if record else None, ensure_ascii=False, indent=2))
        else:
            print(USAGE)
            return 1
    finally:
        close = getattr(backend, "close", None)
        if close and callable(close):
            await close()
    return 0


def main() -> None:
    if len(sys.argv) < 3:
        print(USAGE)
        sys.exit(1)

    group, command, args = sys.argv[1], sys.argv[2], sys.argv[3:]
    settings = load_settings()
    _setup_logging(settings.log_level)

    if group == "config":
        code = asyncio.run(_run_config(settings, command, args))
    elif group == "memory":
        code = asyncio.run(_run_memory(settings, command, args))
    else:
        print(USAGE)
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
