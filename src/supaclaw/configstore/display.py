"""Render config documents as chat-formatted text."""

from __future__ import annotations

import json
from typing import Any, Mapping

from supaclaw.configstore.merge import ConfigDocument, JSONValue

DOCUMENT_TITLE = "📋 **Current OpenClaw Configuration**\n\n"
REDACTED = "[REDACTED]"
SECRET_KEYS = frozenset({"botToken", "token"})

# (path into the document, section title), rendered in this order
KNOWN_SECTIONS: list[tuple[tuple[str, ...], str]] = [
    (("gateway",), "🌐 Gateway"),
    (("channels", "telegram"), "📱 Telegram"),
    (("agents", "defaults"), "🤖 Agent Defaults"),
]


def _value_text(value: JSONValue) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    if isinstance(value, bool) or value is None:
        return json.dumps(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_section(section: Mapping[str, Any], title: str) -> str:
    """One ``• key: `value``` line per key, secrets redacted."""
    lines = [f"**{title}**"]
    for key, value in section.items():
        shown = REDACTED if key in SECRET_KEYS else _value_text(value)
        lines.append(f"• {key}: `{shown}`")
    return "\n".join(lines) + "\n\n"


def _lookup(config: ConfigDocument, path: tuple[str, ...]) -> JSONValue:
    node: JSONValue = config
    for key in path:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def format_config_for_display(config: ConfigDocument, section: str | None = None) -> str:
    """Render one top-level section, or the known sections under a title."""
    if section and section in config:
        subtree = config[section]
        if not isinstance(subtree, dict):
            subtree = {section: subtree}
        return format_section(subtree, section)

    output = DOCUMENT_TITLE
    for path, title in KNOWN_SECTIONS:
        subtree = _lookup(config, path)
        if subtree is not None:
            output += format_section(subtree if isinstance(subtree, dict) else {path[-1]: subtree}, title)
    return output
