"""Parse ``section.key=value`` command arguments into an update document."""

from __future__ import annotations

import json
import math
import re
from typing import Iterable

from supaclaw.configstore.merge import ConfigDocument, JSONValue
from supaclaw.errors import ParseError

# Plain decimal notation only: no underscores, hex or non-ASCII digits
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_value(raw: str) -> JSONValue:
    """Convert a raw argument value: bool, then number, then JSON, then string."""
    if raw == "true":
        return True
    if raw == "false":
        return False

    number = _parse_number(raw)
    if number is not None:
        return number

    if raw.startswith("[") or raw.startswith("{"):
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            pass  # not valid JSON, keep the text
    return raw


def _parse_number(raw: str) -> int | float | None:
    text = raw.strip()
    if not _NUMBER_RE.fullmatch(text):
        return None
    if text.lstrip("+-").isdigit():
        return int(text)
    number = float(text)
    # inf/nan are not representable in the stored JSON document
    return number if math.isfinite(number) else None


def parse_assignments(args: Iterable[str]) -> ConfigDocument:
    """Build one nested update document from ``a.b.c=value`` arguments.

    Raises ParseError for the first malformed argument; nothing is returned
    in that case, so no partial update can be applied.
    """
    updates: ConfigDocument = {}
    for arg in args:
        key_path, sep, raw_value = arg.partition("=")
        if not sep or not key_path or not raw_value:
            raise ParseError(arg)

        keys = key_path.split(".")
        if not all(keys):
            raise ParseError(arg, "Empty key in path")

        current = updates
        for key in keys[:-1]:
            child = current.setdefault(key, {})
            if not isinstance(child, dict):
                raise ParseError(arg, f"'{key}' is already set to a value")
            current = child
        current[keys[-1]] = parse_value(raw_value)
    return updates
