"""Recursive merge of config documents."""

from __future__ import annotations

from typing import Dict, List, Union

JSONValue = Union[None, bool, int, float, str, List["JSONValue"], Dict[str, "JSONValue"]]
ConfigDocument = Dict[str, JSONValue]


def deep_merge(target: ConfigDocument, source: ConfigDocument) -> ConfigDocument:
    """Merge ``source`` into a copy of ``target``.

    Mappings merge key by key; scalars, None and lists from ``source`` replace
    whatever ``target`` holds. Neither argument is modified.
    """
    result = dict(target)
    for key, value in source.items():
        if isinstance(value, dict):
            base = result.get(key)
            result[key] = deep_merge(base if isinstance(base, dict) else {}, value)
        else:
            result[key] = value
    return result
