"""Key Case Conversion — snake_case <-> camelCase for wire payloads.

Invariants:
    - to_snake("firstName") == "first_name"; acronym runs collapse ("userURLPath" -> "user_url_path")
    - to_camel("first_name") == "firstName"; keys without "_" come back unchanged,
      so already-camelCase keys survive decoding untouched
    - Leading/trailing underscores are preserved by both directions
    - convert_keys rewrites mapping keys recursively (lists included), never values

Design Decisions:
    - Own converters over pydantic.alias_generators: to_camel there re-cases keys that are
      already camelCase on some releases; the wire contract needs exact
      convert-from-snake semantics (ADR: one canonical conversion)
"""

import re
from collections.abc import Callable
from typing import Any

_SNAKE_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def _split_edges(key: str) -> tuple[str, str, str]:
    core = key.strip("_")
    if not core:
        return key, "", ""
    start = key.index(core)
    return key[:start], core, key[start + len(core):]


def to_snake(key: str) -> str:
    lead, core, trail = _split_edges(key)
    if not core:
        return key
    return lead + _SNAKE_BOUNDARY.sub("_", core).lower() + trail


def to_camel(key: str) -> str:
    lead, core, trail = _split_edges(key)
    if "_" not in core:
        return key
    parts = [p for p in core.split("_") if p]
    head, rest = parts[0], parts[1:]
    return lead + head + "".join(p[:1].upper() + p[1:].lower() for p in rest) + trail


def convert_keys(value: Any, convert: Callable[[str], str]) -> Any:
    """Recursively rename mapping keys with `convert`."""
    if isinstance(value, dict):
        return {
            (convert(k) if isinstance(k, str) else k): convert_keys(v, convert)
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [convert_keys(v, convert) for v in value]
    return value
