"""Query Encoding — explicit, typed conversion of parameter objects into ordered query items.

Invariants:
    - Items come out in the order fields are added (declaration order of the params type)
    - None is omitted entirely, never emitted as an empty value
    - Sequences join their element texts with "," — an empty sequence encodes as ""
    - Booleans encode as true/false, numbers in plain decimal form (no exponent, no locale)
    - Enums encode as their value
    - A present nested block encodes as parent[child]=value; an absent one emits nothing
    - Values with no defined textual form fall back to str() (degraded, never an error)

Design Decisions:
    - Builder + per-type to_query_items() over runtime field introspection: the omission,
      array and nesting rules are visible at each call site (ADR: no reflection)
    - Pure module: no IO, no logging
"""

from decimal import Decimal
from enum import Enum
from typing import NamedTuple, Protocol


class QueryItem(NamedTuple):
    name: str
    value: str


class QueryParameters(Protocol):
    """Anything that knows how to render itself as ordered query items."""
    def to_query_items(self) -> list[QueryItem]: ...


def encode_scalar(value: object) -> str:
    """Natural textual form of a single value."""
    if isinstance(value, Enum):
        return encode_scalar(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _encode_float(value)
    if isinstance(value, str):
        return value
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def _encode_float(value: float) -> str:
    text = repr(value)
    # nan/inf contain no exponent marker and pass through as repr
    if "e" in text:
        return format(Decimal(text), "f")
    return text


def encode_value(value: object) -> str:
    """Encode a present (non-None) field value: sequences joined, scalars as-is."""
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(encode_scalar(v) for v in value)
    return encode_scalar(value)


class QueryItemsBuilder:
    """Accumulates query items field by field, applying the omission rules."""

    def __init__(self) -> None:
        self._items: list[QueryItem] = []

    def add(self, name: str, value: object) -> "QueryItemsBuilder":
        if value is not None:
            self._items.append(QueryItem(name, encode_value(value)))
        return self

    def add_nested(
        self, parent: str, nested: QueryParameters | None,
    ) -> "QueryItemsBuilder":
        if nested is not None:
            for item in nested.to_query_items():
                self._items.append(QueryItem(f"{parent}[{item.name}]", item.value))
        return self

    def build(self) -> list[QueryItem]:
        return list(self._items)
