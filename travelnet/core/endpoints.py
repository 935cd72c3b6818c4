"""Endpoint Descriptors — declarative description of one logical API call.

Invariants:
    - Endpoint is immutable and carries no behavior beyond header derivation
    - Common headers are Accept: application/json and App-Version; endpoint headers
      override them on key collision (case-insensitive, endpoint wins)
    - path is appended to the base path verbatim; nothing here normalizes slashes

Design Decisions:
    - One canonical descriptor type; resource families expose factory classes
      (POIEndpoint, AuthEndpoint) instead of parallel protocol hierarchies
      (ADR: no duplicated endpoint/builder definitions)
    - `name` is for logs only, it never reaches the wire
"""

from collections.abc import Mapping
from dataclasses import dataclass

from travelnet.core.domain_types import HTTPMethod
from travelnet.core.query_encoding import QueryItem

DEFAULT_APP_VERSION = "1.0"


@dataclass(frozen=True)
class Endpoint:
    method: HTTPMethod
    path: str
    query_items: tuple[QueryItem, ...] | None = None
    headers: Mapping[str, str] | None = None
    name: str | None = None


def common_headers(app_version: str = DEFAULT_APP_VERSION) -> dict[str, str]:
    return {
        "Accept": "application/json",
        "App-Version": app_version,
    }


def merge_headers(
    defaults: Mapping[str, str], overrides: Mapping[str, str] | None,
) -> dict[str, str]:
    """Merge header maps; override keys replace defaults regardless of case."""
    merged = dict(defaults)
    if not overrides:
        return merged
    for key, value in overrides.items():
        for existing in [k for k in merged if k.lower() == key.lower()]:
            del merged[existing]
        merged[key] = value
    return merged
