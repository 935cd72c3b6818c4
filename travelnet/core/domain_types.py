"""Domain Types — value objects and enums shared by every layer.

Invariants:
    - Domain values are frozen dataclasses: snapshots with no identity
    - POIDomainModel keeps only id, name, coordinates, category and pictures
      (API metadata such as self-link, subtype, rank and tags never reaches the domain)
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - Frozen dataclasses over pydantic here: the domain does no validation, wire
      validation lives in schemas/ (ADR: DDD boundary)
    - str Enums: the enum value IS the wire value, so they serialize and query-encode
      without custom converters
"""

from dataclasses import dataclass
from enum import Enum


# ─── Enums ───────────────────────────────────────────────────────

class HTTPMethod(str, Enum):
    """Methods an endpoint descriptor may declare."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


class POICategory(str, Enum):
    """POI categories accepted by the backend as filters."""
    SIGHTS = "SIGHTS"
    BEACH_PARK = "BEACH_PARK"
    HISTORICAL = "HISTORICAL"
    NIGHTLIFE = "NIGHTLIFE"
    RESTAURANT = "RESTAURANT"
    SHOPPING = "SHOPPING"


class RefreshState(str, Enum):
    """Auth interceptor states."""
    IDLE = "idle"
    REFRESHING = "refreshing"


# ─── Credentials ─────────────────────────────────────────────────

@dataclass(frozen=True)
class OAuthTokens:
    """Access/refresh token pair. refresh_token is optional (not every flow issues one)."""
    access_token: str
    refresh_token: str | None = None


@dataclass(frozen=True)
class User:
    id: str | None
    email: str
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None


@dataclass(frozen=True)
class AuthSession:
    """Result of a successful login."""
    user: User
    tokens: OAuthTokens


# ─── Points of Interest ──────────────────────────────────────────

@dataclass(frozen=True)
class PageParameters:
    """Pagination block, encoded as page[limit]=..."""
    limit: int | None = None


@dataclass(frozen=True)
class POIDomainModel:
    id: str
    name: str
    lat: float
    lon: float
    category: str
    pictures: tuple[str, ...] | None = None


@dataclass(frozen=True)
class POIRadiusParametersDomainModel:
    lat: float
    lon: float
    radius: float
    categories: tuple[POICategory, ...] | None = None
    limit: int | None = None
    offset: int | None = None


@dataclass(frozen=True)
class POIBoundingBoxParametersDomainModel:
    north: float
    south: float
    east: float
    west: float
    categories: tuple[POICategory, ...] | None = None
    limit: int | None = None
    offset: int | None = None
    page: PageParameters | None = None


@dataclass(frozen=True)
class POIGetByNameParametersDomainModel:
    name: str
    categories: tuple[POICategory, ...] | None = None
    page: PageParameters | None = None
