"""POI Schemas — wire models for POI responses and POI query parameters.

Invariants:
    - Response models mirror the backend payload, including metadata the domain drops
      (self link, subType, rank, tags)
    - `self` keys are exposed as self_link (alias "self")
    - Query parameter models render fields in declaration order via to_query_items()
    - Bounding-box and by-name searches nest pagination as page[limit]

Design Decisions:
    - Query models are frozen pydantic models: validated once when the mapper builds
      them, hashable so endpoints built from them stay immutable
"""

from pydantic import BaseModel, ConfigDict, Field

from travelnet.core.domain_types import POICategory
from travelnet.core.query_encoding import QueryItem, QueryItemsBuilder
from travelnet.schemas.wire import WireModel


# ─── Responses ──────────────────────────────────────────────────

class POISelfLink(WireModel):
    href: str
    methods: list[str] = Field(default_factory=list)


class GeoCode(WireModel):
    latitude: float
    longitude: float


class POIDataModel(WireModel):
    id: str
    self_link: POISelfLink | None = Field(None, alias="self")
    type: str | None = None
    sub_type: str | None = None
    name: str
    geo_code: GeoCode
    category: str
    rank: int | None = None
    tags: list[str] | None = None
    pictures: list[str] | None = None


class PaginationLinks(WireModel):
    self_link: str | None = Field(None, alias="self")
    first: str | None = None
    last: str | None = None
    next: str | None = None
    up: str | None = None


class Meta(WireModel):
    count: int
    links: PaginationLinks = Field(default_factory=PaginationLinks)


class POIListResponse(WireModel):
    data: list[POIDataModel]
    meta: Meta | None = None


class POISingleResponse(WireModel):
    data: POIDataModel


# ─── Query parameters ───────────────────────────────────────────

class _QueryModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class PageParametersDataModel(_QueryModel):
    limit: int | None = None

    def to_query_items(self) -> list[QueryItem]:
        return QueryItemsBuilder().add("limit", self.limit).build()


class POIRadiusParametersDataModel(_QueryModel):
    latitude: float
    longitude: float
    radius: float | None = None
    categories: tuple[POICategory, ...] | None = None
    limit: int | None = None
    offset: int | None = None

    def to_query_items(self) -> list[QueryItem]:
        return (
            QueryItemsBuilder()
            .add("latitude", self.latitude)
            .add("longitude", self.longitude)
            .add("radius", self.radius)
            .add("categories", self.categories)
            .add("limit", self.limit)
            .add("offset", self.offset)
            .build()
        )


class POIBoundingBoxParametersDataModel(_QueryModel):
    north: float
    south: float
    east: float
    west: float
    categories: tuple[POICategory, ...] | None = None
    limit: int | None = None
    offset: int | None = None
    page: PageParametersDataModel | None = None

    def to_query_items(self) -> list[QueryItem]:
        return (
            QueryItemsBuilder()
            .add("north", self.north)
            .add("south", self.south)
            .add("east", self.east)
            .add("west", self.west)
            .add("categories", self.categories)
            .add("limit", self.limit)
            .add("offset", self.offset)
            .add_nested("page", self.page)
            .build()
        )


class POIGetByNameParametersDataModel(_QueryModel):
    name: str
    categories: tuple[POICategory, ...] | None = None
    page: PageParametersDataModel | None = None

    def to_query_items(self) -> list[QueryItem]:
        return (
            QueryItemsBuilder()
            .add("name", self.name)
            .add("categories", self.categories)
            .add_nested("page", self.page)
            .build()
        )
