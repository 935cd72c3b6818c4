"""POI Endpoints — factory for the four POI endpoint variants.

Invariants:
    - All POI calls are GET with no extra headers
    - Query items come from the parameter data model's own to_query_items()
    - get_by_id percent-encodes the id into the path
"""

from urllib.parse import quote

from travelnet.core.domain_types import HTTPMethod
from travelnet.core.endpoints import Endpoint
from travelnet.schemas.poi import (
    POIBoundingBoxParametersDataModel,
    POIGetByNameParametersDataModel,
    POIRadiusParametersDataModel,
)

POIS_PATH = "/v1/reference-data/locations/pois"


class POIEndpoint:

    @staticmethod
    def search_radius(params: POIRadiusParametersDataModel) -> Endpoint:
        return Endpoint(
            HTTPMethod.GET, POIS_PATH,
            query_items=tuple(params.to_query_items()),
            name="poi.search_radius",
        )

    @staticmethod
    def search_bounding_box(params: POIBoundingBoxParametersDataModel) -> Endpoint:
        return Endpoint(
            HTTPMethod.GET, f"{POIS_PATH}/by-square",
            query_items=tuple(params.to_query_items()),
            name="poi.search_bounding_box",
        )

    @staticmethod
    def search_by_name(params: POIGetByNameParametersDataModel) -> Endpoint:
        return Endpoint(
            HTTPMethod.GET, f"{POIS_PATH}/by-name",
            query_items=tuple(params.to_query_items()),
            name="poi.search_by_name",
        )

    @staticmethod
    def get_by_id(poi_id: str) -> Endpoint:
        return Endpoint(
            HTTPMethod.GET, f"{POIS_PATH}/{quote(poi_id, safe='')}",
            name="poi.get_by_id",
        )
