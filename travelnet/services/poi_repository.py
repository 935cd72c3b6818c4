"""POI Repository — domain-level POI operations over the network service.

Invariants:
    - Each operation: map params -> pick endpoint -> execute -> map results
    - List results keep the server's order, element for element
    - No retry, caching or validation of its own; errors propagate unchanged
"""

import logging

from travelnet.core.domain_types import (
    POIBoundingBoxParametersDomainModel,
    POIDomainModel,
    POIGetByNameParametersDomainModel,
    POIRadiusParametersDomainModel,
)
from travelnet.core.repository_protocols import NetworkService
from travelnet.schemas.poi import POIListResponse, POISingleResponse
from travelnet.services.poi_endpoints import POIEndpoint
from travelnet.services.poi_mapper import POIMapper

logger = logging.getLogger(__name__)


class NetworkPOIRepository:
    """POIRepository backed by the network service."""

    def __init__(self, network_service: NetworkService, mapper: POIMapper | None = None):
        self.network_service = network_service
        self.mapper = mapper or POIMapper()

    async def search_radius(
        self, params: POIRadiusParametersDomainModel,
    ) -> list[POIDomainModel]:
        endpoint = POIEndpoint.search_radius(self.mapper.radius_parameters(params))
        return await self._fetch_list(endpoint)

    async def search_bounding_box(
        self, params: POIBoundingBoxParametersDomainModel,
    ) -> list[POIDomainModel]:
        endpoint = POIEndpoint.search_bounding_box(self.mapper.bounding_box_parameters(params))
        return await self._fetch_list(endpoint)

    async def search_by_name(
        self, params: POIGetByNameParametersDomainModel,
    ) -> list[POIDomainModel]:
        endpoint = POIEndpoint.search_by_name(self.mapper.by_name_parameters(params))
        return await self._fetch_list(endpoint)

    async def get_by_id(self, poi_id: str) -> POIDomainModel:
        response = await self.network_service.execute(
            POIEndpoint.get_by_id(poi_id), POISingleResponse,
        )
        return self.mapper.to_domain(response.data)

    async def _fetch_list(self, endpoint) -> list[POIDomainModel]:
        response = await self.network_service.execute(endpoint, POIListResponse)
        logger.debug(
            f"Fetched {len(response.data)} POIs",
            extra={"endpoint": endpoint.name},
        )
        return [self.mapper.to_domain(poi) for poi in response.data]
