"""POI Mapper — pure translation between POI domain values and wire/data models.

Invariants:
    - Domain -> data parameter mapping preserves every field value unchanged
      (lat/lon are renamed latitude/longitude, nothing else changes)
    - Data -> domain keeps id, name, coordinates, category and pictures only
    - No IO, no validation beyond what the data models themselves enforce
"""

from travelnet.core.domain_types import (
    PageParameters,
    POIBoundingBoxParametersDomainModel,
    POIDomainModel,
    POIGetByNameParametersDomainModel,
    POIRadiusParametersDomainModel,
)
from travelnet.schemas.poi import (
    PageParametersDataModel,
    POIBoundingBoxParametersDataModel,
    POIDataModel,
    POIGetByNameParametersDataModel,
    POIRadiusParametersDataModel,
)


class POIMapper:

    @staticmethod
    def radius_parameters(params: POIRadiusParametersDomainModel) -> POIRadiusParametersDataModel:
        return POIRadiusParametersDataModel(
            latitude=params.lat,
            longitude=params.lon,
            radius=params.radius,
            categories=params.categories,
            limit=params.limit,
            offset=params.offset,
        )

    @staticmethod
    def bounding_box_parameters(
        params: POIBoundingBoxParametersDomainModel,
    ) -> POIBoundingBoxParametersDataModel:
        return POIBoundingBoxParametersDataModel(
            north=params.north,
            south=params.south,
            east=params.east,
            west=params.west,
            categories=params.categories,
            limit=params.limit,
            offset=params.offset,
            page=POIMapper.page_parameters(params.page),
        )

    @staticmethod
    def by_name_parameters(
        params: POIGetByNameParametersDomainModel,
    ) -> POIGetByNameParametersDataModel:
        return POIGetByNameParametersDataModel(
            name=params.name,
            categories=params.categories,
            page=POIMapper.page_parameters(params.page),
        )

    @staticmethod
    def page_parameters(page: PageParameters | None) -> PageParametersDataModel | None:
        if page is None:
            return None
        return PageParametersDataModel(limit=page.limit)

    @staticmethod
    def to_domain(poi: POIDataModel) -> POIDomainModel:
        return POIDomainModel(
            id=poi.id,
            name=poi.name,
            lat=poi.geo_code.latitude,
            lon=poi.geo_code.longitude,
            category=poi.category,
            pictures=tuple(poi.pictures) if poi.pictures is not None else None,
        )
