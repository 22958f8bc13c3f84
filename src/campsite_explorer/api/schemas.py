# src/campsite_explorer/api/schemas.py

from typing import List, Optional

from pydantic import BaseModel

from campsite_explorer.domain.entities import Campsite, Cluster, MapBounds


class BoundsSchema(BaseModel):
    north: float
    south: float
    east: float
    west: float

    @classmethod
    def from_entity(cls, b: MapBounds) -> "BoundsSchema":
        return cls(north=b.north, south=b.south, east=b.east, west=b.west)


class CampsiteSchema(BaseModel):
    location_name: str
    site_name: str
    type: str
    latitude: float
    longitude: float

    @classmethod
    def from_entity(cls, c: Campsite) -> "CampsiteSchema":
        return cls(
            location_name=c.location_name,
            site_name=c.site_name,
            type=c.type,
            latitude=c.latitude,
            longitude=c.longitude,
        )


class ClusterSchema(BaseModel):
    index: int
    lat: float
    lng: float
    count: int
    bounds: BoundsSchema
    campsites: List[CampsiteSchema]

    @classmethod
    def from_entity(cls, index: int, c: Cluster) -> "ClusterSchema":
        return cls(
            index=index,
            lat=c.lat,
            lng=c.lng,
            count=c.count,
            bounds=BoundsSchema.from_entity(c.bounds),
            campsites=[CampsiteSchema.from_entity(m) for m in c.campsites],
        )


class ClustersResponse(BaseModel):
    zoom: float
    bounds: Optional[BoundsSchema] = None
    clusters: List[ClusterSchema]
    single_markers: List[CampsiteSchema]


class ClusterFitResponse(BaseModel):
    index: int
    bounds: BoundsSchema
    max_zoom: int
    target_zoom: float
    center: List[float]
