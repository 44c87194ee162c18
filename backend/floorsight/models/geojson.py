"""GeoJSON output models and conversion from engine features."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from shapely.geometry import mapping

from floorsight.engine.features import Feature, FloorResult


class Geometry(BaseModel):
    type: Literal["Point", "Polygon"]
    # Point: [x, y]; Polygon: [exterior, hole, ...], each ring closed
    coordinates: list[Any]


class GeoFeature(BaseModel):
    type: Literal["Feature"] = "Feature"
    geometry: Geometry
    properties: dict[str, Any] = Field(default_factory=dict)


class FeatureCollection(BaseModel):
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[GeoFeature] = Field(default_factory=list)


class FloorExport(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    floor_id: str = Field(..., alias="floorId")
    markers: FeatureCollection = Field(default_factory=FeatureCollection)
    shapes: FeatureCollection = Field(default_factory=FeatureCollection)


def _listify(value: Any) -> Any:
    if isinstance(value, (tuple, list)):
        return [_listify(v) for v in value]
    return float(value)


def to_geometry(feature: Feature) -> Geometry:
    geo = mapping(feature.geometry)
    return Geometry(type=geo["type"], coordinates=_listify(geo["coordinates"]))


def to_geo_feature(feature: Feature) -> GeoFeature:
    return GeoFeature(geometry=to_geometry(feature), properties=dict(feature.properties))


def to_floor_export(floor: FloorResult) -> FloorExport:
    return FloorExport(
        floor_id=floor.floor_id,
        markers=FeatureCollection(features=[to_geo_feature(f) for f in floor.markers]),
        shapes=FeatureCollection(features=[to_geo_feature(f) for f in floor.shapes]),
    )
