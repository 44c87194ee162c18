"""API request models: the scene document."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class VertexIn(BaseModel):
    x: float
    y: float


class SegmentIn(BaseModel):
    start: int
    end: int


class RegionIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    winding_rule: str = Field(default="NONZERO", alias="windingRule")
    loops: list[list[int]] = Field(default_factory=list)


class VectorNetworkIn(BaseModel):
    vertices: list[VertexIn] = Field(default_factory=list)
    segments: list[SegmentIn] = Field(default_factory=list)
    regions: list[RegionIn] = Field(default_factory=list)


class SceneNodeIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str = ""
    type: str = Field(..., description="Node type tag, e.g. FRAME, VECTOR, INSTANCE")
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    children: list[SceneNodeIn] = Field(default_factory=list)
    vector_network: VectorNetworkIn | None = Field(default=None, alias="vectorNetwork")
    component_id: str | None = Field(default=None, alias="componentId")


class ExportOptions(BaseModel):
    flip_frame: Literal["floor", "root"] | None = Field(
        default=None,
        description="Container whose height the Y axis is flipped against",
    )


class SceneDocument(BaseModel):
    document: SceneNodeIn = Field(..., description="Root container holding one frame per floor")
    components: dict[str, str] = Field(
        default_factory=dict,
        description="Component id -> name; used as the marker category",
    )


class ExportRequest(SceneDocument):
    options: ExportOptions = Field(default_factory=ExportOptions)
