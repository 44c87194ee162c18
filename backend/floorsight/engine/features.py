"""Geometry records produced by the engine, before serialization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from shapely.geometry import Point, Polygon


@dataclass(frozen=True)
class Feature:
    """One exported geometry plus its flat property mapping."""

    geometry: Point | Polygon
    properties: dict[str, Any] = field(default_factory=dict)


@dataclass
class FloorResult:
    """Marker and shape features for one floor container."""

    floor_id: str
    markers: list[Feature] = field(default_factory=list)
    shapes: list[Feature] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.markers and not self.shapes


@dataclass
class ExportResult:
    """All non-empty floors of one export, in traversal order."""

    floors: list[FloorResult] = field(default_factory=list)
    elapsed_ms: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not self.floors
