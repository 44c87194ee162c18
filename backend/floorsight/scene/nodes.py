"""Scene node tree: the in-memory projection of a scene document.

Nodes are built once by the parser and never mutated afterwards.
Positions are node-relative: ``(x, y)`` is the offset inside the parent,
with the source's top-left origin and Y growing downward.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class NodeKind(enum.Enum):
    VECTOR_SHAPE = "vector-shape"
    FRAME = "rectangular-container"
    RECTANGLE = "rectangle"
    ELLIPSE = "ellipse"
    MARKER = "marker-instance"
    GROUP = "group"
    OTHER = "other"


@dataclass(frozen=True)
class Segment:
    """Undirected edge between two vertex indices."""

    start: int
    end: int


@dataclass(frozen=True)
class Region:
    """Grouping of segment indices into loops. Loop 0 is the exterior."""

    winding_rule: str = "NONZERO"
    loops: tuple[tuple[int, ...], ...] = ()


@dataclass(frozen=True)
class VectorNetwork:
    vertices: tuple[tuple[float, float], ...] = ()
    segments: tuple[Segment, ...] = ()
    regions: tuple[Region, ...] = ()

    def loop_segments(self, loop: tuple[int, ...]) -> list[Segment]:
        return [self.segments[i] for i in loop if 0 <= i < len(self.segments)]


@dataclass(eq=False)
class SceneNode:
    """A single node of the scene tree."""

    id: str
    name: str
    kind: NodeKind
    # Offset within the parent container
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    children: list[SceneNode] = field(default_factory=list)
    parent: SceneNode | None = field(default=None, repr=False)
    # Vector shapes only
    vector_network: VectorNetwork | None = None
    # Marker instances only: key into the component registry
    component_id: str | None = None

