"""Shape geometry builders: one feature (or nothing) per floor child.

Every NodeKind has exactly one builder, registered via decorator:

    @shape_builder(NodeKind.ELLIPSE)
    def _ellipse(node, origin, frame_height, config) -> Feature | None:
        ...

Kinds that never produce a shape register ``_no_shape``. Importing this
module fails if a kind is left without a builder.
"""

from __future__ import annotations

import logging
from typing import Callable

from shapely.geometry import Point, Polygon

from floorsight.engine.config import ExportConfig
from floorsight.engine.coordinate_resolver import (
    NotFound,
    Resolved,
    bbox_center,
    bbox_corners,
    resolve_offset,
    to_output_space,
)
from floorsight.engine.features import Feature
from floorsight.engine.ring_tracer import ring_points
from floorsight.scene.nodes import NodeKind, SceneNode

logger = logging.getLogger(__name__)

ShapeBuilder = Callable[[SceneNode, Resolved, float, ExportConfig], "Feature | None"]

_builders: dict[NodeKind, ShapeBuilder] = {}


def shape_builder(*kinds: NodeKind):
    """Decorator to register a builder for one or more node kinds."""

    def decorator(fn: ShapeBuilder) -> ShapeBuilder:
        for kind in kinds:
            if kind in _builders:
                raise ValueError(f"Duplicate shape builder for {kind.name}")
            _builders[kind] = fn
        return fn

    return decorator


def get_builder(kind: NodeKind) -> ShapeBuilder:
    return _builders[kind]


def build_shape_feature(
    node: SceneNode,
    floor: SceneNode,
    frame_height: float,
    config: ExportConfig | None = None,
) -> Feature | None:
    """Build the feature for ``node``, positioned in ``floor``'s flipped space."""
    config = config or ExportConfig()

    origin = resolve_offset(node, floor)
    if isinstance(origin, NotFound):
        logger.debug("Skipping %s: not inside floor %s", node.name, floor.name)
        return None

    return _builders[node.kind](node, origin, frame_height, config)


@shape_builder(NodeKind.VECTOR_SHAPE)
def _vector_shape(
    node: SceneNode,
    origin: Resolved,
    frame_height: float,
    config: ExportConfig,
) -> Feature | None:
    network = node.vector_network
    if network is None:
        return None

    exterior = ring_points(network.vertices, network.segments, config.min_ring_vertices)
    if exterior is None:
        logger.debug("Dropping %s: exterior ring has too few vertices", node.name)
        return None

    holes = []
    if network.regions:
        for loop_no, loop in enumerate(network.regions[0].loops[1:], start=1):
            ring = ring_points(
                network.vertices,
                network.loop_segments(loop),
                config.min_ring_vertices,
            )
            if ring is None:
                logger.debug("Dropping hole %d of %s: too few vertices", loop_no, node.name)
                continue
            holes.append(to_output_space(ring, origin, frame_height))

    polygon = Polygon(to_output_space(exterior, origin, frame_height), holes)
    return Feature(geometry=polygon, properties={"id": node.name})


@shape_builder(NodeKind.FRAME, NodeKind.RECTANGLE)
def _rectangle(
    node: SceneNode,
    origin: Resolved,
    frame_height: float,
    config: ExportConfig,
) -> Feature | None:
    if node.width <= 0 or node.height <= 0:
        logger.debug("Dropping %s: empty bounding box", node.name)
        return None
    corners = to_output_space(bbox_corners(node), origin, frame_height)
    return Feature(geometry=Polygon(corners), properties={"id": node.name})


@shape_builder(NodeKind.ELLIPSE)
def _ellipse(
    node: SceneNode,
    origin: Resolved,
    frame_height: float,
    config: ExportConfig,
) -> Feature | None:
    # Approximated as center + radius, no tessellation
    cx, cy = to_output_space(bbox_center(node), origin, frame_height)[0]
    return Feature(
        geometry=Point(cx, cy),
        properties={"id": node.name, "radius": node.width / 2},
    )


@shape_builder(NodeKind.MARKER, NodeKind.GROUP, NodeKind.OTHER)
def _no_shape(
    node: SceneNode,
    origin: Resolved,
    frame_height: float,
    config: ExportConfig,
) -> Feature | None:
    return None


_missing = set(NodeKind) - set(_builders)
if _missing:
    raise RuntimeError(f"No shape builder for: {sorted(k.name for k in _missing)}")
