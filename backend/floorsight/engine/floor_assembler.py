"""Floor assembly: marker points and shape features for one floor container.

Markers are searched for anywhere beneath the floor; only top-level
instances count, so the parts of a composite icon are not exported twice.
Shapes are taken from the floor's direct children only.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterator

from shapely.geometry import Point

from floorsight.engine.categories import CategoryLookup, resolve_categories
from floorsight.engine.config import ExportConfig
from floorsight.engine.coordinate_resolver import (
    Resolved,
    bbox_center,
    resolve_offset,
    to_output_space,
)
from floorsight.engine.features import Feature, FloorResult
from floorsight.engine.shape_builder import build_shape_feature
from floorsight.scene.nodes import NodeKind, SceneNode

logger = logging.getLogger(__name__)


def iter_top_level_markers(container: SceneNode) -> Iterator[SceneNode]:
    """Depth-first search for markers that are not inside another marker."""
    for child in container.children:
        if child.kind is NodeKind.MARKER:
            yield child
            continue
        yield from iter_top_level_markers(child)


def marker_id(node: SceneNode) -> str:
    parent_name = node.parent.name if node.parent is not None else ""
    return f"{parent_name}-{node.name}"


async def assemble_floor(
    floor: SceneNode,
    frame_height: float,
    lookup: CategoryLookup,
    config: ExportConfig | None = None,
    lookup_slots: asyncio.Semaphore | None = None,
) -> FloorResult | None:
    """Build both collections for ``floor``. Returns None if both are empty.

    ``lookup_slots`` bounds category lookups across floors assembled together.
    """
    config = config or ExportConfig()

    placed: list[tuple[SceneNode, Resolved]] = []
    for node in iter_top_level_markers(floor):
        origin = resolve_offset(node, floor)
        if not isinstance(origin, Resolved):
            logger.debug("Skipping marker %s: not inside floor %s", node.name, floor.name)
            continue
        placed.append((node, origin))

    categories = await resolve_categories(
        [node for node, _ in placed],
        lookup,
        timeout_s=config.lookup_timeout_s,
        max_concurrency=config.max_concurrent_lookups,
        semaphore=lookup_slots,
    )

    markers: list[Feature] = []
    for (node, origin), category in zip(placed, categories):
        cx, cy = to_output_space(bbox_center(node), origin, frame_height)[0]
        markers.append(
            Feature(
                geometry=Point(cx, cy),
                properties={"id": marker_id(node), "category": category},
            )
        )

    shapes: list[Feature] = []
    for child in floor.children:
        feature = build_shape_feature(child, floor, frame_height, config)
        if feature is not None:
            shapes.append(feature)

    result = FloorResult(floor_id=floor.name, markers=markers, shapes=shapes)
    if result.is_empty:
        logger.info("Floor %s has no markers or shapes, dropping", floor.name)
        return None

    logger.debug(
        "Floor %s: %d markers, %d shapes", floor.name, len(markers), len(shapes)
    )
    return result
