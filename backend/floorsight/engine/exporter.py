"""Scene exporter: floors of a root container to per-floor feature collections."""

from __future__ import annotations

import asyncio
import logging
import time

from floorsight.engine.categories import CategoryLookup, ComponentRegistryLookup
from floorsight.engine.config import ExportConfig
from floorsight.engine.errors import InvalidSelectionError, NoFloorsError
from floorsight.engine.features import ExportResult
from floorsight.engine.floor_assembler import assemble_floor
from floorsight.scene.nodes import NodeKind, SceneNode

logger = logging.getLogger(__name__)


def find_floors(root: SceneNode) -> list[SceneNode]:
    """Direct children of ``root`` that are frames, in document order."""
    if root.kind is not NodeKind.FRAME:
        raise InvalidSelectionError("Select exactly one top-level frame to export.")

    floors = [child for child in root.children if child.kind is NodeKind.FRAME]
    if not floors:
        raise NoFloorsError(
            "Place one child frame per floor inside the selected frame."
        )
    return floors


async def export_scene(
    root: SceneNode,
    lookup: CategoryLookup | None = None,
    config: ExportConfig | None = None,
) -> ExportResult:
    """Assemble every floor of ``root`` concurrently and drop the empty ones.

    Raises InvalidSelectionError / NoFloorsError when there is nothing that
    could be a floor. A scene whose floors are all empty is not an error;
    the returned result reports ``is_empty``.
    """
    start = time.perf_counter()
    config = config or ExportConfig()
    lookup = lookup or ComponentRegistryLookup()

    floors = find_floors(root)
    logger.info("Export: %d floors queued", len(floors))

    # One bound for the lookups of every floor
    lookup_slots = asyncio.Semaphore(max(1, config.max_concurrent_lookups))

    results = await asyncio.gather(
        *(
            assemble_floor(
                floor,
                root.height if config.flip_frame == "root" else floor.height,
                lookup,
                config,
                lookup_slots,
            )
            for floor in floors
        )
    )

    export = ExportResult(floors=[r for r in results if r is not None])
    export.elapsed_ms = (time.perf_counter() - start) * 1000

    logger.info(
        "Export complete: %d/%d floors with content in %.0fms",
        len(export.floors),
        len(floors),
        export.elapsed_ms,
    )
    return export
