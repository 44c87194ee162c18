"""POST /api/export: scene document to per-floor GeoJSON collections."""

from __future__ import annotations

import dataclasses
import logging
import time

from fastapi import APIRouter, Depends

from floorsight.dependencies import get_export_config
from floorsight.engine.categories import ComponentRegistryLookup
from floorsight.engine.config import ExportConfig
from floorsight.engine.errors import ExportError
from floorsight.engine.exporter import export_scene
from floorsight.models.geojson import to_floor_export
from floorsight.models.requests import ExportRequest
from floorsight.models.responses import ExportResponse
from floorsight.scene.parser import parse_scene

router = APIRouter()
logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "No markers or shapes were found inside the floor frames."


@router.post("/export", response_model=ExportResponse)
async def export(
    req: ExportRequest,
    config: ExportConfig = Depends(get_export_config),
) -> ExportResponse:
    start = time.perf_counter()

    if req.options.flip_frame is not None:
        config = dataclasses.replace(config, flip_frame=req.options.flip_frame)

    try:
        root, components = parse_scene(req)
        result = await export_scene(root, ComponentRegistryLookup(components), config)
    except ExportError as e:
        logger.info("Export rejected: %s", e.message)
        return ExportResponse(
            status="error",
            message=e.message,
            processing_time_ms=round((time.perf_counter() - start) * 1000, 1),
        )

    elapsed = (time.perf_counter() - start) * 1000

    if result.is_empty:
        return ExportResponse(
            status="empty",
            message=EMPTY_MESSAGE,
            processing_time_ms=round(elapsed, 1),
        )

    floors = [to_floor_export(f) for f in result.floors]
    return ExportResponse(
        status="ok",
        floors=floors,
        floor_count=len(floors),
        processing_time_ms=round(elapsed, 1),
    )
