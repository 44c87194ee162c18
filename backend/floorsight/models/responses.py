"""API response models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from floorsight.models.geojson import FloorExport


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class ExportResponse(BaseModel):
    status: Literal["ok", "empty", "error"] = "ok"
    message: str = ""
    floors: list[FloorExport] = Field(default_factory=list)
    floor_count: int = 0
    processing_time_ms: float = 0.0
