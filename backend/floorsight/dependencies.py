"""FastAPI dependency injection."""

from __future__ import annotations

from floorsight.config import settings
from floorsight.engine.config import ExportConfig


def get_export_config() -> ExportConfig:
    return ExportConfig.from_settings(settings)
