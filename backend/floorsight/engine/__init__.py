"""FloorSight geometry export engine."""

from floorsight.engine.config import ExportConfig
from floorsight.engine.exporter import export_scene, find_floors
from floorsight.engine.features import ExportResult, Feature, FloorResult
from floorsight.engine.ring_tracer import trace_ring

__all__ = [
    "ExportConfig",
    "export_scene",
    "find_floors",
    "ExportResult",
    "Feature",
    "FloorResult",
    "trace_ring",
]
