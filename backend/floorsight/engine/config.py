"""Export configuration: controls geometry acceptance and lookup fan-out."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from floorsight.config import Settings


@dataclass
class ExportConfig:
    """Knobs for a single export run."""

    # Rings with fewer distinct vertices are dropped
    min_ring_vertices: int = 3

    # Category lookups: per-marker timeout and fan-out bound
    lookup_timeout_s: float = 5.0
    max_concurrent_lookups: int = 32

    # "floor" = flip against each floor's height, "root" = the root container's
    flip_frame: Literal["floor", "root"] = "floor"

    @classmethod
    def from_settings(cls, settings: Settings) -> ExportConfig:
        return cls(
            lookup_timeout_s=settings.lookup_timeout_s,
            max_concurrent_lookups=settings.max_concurrent_lookups,
            flip_frame=settings.flip_frame,
        )
