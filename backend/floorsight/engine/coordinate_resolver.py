"""Resolve node positions into a floor's space and flip to Y-up.

Source positions are relative to the parent node, top-left origin, Y down.
Output coordinates share one frame per floor with a bottom-left origin,
Y up. The flip is applied once, after all offsets have been accumulated.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from floorsight.scene.nodes import SceneNode


@dataclass(frozen=True)
class Resolved:
    """Node origin expressed in the reference node's local space."""

    x: float
    y: float

    @property
    def found(self) -> bool:
        return True


@dataclass(frozen=True)
class NotFound:
    """The reference node is not an ancestor of the node."""

    node_id: str

    @property
    def found(self) -> bool:
        return False


Resolution = Resolved | NotFound


def resolve_offset(node: SceneNode, reference: SceneNode) -> Resolution:
    """Sum ``(x, y)`` offsets from ``node`` up to (not including) ``reference``."""
    x = 0.0
    y = 0.0
    current: SceneNode | None = node
    while current is not None and current.id != reference.id:
        x += current.x
        y += current.y
        current = current.parent

    if current is None:
        return NotFound(node_id=node.id)
    return Resolved(x=x, y=y)


def flip_y(y: float | NDArray[np.float64], frame_height: float) -> float | NDArray[np.float64]:
    """Top-left, Y-down to bottom-left, Y-up. Works elementwise on arrays."""
    return frame_height - y


def to_output_space(
    points: ArrayLike,
    origin: Resolved,
    frame_height: float,
) -> NDArray[np.float64]:
    """Shift local Nx2 points by ``origin`` and flip Y against ``frame_height``."""
    pts = np.array(points, dtype=np.float64).reshape(-1, 2)
    pts[:, 0] += origin.x
    pts[:, 1] = flip_y(pts[:, 1] + origin.y, frame_height)
    return pts


def bbox_corners(node: SceneNode) -> NDArray[np.float64]:
    """Local bounding-box corners: top-left, top-right, bottom-right, bottom-left."""
    w, h = node.width, node.height
    return np.array([(0.0, 0.0), (w, 0.0), (w, h), (0.0, h)], dtype=np.float64)


def bbox_center(node: SceneNode) -> NDArray[np.float64]:
    return np.array([(node.width / 2, node.height / 2)], dtype=np.float64)
