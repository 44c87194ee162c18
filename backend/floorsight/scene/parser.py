"""Scene document parser: facade over the pydantic request models.

Converts a raw scene document (JSON text, dict or SceneDocument) into a
SceneNode tree with parent links plus the component table used for marker
categories.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from floorsight.engine.errors import SceneFormatError
from floorsight.models.requests import SceneDocument, SceneNodeIn, VectorNetworkIn
from floorsight.scene.nodes import NodeKind, Region, SceneNode, Segment, VectorNetwork

logger = logging.getLogger(__name__)

# Host type tags (FRAME, VECTOR, ...) and NodeKind values both map onto NodeKind
_KIND_BY_TYPE: dict[str, NodeKind] = {
    "VECTOR": NodeKind.VECTOR_SHAPE,
    "FRAME": NodeKind.FRAME,
    "RECTANGLE": NodeKind.RECTANGLE,
    "ELLIPSE": NodeKind.ELLIPSE,
    "INSTANCE": NodeKind.MARKER,
    "GROUP": NodeKind.GROUP,
}
_KIND_BY_TYPE.update({kind.value.upper(): kind for kind in NodeKind})


def node_kind(type_tag: str) -> NodeKind:
    return _KIND_BY_TYPE.get(type_tag.strip().upper(), NodeKind.OTHER)


def parse_scene(source: str | bytes | dict[str, Any] | SceneDocument) -> tuple[SceneNode, dict[str, str]]:
    """Parse a scene document into ``(root node, component id -> name)``."""
    if isinstance(source, SceneDocument):
        doc = source
    else:
        try:
            if isinstance(source, (str, bytes)):
                doc = SceneDocument.model_validate_json(source)
            else:
                doc = SceneDocument.model_validate(source)
        except ValidationError as e:
            raise SceneFormatError(f"Invalid scene document: {e.error_count()} error(s)") from e

    root = _build_node(doc.document, parent=None)
    logger.debug("Parsed scene %s with %d components", root.name, len(doc.components))
    return root, dict(doc.components)


def _build_node(raw: SceneNodeIn, parent: SceneNode | None) -> SceneNode:
    kind = node_kind(raw.type)
    node = SceneNode(
        id=raw.id,
        name=raw.name,
        kind=kind,
        x=raw.x,
        y=raw.y,
        width=raw.width,
        height=raw.height,
        parent=parent,
        component_id=raw.component_id,
    )
    if kind is NodeKind.VECTOR_SHAPE and raw.vector_network is not None:
        node.vector_network = _build_network(raw.vector_network, raw.name)

    node.children = [_build_node(child, parent=node) for child in raw.children]
    return node


def _build_network(raw: VectorNetworkIn, owner: str) -> VectorNetwork:
    vertices = tuple((v.x, v.y) for v in raw.vertices)
    n = len(vertices)

    segments: list[Segment] = []
    # Loops index the segment list as given; remap them past dropped segments
    remap: dict[int, int] = {}
    for i, s in enumerate(raw.segments):
        if not (0 <= s.start < n and 0 <= s.end < n):
            logger.warning(
                "Dropping segment (%d, %d) of %s: vertex out of range", s.start, s.end, owner
            )
            continue
        remap[i] = len(segments)
        segments.append(Segment(s.start, s.end))

    regions = tuple(
        Region(
            winding_rule=r.winding_rule,
            loops=tuple(tuple(remap[i] for i in loop if i in remap) for loop in r.loops),
        )
        for r in raw.regions
    )
    return VectorNetwork(vertices=vertices, segments=tuple(segments), regions=regions)
