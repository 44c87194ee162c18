"""Shared test fixtures."""

from __future__ import annotations

import copy

import pytest

from floorsight.scene.nodes import NodeKind, SceneNode


# One floor: a lobby rectangle and a desk marker nested in a group
SIMPLE_SCENE = {
    "document": {
        "id": "1:1",
        "name": "Building",
        "type": "FRAME",
        "x": 0,
        "y": 0,
        "width": 100,
        "height": 50,
        "children": [
            {
                "id": "2:1",
                "name": "1F",
                "type": "FRAME",
                "x": 0,
                "y": 0,
                "width": 100,
                "height": 50,
                "children": [
                    {
                        "id": "3:1",
                        "name": "Lobby",
                        "type": "RECTANGLE",
                        "x": 0,
                        "y": 0,
                        "width": 100,
                        "height": 50,
                    },
                    {
                        "id": "3:2",
                        "name": "Room A",
                        "type": "GROUP",
                        "x": 10,
                        "y": 10,
                        "width": 50,
                        "height": 30,
                        "children": [
                            {
                                "id": "4:1",
                                "name": "Desk",
                                "type": "INSTANCE",
                                "x": 40,
                                "y": 20,
                                "width": 0,
                                "height": 0,
                                "componentId": "10:1",
                            },
                        ],
                    },
                ],
            },
        ],
    },
    "components": {"10:1": "desk"},
}

# Square 40x40 with a 20x20 square hole, placed at (10, 5) on a 100-high floor
SQUARE_WITH_HOLE_NETWORK = {
    "vertices": [
        {"x": 0, "y": 0},
        {"x": 40, "y": 0},
        {"x": 40, "y": 40},
        {"x": 0, "y": 40},
        {"x": 10, "y": 10},
        {"x": 30, "y": 10},
        {"x": 30, "y": 30},
        {"x": 10, "y": 30},
    ],
    "segments": [
        {"start": 0, "end": 1},
        {"start": 1, "end": 2},
        {"start": 2, "end": 3},
        {"start": 3, "end": 0},
        {"start": 4, "end": 5},
        {"start": 5, "end": 6},
        {"start": 6, "end": 7},
        {"start": 7, "end": 4},
    ],
    "regions": [{"windingRule": "EVENODD", "loops": [[0, 1, 2, 3], [4, 5, 6, 7]]}],
}

HOLE_SCENE = {
    "document": {
        "id": "1:1",
        "name": "Campus",
        "type": "FRAME",
        "width": 200,
        "height": 120,
        "children": [
            {
                "id": "2:1",
                "name": "B1",
                "type": "FRAME",
                "x": 0,
                "y": 20,
                "width": 200,
                "height": 100,
                "children": [
                    {
                        "id": "3:1",
                        "name": "Atrium",
                        "type": "VECTOR",
                        "x": 10,
                        "y": 5,
                        "width": 40,
                        "height": 40,
                        "vectorNetwork": SQUARE_WITH_HOLE_NETWORK,
                    },
                    {
                        "id": "3:2",
                        "name": "Fountain",
                        "type": "ELLIPSE",
                        "x": 100,
                        "y": 40,
                        "width": 20,
                        "height": 20,
                    },
                ],
            },
            {
                "id": "2:2",
                "name": "Roof",
                "type": "FRAME",
                "x": 0,
                "y": 0,
                "width": 200,
                "height": 20,
                "children": [],
            },
        ],
    },
    "components": {},
}


def make_node(
    name: str,
    kind: NodeKind = NodeKind.GROUP,
    x: float = 0.0,
    y: float = 0.0,
    width: float = 0.0,
    height: float = 0.0,
    parent: SceneNode | None = None,
    **kwargs,
) -> SceneNode:
    """Build a node and attach it to ``parent``."""
    node = SceneNode(
        id=f"{name}-id",
        name=name,
        kind=kind,
        x=x,
        y=y,
        width=width,
        height=height,
        parent=parent,
        **kwargs,
    )
    if parent is not None:
        parent.children.append(node)
    return node


@pytest.fixture
def simple_scene() -> dict:
    return copy.deepcopy(SIMPLE_SCENE)


@pytest.fixture
def hole_scene() -> dict:
    return copy.deepcopy(HOLE_SCENE)
