"""Tests for per-kind shape geometry."""

from __future__ import annotations

import pytest
from shapely.geometry import Point, Polygon

from floorsight.engine.config import ExportConfig
from floorsight.engine.shape_builder import build_shape_feature, get_builder
from floorsight.scene.nodes import NodeKind, Region, Segment, VectorNetwork
from tests.conftest import make_node

SQUARE = ((0.0, 0.0), (40.0, 0.0), (40.0, 40.0), (0.0, 40.0))
INNER = ((10.0, 10.0), (30.0, 10.0), (30.0, 30.0), (10.0, 30.0))


def _square_network(hole_loop=(4, 5, 6, 7), with_region=True) -> VectorNetwork:
    segments = tuple(Segment(a, b) for a, b in [(0, 1), (1, 2), (2, 3), (3, 0)])
    segments += tuple(Segment(a, b) for a, b in [(4, 5), (5, 6), (6, 7), (7, 4)])
    regions = (Region(loops=((0, 1, 2, 3), hole_loop)),) if with_region else ()
    return VectorNetwork(vertices=SQUARE + INNER, segments=segments, regions=regions)


@pytest.fixture
def floor():
    return make_node("1F", NodeKind.FRAME, width=200, height=100)


def _rings(polygon: Polygon) -> list[list[list[float]]]:
    rings = [polygon.exterior] + list(polygon.interiors)
    return [[list(c) for c in ring.coords] for ring in rings]


def test_every_kind_has_a_builder():
    for kind in NodeKind:
        assert callable(get_builder(kind))


def test_rectangle_ring(floor):
    rect = make_node("Lobby", NodeKind.RECTANGLE, 0, 0, 100, 50, parent=floor)
    feature = build_shape_feature(rect, floor, 50.0)
    assert feature is not None
    assert feature.properties == {"id": "Lobby"}
    assert _rings(feature.geometry) == [
        [[0, 50], [100, 50], [100, 0], [0, 0], [0, 50]],
    ]


def test_rectangle_with_empty_bbox_is_dropped(floor):
    line = make_node("Line", NodeKind.RECTANGLE, 0, 0, 100, 0, parent=floor)
    assert build_shape_feature(line, floor, 100.0) is None


def test_ellipse_is_point_with_radius(floor):
    group = make_node("Garden", x=50, y=10, parent=floor)
    pond = make_node("Pond", NodeKind.ELLIPSE, 10, 20, 30, 16, parent=group)
    feature = build_shape_feature(pond, floor, 100.0)
    assert isinstance(feature.geometry, Point)
    assert (feature.geometry.x, feature.geometry.y) == (75.0, 100.0 - 38.0)
    assert feature.properties == {"id": "Pond", "radius": 15.0}


def test_vector_with_hole(floor):
    node = make_node(
        "Atrium", NodeKind.VECTOR_SHAPE, 10, 5, 40, 40, parent=floor,
        vector_network=_square_network(),
    )
    feature = build_shape_feature(node, floor, 100.0)
    rings = _rings(feature.geometry)
    assert len(rings) == 2
    for ring in rings:
        assert ring[0] == ring[-1]
    assert rings[0] == [[10, 95], [50, 95], [50, 55], [10, 55], [10, 95]]
    assert rings[1] == [[20, 85], [40, 85], [40, 65], [20, 65], [20, 85]]


def test_vector_without_regions_has_no_holes(floor):
    node = make_node(
        "Slab", NodeKind.VECTOR_SHAPE, parent=floor,
        vector_network=_square_network(with_region=False),
    )
    feature = build_shape_feature(node, floor, 100.0)
    assert len(feature.geometry.interiors) == 0


def test_short_hole_is_skipped(floor):
    node = make_node(
        "Atrium", NodeKind.VECTOR_SHAPE, parent=floor,
        vector_network=_square_network(hole_loop=(4, 5)),
    )
    feature = build_shape_feature(node, floor, 100.0)
    assert feature is not None
    assert len(feature.geometry.interiors) == 0


def test_exterior_stalling_early_drops_the_shape(floor):
    network = VectorNetwork(
        vertices=SQUARE,
        segments=(Segment(0, 1), Segment(2, 3), Segment(3, 0)),
    )
    node = make_node("Wall", NodeKind.VECTOR_SHAPE, parent=floor, vector_network=network)
    assert build_shape_feature(node, floor, 100.0) is None


def test_open_exterior_keeps_the_traced_prefix(floor):
    # (3, 0) missing: the walk from (1, 2) reaches 3 and stops
    network = VectorNetwork(
        vertices=SQUARE,
        segments=(Segment(1, 2), Segment(2, 3), Segment(0, 1)),
    )
    node = make_node("Wall", NodeKind.VECTOR_SHAPE, parent=floor, vector_network=network)
    feature = build_shape_feature(node, floor, 100.0)
    assert _rings(feature.geometry) == [
        [[40, 100], [40, 60], [0, 60], [40, 100]],
    ]


@pytest.mark.parametrize("n_segments", [0, 1, 2])
def test_degenerate_vector_is_dropped(floor, n_segments):
    segments = (Segment(0, 1), Segment(1, 2))[:n_segments]
    network = VectorNetwork(vertices=SQUARE, segments=segments)
    node = make_node("Stub", NodeKind.VECTOR_SHAPE, parent=floor, vector_network=network)
    assert build_shape_feature(node, floor, 100.0) is None


def test_vector_with_coincident_vertices_is_dropped(floor):
    network = VectorNetwork(
        vertices=((0.0, 0.0), (10.0, 0.0), (0.0, 0.0)),
        segments=(Segment(0, 1), Segment(1, 2), Segment(2, 0)),
        regions=(),
    )
    node = make_node("Sliver", NodeKind.VECTOR_SHAPE, parent=floor, vector_network=network)
    assert build_shape_feature(node, floor, 100.0) is None


def test_min_ring_vertices_is_configurable(floor):
    node = make_node(
        "Tri", NodeKind.VECTOR_SHAPE, parent=floor,
        vector_network=VectorNetwork(
            vertices=SQUARE[:3],
            segments=(Segment(0, 1), Segment(1, 2), Segment(2, 0)),
        ),
    )
    assert build_shape_feature(node, floor, 100.0) is not None
    assert build_shape_feature(node, floor, 100.0, ExportConfig(min_ring_vertices=4)) is None


@pytest.mark.parametrize("kind", [NodeKind.MARKER, NodeKind.GROUP, NodeKind.OTHER])
def test_kinds_without_shape(floor, kind):
    node = make_node("Thing", kind, 0, 0, 10, 10, parent=floor)
    assert build_shape_feature(node, floor, 100.0) is None


def test_node_outside_floor(floor):
    elsewhere = make_node("2F", NodeKind.FRAME, width=10, height=10)
    rect = make_node("Closet", NodeKind.RECTANGLE, 0, 0, 5, 5, parent=elsewhere)
    assert build_shape_feature(rect, floor, 100.0) is None
