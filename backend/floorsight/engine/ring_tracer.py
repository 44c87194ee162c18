"""Ring tracing: ordered vertex sequence from an unordered edge set.

The input edges are assumed to describe exactly one simple closed walk
(every vertex on it has exactly two incident edges). Nothing here raises on
input that breaks that assumption: an open or branching edge set yields the
prefix that could be walked before the trace stalled, and callers decide
whether that prefix is long enough to be a ring.

Known limitation: a cycle missing an edge is truncated, not reported.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from floorsight.scene.nodes import Segment

Edge = Segment | tuple[int, int]


def _endpoints(edge: Edge) -> tuple[int, int]:
    if isinstance(edge, Segment):
        return (edge.start, edge.end)
    a, b = edge
    return (int(a), int(b))


def trace_ring(edges: Sequence[Edge]) -> list[int]:
    """Walk the edge set from its first edge and return vertex indices in order.

    When several unused edges touch the current vertex, the one that comes
    first in ``edges`` wins. The closing vertex is not repeated.
    """
    if not edges:
        return []

    pairs = [_endpoints(e) for e in edges]

    # vertex -> positions of incident edges, ascending
    incident: dict[int, list[int]] = defaultdict(list)
    for pos, (a, b) in enumerate(pairs):
        incident[a].append(pos)
        if b != a:
            incident[b].append(pos)

    used = [False] * len(pairs)
    used[0] = True
    remaining = len(pairs) - 1

    first, current = pairs[0]
    order = [first, current]

    while remaining:
        nxt = next((pos for pos in incident[current] if not used[pos]), None)
        if nxt is None:
            break
        used[nxt] = True
        remaining -= 1
        a, b = pairs[nxt]
        current = b if current == a else a
        order.append(current)

    if len(order) > 1 and order[0] == order[-1]:
        order.pop()
    return order


def distinct_count(indices: Sequence[int]) -> int:
    return len(set(indices))


def ring_points(
    vertices: Sequence[tuple[float, float]],
    edges: Sequence[Edge],
    min_vertices: int = 3,
) -> NDArray[np.float64] | None:
    """Trace ``edges`` and return the ring as an Nx2 array of vertex positions.

    Returns None when there are fewer than ``min_vertices`` edges, when the
    trace has fewer than ``min_vertices`` distinct vertices or distinct
    positions, or when it references a vertex that does not exist.
    """
    if len(edges) < min_vertices:
        return None
    order = trace_ring(edges)
    if distinct_count(order) < min_vertices:
        return None
    if any(i < 0 or i >= len(vertices) for i in order):
        return None
    pts = np.array([vertices[i] for i in order], dtype=np.float64)
    # Distinct indices can still share a position
    if len(np.unique(pts, axis=0)) < min_vertices:
        return None
    return pts
