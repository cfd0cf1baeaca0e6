"""Pairwise edge crossing detection and cycle classification."""

from __future__ import annotations

import logging
from typing import List, Sequence, Set, Tuple

from .model import NO_CYCLE, CycleId, Edge, Vertex, VertexId

logger = logging.getLogger(__name__)


def segments_intersect(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    x3: float,
    y3: float,
    x4: float,
    y4: float,
) -> bool:
    """Return ``True`` when segment (p1, p2) meets segment (p3, p4).

    Parallel and collinear segments never intersect. Touching at an endpoint
    counts as an intersection.
    """

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if denom == 0:
        return False
    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / denom
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / denom
    return 0 <= t <= 1 and 0 <= u <= 1


def edges_cross(vertices: Sequence[Vertex], first: Edge, second: Edge) -> bool:
    """Geometric crossing test for two edges; shared endpoints never cross."""

    if first.shares_endpoint(second):
        return False
    p1, p2 = vertices[first.a], vertices[first.b]
    p3, p4 = vertices[second.a], vertices[second.b]
    return segments_intersect(p1.x, p1.y, p2.x, p2.y, p3.x, p3.y, p4.x, p4.y)


def detect_crossings(vertices: Sequence[Vertex], edges: Sequence[Edge]) -> int:
    """Flag every crossing edge and return the number of crossing pairs found.

    Pairs whose edges are both already flagged are not re-tested, so the
    count can be lower than the full number of intersecting pairs. It is zero
    exactly when no two edges cross.
    """

    for edge in edges:
        edge.crossing = False

    count = 0
    for i in range(len(edges)):
        first = edges[i]
        for j in range(i + 1, len(edges)):
            second = edges[j]
            if first.crossing and second.crossing:
                continue
            if edges_cross(vertices, first, second):
                first.crossing = True
                second.crossing = True
                count += 1

    logger.debug("Crossings found: %d", count)
    return count


def crossing_pairs(vertices: Sequence[Vertex], edges: Sequence[Edge]) -> List[Tuple[int, int]]:
    """Every crossing pair of edge indices ``(i, j)`` with ``i < j``.

    Does not touch the ``crossing`` flags.
    """

    return [
        (i, j)
        for i in range(len(edges))
        for j in range(i + 1, len(edges))
        if edges_cross(vertices, edges[i], edges[j])
    ]


def clean_cycles(edges: Sequence[Edge]) -> Set[CycleId]:
    """Ids of cycles none of whose edges is flagged as crossing."""

    seen: Set[CycleId] = set()
    tangled: Set[CycleId] = set()
    for edge in edges:
        seen.add(edge.cycle_id)
        if edge.crossing:
            tangled.add(edge.cycle_id)
    return seen - tangled


def cycle_is_clean(edges: Sequence[Edge], cycle_id: CycleId) -> bool:
    return not any(edge.crossing for edge in edges if edge.cycle_id == cycle_id)


def owner_cycle(edges: Sequence[Edge], vertex_id: VertexId) -> CycleId:
    """Cycle id of the first edge touching ``vertex_id``, else ``NO_CYCLE``."""

    for edge in edges:
        if edge.touches(vertex_id):
            return edge.cycle_id
    return NO_CYCLE


__all__ = [
    "segments_intersect",
    "edges_cross",
    "detect_crossings",
    "crossing_pairs",
    "clean_cycles",
    "cycle_is_clean",
    "owner_cycle",
]
