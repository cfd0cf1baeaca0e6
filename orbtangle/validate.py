from collections import defaultdict
from typing import Dict, List, Sequence, Set

from .model import Edge, Vertex


class ValidationError(Exception):
    pass


def _ensure_ids(vertices: Sequence[Vertex]) -> None:
    for idx, vertex in enumerate(vertices):
        if vertex.id != idx:
            raise ValidationError(f'vertex at index {idx} has id {vertex.id}, expected {idx}')


def _walk_cycle(cycle_id: int, members: Set[int], adjacency: Dict[int, List[int]]) -> None:
    start = min(members)
    prev, current = None, start
    visited = {start}
    while True:
        a, b = adjacency[current]
        nxt = b if a == prev else a
        if nxt == start:
            break
        if nxt in visited:
            raise ValidationError(f'cycle {cycle_id} does not close at vertex {start}')
        visited.add(nxt)
        prev, current = current, nxt
    if visited != members:
        raise ValidationError(f'cycle {cycle_id} splits into more than one loop')


def validate_graph(vertices: Sequence[Vertex], edges: Sequence[Edge], min_cycle_size: int = 3) -> None:
    """Raise ``ValidationError`` unless the graph is a union of disjoint simple cycles."""

    _ensure_ids(vertices)
    count = len(vertices)
    adjacency: Dict[int, List[int]] = defaultdict(list)
    members: Dict[int, Set[int]] = defaultdict(set)
    owner: Dict[int, int] = {}

    for edge in edges:
        for endpoint in (edge.a, edge.b):
            if not 0 <= endpoint < count:
                raise ValidationError(f'edge {edge.a}-{edge.b} references unknown vertex {endpoint}')
            if owner.setdefault(endpoint, edge.cycle_id) != edge.cycle_id:
                raise ValidationError(
                    f'vertex {endpoint} belongs to cycles {owner[endpoint]} and {edge.cycle_id}'
                )
            members[edge.cycle_id].add(endpoint)
        if edge.a == edge.b:
            raise ValidationError(f'edge {edge.a}-{edge.b} is a self loop')
        adjacency[edge.a].append(edge.b)
        adjacency[edge.b].append(edge.a)

    for vertex in vertices:
        degree = len(adjacency.get(vertex.id, []))
        if degree != 2:
            raise ValidationError(f'vertex {vertex.id} has degree {degree}, expected 2')

    for cycle_id, cycle_members in sorted(members.items()):
        if len(cycle_members) < min_cycle_size:
            raise ValidationError(
                f'cycle {cycle_id} has {len(cycle_members)} vertices, needs at least {min_cycle_size}'
            )
        _walk_cycle(cycle_id, cycle_members, adjacency)
