from collections import defaultdict
from typing import Dict, Iterable, List, Sequence

from .crossings import clean_cycles
from .model import Edge, Vertex
from .puzzle import PuzzleState


def format_vertex(vertex: Vertex) -> str:
    return f"orb {vertex.id} at ({vertex.x:g}, {vertex.y:g})"


def format_edge(edge: Edge) -> str:
    mark = " [crossing]" if edge.crossing else ""
    return f"edge {edge.a}-{edge.b} cycle {edge.cycle_id}{mark}"


def _walk_members(cycle_edges: Sequence[Edge]) -> List[int]:
    """Vertex ids of one cycle in loop order, starting from the lowest id."""

    adjacency: Dict[int, List[int]] = defaultdict(list)
    for edge in cycle_edges:
        adjacency[edge.a].append(edge.b)
        adjacency[edge.b].append(edge.a)
    start = min(adjacency)
    members = [start]
    prev, current = None, start
    while True:
        nxt = next((n for n in adjacency[current] if n != prev), None)
        if nxt is None or nxt == start or nxt in members:
            break
        members.append(nxt)
        prev, current = current, nxt
    return members


def _cycle_lines(edges: Sequence[Edge]) -> Iterable[str]:
    clean = clean_cycles(edges)
    for cycle_id in sorted({edge.cycle_id for edge in edges}):
        members = _walk_members([edge for edge in edges if edge.cycle_id == cycle_id])
        status = "clean" if cycle_id in clean else "crossing"
        yield f"cycle {cycle_id} ({'-'.join(str(m) for m in members)}): {status}"


def print_puzzle(state: PuzzleState) -> str:
    """Plain-text dump of orbs, edges and cycle status, one item per line."""

    lines: List[str] = []
    lines.extend(format_vertex(vertex) for vertex in state.vertices)
    lines.extend(format_edge(edge) for edge in state.edges)
    lines.extend(_cycle_lines(state.edges))
    lines.append(f"crossings: {state.crossings}")
    return "\n".join(lines) + "\n"
