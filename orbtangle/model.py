"""Core data structures for the untangle puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

VertexId = int
CycleId = int

NO_CYCLE: CycleId = -1


@dataclass
class Vertex:
    """An orb on the canvas. Coordinates change on placement and swaps only."""

    id: VertexId
    x: float = 0.0
    y: float = 0.0

    @property
    def position(self) -> Tuple[float, float]:
        return self.x, self.y


@dataclass
class Edge:
    """Connection between two orbs of the same cycle.

    ``crossing`` is derived state, rewritten on every detection pass.
    """

    a: VertexId
    b: VertexId
    cycle_id: CycleId
    crossing: bool = False

    def touches(self, vertex_id: VertexId) -> bool:
        return self.a == vertex_id or self.b == vertex_id

    def shares_endpoint(self, other: "Edge") -> bool:
        return self.touches(other.a) or self.touches(other.b)


@dataclass
class PuzzleOptions:
    """Tunables for generating and laying out a puzzle."""

    min_orbs: int = 6
    max_orbs: int = 20
    min_cycles: int = 2
    min_cycle_size: int = 3
    width: int = 800
    height: int = 600
    margin: int = 50
    min_distance: float = 60.0
    place_attempts: int = 100
    shuffle_attempts: int = 1000
    random_seed: Optional[int] = None


class PuzzleGenerationError(RuntimeError):
    """Raised when a tangled starting layout cannot be produced."""


Graph = Tuple[List[Vertex], List[Edge]]


__all__ = [
    "VertexId",
    "CycleId",
    "NO_CYCLE",
    "Vertex",
    "Edge",
    "Graph",
    "PuzzleOptions",
    "PuzzleGenerationError",
]
