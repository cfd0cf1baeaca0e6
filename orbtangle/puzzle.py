"""Puzzle state, orb selection and the tangled starting layout."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Literal, Optional, Set

import numpy as np

from .config import get_default_options
from .crossings import clean_cycles, cycle_is_clean, detect_crossings, owner_cycle
from .generator import generate
from .layout import place
from .logging_utils import apply_debug_logging
from .model import (
    NO_CYCLE,
    CycleId,
    Edge,
    PuzzleGenerationError,
    PuzzleOptions,
    Vertex,
    VertexId,
)
from .validate import validate_graph

logger = logging.getLogger(__name__)

SelectionKind = Literal["selected", "deselected", "swapped"]


def swap(v1: Vertex, v2: Vertex) -> None:
    """Exchange the positions of two vertices; ids stay put."""

    v1.x, v1.y, v2.x, v2.y = v2.x, v2.y, v1.x, v1.y


@dataclass(frozen=True)
class SelectionEvent:
    kind: SelectionKind
    vertex_id: VertexId
    other_id: Optional[VertexId] = None


@dataclass(frozen=True)
class SettleReport:
    crossings: int
    clean_cycles: Set[CycleId]
    newly_solved: bool

    @property
    def solved(self) -> bool:
        return self.crossings == 0


@dataclass
class PuzzleState:
    """Vertices, edges and the selection of a single puzzle session.

    Selection follows ``Idle -> OrbSelected -> Idle``: picking an orb selects
    it, picking it again clears the selection and picking a different orb
    swaps the two. Crossing flags are refreshed by :meth:`detect` or
    :meth:`settle`, never by a swap itself.
    """

    vertices: List[Vertex]
    edges: List[Edge]
    selected: Optional[VertexId] = None
    moves: int = 0
    crossings: int = field(init=False, default=0)
    solved_announced: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        self.crossings = detect_crossings(self.vertices, self.edges)

    def _vertex(self, vertex_id: VertexId) -> Vertex:
        if not 0 <= vertex_id < len(self.vertices):
            raise ValueError(f"vertex id {vertex_id} out of range 0..{len(self.vertices) - 1}")
        return self.vertices[vertex_id]

    @property
    def is_solved(self) -> bool:
        return self.crossings == 0

    def swap(self, a_id: VertexId, b_id: VertexId) -> None:
        swap(self._vertex(a_id), self._vertex(b_id))

    def detect(self) -> int:
        self.crossings = detect_crossings(self.vertices, self.edges)
        return self.crossings

    def clean_cycles(self) -> Set[CycleId]:
        return clean_cycles(self.edges)

    def cycle_is_clean(self, cycle_id: CycleId) -> bool:
        return cycle_is_clean(self.edges, cycle_id)

    def owner_cycle(self, vertex_id: VertexId) -> CycleId:
        return owner_cycle(self.edges, vertex_id)

    def is_clean_vertex(self, vertex_id: VertexId) -> bool:
        """``True`` when the vertex's cycle has no crossing edge."""

        cycle_id = self.owner_cycle(vertex_id)
        return cycle_id != NO_CYCLE and self.cycle_is_clean(cycle_id)

    def select(self, vertex_id: VertexId) -> SelectionEvent:
        self._vertex(vertex_id)
        if self.selected is None:
            self.selected = vertex_id
            return SelectionEvent("selected", vertex_id)
        if self.selected == vertex_id:
            self.selected = None
            return SelectionEvent("deselected", vertex_id)

        first = self.selected
        self.swap(first, vertex_id)
        self.selected = None
        self.moves += 1
        logger.debug("Swapped orbs %d and %d (move %d)", first, vertex_id, self.moves)
        return SelectionEvent("swapped", first, vertex_id)

    def settle(self) -> SettleReport:
        """Re-detect crossings once a swap has visually settled.

        ``newly_solved`` is reported once per solved layout; it re-arms only
        after a later settle finds crossings again.
        """

        count = self.detect()
        newly_solved = count == 0 and not self.solved_announced
        self.solved_announced = count == 0
        if newly_solved:
            logger.info("Puzzle solved after %d move(s)", self.moves)
        return SettleReport(crossings=count, clean_cycles=self.clean_cycles(), newly_solved=newly_solved)


def shuffle_until_tangled(state: PuzzleState, rng: np.random.Generator, max_attempts: int = 1000) -> int:
    """Swap random distinct orbs until at least one crossing exists.

    Returns the number of swaps performed; a layout that is already tangled
    is left as is.
    """

    count = len(state.vertices)
    if count < 2:
        raise ValueError("shuffling needs at least two vertices")

    attempts = 0
    while state.detect() == 0:
        if attempts >= max_attempts:
            raise PuzzleGenerationError(f"layout still untangled after {attempts} shuffle swaps")
        first = int(rng.integers(0, count))
        second = int(rng.integers(0, count))
        while first == second:
            second = int(rng.integers(0, count))
        state.swap(first, second)
        attempts += 1
    return attempts


def new_puzzle(
    options: Optional[PuzzleOptions] = None,
    rng: Optional[np.random.Generator] = None,
) -> PuzzleState:
    """Generate, place and shuffle a fresh puzzle."""

    options = options or get_default_options()
    if rng is None:
        rng = np.random.default_rng(options.random_seed)

    vertices, edges = generate(rng, options)
    validate_graph(vertices, edges, options.min_cycle_size)
    place(
        vertices,
        options.width,
        options.height,
        options.margin,
        options.min_distance,
        rng,
        max_attempts=options.place_attempts,
    )
    state = PuzzleState(vertices, edges)
    swaps = shuffle_until_tangled(state, rng, options.shuffle_attempts)
    logger.info(
        "Created puzzle with %d orbs, %d edges and %d crossing(s) after %d shuffle swap(s)",
        len(vertices),
        len(edges),
        state.crossings,
        swaps,
    )
    return state


apply_debug_logging(globals(), logger=logger, skip={"swap", "PuzzleState.detect"})


__all__ = [
    "swap",
    "SelectionEvent",
    "SettleReport",
    "PuzzleState",
    "shuffle_until_tangled",
    "new_puzzle",
]
