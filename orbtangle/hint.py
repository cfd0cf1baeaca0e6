"""Greedy swap suggestions."""

from __future__ import annotations

import copy
import logging
from itertools import combinations
from typing import Callable, Optional, Tuple

from .crossings import crossing_pairs
from .logging_utils import apply_debug_logging
from .puzzle import PuzzleState, SettleReport, swap

logger = logging.getLogger(__name__)


def best_swap(state: PuzzleState) -> Optional[Tuple[int, int]]:
    """Swap that removes the most crossing pairs, or ``None`` if none helps.

    Ties go to the lexicographically smallest pair of vertex ids. The state
    itself is not modified.
    """

    vertices = copy.deepcopy(state.vertices)
    best: Optional[Tuple[int, int]] = None
    best_count = len(crossing_pairs(vertices, state.edges))
    for a, b in combinations(range(len(vertices)), 2):
        swap(vertices[a], vertices[b])
        count = len(crossing_pairs(vertices, state.edges))
        swap(vertices[a], vertices[b])
        if count < best_count:
            best, best_count = (a, b), count
    return best


def solve_greedy(
    state: PuzzleState,
    max_moves: int = 50,
    on_move: Optional[Callable[[Tuple[int, int], SettleReport], None]] = None,
) -> int:
    """Apply best swaps through the selection flow until solved or stuck.

    ``on_move`` is called with the swapped pair and the settle report after
    every move.
    """

    if state.selected is not None:
        state.select(state.selected)
    moves = 0
    while not state.is_solved and moves < max_moves:
        pair = best_swap(state)
        if pair is None:
            logger.info("No improving swap left with %d crossing(s)", state.crossings)
            break
        state.select(pair[0])
        state.select(pair[1])
        report = state.settle()
        moves += 1
        if on_move is not None:
            on_move(pair, report)
    return moves


apply_debug_logging(globals(), logger=logger)


__all__ = ["best_swap", "solve_greedy"]
