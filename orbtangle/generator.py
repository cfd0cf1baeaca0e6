"""Random graph generation: a union of disjoint simple cycles."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import numpy as np

from .model import Edge, Graph, PuzzleOptions, Vertex

logger = logging.getLogger(__name__)


def _between(rng: np.random.Generator, low: int, high: int) -> int:
    """Uniform integer in the closed range ``[low, high]``."""

    return int(rng.integers(low, high, endpoint=True))


def cycle_sizes(
    num_orbs: int,
    num_cycles: int,
    rng: np.random.Generator,
    min_size: int = 3,
) -> List[int]:
    """Split ``num_orbs`` into ``num_cycles`` sizes of at least ``min_size``.

    Each size leaves room for the cycles still to come; the last cycle takes
    whatever remains.
    """

    if num_cycles < 1:
        raise ValueError(f"need at least one cycle, got {num_cycles}")
    if num_orbs < num_cycles * min_size:
        raise ValueError(
            f"cannot split {num_orbs} orbs into {num_cycles} cycles of at least {min_size}"
        )

    sizes: List[int] = []
    remaining = num_orbs
    for idx in range(num_cycles):
        if idx == num_cycles - 1:
            sizes.append(remaining)
            break
        max_size = remaining - (num_cycles - idx - 1) * min_size
        size = _between(rng, min_size, max(min_size, max_size))
        sizes.append(size)
        remaining -= size
    return sizes


def build_cycles(sizes: Sequence[int]) -> Graph:
    """Build vertices and edges for consecutive cycles of the given sizes."""

    vertices = [Vertex(id=idx) for idx in range(sum(sizes))]
    edges: List[Edge] = []
    next_id = 0
    for cycle_id, size in enumerate(sizes):
        members = list(range(next_id, next_id + size))
        next_id += size
        for idx, a in enumerate(members):
            b = members[(idx + 1) % size]
            edges.append(Edge(a=a, b=b, cycle_id=cycle_id))
    return vertices, edges


def generate(
    rng: np.random.Generator,
    options: Optional[PuzzleOptions] = None,
) -> Graph:
    """Generate a random graph whose vertices partition into simple cycles."""

    options = options or PuzzleOptions()
    min_total = options.min_cycles * options.min_cycle_size
    if options.min_orbs < min_total or options.max_orbs < options.min_orbs:
        raise ValueError(
            f"orb range [{options.min_orbs}, {options.max_orbs}] cannot hold "
            f"{options.min_cycles} cycles of size {options.min_cycle_size}"
        )

    num_orbs = _between(rng, options.min_orbs, options.max_orbs)
    max_cycles = max(options.min_cycles, num_orbs // options.min_cycle_size)
    num_cycles = _between(rng, options.min_cycles, max_cycles)
    logger.info("Generating graph with %d orbs and %d cycles", num_orbs, num_cycles)

    sizes = cycle_sizes(num_orbs, num_cycles, rng, options.min_cycle_size)
    logger.debug("Cycle sizes: %s", sizes)
    return build_cycles(sizes)


__all__ = ["cycle_sizes", "build_cycles", "generate"]
