"""Random placement of orbs with a best-effort minimum separation."""

from __future__ import annotations

import logging
import math
from itertools import combinations
from typing import List, Sequence

import numpy as np

from .model import Vertex

logger = logging.getLogger(__name__)


def _too_close(placed: Sequence[Vertex], x: float, y: float, min_distance: float) -> bool:
    return any(math.hypot(v.x - x, v.y - y) < min_distance for v in placed)


def place(
    vertices: List[Vertex],
    width: float,
    height: float,
    margin: float,
    min_distance: float,
    rng: np.random.Generator,
    max_attempts: int = 100,
) -> List[Vertex]:
    """Assign each vertex a position inside the margins of the canvas.

    Vertices are placed in list order. A candidate closer than
    ``min_distance`` to an already placed vertex is resampled, up to
    ``max_attempts`` samples; the last sample is accepted regardless.
    """

    low_x, high_x = int(margin), int(width - margin)
    low_y, high_y = int(margin), int(height - margin)
    if high_x < low_x or high_y < low_y:
        raise ValueError(f"margin {margin} leaves no room on a {width}x{height} canvas")
    attempts_limit = max(1, int(max_attempts))

    for idx, vertex in enumerate(vertices):
        placed = vertices[:idx]
        attempts = 0
        while True:
            x = float(rng.integers(low_x, high_x, endpoint=True))
            y = float(rng.integers(low_y, high_y, endpoint=True))
            attempts += 1
            if not _too_close(placed, x, y, min_distance):
                break
            if attempts >= attempts_limit:
                logger.debug(
                    "Vertex %d accepted at (%.0f, %.0f) after %d attempts despite crowding",
                    vertex.id,
                    x,
                    y,
                    attempts,
                )
                break
        vertex.x = x
        vertex.y = y
    return vertices


def min_separation(vertices: Sequence[Vertex]) -> float:
    """Smallest pairwise distance between vertices (``inf`` for fewer than two)."""

    return min(
        (math.hypot(a.x - b.x, a.y - b.y) for a, b in combinations(vertices, 2)),
        default=math.inf,
    )


__all__ = ["place", "min_separation"]
