from .model import NO_CYCLE, Edge, PuzzleGenerationError, PuzzleOptions, Vertex
from .config import get_default_options, set_default_options
from .generator import generate, cycle_sizes, build_cycles
from .layout import place, min_separation
from .crossings import (
    segments_intersect,
    detect_crossings,
    crossing_pairs,
    clean_cycles,
    cycle_is_clean,
    owner_cycle,
)
from .validate import validate_graph, ValidationError
from .puzzle import PuzzleState, SelectionEvent, SettleReport, swap, shuffle_until_tangled, new_puzzle
from .hint import best_swap, solve_greedy
from .printer import print_puzzle, format_vertex, format_edge

__all__ = [
    'NO_CYCLE',
    'Edge',
    'PuzzleGenerationError',
    'PuzzleOptions',
    'Vertex',
    'get_default_options',
    'set_default_options',
    'generate',
    'cycle_sizes',
    'build_cycles',
    'place',
    'min_separation',
    'segments_intersect',
    'detect_crossings',
    'crossing_pairs',
    'clean_cycles',
    'cycle_is_clean',
    'owner_cycle',
    'validate_graph',
    'ValidationError',
    'PuzzleState',
    'SelectionEvent',
    'SettleReport',
    'swap',
    'shuffle_until_tangled',
    'new_puzzle',
    'best_swap',
    'solve_greedy',
    'print_puzzle',
    'format_vertex',
    'format_edge',
]
