import numpy as np
import pytest

from orbtangle.config import get_default_options, set_default_options
from orbtangle.crossings import crossing_pairs
from orbtangle.model import Edge, PuzzleGenerationError, PuzzleOptions, Vertex
from orbtangle.puzzle import PuzzleState, SelectionEvent, new_puzzle, shuffle_until_tangled, swap
from orbtangle.validate import validate_graph


def _square_state():
    vertices = [Vertex(0, 0.0, 0.0), Vertex(1, 10.0, 0.0), Vertex(2, 10.0, 10.0), Vertex(3, 0.0, 10.0)]
    edges = [Edge(0, 1, 0), Edge(1, 2, 0), Edge(2, 3, 0), Edge(3, 0, 0)]
    return PuzzleState(vertices, edges)


def test_swap_twice_restores_positions():
    a = Vertex(0, 1.5, 2.5)
    b = Vertex(1, 7.0, -3.0)

    swap(a, b)
    assert (a.id, a.position, b.id, b.position) == (0, (7.0, -3.0), 1, (1.5, 2.5))
    swap(a, b)
    assert (a.position, b.position) == ((1.5, 2.5), (7.0, -3.0))


def test_state_detects_on_construction():
    state = _square_state()

    assert state.crossings == 0
    assert state.is_solved
    assert state.clean_cycles() == {0}


def test_swap_does_not_refresh_crossings_until_detect():
    state = _square_state()
    state.swap(0, 1)

    assert state.crossings == 0
    assert state.detect() == 1
    assert not state.is_solved
    assert not state.cycle_is_clean(0)
    assert not state.is_clean_vertex(2)


@pytest.mark.parametrize('bad_id', [-1, 4, 100])
def test_out_of_range_ids_fail_loudly(bad_id):
    state = _square_state()

    with pytest.raises(ValueError):
        state.swap(0, bad_id)
    with pytest.raises(ValueError):
        state.select(bad_id)
    assert state.selected is None


def test_selection_state_machine():
    state = _square_state()

    assert state.select(2) == SelectionEvent('selected', 2)
    assert state.selected == 2
    assert state.select(2) == SelectionEvent('deselected', 2)
    assert state.selected is None
    assert state.moves == 0

    state.select(0)
    event = state.select(1)
    assert event == SelectionEvent('swapped', 0, 1)
    assert state.selected is None
    assert state.moves == 1
    assert state.vertices[0].position == (10.0, 0.0)
    assert state.vertices[1].position == (0.0, 0.0)


def test_solved_is_announced_once_per_settling():
    state = _square_state()

    first = state.settle()
    assert first.solved and first.newly_solved
    assert first.clean_cycles == {0}
    assert not state.settle().newly_solved

    state.select(0)
    state.select(1)
    tangled = state.settle()
    assert tangled.crossings == 1
    assert tangled.clean_cycles == set()
    assert not tangled.newly_solved

    state.select(1)
    state.select(0)
    again = state.settle()
    assert again.crossings == 0
    assert again.newly_solved


def test_owner_cycle_of_isolated_vertex():
    state = PuzzleState([Vertex(0), Vertex(1)], [])

    assert state.owner_cycle(0) == -1
    assert not state.is_clean_vertex(0)


def test_shuffle_keeps_tangled_layout():
    state = _square_state()
    state.swap(0, 1)

    assert shuffle_until_tangled(state, np.random.default_rng(0)) == 0
    assert state.crossings == 1


def test_shuffle_tangles_solved_layout():
    state = _square_state()

    swaps = shuffle_until_tangled(state, np.random.default_rng(5))

    assert swaps >= 1
    assert state.crossings > 0
    assert sorted(v.position for v in state.vertices) == [(0.0, 0.0), (0.0, 10.0), (10.0, 0.0), (10.0, 10.0)]


def test_shuffle_gives_up_after_attempt_limit():
    state = _square_state()

    with pytest.raises(PuzzleGenerationError):
        shuffle_until_tangled(state, np.random.default_rng(0), max_attempts=0)


@pytest.mark.parametrize('seed', [0, 1, 2, 3, 42])
def test_new_puzzle_starts_tangled(seed):
    state = new_puzzle(PuzzleOptions(random_seed=seed))

    validate_graph(state.vertices, state.edges)
    assert state.crossings > 0
    assert crossing_pairs(state.vertices, state.edges)
    assert state.selected is None
    assert state.moves == 0


def test_new_puzzle_is_reproducible():
    first = new_puzzle(PuzzleOptions(random_seed=77))
    second = new_puzzle(PuzzleOptions(random_seed=77))

    assert [v.position for v in first.vertices] == [v.position for v in second.vertices]
    assert first.edges == second.edges


def test_new_puzzle_uses_default_options():
    saved = get_default_options()
    try:
        set_default_options(PuzzleOptions(min_orbs=12, max_orbs=12, random_seed=3))
        state = new_puzzle()
        assert len(state.vertices) == 12
    finally:
        set_default_options(saved)


def test_default_options_are_copies():
    options = get_default_options()
    options.width = 1

    assert get_default_options().width == 800
