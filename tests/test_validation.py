import pytest

from orbtangle.generator import build_cycles
from orbtangle.model import Edge, Vertex
from orbtangle.validate import ValidationError, validate_graph


def _vertices(count):
    return [Vertex(idx) for idx in range(count)]


def test_validate_accepts_built_cycles():
    vertices, edges = build_cycles([3, 5, 4])

    validate_graph(vertices, edges)


@pytest.mark.parametrize(
    'vertices, edges, message_part',
    [
        (
            [Vertex(0), Vertex(2), Vertex(1)],
            [Edge(0, 1, 0), Edge(1, 2, 0), Edge(2, 0, 0)],
            'has id 2',
        ),
        (
            _vertices(3),
            [Edge(0, 1, 0), Edge(1, 7, 0), Edge(2, 0, 0)],
            'unknown vertex 7',
        ),
        (
            _vertices(3),
            [Edge(0, 1, 0), Edge(1, 2, 0), Edge(2, 0, 1)],
            'belongs to cycles',
        ),
        (
            _vertices(4),
            [Edge(0, 1, 0), Edge(1, 2, 0), Edge(2, 0, 0)],
            'vertex 3 has degree 0',
        ),
        (
            _vertices(4),
            [Edge(0, 1, 0), Edge(1, 0, 0), Edge(2, 3, 1), Edge(3, 2, 1)],
            'needs at least 3',
        ),
        (
            _vertices(6),
            [Edge(0, 1, 0), Edge(1, 2, 0), Edge(2, 0, 0), Edge(3, 4, 0), Edge(4, 5, 0), Edge(5, 3, 0)],
            'splits into more than one loop',
        ),
        (
            _vertices(3),
            [Edge(0, 0, 0), Edge(1, 2, 0), Edge(2, 1, 0)],
            'self loop',
        ),
    ],
)
def test_validate_rejects_malformed_graphs(vertices, edges, message_part):
    with pytest.raises(ValidationError) as exc:
        validate_graph(vertices, edges)

    assert message_part in str(exc.value)


def test_validate_honours_custom_cycle_size():
    vertices, edges = build_cycles([3, 3])

    with pytest.raises(ValidationError):
        validate_graph(vertices, edges, min_cycle_size=4)
