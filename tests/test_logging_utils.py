import logging

import numpy as np
import pytest

from orbtangle.logging_utils import _safe_repr, apply_debug_logging, debug_log_call

logger = logging.getLogger('orbtangle.tests.logging')


def test_debug_log_call_records_entry_and_exit(caplog):
    @debug_log_call(logger)
    def add(a, b=0):
        return a + b

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        assert add(2, b=3) == 5

    messages = [record.getMessage() for record in caplog.records]
    assert any(msg.startswith('Entering') and 'args=[2]' in msg and 'b=3' in msg for msg in messages)
    assert any(msg.startswith('Exiting') and msg.endswith('-> 5') for msg in messages)


def test_debug_log_call_reraises(caplog):
    @debug_log_call(logger, name='boom')
    def boom():
        raise RuntimeError('bad')

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        with pytest.raises(RuntimeError):
            boom()

    assert any(record.getMessage() == 'Exception in boom' for record in caplog.records)


def test_wrapping_is_not_repeated():
    def func():
        return 1

    once = debug_log_call(logger)(func)
    assert debug_log_call(logger)(once) is once


def test_apply_debug_logging_skips_private_and_named():
    def _private():
        return 0

    def public():
        return 1

    def skipped():
        return 2

    public.__module__ = skipped.__module__ = _private.__module__ = 'fake_module'
    namespace = {'__name__': 'fake_module', '_private': _private, 'public': public, 'skipped': skipped}

    apply_debug_logging(namespace, logger=logger, skip={'skipped'})

    assert getattr(namespace['public'], '_debug_logging_wrapped', False)
    assert namespace['skipped'] is skipped
    assert namespace['_private'] is _private


def test_safe_repr_truncates_long_sequences():
    assert _safe_repr(list(range(8))) == '[0, 1, 2, 3, 4, ... 3 more]'
    assert _safe_repr(np.random.default_rng(0)) == 'Generator(PCG64)'


def test_safe_repr_summarises_puzzle_types():
    from orbtangle.model import Edge, Vertex
    from orbtangle.puzzle import PuzzleState

    vertices = [Vertex(idx, float(idx * 10), 5.0) for idx in range(6)]
    edges = [Edge(0, 1, 0), Edge(1, 2, 0), Edge(2, 0, 0), Edge(3, 4, 1), Edge(4, 5, 1), Edge(5, 3, 1)]

    assert _safe_repr(vertices[1]) == 'v1(10, 5)'
    assert _safe_repr(Edge(1, 2, 0, crossing=True)) == 'e1-2@0*'
    assert _safe_repr(vertices) == '<6 vertices>'
    assert _safe_repr(edges) == '<6 edges, 0 crossing>'
    assert _safe_repr(edges[:2]) == '[e0-1@0, e1-2@0]'
    assert _safe_repr(PuzzleState(vertices, edges)) == (
        'PuzzleState(6 vertices, 6 edges in 2 cycle(s), 0 crossing)'
    )
