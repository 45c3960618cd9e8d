"""
Tests for the heuristic registry and path helpers
"""

import pytest

from netpath.core import InvalidPathError, Node, UnknownHeuristicError
from netpath.pathfinding import (
    DEFAULT_HEURISTIC,
    HEURISTIC_REGISTRY,
    get_heuristic,
    is_valid_path,
    list_heuristics,
    path_cost,
    path_edges,
    register_heuristic,
)


class TestHeuristicRegistry:
    """Test suite for heuristic registration and lookup"""

    def test_builtin_heuristics(self):
        assert list_heuristics() == ['euclidean', 'manhattan', 'zero']
        assert DEFAULT_HEURISTIC == 'euclidean'

    def test_builtin_values(self):
        node, goal = Node(0, 0.0, 0.0), Node(1, 3.0, 4.0)

        assert get_heuristic('euclidean')(node, goal) == 5.0
        assert get_heuristic('manhattan')(node, goal) == 7.0
        assert get_heuristic('zero')(node, goal) == 0.0

    def test_unknown_name(self):
        with pytest.raises(UnknownHeuristicError) as exc_info:
            get_heuristic('chebyshev')

        assert "Available heuristics: euclidean, manhattan, zero" in str(exc_info.value)

    def test_unknown_name_is_key_error(self):
        with pytest.raises(KeyError):
            get_heuristic('chebyshev')

    def test_register_custom(self):
        @register_heuristic('test_half_euclidean')
        def half(node, goal):
            return 0.5 * get_heuristic('euclidean')(node, goal)

        try:
            assert get_heuristic('test_half_euclidean') is half
            assert half(Node(0, 0.0, 0.0), Node(1, 3.0, 4.0)) == 2.5
        finally:
            del HEURISTIC_REGISTRY['test_half_euclidean']

    def test_duplicate_registration(self):
        with pytest.raises(ValueError, match="already registered"):
            @register_heuristic('euclidean')
            def other(node, goal):
                return 0.0


class TestPathHelpers:
    """Test suite for path validation and measurement"""

    def test_path_edges(self):
        assert path_edges([0, 1, 4]) == [(0, 1), (1, 4)]
        assert path_edges([3]) == []

    def test_valid_paths(self, chain_graph):
        assert is_valid_path(chain_graph, [0, 4])
        assert is_valid_path(chain_graph, [4, 3, 2])
        assert is_valid_path(chain_graph, [2])

    def test_invalid_paths(self, chain_graph):
        assert not is_valid_path(chain_graph, [])
        assert not is_valid_path(chain_graph, [0, 2])
        assert not is_valid_path(chain_graph, [0, 9])
        assert not is_valid_path(chain_graph, [7])

    def test_path_cost(self, chain_graph):
        assert path_cost(chain_graph, [0, 4]) == pytest.approx(4 * 2 ** 0.5)
        assert path_cost(chain_graph, [3]) == 0.0

    def test_path_cost_of_broken_path(self, chain_graph):
        with pytest.raises(InvalidPathError):
            path_cost(chain_graph, [0, 2])
