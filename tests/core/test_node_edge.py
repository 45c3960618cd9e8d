"""
Tests for the Node and Edge value types
"""

import math

import pytest
from hypothesis import given, strategies as st

from netpath.core import Edge, Node, euclidean_distance, manhattan_distance, midpoint


coordinates = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False)


class TestNode:
    """Test suite for Node"""

    def test_inactive_sentinel(self):
        """Test the sentinel used for empty slots"""
        sentinel = Node.inactive()
        assert sentinel == Node(-1, -1.0, -1.0)
        assert not sentinel.is_active()

    def test_zero_index_is_active(self):
        assert Node(0, 0.0, 0.0).is_active()

    def test_with_index_keeps_position(self):
        """Test that moving a node to another slot keeps its coordinates"""
        node = Node(3, 1.5, -2.0)
        moved = node.with_index(7)

        assert moved == Node(7, 1.5, -2.0)
        assert node.index == 3  # source node untouched

    def test_nodes_are_immutable(self):
        node = Node(0, 1.0, 1.0)
        with pytest.raises(AttributeError):
            node.x = 5.0

    def test_position(self):
        assert Node(2, 3.0, 4.0).position == (3.0, 4.0)


class TestDistances:
    """Test suite for planar distance helpers"""

    def test_euclidean_three_four_five(self):
        assert euclidean_distance(Node(0, 0.0, 0.0), Node(1, 3.0, 4.0)) == 5.0

    def test_manhattan(self):
        assert manhattan_distance(Node(0, 0.0, 0.0), Node(1, 3.0, -4.0)) == 7.0

    def test_midpoint(self):
        assert midpoint(Node(0, 0.0, 0.0), Node(1, 2.0, 4.0)) == (1.0, 2.0)

    @given(coordinates, coordinates, coordinates, coordinates)
    def test_euclidean_never_exceeds_manhattan(self, x1, y1, x2, y2):
        """Property: straight-line distance is a lower bound on axis distance"""
        a, b = Node(0, x1, y1), Node(1, x2, y2)
        assert euclidean_distance(a, b) <= manhattan_distance(a, b) * (1 + 1e-12)

    @given(coordinates, coordinates, coordinates, coordinates)
    def test_euclidean_is_symmetric(self, x1, y1, x2, y2):
        a, b = Node(0, x1, y1), Node(1, x2, y2)
        assert math.isclose(euclidean_distance(a, b), euclidean_distance(b, a))


class TestEdge:
    """Test suite for Edge"""

    def test_inactive_sentinel(self):
        sentinel = Edge.inactive()
        assert sentinel.as_tuple() == (-1, -1)
        assert not sentinel.is_active()

    def test_edge_with_one_real_endpoint_is_active(self):
        """Only the (-1, -1) pair counts as inactive"""
        assert Edge(-1, 0).is_active()
        assert Edge(0, 0).is_active()

    def test_connects_ignores_direction(self):
        edge = Edge(2, 5)
        assert edge.connects(2, 5)
        assert edge.connects(5, 2)
        assert not edge.connects(2, 4)

    def test_touches(self):
        edge = Edge(2, 5)
        assert edge.touches(2)
        assert edge.touches(5)
        assert not edge.touches(3)

    def test_other_endpoint(self):
        edge = Edge(2, 5)
        assert edge.other_endpoint(2) == 5
        assert edge.other_endpoint(5) == 2

    def test_other_endpoint_of_unrelated_node(self):
        with pytest.raises(ValueError, match="does not touch node 3"):
            Edge(2, 5).other_endpoint(3)
