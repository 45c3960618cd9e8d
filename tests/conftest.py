"""
Shared pytest fixtures and utilities for testing
"""

import pytest
import yaml

from netpath.core import Edge, Graph, Node
from netpath.scenarios import build_grid_graph


def make_graph(positions, edges=(), capacity=1000, edge_capacity=None):
    """Build a graph from (x, y) positions and (source, destination) pairs"""
    graph = Graph(capacity=capacity, edge_capacity=edge_capacity)
    for index, (x, y) in enumerate(positions):
        assert graph.add_node(Node(index, float(x), float(y)))
    for source, destination in edges:
        graph.add_edge(Edge(source, destination))
    return graph


@pytest.fixture
def chain_graph():
    """Five diagonal nodes 0-1-2-3-4 with a shortcut edge 0-4 in slot 4"""
    return make_graph(
        [(i, i) for i in range(5)],
        [(0, 1), (1, 2), (2, 3), (3, 4), (0, 4)]
    )


@pytest.fixture
def three_node_graph():
    """Nodes on the x axis at 1, 2, 3 joined 0-1 and 1-2"""
    return make_graph([(1, 1), (2, 2), (3, 3)], [(0, 1), (1, 2)])


@pytest.fixture
def grid_graph():
    """10x10 grid with right and down neighbour edges"""
    return build_grid_graph()


@pytest.fixture
def scenario_dict():
    """Valid scenario configuration as parsed from YAML"""
    return {
        'name': 'shortcut',
        'graph': {'capacity': 100, 'edge_capacity': 100},
        'nodes': [[0, 0], [1, 1], [2, 2], [3, 3], {'x': 4, 'y': 4}],
        'edges': [[0, 1], [1, 2], [2, 3], [3, 4], [0, 4]],
        'search': {'start': 0, 'goal': 4},
    }


@pytest.fixture
def scenario_file(tmp_path, scenario_dict):
    """Scenario dictionary written to a YAML file"""
    path = tmp_path / 'netpath.yaml'
    path.write_text(yaml.safe_dump(scenario_dict), encoding='utf-8')
    return path


# Helper functions for tests

def edge_pairs(graph):
    """Stored edges as (source, destination) tuples in slot order"""
    return [edge.as_tuple() for edge in graph.edges]


def node_positions(graph):
    """Stored nodes as (x, y) tuples in slot order"""
    return [node.position for node in graph.nodes]


def assert_graph_invariants(graph):
    """
    Assert the storage invariants every public operation preserves

    - Every active node sits in the slot named by its index
    - Node and edge storage are contiguous
    - Every edge endpoint refers to an active node
    """
    for slot, node in enumerate(graph.nodes):
        assert node.index == slot, f"Node in slot {slot} has index {node.index}"
        assert node.is_active()

    assert graph.last_node_index == graph.node_count - 1
    assert graph.last_edge_index == graph.edge_count - 1

    for slot, edge in enumerate(graph.edges):
        assert edge.is_active(), f"Inactive edge stored in slot {slot}"
        for endpoint in edge.as_tuple():
            assert graph.has_node(endpoint), f"Edge {edge.as_tuple()} in slot {slot} dangles"
