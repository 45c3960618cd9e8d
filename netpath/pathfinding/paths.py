"""
Validation and measurement of paths returned by the search
"""

from typing import List, Sequence

from ..core.exceptions import InvalidPathError
from ..core.graph import Graph
from ..core.node import euclidean_distance


def path_edges(path: Sequence[int]) -> List[tuple]:
    """Consecutive (from, to) pairs along a path."""
    return [(path[i], path[i + 1]) for i in range(len(path) - 1)]


def is_valid_path(graph: Graph, path: Sequence[int]) -> bool:
    """
    Check that a path only uses active nodes joined by active edges.

    An empty path is invalid; a single active node is a valid path.
    """
    if not path:
        return False
    if not all(graph.has_node(index) for index in path):
        return False
    return all(graph.has_edge_bi_directional(a, b) for a, b in path_edges(path))


def path_cost(graph: Graph, path: Sequence[int]) -> float:
    """
    Total Euclidean length of a path.

    Raises:
        InvalidPathError: If the path is empty or steps across a missing edge
    """
    if not is_valid_path(graph, path):
        raise InvalidPathError(f"Path {list(path)} is not connected in {graph!r}")

    return sum(
        euclidean_distance(graph.get_node(a), graph.get_node(b))
        for a, b in path_edges(path)
    )
