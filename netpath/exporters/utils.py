"""
Utility functions for exporters
"""

import os
import logging
from pathlib import Path
from typing import Optional, Sequence, Set, Tuple

from ..core.graph import Graph
from ..core.node import euclidean_distance
from ..pathfinding.paths import is_valid_path, path_cost
from .exceptions import InvalidResultsError, PathValidationError
from .types import PathResultsDict

logger = logging.getLogger(__name__)

# Constants
MAX_FILENAME_LENGTH = 255
RESERVED_NAMES = {
    'CON', 'PRN', 'AUX', 'NUL',
    'COM1', 'COM2', 'COM3', 'COM4', 'COM5', 'COM6', 'COM7', 'COM8', 'COM9',
    'LPT1', 'LPT2', 'LPT3', 'LPT4', 'LPT5', 'LPT6', 'LPT7', 'LPT8', 'LPT9',
}


def validate_file_path(file_path: str, must_exist: bool = False) -> Path:
    """
    Validate and resolve a file path for export operations

    Args:
        file_path: Path to validate
        must_exist: Whether the parent directory must already exist

    Returns:
        Resolved Path object

    Raises:
        PathValidationError: If path is invalid or unsafe
    """
    if not file_path or not isinstance(file_path, (str, Path)):
        raise PathValidationError(f"File path must be a non-empty string, got: {type(file_path)}")

    filename = os.path.basename(str(file_path))
    if len(filename) > MAX_FILENAME_LENGTH:
        raise PathValidationError(
            f"Filename too long ({len(filename)} chars). Maximum is {MAX_FILENAME_LENGTH}"
        )

    try:
        path = Path(file_path).resolve()
    except (ValueError, OSError) as e:
        raise PathValidationError(f"Invalid file path: {e}") from e

    if must_exist:
        parent = path.parent
        if not parent.exists():
            raise PathValidationError(f"Parent directory does not exist: {parent}")
        if not parent.is_dir():
            raise PathValidationError(f"Parent path is not a directory: {parent}")

    # Windows device names
    if path.stem.upper() in RESERVED_NAMES:
        raise PathValidationError(f"Reserved filename: {filename}")

    return path


def path_edge_pairs(path: Sequence[int]) -> Set[Tuple[int, int]]:
    """Unordered steps of a path, as (low, high) pairs."""
    return {
        (min(path[i], path[i + 1]), max(path[i], path[i + 1]))
        for i in range(len(path) - 1)
    }


def build_path_results(
    graph: Graph,
    path: Sequence[int],
    scenario: Optional[str] = None,
    heuristic: Optional[str] = None
) -> PathResultsDict:
    """
    Collect graph contents and path membership into a plain dictionary

    Args:
        graph: Searched graph
        path: Node indices returned by the search (may be empty)
        scenario: Optional scenario name to record
        heuristic: Optional heuristic name to record

    Returns:
        Results dictionary ready for serialization

    Raises:
        InvalidResultsError: If the path is not a connected walk in the graph
    """
    path = list(path)
    if path and not is_valid_path(graph, path):
        raise InvalidResultsError(f"Path {path} is not connected in {graph!r}")

    on_path = set(path)
    steps = path_edge_pairs(path)

    results: PathResultsDict = {
        'node_count': graph.node_count,
        'edge_count': graph.edge_count,
        'nodes': [
            {'index': node.index, 'x': node.x, 'y': node.y, 'in_path': node.index in on_path}
            for node in graph.nodes
        ],
        'edges': [
            {
                'source_index': edge.source_index,
                'destination_index': edge.destination_index,
                'length': euclidean_distance(
                    graph.get_node(edge.source_index),
                    graph.get_node(edge.destination_index)
                ),
                'in_path': (
                    min(edge.as_tuple()), max(edge.as_tuple())
                ) in steps,
            }
            for edge in graph.edges
        ],
        'path': path,
        'start_index': path[0] if path else None,
        'goal_index': path[-1] if path else None,
        'cost': path_cost(graph, path) if path else None,
    }
    if scenario is not None:
        results['scenario'] = scenario
    if heuristic is not None:
        results['heuristic'] = heuristic

    return results
