"""
A* shortest-path search over a Graph.

The open set is a plain list scanned linearly for the lowest f-score. Ties go
to the entry that entered the frontier first, which makes the returned path
deterministic among equal-cost candidates. Cost per search is O(V^2), fine
for graphs of a few hundred nodes.
"""

import logging
import math
from typing import Dict, List, Union

from ..core.exceptions import OutOfRangeIndexError, PathNotFoundError
from ..core.graph import Graph
from ..core.node import Node, euclidean_distance
from .heuristics import DEFAULT_HEURISTIC, HeuristicFn, get_heuristic

logger = logging.getLogger(__name__)


def reconstruct_path(came_from: Dict[int, int], current: int) -> List[int]:
    """Walk predecessor links back from ``current`` and return the path in travel order."""
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.insert(0, current)
    return path


def _lowest_f_score_position(frontier: List[Node], f_score: List[float]) -> int:
    """Position in the frontier of the first node with the lowest f-score."""
    best_position = 0
    best_score = math.inf
    for position, node in enumerate(frontier):
        score = f_score[node.index]
        # Strict comparison keeps the earliest entry on ties
        if score < best_score:
            best_score = score
            best_position = position
    return best_position


def a_star_search(
    start_index: int,
    goal_index: int,
    graph: Graph,
    heuristic: Union[str, HeuristicFn] = DEFAULT_HEURISTIC
) -> List[int]:
    """
    Find a shortest path between two nodes.

    Args:
        start_index: Index of the node to start from
        goal_index: Index of the node to reach
        graph: Graph to search; it is only read
        heuristic: Registered heuristic name or a callable ``(node, goal) -> float``

    Returns:
        Node indices from start to goal, both included ([start] when they are equal)

    Raises:
        OutOfRangeIndexError: If start or goal is not an active node
        UnknownHeuristicError: If the heuristic name is not registered
        PathNotFoundError: If the goal cannot be reached
    """
    for label, index in (('start', start_index), ('goal', goal_index)):
        if not graph.has_node(index):
            raise OutOfRangeIndexError(
                f"Search {label} {index} is not an active node (0..{graph.last_node_index})"
            )

    estimate = get_heuristic(heuristic) if isinstance(heuristic, str) else heuristic

    start_node = graph.get_node(start_index)
    goal_node = graph.get_node(goal_index)

    frontier: List[Node] = [start_node]
    came_from: Dict[int, int] = {}

    g_score = [math.inf] * graph.node_count
    g_score[start_index] = 0.0

    f_score = [math.inf] * graph.node_count
    f_score[start_index] = estimate(start_node, goal_node)

    expanded = 0
    while frontier:
        current = frontier.pop(_lowest_f_score_position(frontier, f_score))

        if current.index == goal_index:
            path = reconstruct_path(came_from, current.index)
            logger.info(
                f"Found path {start_index} -> {goal_index}: {len(path)} nodes, "
                f"cost {g_score[goal_index]:.2f}, {expanded} expansions"
            )
            return path

        expanded += 1
        for neighbour in graph.get_connected_nodes(current):
            tentative_g = g_score[current.index] + euclidean_distance(current, neighbour)
            if tentative_g < g_score[neighbour.index]:
                came_from[neighbour.index] = current.index
                g_score[neighbour.index] = tentative_g
                f_score[neighbour.index] = tentative_g + estimate(neighbour, goal_node)
                if neighbour not in frontier:
                    frontier.append(neighbour)

    logger.debug(f"Frontier exhausted after {expanded} expansions")
    raise PathNotFoundError(start_index, goal_index)
