"""
A* pathfinding over netpath graphs.

- a_star_search: shortest path by node index, deterministic tie-break
- heuristics: named distance estimates (euclidean, manhattan, zero)
- paths: validity and cost of a returned path
"""

from .astar import a_star_search, reconstruct_path
from .heuristics import (
    HEURISTIC_REGISTRY,
    DEFAULT_HEURISTIC,
    register_heuristic,
    get_heuristic,
    list_heuristics,
)
from .paths import is_valid_path, path_cost, path_edges

__all__ = [
    'a_star_search',
    'reconstruct_path',
    'HEURISTIC_REGISTRY',
    'DEFAULT_HEURISTIC',
    'register_heuristic',
    'get_heuristic',
    'list_heuristics',
    'is_valid_path',
    'path_cost',
    'path_edges',
]
