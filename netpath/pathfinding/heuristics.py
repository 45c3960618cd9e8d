"""
Heuristic registry for A* search.

A heuristic estimates the remaining cost from a node to the goal. Search
always charges the Euclidean length of each edge, so only heuristics that
never exceed the straight-line distance keep the result optimal.
"""

from typing import Callable, Dict, List

from ..core.exceptions import UnknownHeuristicError
from ..core.node import Node, euclidean_distance, manhattan_distance


HeuristicFn = Callable[[Node, Node], float]

# Global registry mapping heuristic names to functions
HEURISTIC_REGISTRY: Dict[str, HeuristicFn] = {}

DEFAULT_HEURISTIC = 'euclidean'


def register_heuristic(name: str):
    """Decorator to register a heuristic function under a name

    Usage:
        @register_heuristic("euclidean")
        def euclidean(node, goal):
            ...

    Raises:
        ValueError: If the name is already registered
    """
    def decorator(fn: HeuristicFn) -> HeuristicFn:
        if name in HEURISTIC_REGISTRY:
            raise ValueError(
                f"Heuristic '{name}' is already registered by {HEURISTIC_REGISTRY[name].__name__}"
            )
        HEURISTIC_REGISTRY[name] = fn
        return fn

    return decorator


def get_heuristic(name: str) -> HeuristicFn:
    """Retrieve a heuristic by name

    Raises:
        UnknownHeuristicError: If nothing is registered under that name
    """
    if name not in HEURISTIC_REGISTRY:
        available = ", ".join(list_heuristics())
        raise UnknownHeuristicError(f"Unknown heuristic: '{name}'. Available heuristics: {available}")
    return HEURISTIC_REGISTRY[name]


def list_heuristics() -> List[str]:
    """Sorted list of registered heuristic names"""
    return sorted(HEURISTIC_REGISTRY.keys())


@register_heuristic('euclidean')
def euclidean(node: Node, goal: Node) -> float:
    """Straight-line distance; admissible and consistent."""
    return euclidean_distance(node, goal)


@register_heuristic('manhattan')
def manhattan(node: Node, goal: Node) -> float:
    """Axis-aligned distance; overestimates diagonal edges."""
    return manhattan_distance(node, goal)


@register_heuristic('zero')
def zero(node: Node, goal: Node) -> float:
    """No estimate at all, turning A* into Dijkstra's algorithm."""
    return 0.0
