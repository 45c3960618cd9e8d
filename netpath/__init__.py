"""
netpath - dense graph storage with identity-preserving reindexing and A* search
"""

from importlib.metadata import version, PackageNotFoundError

from .core import (
    Node,
    Edge,
    Graph,
    ScenarioConfig,
    NetpathError,
    GraphError,
    InvalidNodeIndexError,
    OutOfRangeIndexError,
    CapacityExceededError,
    EdgeEndpointInvalidError,
    PathfindingError,
    PathNotFoundError,
    InvalidPathError,
    UnknownHeuristicError,
    ConfigError,
)
from .pathfinding import a_star_search, is_valid_path, path_cost

try:
    __version__ = version("netpath")
except PackageNotFoundError:
    # Package not installed (development mode)
    __version__ = "0.0.0.dev"

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "ScenarioConfig",
    "a_star_search",
    "is_valid_path",
    "path_cost",
    "NetpathError",
    "GraphError",
    "InvalidNodeIndexError",
    "OutOfRangeIndexError",
    "CapacityExceededError",
    "EdgeEndpointInvalidError",
    "PathfindingError",
    "PathNotFoundError",
    "InvalidPathError",
    "UnknownHeuristicError",
    "ConfigError",
]
