"""
Graph storage: node and edge value types, the Graph container and its errors
"""

from .node import Node, euclidean_distance, manhattan_distance, midpoint
from .edge import Edge
from .graph import Graph, DEFAULT_NODE_CAPACITY, DEFAULT_EDGE_CAPACITY
from .config import ScenarioConfig
from .exceptions import (
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
    UnknownScenarioError,
)

__all__ = [
    'Node',
    'Edge',
    'Graph',
    'ScenarioConfig',
    'DEFAULT_NODE_CAPACITY',
    'DEFAULT_EDGE_CAPACITY',
    'euclidean_distance',
    'manhattan_distance',
    'midpoint',
    'NetpathError',
    'GraphError',
    'InvalidNodeIndexError',
    'OutOfRangeIndexError',
    'CapacityExceededError',
    'EdgeEndpointInvalidError',
    'PathfindingError',
    'PathNotFoundError',
    'InvalidPathError',
    'UnknownHeuristicError',
    'ConfigError',
    'UnknownScenarioError',
]
