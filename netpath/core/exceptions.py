"""
Custom exceptions for graph storage and pathfinding
"""


class NetpathError(Exception):
    """Base exception for all netpath errors"""
    pass


class GraphError(NetpathError):
    """Base exception for graph container errors"""
    pass


class InvalidNodeIndexError(GraphError):
    """Raised when a node index would leave a gap in node storage"""
    pass


class OutOfRangeIndexError(GraphError, IndexError):
    """Raised when a node or edge index is outside the active range"""
    pass


class CapacityExceededError(GraphError):
    """Raised when an insert would exceed the configured slot capacity"""
    pass


class EdgeEndpointInvalidError(GraphError):
    """Raised when an edge references a node that is not active"""
    pass


class PathfindingError(NetpathError):
    """Base exception for search errors"""
    pass


class PathNotFoundError(PathfindingError):
    """Raised when the search exhausts its frontier without reaching the goal"""

    def __init__(self, start_index: int, goal_index: int):
        self.start_index = start_index
        self.goal_index = goal_index
        super().__init__(f"No path found from node {start_index} to node {goal_index}")


class InvalidPathError(PathfindingError):
    """Raised when a path contains a step that is not backed by an edge"""
    pass


class UnknownHeuristicError(PathfindingError, KeyError):
    """Raised when a heuristic name is not registered"""

    def __str__(self):
        # KeyError quotes its argument otherwise
        return str(self.args[0]) if self.args else ''


class ConfigError(NetpathError, ValueError):
    """Raised when a configuration file or dictionary is invalid"""
    pass


class UnknownScenarioError(NetpathError, KeyError):
    """Raised when a scenario name is not registered"""

    def __str__(self):
        return str(self.args[0]) if self.args else ''
