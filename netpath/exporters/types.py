"""
Type definitions for exported search results
"""

from typing import TypedDict, List, Optional, NotRequired


class NodeDict(TypedDict):
    """One node with its path membership"""
    index: int
    x: float
    y: float
    in_path: bool


class EdgeDict(TypedDict):
    """One edge with its Euclidean length"""
    source_index: int
    destination_index: int
    length: float
    in_path: bool


class PathResultsDict(TypedDict):
    """Graph contents plus the path found in it"""
    node_count: int
    edge_count: int
    nodes: List[NodeDict]
    edges: List[EdgeDict]
    path: List[int]
    start_index: Optional[int]
    goal_index: Optional[int]
    cost: Optional[float]
    scenario: NotRequired[str]
    heuristic: NotRequired[str]
