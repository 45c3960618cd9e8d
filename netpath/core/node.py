"""
Node value type and planar distance helpers
"""

import math
from dataclasses import dataclass, replace
from typing import Tuple


INACTIVE_INDEX = -1


@dataclass(frozen=True)
class Node:
    """A graph node: slot identity plus a 2D position.

    A node is active when its index is zero or positive. The inactive
    sentinel fills every unoccupied slot of a Graph.
    """
    index: int
    x: float
    y: float

    @classmethod
    def inactive(cls) -> 'Node':
        """Return the sentinel used for empty node slots."""
        return cls(INACTIVE_INDEX, -1.0, -1.0)

    def is_active(self) -> bool:
        return self.index >= 0

    def with_index(self, index: int) -> 'Node':
        """Copy of this node moved to another slot."""
        return replace(self, index=index)

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)


def euclidean_distance(node_a: Node, node_b: Node) -> float:
    """Straight-line distance between two nodes."""
    return math.hypot(node_a.x - node_b.x, node_a.y - node_b.y)


def manhattan_distance(node_a: Node, node_b: Node) -> float:
    """Sum of the absolute axis differences between two nodes."""
    return abs(node_a.x - node_b.x) + abs(node_a.y - node_b.y)


def midpoint(node_a: Node, node_b: Node) -> Tuple[float, float]:
    """Point halfway between two nodes, used for edge labels."""
    return ((node_a.x + node_b.x) / 2, (node_a.y + node_b.y) / 2)
