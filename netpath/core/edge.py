"""
Edge value type
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Edge:
    """An endpoint pair between two node indices.

    Edges are stored with a direction but the graph treats (a, b) and
    (b, a) as the same connection.
    """
    source_index: int
    destination_index: int

    @classmethod
    def inactive(cls) -> 'Edge':
        """Return the sentinel used for empty edge slots."""
        return cls(-1, -1)

    def is_active(self) -> bool:
        return self.source_index != -1 or self.destination_index != -1

    def connects(self, index_a: int, index_b: int) -> bool:
        """Check if this edge joins the two indices in either direction."""
        return (
            (self.source_index == index_a and self.destination_index == index_b) or
            (self.source_index == index_b and self.destination_index == index_a)
        )

    def touches(self, index: int) -> bool:
        return self.source_index == index or self.destination_index == index

    def other_endpoint(self, index: int) -> int:
        """Return the endpoint opposite to ``index``."""
        if self.source_index == index:
            return self.destination_index
        if self.destination_index == index:
            return self.source_index
        raise ValueError(f"Edge {self.as_tuple()} does not touch node {index}")

    def as_tuple(self) -> Tuple[int, int]:
        return (self.source_index, self.destination_index)
