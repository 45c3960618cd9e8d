"""
Dense graph container with identity-preserving reindexing.

Nodes live in contiguous slots where a node's index always equals its slot
position. Inserting into an occupied slot shifts later nodes right and
removing a node shifts them left; every edge endpoint is rewritten in the
same step so edges keep pointing at the same nodes.
"""

import logging
from typing import List, Optional, Tuple, Union

from .edge import Edge
from .exceptions import (
    CapacityExceededError,
    EdgeEndpointInvalidError,
    InvalidNodeIndexError,
    OutOfRangeIndexError,
)
from .node import Node

logger = logging.getLogger(__name__)

# One million node and edge slots unless a smaller ceiling is given
DEFAULT_NODE_CAPACITY = 1_000_000
DEFAULT_EDGE_CAPACITY = 1_000_000

NodeRef = Union[Node, int]


class Graph:
    """
    Undirected graph with fixed small-integer node identities.

    Storage grows on demand up to ``capacity`` nodes and ``edge_capacity``
    edges. Slots inside the capacity that hold nothing read back as the
    inactive sentinels ``Node.inactive()`` / ``Edge.inactive()``.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_NODE_CAPACITY,
        edge_capacity: Optional[int] = None
    ):
        """
        Initialize an empty graph.

        Args:
            capacity: Maximum number of node slots
            edge_capacity: Maximum number of edge slots (default: 1,000,000)
        """
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        if edge_capacity is None:
            edge_capacity = DEFAULT_EDGE_CAPACITY
        if edge_capacity <= 0:
            raise ValueError(f"edge_capacity must be positive, got {edge_capacity}")

        self.capacity = capacity
        self.edge_capacity = edge_capacity
        self._nodes: List[Node] = []
        self._edges: List[Edge] = []

    # ------------------------------------------------------------------
    # Cursors and read-only views
    # ------------------------------------------------------------------

    @property
    def last_node_index(self) -> int:
        """Highest occupied node slot (-1 when empty)."""
        return len(self._nodes) - 1

    @property
    def last_edge_index(self) -> int:
        """Highest occupied edge slot (-1 when empty)."""
        return len(self._edges) - 1

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    @property
    def nodes(self) -> Tuple[Node, ...]:
        """Active nodes in slot order."""
        return tuple(self._nodes)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        """Active edges in slot order."""
        return tuple(self._edges)

    def is_empty(self) -> bool:
        return not self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count}, edges={self.edge_count}, capacity={self.capacity})"

    def copy(self) -> 'Graph':
        """Independent copy with the same capacities."""
        clone = Graph(self.capacity, self.edge_capacity)
        # Node and Edge are immutable, a shallow list copy is enough
        clone._nodes = list(self._nodes)
        clone._edges = list(self._edges)
        return clone

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_node(self, index: int) -> Node:
        """
        Look up a node slot.

        Args:
            index: Slot position

        Returns:
            The node in that slot, or the inactive sentinel for an empty slot

        Raises:
            OutOfRangeIndexError: If index is negative or beyond capacity
        """
        if index < 0 or index >= self.capacity:
            raise OutOfRangeIndexError(
                f"Node slot {index} is outside capacity 0..{self.capacity - 1}"
            )
        if index > self.last_node_index:
            return Node.inactive()
        return self._nodes[index]

    def get_edge(self, index: int) -> Edge:
        """Look up an edge slot (inactive sentinel for an empty slot)."""
        if index < 0 or index >= self.edge_capacity:
            raise OutOfRangeIndexError(
                f"Edge slot {index} is outside capacity 0..{self.edge_capacity - 1}"
            )
        if index > self.last_edge_index:
            return Edge.inactive()
        return self._edges[index]

    def has_node(self, index: int) -> bool:
        return 0 <= index <= self.last_node_index

    def has_edge_bi_directional(self, index_a: int, index_b: int) -> bool:
        """Check whether an edge joins the two nodes in either direction."""
        return any(edge.connects(index_a, index_b) for edge in self._edges)

    def get_connected_nodes(self, node: NodeRef) -> List[Node]:
        """
        Return the nodes joined to ``node`` by an edge.

        Neighbours come back in edge storage order. Parallel edges produce
        repeated neighbours.
        """
        index = _index_of(node)
        connected = []
        for edge in self._edges:
            if edge.touches(index):
                connected.append(self._nodes[edge.other_endpoint(index)])
        return connected

    # ------------------------------------------------------------------
    # Node mutation
    # ------------------------------------------------------------------

    def add_node(self, node: Node) -> bool:
        """
        Insert a node at the slot named by its index.

        An index one past the last occupied slot appends. An index inside
        the occupied range shifts that slot and everything after it one
        position right, renumbering nodes and edge endpoints to match.

        Args:
            node: Node to insert

        Returns:
            True if the node was stored, False if its index is negative

        Raises:
            CapacityExceededError: If the node does not fit in the capacity
            InvalidNodeIndexError: If the index would leave an empty slot
        """
        if not node.is_active():
            logger.warning(f"Rejected node with negative index {node.index}")
            return False

        if node.index >= self.capacity or self.node_count >= self.capacity:
            raise CapacityExceededError(
                f"Cannot store node {node.index}: node capacity is {self.capacity}"
            )

        next_free = self.last_node_index + 1
        if node.index > next_free:
            raise InvalidNodeIndexError(
                f"Node index {node.index} would leave a gap; next free slot is {next_free}"
            )

        if node.index == next_free:
            self._nodes.append(node)
        else:
            self._shift_nodes_right(node.index)
            self._nodes[node.index] = node

        logger.debug(f"Added node {node.index} at ({node.x}, {node.y})")
        return True

    def add_node_between(self, node: Node, before: NodeRef, after: NodeRef) -> bool:
        """
        Insert a node and reroute the edge between two neighbours through it.

        Every edge joining ``before`` and ``after`` (in either direction) is
        replaced by ``before -> node`` and ``node -> after``. Without such an
        edge this is a plain ``add_node``.

        Args:
            node: Node to insert
            before: Existing node (or index) on one side
            after: Existing node (or index) on the other side

        Returns:
            Result of the underlying ``add_node``

        Raises:
            OutOfRangeIndexError: If before or after is not an active node
            CapacityExceededError: If the node or the rerouted edges do not fit
        """
        before_index = self._require_node(_index_of(before))
        after_index = self._require_node(_index_of(after))

        # Slot order survives the renumbering, so matches can be found up front
        matched = [
            slot for slot, edge in enumerate(self._edges)
            if edge.connects(before_index, after_index)
        ]
        if matched and self.edge_count + 2 > self.edge_capacity:
            raise CapacityExceededError(
                f"Rerouting through node {node.index} needs two free edge slots"
            )

        shifts = node.is_active() and node.index <= self.last_node_index
        if not self.add_node(node):
            return False

        if shifts:
            if before_index >= node.index:
                before_index += 1
            if after_index >= node.index:
                after_index += 1

        if not matched:
            return True

        self.add_edge(Edge(before_index, node.index))
        self.add_edge(Edge(node.index, after_index))

        # Highest slot first so earlier removals don't move later targets
        for slot in reversed(matched):
            self.remove_edge(slot)

        logger.debug(
            f"Rerouted {len(matched)} edge(s) {before_index}-{after_index} through node {node.index}"
        )
        return True

    def remove_node(self, index: int) -> Node:
        """
        Remove a node and every edge incident to it.

        Later nodes shift one slot left and edge endpoints follow them.

        Returns:
            The removed node

        Raises:
            OutOfRangeIndexError: If index is not an occupied slot
        """
        if not self.has_node(index):
            raise OutOfRangeIndexError(
                f"Can't remove node {index}: occupied slots are 0..{self.last_node_index}"
            )

        incident = [slot for slot, edge in enumerate(self._edges) if edge.touches(index)]
        for slot in reversed(incident):
            self.remove_edge(slot)

        removed = self._nodes[index]
        self._shift_nodes_left(index + 1)

        logger.debug(f"Removed node {index} and {len(incident)} incident edge(s)")
        return removed

    # ------------------------------------------------------------------
    # Edge mutation
    # ------------------------------------------------------------------

    def add_edge(self, edge: Edge) -> bool:
        """
        Append an edge unless the same pair is already connected.

        Returns:
            True if the edge was stored, False if it duplicates an existing one

        Raises:
            EdgeEndpointInvalidError: If an endpoint is not an active node or both
                endpoints are the same node
            CapacityExceededError: If the edge slots are full
        """
        if edge.source_index == edge.destination_index:
            raise EdgeEndpointInvalidError(f"Edge {edge.as_tuple()} joins node {edge.source_index} to itself")

        if self.has_edge_bi_directional(edge.source_index, edge.destination_index):
            return False

        for endpoint in (edge.source_index, edge.destination_index):
            if not self.has_node(endpoint):
                raise EdgeEndpointInvalidError(
                    f"Edge {edge.as_tuple()} references node {endpoint}, "
                    f"active nodes are 0..{self.last_node_index}"
                )

        if self.edge_count >= self.edge_capacity:
            raise CapacityExceededError(
                f"Cannot store edge {edge.as_tuple()}: edge capacity is {self.edge_capacity}"
            )

        self._edges.append(edge)
        return True

    def remove_edge(self, index: int) -> Edge:
        """
        Remove the edge in a slot, shifting later edges left to close the gap.

        Raises:
            OutOfRangeIndexError: If index is not an occupied edge slot
        """
        if index < 0 or index > self.last_edge_index:
            raise OutOfRangeIndexError(
                f"Can't remove edge {index}: occupied slots are 0..{self.last_edge_index}"
            )
        return self._edges.pop(index)

    # ------------------------------------------------------------------
    # Reindexing primitives
    # ------------------------------------------------------------------

    def _shift_nodes_right(self, start_at: int) -> None:
        """Open an inactive slot at ``start_at``, moving later nodes up by one."""
        self._nodes.insert(start_at, Node.inactive())
        for slot in range(start_at + 1, len(self._nodes)):
            self._nodes[slot] = self._nodes[slot].with_index(slot)
        self._offset_edge_endpoints(start_at, 1)

    def _shift_nodes_left(self, start_at: int) -> None:
        """Move nodes from ``start_at`` onward down by one, overwriting ``start_at - 1``."""
        if start_at <= 0:
            raise OutOfRangeIndexError("Can't shift nodes left past slot 0")
        del self._nodes[start_at - 1]
        for slot in range(start_at - 1, len(self._nodes)):
            self._nodes[slot] = self._nodes[slot].with_index(slot)
        self._offset_edge_endpoints(start_at, -1)

    def _offset_edge_endpoints(self, start_at: int, offset: int) -> None:
        """Add ``offset`` to every edge endpoint at or after ``start_at``."""
        for slot, edge in enumerate(self._edges):
            source = edge.source_index
            destination = edge.destination_index
            if source >= start_at:
                source += offset
            if destination >= start_at:
                destination += offset
            self._edges[slot] = Edge(source, destination)

    def _require_node(self, index: int) -> int:
        if not self.has_node(index):
            raise OutOfRangeIndexError(
                f"Node {index} is not active; occupied slots are 0..{self.last_node_index}"
            )
        return index


def _index_of(node: NodeRef) -> int:
    if isinstance(node, Node):
        return node.index
    return int(node)
