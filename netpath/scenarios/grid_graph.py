"""
Square grid graph with right and down neighbour edges
"""

from ..core.edge import Edge
from ..core.graph import Graph
from ..core.node import Node
from .base import Scenario
from .registry import register_scenario


GRID_WIDTH = 10
SCALE = 50.0
PADDING = 50.0


def build_grid_graph(width: int = GRID_WIDTH, scale: float = SCALE, padding: float = PADDING) -> Graph:
    """
    Build a width x width grid.

    Node i sits at column ``i % width`` and row ``i // width``. Each node is
    joined to its right neighbour and the one below it.
    """
    node_total = width * width
    graph = Graph(capacity=node_total, edge_capacity=2 * node_total)

    for i in range(node_total):
        x = (i % width) * scale + padding
        y = (i // width) * scale + padding
        graph.add_node(Node(i, x, y))

    for i in range(node_total):
        if i % width != width - 1:
            graph.add_edge(Edge(i, i + 1))
        if i < node_total - width:
            graph.add_edge(Edge(i, i + width))

    return graph


@register_scenario('grid')
class GridGraphScenario(Scenario):
    """10x10 grid searched from the bottom-left corner (90) to node 29"""

    display_name = 'Grid graph'
    start_index = 90
    goal_index = 29

    def build_graph(self) -> Graph:
        return build_grid_graph()
