"""
Hand-placed ten node graph: a chain with three shortcuts
"""

from ..core.edge import Edge
from ..core.graph import Graph
from ..core.node import Node
from .base import Scenario
from .registry import register_scenario


POSITIONS = [
    (50.0, 299.0),
    (190.0, 255.0),
    (260.0, 154.0),
    (304.0, 190.0),
    (380.0, 205.0),
    (318.0, 442.0),
    (142.0, 363.0),
    (253.0, 232.0),
    (140.0, 200.0),
    (96.0, 173.0),
]

SHORTCUTS = [(1, 7), (0, 6), (5, 3)]


@register_scenario('basic')
class BasicGraphScenario(Scenario):
    """Chain 0-1-...-9 plus shortcuts, searched from node 0 to node 4"""

    display_name = 'Basic graph'
    start_index = 0
    goal_index = 4

    def build_graph(self) -> Graph:
        graph = Graph()
        for index, (x, y) in enumerate(POSITIONS):
            graph.add_node(Node(index, x, y))
            if index != 0:
                graph.add_edge(Edge(index - 1, index))

        for source, destination in SHORTCUTS:
            graph.add_edge(Edge(source, destination))

        return graph
