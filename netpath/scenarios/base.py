"""
Base class and result model for path search scenarios
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from pydantic import BaseModel, Field

from ..core.graph import Graph
from ..pathfinding import DEFAULT_HEURISTIC, a_star_search, path_cost

logger = logging.getLogger(__name__)


class ScenarioResult(BaseModel):
    """Structured outcome of running a scenario

    Attributes:
        name: Scenario registry key
        start_index: Node the search started from
        goal_index: Node the search had to reach
        heuristic: Heuristic used by the search
        path: Node indices from start to goal
        cost: Euclidean length of the path
        node_count: Number of nodes in the searched graph
        edge_count: Number of edges in the searched graph
    """
    name: str
    start_index: int
    goal_index: int
    heuristic: str
    path: List[int] = Field(default_factory=list)
    cost: float = 0.0
    node_count: int = 0
    edge_count: int = 0


class Scenario(ABC):
    """Abstract base class for scenarios

    A scenario builds a graph, picks two endpoints and runs the search.
    Subclasses implement build_graph() and set start_index / goal_index.

    Attributes:
        name: Registry key (set by @register_scenario decorator)
        display_name: Human-readable name
        graph: Graph built by the last run (None before run)
        found_path: Path found by the last run
    """

    name: str = None  # Set by @register_scenario decorator
    display_name: str = None  # Override in subclasses
    start_index: int = 0
    goal_index: int = 0

    def __init__(self, heuristic: str = DEFAULT_HEURISTIC):
        self.heuristic = heuristic
        self.graph: Optional[Graph] = None
        self.found_path: List[int] = []

    @abstractmethod
    def build_graph(self) -> Graph:
        """Create the graph this scenario searches"""
        pass

    def run(self) -> ScenarioResult:
        """Build the graph and search it

        Raises:
            PathNotFoundError: If the goal is unreachable
        """
        self.graph = self.build_graph()
        logger.info(
            f"Scenario '{self.name}': {self.graph.node_count} nodes, {self.graph.edge_count} edges"
        )

        self.found_path = a_star_search(self.start_index, self.goal_index, self.graph, self.heuristic)

        return ScenarioResult(
            name=self.name or type(self).__name__,
            start_index=self.start_index,
            goal_index=self.goal_index,
            heuristic=self.heuristic,
            path=self.found_path,
            cost=path_cost(self.graph, self.found_path),
            node_count=self.graph.node_count,
            edge_count=self.graph.edge_count,
        )
