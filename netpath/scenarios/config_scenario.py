"""
Scenario driven by a YAML scenario file
"""

from pathlib import Path
from typing import Optional, Union

from ..core.config import ScenarioConfig
from ..core.graph import Graph
from .base import Scenario


class ConfigScenario(Scenario):
    """Graph, endpoints and heuristic all come from a ScenarioConfig"""

    display_name = 'Scenario file'

    def __init__(self, config: ScenarioConfig, heuristic: Optional[str] = None):
        super().__init__(heuristic or config.heuristic)
        self.config = config
        self.name = config.name
        self.start_index = config.start
        self.goal_index = config.goal

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path], heuristic: Optional[str] = None) -> 'ConfigScenario':
        return cls(ScenarioConfig.from_yaml(yaml_path), heuristic)

    def build_graph(self) -> Graph:
        return self.config.build_graph()
