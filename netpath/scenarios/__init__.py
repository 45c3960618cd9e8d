"""Search scenarios - built-ins register themselves on import"""

from .base import Scenario, ScenarioResult
from .registry import (
    SCENARIO_REGISTRY,
    register_scenario,
    get_scenario,
    list_scenarios,
    get_scenario_info,
)
from . import basic_graph, grid_graph
from .basic_graph import BasicGraphScenario
from .grid_graph import GridGraphScenario, build_grid_graph
from .config_scenario import ConfigScenario

__all__ = [
    'Scenario',
    'ScenarioResult',
    'SCENARIO_REGISTRY',
    'register_scenario',
    'get_scenario',
    'list_scenarios',
    'get_scenario_info',
    'BasicGraphScenario',
    'GridGraphScenario',
    'ConfigScenario',
    'build_grid_graph',
]
