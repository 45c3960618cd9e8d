"""
Scenario registry for lookup by name from the CLI
"""

from typing import Dict, List, Type

from ..core.exceptions import UnknownScenarioError
from .base import Scenario


# Global registry mapping scenario names to scenario classes
SCENARIO_REGISTRY: Dict[str, Type[Scenario]] = {}


def register_scenario(name: str):
    """Decorator to register a scenario class

    Usage:
        @register_scenario("grid")
        class GridGraphScenario(Scenario):
            ...

    Raises:
        TypeError: If decorated class doesn't inherit from Scenario
        ValueError: If scenario name is already registered
    """
    def decorator(cls: Type[Scenario]):
        if not issubclass(cls, Scenario):
            raise TypeError(f"{cls.__name__} must inherit from Scenario to be registered")

        if name in SCENARIO_REGISTRY:
            raise ValueError(
                f"Scenario '{name}' is already registered by {SCENARIO_REGISTRY[name].__name__}"
            )

        cls.name = name
        SCENARIO_REGISTRY[name] = cls
        return cls

    return decorator


def get_scenario(name: str) -> Type[Scenario]:
    """Retrieve a scenario class by name

    Raises:
        UnknownScenarioError: If no scenario is registered under that name
    """
    if name not in SCENARIO_REGISTRY:
        available = ", ".join(list_scenarios())
        raise UnknownScenarioError(f"Unknown scenario: '{name}'. Available scenarios: {available}")
    return SCENARIO_REGISTRY[name]


def list_scenarios() -> List[str]:
    """Sorted list of registered scenario names"""
    return sorted(SCENARIO_REGISTRY.keys())


def get_scenario_info() -> Dict[str, Dict[str, str]]:
    """Name, display name and class of every registered scenario"""
    return {
        name: {
            'name': name,
            'display_name': scenario_class.display_name or name,
            'class_name': scenario_class.__name__,
        }
        for name, scenario_class in SCENARIO_REGISTRY.items()
    }
