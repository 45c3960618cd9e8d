"""
Output formatting and printing utilities for CLI
"""

from typing import Dict, List

from ..scenarios import ScenarioResult


def format_path(path: List[int]) -> str:
    """One line per node, in travel order"""
    return "\n".join(f"  ↳ {index}" for index in path)


def print_result(result: ScenarioResult) -> None:
    """
    Print a scenario result

    Args:
        result: Result returned by Scenario.run()
    """
    print_separator()
    print(f"Scenario:  {result.name}")
    print(f"Graph:     {result.node_count} nodes, {result.edge_count} edges")
    print(f"Search:    {result.start_index} -> {result.goal_index} ({result.heuristic})")
    print(f"Cost:      {result.cost:.2f} over {max(len(result.path) - 1, 0)} edge(s)")
    print_separator()
    print("Path:")
    print(format_path(result.path))


def print_listing(scenarios: Dict[str, Dict[str, str]], heuristics: List[str]) -> None:
    """Print registered scenarios and heuristics"""
    print("Scenarios:")
    for name in sorted(scenarios):
        print(f"  • {name:<10} {scenarios[name]['display_name']}")
    print("Heuristics:")
    for name in heuristics:
        print(f"  • {name}")


def print_separator(width: int = 60, char: str = '=') -> None:
    """
    Print a separator line

    Args:
        width: Width of the separator
        char: Character to use for separator
    """
    print(char * width)
