"""
CLI command to build a graph, search it and export the result
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..core.config import OutputConfig, ScenarioConfig
from ..core.exceptions import NetpathError, PathNotFoundError
from ..exporters import write_exports
from ..pathfinding import DEFAULT_HEURISTIC
from ..scenarios import ConfigScenario, Scenario, get_scenario
from .config_discovery import discover_config
from .output import print_result

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(log_level: str = 'INFO', log_file: Optional[Path] = None) -> None:
    """
    Configure logging for the netpath package

    Console output goes to stdout at ``log_level``; the optional file
    handler records everything from DEBUG up.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path to a log file
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    package_logger = logging.getLogger('netpath')
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)


def run_run_command(
    config_file: Optional[str] = None,
    scenario_name: Optional[str] = None,
    heuristic: Optional[str] = None,
    output_dir: Optional[str] = None,
    formats: Optional[List[str]] = None,
    no_export: bool = False,
    log_level: Optional[str] = None,
    log_file: Optional[str] = None
) -> int:
    """
    Run a built-in scenario or a scenario file

    Command-line values override the scenario file, which overrides the
    built-in defaults.

    Returns:
        Exit code (0 = success, 1 = error)
    """
    defaults = OutputConfig()
    config: Optional[ScenarioConfig] = None

    try:
        if scenario_name:
            scenario: Scenario = get_scenario(scenario_name)(heuristic or DEFAULT_HEURISTIC)
        else:
            config_path = discover_config(config_file)
            config = ScenarioConfig.from_yaml(config_path)
            scenario = ConfigScenario(config, heuristic)
    except (FileNotFoundError, NetpathError) as e:
        print(f"❌ {e}")
        return 1

    setup_logging(
        log_level or (config.log_level if config else 'INFO'),
        Path(log_file) if log_file else (config.log_file if config else None)
    )

    try:
        result = scenario.run()
    except PathNotFoundError as e:
        logger.error(str(e))
        print(f"❌ {e}")
        return 1
    except NetpathError as e:
        logger.error(f"Search failed: {e}")
        print(f"❌ {e}")
        return 1

    print_result(result)

    if no_export:
        return 0

    target_dir = Path(output_dir) if output_dir else (config.output_dir if config else Path(defaults.directory))
    export_formats = formats or (config.export_formats if config else defaults.formats)
    file_prefix = config.file_prefix if config else f"{result.name}_{defaults.file_prefix}"

    try:
        written = write_exports(
            scenario.graph,
            result.path,
            target_dir,
            export_formats,
            file_prefix,
            scenario=result.name,
            heuristic=result.heuristic
        )
    except NetpathError as e:
        logger.error(f"Export failed: {e}")
        print(f"❌ {e}")
        return 1

    for path in written:
        print(f"📄 Results saved to: {path}")

    return 0
