"""
Scenario file discovery logic
"""

from pathlib import Path
from typing import Optional

from platformdirs import user_config_dir

from .config_template import DEFAULT_CONFIG_FILENAME


def user_config_path() -> Path:
    """OS-native location for a default scenario file"""
    return Path(user_config_dir('netpath', appauthor=False)) / DEFAULT_CONFIG_FILENAME


def discover_config(explicit_path: Optional[str] = None) -> str:
    """
    Locate the scenario file to run

    Priority order:
    1. Explicit path provided by user
    2. Current directory (./netpath.yaml)
    3. OS-native config location (~/.config/netpath/netpath.yaml on Linux)

    Args:
        explicit_path: Optional explicit path to a scenario file

    Returns:
        Absolute path to the scenario file as string

    Raises:
        FileNotFoundError: If no scenario file is found in any location
    """
    if explicit_path:
        path = Path(explicit_path).resolve()
        if not path.exists():
            raise FileNotFoundError(f"Scenario file not found: {explicit_path}")
        return str(path)

    local_config = Path(DEFAULT_CONFIG_FILENAME).resolve()
    if local_config.exists():
        return str(local_config)

    os_config = user_config_path()
    if os_config.exists():
        return str(os_config)

    raise FileNotFoundError(
        "No scenario file found.\n"
        "Run 'netpath init' to create one, pass a file path, or use --scenario."
    )
