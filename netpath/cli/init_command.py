"""
CLI command to create a scenario file
"""

from pathlib import Path
from typing import Optional

from .config_template import DEFAULT_CONFIG_FILENAME, MINIMAL_CONFIG_TEMPLATE


def run_init_command(force: bool = False, path: Optional[str] = None) -> int:
    """
    Write the template scenario file to the current directory or a custom path

    Args:
        force: If True, overwrite an existing file
        path: Custom path for the file. If None, creates ./netpath.yaml

    Returns:
        Exit code (0 = success, 1 = error)
    """
    config_path = Path(path or DEFAULT_CONFIG_FILENAME).resolve()

    if config_path.exists() and not force:
        print(f"❌ Scenario file already exists: {config_path}")
        print("   Use --force to overwrite")
        return 1

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(MINIMAL_CONFIG_TEMPLATE, encoding='utf-8')
    except OSError as e:
        print(f"❌ Failed to write scenario file: {config_path}")
        print(f"   Error: {e}")
        return 1

    print(f"✅ Scenario file created: {config_path}")
    print("\nNext steps:")
    print(f"  1. Edit the nodes, edges and search endpoints in {config_path}")
    print("  2. Run the search:")
    print(f"     netpath run {config_path.name}")

    return 0
