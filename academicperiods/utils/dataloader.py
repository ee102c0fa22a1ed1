"""Shared data loading utilities for calendar files.

Calendar definitions are data: packaged presets live next to the module
that reads them, user calendars are YAML files named explicitly or through
an environment variable.
"""

import os
from pathlib import Path
from typing import List, Optional, Tuple


def find_data_file(
    module_file: str,
    filenames: List[str],
    env_var: Optional[str] = None,
    module_local_data: bool = True,
) -> Optional[Path]:
    """Find data file by searching standard locations.

    Search priority:
    1. Environment variable: ${env_var} (if env_var is set and the file exists)
    2. Module-local data: {module_dir}/data/ (if module_local_data=True)

    Args:
        module_file: __file__ from the calling module
        filenames: Candidate filenames to search for (e.g., ['presets.yaml'])
        env_var: Optional environment variable holding an explicit path
        module_local_data: If True, search module_dir/data/

    Returns:
        Path to found file, or None if not found

    Examples:
        >>> # From calendars/calendarapi.py (presets are in calendars/data/)
        >>> path = find_data_file(__file__, ['presets.yaml'])
    """
    # Priority 1: explicit path from the environment
    if env_var:
        env_path = os.environ.get(env_var)
        if env_path and Path(env_path).exists():
            return Path(env_path)

    # Priority 2: module-local data (e.g., academicperiods/calendars/data/)
    if module_local_data:
        data_dir = Path(module_file).parent / "data"
        for filename in filenames:
            p = data_dir / filename
            if p.exists():
                return p

    return None


def load_yaml_file(path: Path) -> dict:
    """
    Load and parse YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Parsed YAML data as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If file does not exist
    """
    import yaml

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def format_not_found_error(
    what: str,
    searched_locations: List[Tuple[str, object]],
    fix_instructions: List[str],
) -> str:
    """Format a helpful FileNotFoundError message.

    Args:
        what: What was being looked for (e.g., 'calendar')
        searched_locations: List of (description, path) tuples for locations searched
        fix_instructions: List of commands/instructions to fix the issue

    Returns:
        Formatted error message string
    """
    lines = [f"No {what} data found in standard locations.\n"]

    lines.append("Searched:")
    for i, (desc, path) in enumerate(searched_locations, 1):
        lines.append(f"  {i}. {desc}: {path}")

    lines.append("\nTo fix:")
    for instruction in fix_instructions:
        lines.append(f"  • {instruction}")

    return "\n".join(lines)


__all__ = [
    "find_data_file",
    "load_yaml_file",
    "format_not_found_error",
]
