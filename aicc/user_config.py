"""Project-level configuration for aicc.

A project config file is looked up from the working directory upward; the
first match wins. Files are parsed as YAML, so plain JSON ``.aiccrc`` files
work too.
"""

from pathlib import Path
from typing import Any, Optional

import yaml

from aicc.config import ConfigError

PROJECT_CONFIG_FILES = (
    ".aiccrc",
    ".aiccrc.json",
    ".aiccrc.yaml",
    ".aiccrc.yml",
    ".aicc.yaml",
)


def find_project_config(cwd: Path) -> Optional[Path]:
    """Find the nearest project config file.

    Args:
        cwd: Directory to start searching from.

    Returns:
        Path to the config file, or None if there is none.
    """
    current = cwd.resolve()
    for directory in (current, *current.parents):
        for name in PROJECT_CONFIG_FILES:
            candidate = directory / name
            if candidate.is_file():
                return candidate
    return None


def load_project_config(cwd: Path) -> dict[str, Any]:
    """Load the nearest project config file.

    Args:
        cwd: Directory to start searching from.

    Returns:
        The raw config mapping, or an empty dict if no file exists.

    Raises:
        ConfigError: If the file cannot be parsed or is not a mapping.
    """
    config_file = find_project_config(cwd)
    if config_file is None:
        return {}

    try:
        with open(config_file, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load project config {config_file}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Project config {config_file} must contain a mapping")
    return data
