"""Global configuration management for aicc.

Handles user-level configuration stored in ``$XDG_CONFIG_HOME/aicc/``
(``~/.config/aicc/`` when XDG_CONFIG_HOME is unset):
- config.yaml: Provider, model, and preference settings
- credentials: API keys for model providers
"""

import os
import stat
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from aicc.config import ConfigError


class GlobalConfigError(ConfigError):
    """Raised when there's an error with global configuration."""
    pass


def _default_config_dir() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "aicc"


_CONFIG_DIR = _default_config_dir()


def get_global_config_dir() -> Path:
    """Get the global aicc configuration directory.

    Returns:
        Path to the aicc config directory.
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to the aicc config directory.
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file."""
    return get_global_config_dir() / "config.yaml"


def get_credentials_file_path() -> Path:
    """Get path to credentials file."""
    return get_global_config_dir() / "credentials"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file cannot be read or is not a mapping.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")
    return config


def save_global_config(partial: Dict[str, Any]) -> Path:
    """Merge values into the global config file.

    Args:
        partial: Keys to add or replace. Other existing keys are kept.

    Returns:
        Path to the written config file.

    Raises:
        GlobalConfigError: If the file cannot be written.
    """
    config = load_global_config()
    config.update(partial)

    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")

    return config_file


def _read_credentials_file(credentials_file: Path) -> Dict[str, str]:
    credentials = {}
    with open(credentials_file, "r") as f:
        for line in f:
            line = line.strip()
            # Skip empty lines and comments
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, value = line.split("=", 1)
                credentials[key.strip()] = value.strip()
    return credentials


def load_credentials() -> Dict[str, str]:
    """Load API keys from the credentials file.

    Returns:
        Dictionary mapping environment variable names to API keys.
    """
    credentials_file = get_credentials_file_path()

    if not credentials_file.exists():
        return {}

    try:
        return _read_credentials_file(credentials_file)
    except OSError as e:
        raise GlobalConfigError(f"Failed to load credentials from {credentials_file}: {e}")


def save_credential(key_name: str, api_key: str) -> None:
    """Save or update an API key in the credentials file.

    Args:
        key_name: Environment variable name (e.g., "ANTHROPIC_API_KEY")
        api_key: The API key value.
    """
    credentials = load_credentials()
    credentials[key_name] = api_key

    ensure_global_config_dir()
    credentials_file = get_credentials_file_path()

    try:
        with open(credentials_file, "w") as f:
            f.write("# aicc API credentials\n")
            f.write("# Format: PROVIDER_API_KEY=your_key_here\n\n")
            for key, value in credentials.items():
                f.write(f"{key}={value}\n")

        # Owner read/write only
        os.chmod(credentials_file, stat.S_IRUSR | stat.S_IWUSR)
    except OSError as e:
        raise GlobalConfigError(f"Failed to save credential: {e}")


def get_credential(key_name: str) -> Optional[str]:
    """Get an API key from the credentials file.

    Args:
        key_name: Environment variable name (e.g., "ANTHROPIC_API_KEY")

    Returns:
        The API key if found, None otherwise.
    """
    return load_credentials().get(key_name)
