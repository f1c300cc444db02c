"""Plugin registry and loading.

Built-in plugins register themselves by name. Configured plugin entries
are either such a name or a path to a Python file that exposes a
``plugin`` object, or module-level ``transform_candidates`` /
``validate_candidate`` functions. Entries that fail to load are logged
and skipped.
"""

import importlib.util
from pathlib import Path
from typing import Dict, List, Optional, Type

from aicc.log import get_logger
from aicc.plugins.base import FunctionPlugin, Plugin

logger = get_logger(__name__)


class PluginLoadError(Exception):
    """Raised when a plugin entry cannot be turned into a plugin."""

    pass


class PluginRegistry:
    """Registry of named built-in plugins."""

    _plugins: Dict[str, Type[Plugin]] = {}

    @classmethod
    def register(cls, name: str):
        """Decorator to register a plugin class under a name."""
        def decorator(plugin_class: Type[Plugin]) -> Type[Plugin]:
            cls._plugins[name] = plugin_class
            logger.debug("Registered plugin: %s", name)
            return plugin_class
        return decorator

    @classmethod
    def get(cls, name: str) -> Optional[Type[Plugin]]:
        """Get a plugin class by name."""
        return cls._plugins.get(name)

    @classmethod
    def list_plugins(cls) -> List[str]:
        """List all registered plugin names."""
        return list(cls._plugins.keys())


def load_plugin_file(path: Path) -> Plugin:
    """Import a plugin from a Python file.

    Args:
        path: Path to the plugin module.

    Returns:
        The plugin.

    Raises:
        PluginLoadError: If the file cannot be imported or exposes no hooks.
    """
    module_name = f"aicc_plugin_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise PluginLoadError(f"Cannot import {path}")

    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        raise PluginLoadError(f"Error importing {path}: {e}") from e

    exported = getattr(module, "plugin", None)
    if isinstance(exported, type) and issubclass(exported, Plugin):
        exported = exported()
    if exported is not None:
        if not (hasattr(exported, "transform_candidates") or hasattr(exported, "validate_candidate")):
            raise PluginLoadError(f"{path}: 'plugin' has no transform_candidates or validate_candidate")
        if not isinstance(exported, Plugin):
            exported = FunctionPlugin(
                getattr(exported, "name", path.stem),
                transform=getattr(exported, "transform_candidates", None),
                validate=getattr(exported, "validate_candidate", None),
            )
        return exported

    transform = getattr(module, "transform_candidates", None)
    validate = getattr(module, "validate_candidate", None)
    if transform is None and validate is None:
        raise PluginLoadError(f"{path} exposes no plugin hooks")
    return FunctionPlugin(getattr(module, "PLUGIN_NAME", path.stem), transform, validate)


def load_plugin(entry: str, cwd: Path) -> Plugin:
    """Resolve one configured plugin entry.

    Raises:
        PluginLoadError: If the entry is neither a registered name nor a
            loadable file.
    """
    # Importing the builtin package registers its plugins
    import aicc.plugins.builtin  # noqa: F401

    plugin_class = PluginRegistry.get(entry)
    if plugin_class is not None:
        return plugin_class()

    path = Path(entry).expanduser()
    if not path.is_absolute():
        path = cwd / path
    if not path.is_file():
        raise PluginLoadError(f"Plugin not found: {entry}")
    return load_plugin_file(path)


def load_plugins(entries: list[str], cwd: Path) -> list[Plugin]:
    """Load configured plugins in order, skipping failures.

    Args:
        entries: Plugin names or file paths from the config.
        cwd: Base directory for relative paths.

    Returns:
        The plugins that loaded successfully.
    """
    plugins = []
    for entry in entries:
        try:
            plugins.append(load_plugin(entry, cwd))
        except PluginLoadError as e:
            logger.warning("Skipping plugin %s: %s", entry, e)
            continue
        logger.debug("Loaded plugin %s", entry)
    return plugins
