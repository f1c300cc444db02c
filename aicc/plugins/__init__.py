"""Plugin support for aicc.

This package provides:
- base: Plugin, FunctionPlugin, PluginContext
- registry: PluginRegistry, load_plugins, load_plugin_file
- pipeline: apply_transforms, run_validations
- builtin: bundled plugins (wip-guard)
"""

from aicc.plugins.base import (
    FunctionPlugin,
    Plugin,
    PluginContext,
    ValidationResult,
)
from aicc.plugins.registry import (
    PluginLoadError,
    PluginRegistry,
    load_plugin,
    load_plugin_file,
    load_plugins,
)
from aicc.plugins.pipeline import (
    apply_transforms,
    run_validations,
)

__all__ = [
    "FunctionPlugin",
    "Plugin",
    "PluginContext",
    "ValidationResult",
    "PluginLoadError",
    "PluginRegistry",
    "load_plugin",
    "load_plugin_file",
    "load_plugins",
    "apply_transforms",
    "run_validations",
]
