"""Built-in plugins, registered on import."""

from aicc.plugins.builtin.wip_guard import WipGuardPlugin

__all__ = ["WipGuardPlugin"]
