"""Hook system for Behold plugins."""

from .manager import (
    BeholdPluginManager,
    get_plugin_manager,
    hooks_enabled,
    reset_plugin_manager,
    set_hooks_enabled,
)
from .specs import BeholdHookSpecs, hookimpl, hookspec

__all__ = [
    "hookspec",
    "hookimpl",
    "BeholdHookSpecs",
    "BeholdPluginManager",
    "get_plugin_manager",
    "reset_plugin_manager",
    "set_hooks_enabled",
    "hooks_enabled",
]
