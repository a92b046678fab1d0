"""Plugin manager holding registered Behold hook implementations."""

from __future__ import annotations

import logging
import threading
from typing import Any

import pluggy

from .specs import BeholdHookSpecs

logger = logging.getLogger("Behold")

_lock = threading.Lock()
_plugin_manager: BeholdPluginManager | None = None
_enabled = True


class BeholdPluginManager(pluggy.PluginManager):
    """Plugin manager preloaded with the Behold hook specifications."""

    def __init__(self) -> None:
        super().__init__("behold")
        self.add_hookspecs(BeholdHookSpecs)


def get_plugin_manager() -> BeholdPluginManager:
    """Return the shared plugin manager, creating it on first use."""
    global _plugin_manager
    if _plugin_manager is None:
        with _lock:
            if _plugin_manager is None:
                _plugin_manager = BeholdPluginManager()
    return _plugin_manager


def reset_plugin_manager() -> None:
    """Drop the shared plugin manager and every registered plugin."""
    global _plugin_manager
    with _lock:
        _plugin_manager = None


def set_hooks_enabled(enabled: bool) -> None:
    global _enabled
    _enabled = bool(enabled)


def hooks_enabled() -> bool:
    return _enabled


def notify(hook_name: str, **kwargs: Any) -> None:
    """Call ``hook_name`` on every registered plugin, unless hooks are off."""
    if not _enabled:
        return
    pm = get_plugin_manager()
    if not pm.get_plugins():
        return
    logger.debug("Dispatching %s to %d plugin(s)", hook_name, len(pm.get_plugins()))
    getattr(pm.hook, hook_name)(**kwargs)
