"""Process-wide default instance and module-level convenience API."""

from __future__ import annotations

import logging
import threading
from typing import Any, cast

from .config import BeholdConfig
from .core.store import ContextStore
from .core.switch import Behold
from .hooks.manager import notify, set_hooks_enabled

logger = logging.getLogger("Behold")

_init_lock = threading.Lock()
_default: Behold | None = None
_config: BeholdConfig | None = None


def get_default() -> Behold:
    """Return the default instance, initializing the global store once.

    The first call reads the environment configuration (unless
    :func:`configure` ran earlier) and seeds the store from it.
    """
    global _default, _config
    seeded: dict[str, bool] = {}
    if _default is None:
        with _init_lock:
            if _default is None:
                if _config is None:
                    _config = BeholdConfig.from_env()
                set_hooks_enabled(_config.enable_hooks)
                seeded = _config.flags()
                store = ContextStore(lock_timeout=_config.lock_timeout, initial=seeded)
                _default = Behold(store)
                logger.debug("Initialized default Behold with %d flag(s)", len(store))
    # hooks may call back into behold(), so they run after the init lock is released
    for key, value in seeded.items():
        notify("behold_context_set", key=key, value=value)
    return _default


def get_config() -> BeholdConfig:
    """Return the active configuration."""
    get_default()
    return cast(BeholdConfig, _config)


def configure(config: BeholdConfig) -> None:
    """Replace the active configuration.

    Flags from ``config`` are written into the global store; flags already
    set stay unless ``config`` overrides them.
    """
    global _config
    with _init_lock:
        _config = config
        set_hooks_enabled(config.enable_hooks)
        default = _default
    if default is not None:
        default.store.lock_timeout = config.lock_timeout
        config.apply(default.store)
    else:
        get_default()


def reset_default() -> None:
    """Forget the default instance and configuration.

    Meant for test isolation; handles obtained earlier keep their store.
    """
    global _default, _config
    with _init_lock:
        _default = None
        _config = None
    set_hooks_enabled(True)


def behold() -> Behold:
    """Return the process-wide default instance."""
    return get_default()


def set_context(key: str, value: bool) -> None:
    get_default().set_context(key, value)


def when_context(key: str) -> Behold:
    return get_default().when_context(key)


def when(speak_up: bool) -> Behold:
    return get_default().when(speak_up)


def tag(name: str) -> Behold:
    return get_default().tag(name)


def show(msg: Any) -> None:
    get_default().show(msg)
