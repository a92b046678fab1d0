"""Configuration for the process-wide Behold context."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from .core.store import ContextStore, valid_lock_timeout
from .hooks.manager import notify

logger = logging.getLogger("Behold")

ENV_ENABLE = "BEHOLD_ENABLE"
ENV_DISABLE = "BEHOLD_DISABLE"
ENV_DISABLE_HOOKS = "BEHOLD_DISABLE_HOOKS"
ENV_LOCK_TIMEOUT = "BEHOLD_LOCK_TIMEOUT"

_KEY_SEPARATORS = re.compile(r"[,\s]+")


def parse_bool(value: str | bool) -> bool:
    """Parse boolean from string."""
    if isinstance(value, bool):
        return value
    return value.strip().lower() in ("true", "1", "yes", "on")


def parse_lock_timeout(value: str | float | None, default: float = -1.0) -> float:
    """Parse a lock timeout in seconds.

    Anything but a finite, non-negative number or ``-1`` gives ``default``.
    """
    if value is None or value == "":
        return default
    try:
        timeout = float(value)
    except (ValueError, TypeError):
        logger.debug("Ignoring unparsable lock timeout %r", value)
        return default
    if not valid_lock_timeout(timeout):
        logger.debug("Ignoring out of range lock timeout %r", value)
        return default
    return timeout


def parse_keys(value: str | Iterable[str] | None) -> list[str]:
    """Split a comma or whitespace separated list of context keys.

    Iterables are flattened, so repeated CLI options like
    ``["a,b", "c"]`` give ``["a", "b", "c"]``. Order is kept, duplicates
    are dropped.
    """
    if not value:
        return []
    chunks = [value] if isinstance(value, str) else list(value)
    keys: list[str] = []
    for chunk in chunks:
        for key in _KEY_SEPARATORS.split(chunk):
            if key and key not in keys:
                keys.append(key)
    return keys


@dataclass
class BeholdConfig:
    """Configuration applied to the global context store."""

    # Context keys switched on / off at startup
    enable: list[str] = field(default_factory=list)
    disable: list[str] = field(default_factory=list)

    enable_hooks: bool = True

    # Seconds to wait for the store lock, -1 blocks
    lock_timeout: float = -1.0

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> BeholdConfig:
        """Build a configuration from ``BEHOLD_*`` environment variables."""
        env = os.environ if environ is None else environ

        return cls(
            enable=parse_keys(env.get(ENV_ENABLE)),
            disable=parse_keys(env.get(ENV_DISABLE)),
            enable_hooks=not parse_bool(env.get(ENV_DISABLE_HOOKS, "false")),
            lock_timeout=parse_lock_timeout(env.get(ENV_LOCK_TIMEOUT)),
        )

    def flags(self) -> dict[str, bool]:
        """Return the flags this configuration sets; disable wins on conflict."""
        result = {key: True for key in self.enable}
        result.update({key: False for key in self.disable})
        return result

    def apply(self, store: ContextStore) -> None:
        """Write the configured flags into ``store`` and notify hooks."""
        for key, value in self.flags().items():
            store.set(key, value)
            notify("behold_context_set", key=key, value=value)
