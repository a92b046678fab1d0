"""Shared, lock-guarded mapping of context flags."""

from __future__ import annotations

import logging
import math
import threading
from collections.abc import Iterator, Mapping
from contextlib import contextmanager

from .errors import ContextLockError

logger = logging.getLogger("Behold")


def valid_lock_timeout(value: float) -> bool:
    """Return whether ``value`` is accepted by ``Lock.acquire(timeout=...)``."""
    if value == -1:
        return True
    return math.isfinite(value) and 0 <= value <= threading.TIMEOUT_MAX


class ContextStore:
    """Mapping from context keys to on/off flags.

    Every :class:`~behold.core.switch.Behold` handle derived from the same
    origin holds a reference to one store, so a flag written through any
    handle is seen by all of them. The lock is held for a single insert or
    lookup only.

    Args:
        lock_timeout: Seconds to wait for the lock; ``-1`` waits forever.
        initial: Optional flags to seed the store with.
    """

    def __init__(
        self,
        lock_timeout: float = -1.0,
        initial: Mapping[str, bool] | None = None,
    ) -> None:
        self._lock_timeout = -1.0
        self.lock_timeout = lock_timeout
        self._lock = threading.Lock()
        self._flags: dict[str, bool] = {str(k): bool(v) for k, v in (initial or {}).items()}

    @property
    def lock_timeout(self) -> float:
        return self._lock_timeout

    @lock_timeout.setter
    def lock_timeout(self, value: float) -> None:
        if not valid_lock_timeout(value):
            logger.debug("Ignoring invalid lock timeout %r, blocking instead", value)
            value = -1.0
        self._lock_timeout = float(value)

    @contextmanager
    def _locked(self, operation: str) -> Iterator[dict[str, bool]]:
        if not self._lock.acquire(timeout=self.lock_timeout):
            raise ContextLockError(operation, self.lock_timeout)
        try:
            yield self._flags
        finally:
            self._lock.release()

    def set(self, key: str, value: bool) -> None:
        """Insert or overwrite ``key``."""
        with self._locked("set_context") as flags:
            flags[key] = bool(value)
        logger.debug("Context %r set to %s", key, bool(value))

    def get(self, key: str, default: bool = False) -> bool:
        """Return the flag stored under ``key``, or ``default`` when unset."""
        with self._locked("when_context") as flags:
            value = flags.get(key)
        if value is None:
            logger.debug("Context %r is unset, using %s", key, default)
            return default
        return value

    def snapshot(self) -> dict[str, bool]:
        """Return a copy of all flags."""
        with self._locked("snapshot") as flags:
            return dict(flags)

    def __contains__(self, key: object) -> bool:
        with self._locked("contains") as flags:
            return key in flags

    def __len__(self) -> int:
        with self._locked("len") as flags:
            return len(flags)

    def __repr__(self) -> str:
        return f"<ContextStore flags={self.snapshot()!r}>"
