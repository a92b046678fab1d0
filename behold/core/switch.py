"""The Behold handle: decides per call site whether to speak up."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from ..hooks.manager import notify
from .store import ContextStore

T = TypeVar("T")


@dataclass(frozen=True)
class Behold:
    """Immutable handle combining a shared context store with local settings.

    ``store`` is shared by reference between a handle and everything derived
    from it. ``speak_up`` and ``suffix`` belong to the instance; the
    derivation methods return new handles and never touch the receiver.
    """

    store: ContextStore = dataclasses.field(repr=False)
    # Determine if this instance should produce output
    speak_up: bool = True
    # Appended to output as ", <suffix>"
    suffix: str | None = None

    @classmethod
    def new(cls) -> Behold:
        """Return the process-wide default instance."""
        from ..api import get_default

        return get_default()

    def set_context(self, key: str, value: bool) -> None:
        """Set ``key`` in the store shared by this handle."""
        self.store.set(key, value)
        notify("behold_context_set", key=key, value=bool(value))

    def tag(self, tag: str) -> Behold:
        """Return a handle that appends ``tag`` to its output."""
        return dataclasses.replace(self, suffix=tag)

    def when(self, speak_up: bool) -> Behold:
        """Return a handle that speaks up only if ``speak_up`` is true."""
        return dataclasses.replace(self, speak_up=bool(speak_up))

    def when_context(self, key: str) -> Behold:
        """Return a handle that speaks up only if ``key`` is set in the store.

        Keys that were never set count as off.
        """
        return dataclasses.replace(self, speak_up=self.store.get(key, False))

    def call(self, callback: Callable[[], T]) -> T | None:
        """Run ``callback`` if this handle speaks up and return its result."""
        if not self.speak_up:
            return None
        return callback()

    def show(self, msg: Any) -> None:
        """Print ``msg`` if this handle speaks up."""
        self.call(lambda: self._emit(str(msg)))

    def _emit(self, message: str) -> None:
        if self.suffix is None:
            line = message
        else:
            line = f"{message}, {self.suffix}"
        print(line)
        notify("behold_show", message=message, tag=self.suffix, line=line)
