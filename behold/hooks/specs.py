"""Hook specifications for the Behold plugin system."""

from __future__ import annotations

from pluggy import HookimplMarker, HookspecMarker

hookspec = HookspecMarker("behold")
hookimpl = HookimplMarker("behold")


class BeholdHookSpecs:
    """Hook specifications for observing Behold activity."""

    @hookspec
    def behold_show(self, message: str, tag: str | None, line: str) -> None:
        """Called after an active handle has written a message.

        Args:
            message: The message as passed to ``show``
            tag: Tag of the handle, if any
            line: The exact line written to the output stream
        """

    @hookspec
    def behold_context_set(self, key: str, value: bool) -> None:
        """Called after a context flag has been stored.

        Args:
            key: Context key
            value: New flag value
        """
