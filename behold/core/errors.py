"""Exceptions raised by Behold."""

from __future__ import annotations


class BeholdError(Exception):
    """Base class for all Behold errors."""


class ContextLockError(BeholdError, RuntimeError):
    """The context store lock could not be acquired.

    This signals a broken invariant (a lock held far longer than a single
    insert or lookup) and is not meant to be recovered from.
    """

    def __init__(self, operation: str, timeout: float) -> None:
        self.operation = operation
        self.timeout = timeout
        super().__init__(
            f"{operation} called on a context store - lock not acquired within {timeout}s"
        )
