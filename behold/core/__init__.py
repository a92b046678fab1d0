"""Core components: the context store and the Behold handle."""

from .errors import BeholdError, ContextLockError
from .store import ContextStore
from .switch import Behold

__all__ = [
    "Behold",
    "BeholdError",
    "ContextLockError",
    "ContextStore",
]
