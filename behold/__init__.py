"""Behold - contextual debugging toggles for ad-hoc diagnostic output."""

from __future__ import annotations

# Public API facade
from behold.api import (
    behold,
    configure,
    get_config,
    get_default,
    reset_default,
    set_context,
    show,
    tag,
    when,
    when_context,
)
from behold.config import BeholdConfig

# Core types
from behold.core import Behold, BeholdError, ContextLockError, ContextStore
from behold.hooks import hookimpl

# Version info
__version__ = "0.1.0"

# Public API
__all__ = [
    # Version
    "__version__",
    # Core types
    "Behold",
    "BeholdConfig",
    "BeholdError",
    "ContextLockError",
    "ContextStore",
    # Public API
    "behold",
    "configure",
    "get_config",
    "get_default",
    "reset_default",
    "set_context",
    "show",
    "tag",
    "when",
    "when_context",
    # Hooks
    "hookimpl",
]
