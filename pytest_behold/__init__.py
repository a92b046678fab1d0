"""Pytest plugin for Behold contextual debugging."""

from behold.config import BeholdConfig

from .plugin import behold_isolated, behold_store

__version__ = "0.1.0"

__all__ = [
    "BeholdConfig",
    "behold_isolated",
    "behold_store",
]
