"""Pytest plugin seeding Behold context flags and providing fixtures."""

from __future__ import annotations

import pytest

from behold.api import configure
from behold.core import Behold, ContextStore

from .config import (
    register_options,
    resolve_options,
    setup_pytest_ini_options,
)


def pytest_addoption(parser: pytest.Parser) -> None:
    """Add command line options."""
    register_options(parser)
    setup_pytest_ini_options(parser)


def pytest_configure(config: pytest.Config) -> None:
    behold_config = resolve_options(config)
    config._behold_config = behold_config
    configure(behold_config)


def pytest_unconfigure(config: pytest.Config) -> None:
    if getattr(config, "_behold_config", None) is not None:
        del config._behold_config


def pytest_report_header(config: pytest.Config) -> str | None:
    behold_config = getattr(config, "_behold_config", None)
    if behold_config is None or not behold_config.flags():
        return None
    flags = ", ".join(
        f"{key}={'on' if value else 'off'}" for key, value in behold_config.flags().items()
    )
    return f"behold: {flags}"


@pytest.fixture
def behold_store() -> ContextStore:
    """A context store private to the requesting test."""
    return ContextStore()


@pytest.fixture
def behold_isolated(behold_store: ContextStore) -> Behold:
    """An active, untagged handle bound to ``behold_store``."""
    return Behold(behold_store)
