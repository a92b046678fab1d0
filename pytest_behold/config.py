"""Configuration system for the pytest-behold plugin."""

from __future__ import annotations

import os
from typing import Any

import pytest

from behold.config import (
    ENV_DISABLE,
    ENV_DISABLE_HOOKS,
    ENV_ENABLE,
    ENV_LOCK_TIMEOUT,
    BeholdConfig,
    parse_bool,
    parse_keys,
    parse_lock_timeout,
)


def register_options(parser: pytest.Parser) -> None:
    """Register pytest command line options for Behold."""
    group = parser.getgroup("behold", "Behold contextual debugging")

    group.addoption(
        "--behold-enable",
        action="append",
        default=None,
        metavar="KEY",
        help="Switch on a Behold context key (repeatable, comma separated)",
    )
    group.addoption(
        "--behold-disable",
        action="append",
        default=None,
        metavar="KEY",
        help="Switch off a Behold context key (repeatable, comma separated)",
    )
    group.addoption(
        "--behold-disable-hooks",
        action="store_true",
        default=None,
        help="Do not dispatch Behold plugin hooks",
    )
    group.addoption(
        "--behold-lock-timeout",
        action="store",
        type=float,
        default=None,
        metavar="SECONDS",
        help="Seconds to wait for the context store lock (-1 waits forever)",
    )


def setup_pytest_ini_options(parser: pytest.Parser) -> None:
    """Setup pytest.ini configuration options."""
    parser.addini("behold_enable", "Behold context keys to switch on")
    parser.addini("behold_disable", "Behold context keys to switch off")
    parser.addini("behold_disable_hooks", "Disable Behold hooks", default="false")
    parser.addini("behold_lock_timeout", "Seconds to wait for the context store lock", default="-1")


def resolve_options(config: pytest.Config) -> BeholdConfig:
    """Resolve Behold configuration from CLI, environment, and pytest.ini.

    Priority: CLI > ENV > pytest.ini > defaults
    """

    def get_option(name: str, env_name: str, ini_name: str, default: Any = None) -> Any:
        cli_value = config.getoption(name, default=None)
        if cli_value is not None:
            return cli_value

        env_value = os.getenv(env_name)
        if env_value is not None:
            return env_value

        ini_value = config.getini(ini_name)
        if ini_value:
            return ini_value

        return default

    return BeholdConfig(
        enable=parse_keys(get_option("behold_enable", ENV_ENABLE, "behold_enable")),
        disable=parse_keys(get_option("behold_disable", ENV_DISABLE, "behold_disable")),
        enable_hooks=not parse_bool(
            get_option(
                "behold_disable_hooks", ENV_DISABLE_HOOKS, "behold_disable_hooks", False
            )
        ),
        lock_timeout=parse_lock_timeout(
            get_option("behold_lock_timeout", ENV_LOCK_TIMEOUT, "behold_lock_timeout", -1.0)
        ),
    )
