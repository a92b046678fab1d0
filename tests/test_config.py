"""Tests for Behold configuration parsing."""

from __future__ import annotations

import pytest

from behold.config import BeholdConfig, parse_bool, parse_keys, parse_lock_timeout
from behold.core.store import ContextStore
from behold.hooks.manager import reset_plugin_manager


class TestParsing:
    """Tests for the string parsing helpers."""

    def test_parse_bool(self) -> None:
        """Test boolean parsing from strings."""
        assert parse_bool(True) is True
        assert parse_bool(" Yes ") is True
        assert parse_bool("1") is True
        assert parse_bool("off") is False
        assert parse_bool("") is False

    def test_parse_keys(self) -> None:
        """Test splitting of comma and whitespace separated keys."""
        assert parse_keys(None) == []
        assert parse_keys("") == []
        assert parse_keys("a, b  c,,a") == ["a", "b", "c"]
        assert parse_keys(["a,b", "c", "b"]) == ["a", "b", "c"]

    @pytest.mark.parametrize(
        "raw, expected",
        [("2.5", 2.5), ("0", 0.0), ("-1", -1.0), (3, 3.0), (None, -1.0), ("", -1.0)],
    )
    def test_parse_lock_timeout(self, raw, expected) -> None:
        """Test accepted lock timeout values."""
        assert parse_lock_timeout(raw) == expected

    @pytest.mark.parametrize("raw", ["-5", "-0.5", "inf", "-inf", "nan", "1e300", "soon"])
    def test_parse_lock_timeout_rejects(self, raw) -> None:
        """Test that unusable lock timeouts fall back to the default."""
        assert parse_lock_timeout(raw) == -1.0
        assert parse_lock_timeout(raw, default=1.0) == 1.0


class TestBeholdConfig:
    """Tests for BeholdConfig."""

    def setup_method(self):
        """Drop registered hook plugins before each test."""
        reset_plugin_manager()

    def test_default_config(self) -> None:
        """Test default configuration values."""
        config = BeholdConfig()

        assert config.enable == []
        assert config.disable == []
        assert config.enable_hooks is True
        assert config.lock_timeout == -1.0

    def test_from_env(self) -> None:
        """Test resolution from BEHOLD_* variables."""
        config = BeholdConfig.from_env(
            {
                "BEHOLD_ENABLE": "net,db",
                "BEHOLD_DISABLE": "cache",
                "BEHOLD_DISABLE_HOOKS": "true",
                "BEHOLD_LOCK_TIMEOUT": "0.5",
            }
        )

        assert config.enable == ["net", "db"]
        assert config.disable == ["cache"]
        assert config.enable_hooks is False
        assert config.lock_timeout == 0.5

    def test_from_empty_env(self) -> None:
        """Test that an empty environment gives the defaults."""
        assert BeholdConfig.from_env({}) == BeholdConfig()

    @pytest.mark.parametrize("raw", ["soon", "-5", "inf", "nan"])
    def test_invalid_lock_timeout_falls_back(self, raw) -> None:
        """Test that a bad BEHOLD_LOCK_TIMEOUT leaves the store usable."""
        config = BeholdConfig.from_env({"BEHOLD_LOCK_TIMEOUT": raw})
        assert config.lock_timeout == -1.0

        store = ContextStore(lock_timeout=config.lock_timeout)
        store.set("k", True)
        assert store.get("k") is True

    def test_disable_wins(self) -> None:
        """Test that disable overrides enable for the same key."""
        config = BeholdConfig(enable=["a", "b"], disable=["b"])
        assert config.flags() == {"a": True, "b": False}

    def test_apply(self) -> None:
        """Test writing configured flags into a store."""
        store = ContextStore(initial={"other": True})

        BeholdConfig(enable=["a"], disable=["b"]).apply(store)

        assert store.snapshot() == {"other": True, "a": True, "b": False}
