"""Shared test fixtures for the runconf test suite."""

import os
from collections.abc import Callable, Generator
from typing import Any

import pytest

from runconf.stores import InMemoryConfigStore


class EnvOverrideContext:
    """Context manager for temporarily setting environment variables."""

    def __init__(self, overrides: dict[str, str]) -> None:
        self.overrides = overrides
        self.original_env: dict[str, str | None] = {}

    def __enter__(self) -> None:
        for key, value in self.overrides.items():
            self.original_env[key] = os.environ.get(key)
            os.environ[key] = value

    def __exit__(self, *args: Any) -> None:
        for key in self.overrides:
            if self.original_env[key] is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = self.original_env[key]


@pytest.fixture
def env_override() -> Generator[Callable[[dict[str, str]], EnvOverrideContext], None, None]:
    """Context manager for temporarily setting environment variables.

    Usage:
        def test_something(env_override):
            with env_override({"MY_ENV": "value"}):
                # test code here
    """

    def _env_override(overrides: dict[str, str]) -> EnvOverrideContext:
        return EnvOverrideContext(overrides)

    yield _env_override


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache before and after each test."""
    from runconf.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def app_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment used by the store fixture entries."""
    monkeypatch.setenv("MY_ENV", "some env value")
    monkeypatch.setenv("MY_PORT", "9999")
    monkeypatch.delenv("MISSING_ENV", raising=False)


@pytest.fixture
def store() -> InMemoryConfigStore:
    """Store populated like a host application would at startup."""
    return InMemoryConfigStore.from_mapping({
        "configuration": {
            "hardcoded_nil": None,
            "hardcoded_value": "some hardcoded value",
            "system_env": ("system", "MY_ENV"),
            "system_missing": ("system", "MISSING_ENV"),
            "system_default": ("system", "MISSING_ENV", "some system default"),
            "recursive_map": {"port": ("system", "MY_PORT")},
            "recursive_list": [("port", ("system", "MY_PORT"))],
            "recursive_missing": [("port", ("system", "MISSING_ENV"))],
        }
    })
