"""Shared fixtures: in-memory session/persistent stores and isolated config."""

from __future__ import annotations

import random
from typing import Any

import pytest

from src.memory_match.services.config_loader import set_runtime_config


class MemorySessionStore:
    """Dict-backed SessionStore used in place of st.session_state."""

    def __init__(self) -> None:
        self.data: dict[str, Any] = {}

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.data[key] = value


class MemoryKeyValueStore:
    """Dict-backed KeyValueStore; counts writes so tests can assert persistence."""

    def __init__(self) -> None:
        self.data: dict[str, Any] = {}
        self.writes = 0

    def get(self, key: str) -> Any:
        return self.data.get(key)

    def set(self, key: str, value: Any) -> None:
        self.data[key] = value
        self.writes += 1


@pytest.fixture(autouse=True)
def _isolated_config():
    """Never read a memory_match.toml from the working directory during tests."""
    set_runtime_config({})
    yield
    set_runtime_config(None)


@pytest.fixture()
def session() -> MemorySessionStore:
    return MemorySessionStore()


@pytest.fixture()
def kv() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)
