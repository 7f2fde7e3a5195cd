"""Pytest configuration and fixtures.

Provides environment isolation and shared test doubles. Fixtures here are
autouse unless noted.
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import suppress
from dataclasses import dataclass
import os

import pytest

from monadkit.config import Config

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class CountingThunk[T]:
    """Zero-argument computation that records how often it runs."""

    value: T
    calls: int = 0

    def __call__(self) -> T:
        self.calls += 1
        return self.value


@dataclass
class RaisingThunk:
    """Computation that raises a fixed error and counts attempts."""

    error: Exception
    calls: int = 0

    def __call__(self) -> object:
        self.calls += 1
        raise self.error


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "monadkit.config.load_dotenv", lambda *_args, **_kwargs: False
        )


@pytest.fixture(autouse=True)
def isolate_monadkit_env(request, monkeypatch):
    """Clear MONADKIT_* variables so the outer shell cannot leak into tests.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("MONADKIT_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def counting_thunk() -> Callable[[object], CountingThunk[object]]:
    """Factory for CountingThunk instances."""
    return CountingThunk


@pytest.fixture
def fast_config() -> Config:
    """Config that skips the simulated delay in demos."""
    return Config(magic_delay_s=0.0, stream_preview=5)
