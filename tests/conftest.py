"""Pytest configuration shared across the suite."""

from __future__ import annotations

import random
from typing import Callable

import pytest


class ConstantSource:
    """Random source that always returns the same value."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


@pytest.fixture
def constant_source() -> Callable[[float], ConstantSource]:
    """Factory for constant random sources, e.g. ``constant_source(0.5)``."""
    return ConstantSource


@pytest.fixture
def midpoint_source() -> ConstantSource:
    """Source pinned to the middle of [0, 1): zero noise, coin flips always fail."""
    return ConstantSource(0.5)


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture(autouse=True)
def _clean_sim_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep SIM_* environment variables from leaking into config loading."""
    monkeypatch.delenv("SIM_LENGTH", raising=False)
    monkeypatch.delenv("SIM_SEED", raising=False)
