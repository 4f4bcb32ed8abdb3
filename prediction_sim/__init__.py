"""Prediction Market Simulator - a regime-driven probability path with a trading agent.

This package provides a deterministic (given a random source) pipeline that combines:
- Probability path synthesis under regime drift and smoothed noise
- Momentum statistics and correlated news synthesis
- A signal-driven decision state machine with risk-bounded position sizing
"""

__version__ = "0.1.0"

from prediction_sim.core.simulation import SimulationResult, generate_simulation  # noqa: E402
from prediction_sim.errors import InvalidArgumentError, SimulationError  # noqa: E402

__all__ = [
    "core",
    "config",
    "cli",
    "generate_simulation",
    "SimulationResult",
    "SimulationError",
    "InvalidArgumentError",
]
