"""Configuration package for the prediction market simulator.

Usage:
    from prediction_sim.config import SimulationConfig, load_config

    cfg = load_config("sim.json")
    cfg = SimulationConfig(length=200, seed=7)
"""

from prediction_sim.config.models import (
    DEFAULT_REGIMES,
    FeedConfig,
    NewsConfig,
    PathConfig,
    RegimeShift,
    SignalConfig,
    SimulationConfig,
)
from prediction_sim.config.service import build_config, load_config

__all__ = [
    # Models
    "RegimeShift",
    "DEFAULT_REGIMES",
    "PathConfig",
    "NewsConfig",
    "SignalConfig",
    "FeedConfig",
    "SimulationConfig",
    # Service functions
    "build_config",
    "load_config",
]
