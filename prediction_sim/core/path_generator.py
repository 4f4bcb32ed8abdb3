"""Probability path synthesis from a regime schedule plus smoothed noise.

The path is sampled on a fixed simulated horizon, so a larger length only
increases sampling density. At each step:

1. Any regime whose trigger lies within half a step of the current time adds
   its delta to the cumulative drift (each regime fires at most once)
2. The noise walk advances by one step
3. The probability moves by drift * drift_coefficient + noise * noise_coefficient
   and is clamped to [prob_floor, prob_ceiling]

Momentum is the discrete derivative of the clamped probability, so near the
bounds it can read smaller than the attempted step.
"""

from __future__ import annotations

import logging

from prediction_sim.config.models import PathConfig
from prediction_sim.core.noise import clamp, smooth_noise
from prediction_sim.core.types import PathPoint, RandomSource
from prediction_sim.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def time_step(length: int, horizon: float) -> float:
    """Return the spacing between consecutive samples.

    Raises:
        InvalidArgumentError: If length < 2 (the step would be undefined)
    """
    if isinstance(length, bool) or not isinstance(length, int) or length < 2:
        raise InvalidArgumentError(f"length must be an integer >= 2, got {length!r}")
    return horizon / (length - 1)


def generate_path(length: int, config: PathConfig, rng: RandomSource) -> list[PathPoint]:
    """Generate the base probability series.

    Args:
        length: Number of points to produce (>= 2)
        config: Path synthesis parameters
        rng: Source of uniform floats in [0, 1)

    Returns:
        List of ``length`` PathPoint values ordered by time
    """
    dt = time_step(length, config.horizon)

    points: list[PathPoint] = []
    fired: set[int] = set()
    prob = config.initial_prob
    drift = 0.0
    noise = 0.0

    for i in range(length):
        t = i * dt

        for r, regime in enumerate(config.regimes):
            if r not in fired and abs(t - regime.trigger_time) < dt / 2:
                fired.add(r)
                drift += regime.drift_delta
                logger.debug(
                    "Regime %d fired at t=%.3f (delta=%+.4f, drift=%+.4f)",
                    r,
                    t,
                    regime.drift_delta,
                    drift,
                )

        noise = smooth_noise(noise, config.noise_intensity, rng)
        step_change = drift * config.drift_coefficient + noise * config.noise_coefficient
        prev_prob = prob
        prob = clamp(prob + step_change, config.prob_floor, config.prob_ceiling)

        raw_change = prob - prev_prob
        momentum = raw_change / dt if i > 0 else 0.0

        points.append(
            PathPoint(
                index=i,
                t=t,
                prob=prob,
                momentum=momentum,
                raw_change=raw_change,
                drift=drift,
            )
        )

    return points


__all__ = ["time_step", "generate_path"]
