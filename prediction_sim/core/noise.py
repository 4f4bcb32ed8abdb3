"""Smoothed bounded random walk used to perturb the probability drift."""

from __future__ import annotations

from prediction_sim.core.types import RandomSource


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value x to the range [lo, hi].

    Args:
        x: Value to clamp
        lo: Lower bound
        hi: Upper bound

    Returns:
        Clamped value in [lo, hi]
    """
    return max(lo, min(hi, x))


def smooth_noise(prev: float, intensity: float, rng: RandomSource) -> float:
    """Advance the noise walk by one step.

    Each step adds a uniform perturbation in [-intensity/2, intensity/2) to the
    previous value, so consecutive samples are autocorrelated. The result is
    kept in [-1, 1].

    Args:
        prev: Previous noise value (the caller threads this forward)
        intensity: Width of the uniform perturbation
        rng: Source of uniform floats in [0, 1)

    Returns:
        Next noise value in [-1, 1]
    """
    return clamp(prev + (rng.random() - 0.5) * intensity, -1.0, 1.0)


__all__ = ["clamp", "smooth_noise"]
