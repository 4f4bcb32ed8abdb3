"""Global momentum statistics used to z-score every point."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence

from prediction_sim.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

# Floor substituted for a zero standard deviation (all-equal series)
STD_EPSILON = 1e-6


@dataclass(frozen=True, slots=True)
class MomentumStats:
    """Mean and population standard deviation of a momentum series."""

    mean: float
    std: float
    count: int

    def z_score(self, momentum: float) -> float:
        return (momentum - self.mean) / self.std


def compute_momentum_stats(momenta: Sequence[float]) -> MomentumStats:
    """Compute mean and population standard deviation (divide by N).

    Needs the full series, so it runs as its own pass after path generation.

    Args:
        momenta: Momentum values for every point of the path

    Returns:
        MomentumStats with std floored to STD_EPSILON when the series is flat

    Raises:
        InvalidArgumentError: If momenta is empty
    """
    n = len(momenta)
    if n == 0:
        raise InvalidArgumentError("momentum series must not be empty")

    mean = sum(momenta) / n
    variance = sum((m - mean) * (m - mean) for m in momenta) / n
    std = math.sqrt(variance)

    if std == 0.0:
        logger.debug("Momentum series is flat, flooring std to %g", STD_EPSILON)
        std = STD_EPSILON

    logger.debug("Momentum stats: n=%d mean=%.6f std=%.6f", n, mean, std)
    return MomentumStats(mean=mean, std=std, count=n)


__all__ = ["STD_EPSILON", "MomentumStats", "compute_momentum_stats"]
