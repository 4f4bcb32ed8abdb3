"""Synthetic news events correlated with anomalous momentum.

Only interior points whose momentum z-score clears the threshold are
eligible, and each eligible point emits news with a fixed probability. Large
moves therefore produce news often but not always, and small moves never do.
"""

from __future__ import annotations

import logging
from typing import Sequence

from prediction_sim.config.models import NewsConfig
from prediction_sim.core.noise import clamp
from prediction_sim.core.statistics import MomentumStats
from prediction_sim.core.types import NewsEvent, NewsPolarity, PathPoint, RandomSource

logger = logging.getLogger(__name__)

HEADLINES: dict[NewsPolarity, tuple[str, ...]] = {
    NewsPolarity.POSITIVE: (
        "Polls tighten in favor of outcome",
        "Key indicator surprises to the upside",
        "Major fund signals confidence in scenario",
        "Market liquidity spikes as buyers step in",
    ),
    NewsPolarity.NEGATIVE: (
        "Unexpected data undermines prior consensus",
        "Key stakeholder walks back earlier commitment",
        "Liquidity thins out as traders de-risk",
        "New report challenges baseline assumptions",
    ),
}


def pick_headline(polarity: NewsPolarity, rng: RandomSource) -> str:
    """Draw a headline uniformly from the pool for ``polarity``."""
    if polarity not in HEADLINES:
        raise ValueError(f"No headlines for polarity '{polarity.value}'")
    pool = HEADLINES[polarity]
    # min() guards against a source that returns exactly 1.0
    return pool[min(int(rng.random() * len(pool)), len(pool) - 1)]


def news_relevance(abs_z: float, config: NewsConfig, jitter: float) -> float:
    """Relevance of a news event raised at ``abs_z``, clamped to [0, 1].

    Args:
        abs_z: Absolute momentum z-score of the point
        config: News synthesis parameters
        jitter: Uniform draw in [0, 1) scaled by relevance_jitter
    """
    return clamp(
        config.base_relevance
        + (abs_z - config.z_threshold) * config.relevance_slope
        + jitter * config.relevance_jitter,
        0.0,
        1.0,
    )


def synthesize_news(
    points: Sequence[PathPoint],
    stats: MomentumStats,
    config: NewsConfig,
    rng: RandomSource,
) -> list[NewsEvent]:
    """Scan interior points for momentum anomalies and emit news events.

    Args:
        points: Full path, ordered by time
        stats: Global momentum statistics for z-scoring
        config: News synthesis parameters
        rng: Source of uniform floats in [0, 1)

    Returns:
        News events ordered by time (follows point order)
    """
    events: list[NewsEvent] = []

    for point in points[1:-1]:
        z = stats.z_score(point.momentum)
        abs_z = abs(z)

        # Coin flip is only drawn for eligible points
        if abs_z > config.z_threshold and rng.random() < config.emission_probability:
            relevance = news_relevance(abs_z, config, rng.random())
            polarity = NewsPolarity.POSITIVE if z > 0 else NewsPolarity.NEGATIVE
            events.append(
                NewsEvent(
                    t=point.t,
                    index=point.index,
                    relevance=relevance,
                    polarity=polarity,
                    headline=pick_headline(polarity, rng),
                )
            )

    logger.debug("Synthesized %d news events from %d points", len(events), len(points))
    return events


__all__ = ["HEADLINES", "pick_headline", "news_relevance", "synthesize_news"]
