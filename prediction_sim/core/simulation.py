"""End-to-end simulation pipeline.

Stages run strictly in sequence, each consuming the previous stage's full
output:

    path generation -> momentum statistics -> news synthesis -> signal & decisions

The statistics stage needs the whole path before anything can be z-scored,
so the stages are not fused into a single streaming pass.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from prediction_sim.config.models import SignalConfig, SimulationConfig
from prediction_sim.config.service import build_config
from prediction_sim.core.decision import direction_from_z, risk_utilization, transition
from prediction_sim.core.news import synthesize_news
from prediction_sim.core.path_generator import generate_path
from prediction_sim.core.signal import NewsCursor, signal_score
from prediction_sim.core.statistics import MomentumStats, compute_momentum_stats
from prediction_sim.core.types import (
    Decision,
    DecisionRecord,
    NewsEvent,
    NewsPolarity,
    PathPoint,
    RandomSource,
    SimulationPoint,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SimulationResult:
    """Read-only output of a single run."""

    points: tuple[SimulationPoint, ...]
    news_events: tuple[NewsEvent, ...]
    decisions: tuple[DecisionRecord, ...]
    stats: MomentumStats
    config: SimulationConfig

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "config": self.config.model_dump(mode="json"),
            "stats": {
                "mean": self.stats.mean,
                "std": self.stats.std,
                "count": self.stats.count,
            },
            "points": [p.to_dict() for p in self.points],
            "news_events": [n.to_dict() for n in self.news_events],
            "decisions": [d.to_dict() for d in self.decisions],
        }


def run_decision_pass(
    path: Sequence[PathPoint],
    news_events: Sequence[NewsEvent],
    stats: MomentumStats,
    config: SignalConfig,
) -> tuple[list[SimulationPoint], list[DecisionRecord]]:
    """Score every point, drive the decision state machine and collect the log.

    Args:
        path: Full path from the generator, ordered by time
        news_events: News events ordered by time
        stats: Global momentum statistics
        config: Signal parameters

    Returns:
        Tuple of (enriched points, decision log without OBSERVE entries)
    """
    points: list[SimulationPoint] = []
    decisions: list[DecisionRecord] = []
    cursor = NewsCursor(news_events)
    position_size = 0.0

    for base in path:
        z = stats.z_score(base.momentum)
        abs_z = abs(z)

        news = cursor.recent(base.t, config.news_window)
        relevance = news.relevance if news is not None else 0.0
        polarity = news.polarity if news is not None else NewsPolarity.NEUTRAL

        score = signal_score(abs_z, relevance, config)
        decision, position_size = transition(score, position_size, direction_from_z(z), config)

        point = SimulationPoint.from_path_point(
            base,
            z=z,
            abs_z=abs_z,
            news_relevance=relevance,
            news_polarity=polarity,
            signal_score=score,
            trade_threshold=config.trade_threshold,
            position_size=position_size,
            risk_utilization=risk_utilization(position_size, config),
            decision=decision,
        )
        points.append(point)

        if decision is not Decision.OBSERVE:
            decisions.append(DecisionRecord.from_point(point))

    return points, decisions


def generate_simulation(
    config: SimulationConfig | Mapping[str, Any] | None = None,
    rng: RandomSource | None = None,
) -> SimulationResult:
    """Run the full pipeline and return an immutable result.

    Args:
        config: SimulationConfig, mapping of its fields, or None for defaults
        rng: Random source with a ``random()`` method; defaults to
            ``random.Random(config.seed)``

    Returns:
        SimulationResult with time-ordered points, news events and decisions

    Raises:
        InvalidArgumentError: If the configuration is invalid. Raised before
            any generation work starts.
    """
    cfg = build_config(config)
    if rng is None:
        rng = random.Random(cfg.seed)

    path = generate_path(cfg.length, cfg.path, rng)
    stats = compute_momentum_stats([p.momentum for p in path])
    news_events = synthesize_news(path, stats, cfg.news, rng)
    points, decisions = run_decision_pass(path, news_events, stats, cfg.signal)

    logger.info(
        "Simulation complete: %d points, %d news events, %d decisions",
        len(points),
        len(news_events),
        len(decisions),
    )

    return SimulationResult(
        points=tuple(points),
        news_events=tuple(news_events),
        decisions=tuple(decisions),
        stats=stats,
        config=cfg,
    )


__all__ = ["SimulationResult", "run_decision_pass", "generate_simulation"]
