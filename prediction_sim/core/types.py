"""Value types shared by the simulation stages."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Protocol


class Decision(str, Enum):
    """Agent decision taken at a single point.

    - OBSERVE: no action, position unchanged
    - ENTER: open a position from flat
    - SCALE: add to an open position on high conviction
    - HOLD: keep exposure while it slowly decays toward flat
    - EXIT: cut exposure sharply on a weak signal
    """

    OBSERVE = "observe"
    ENTER = "enter"
    SCALE = "scale"
    HOLD = "hold"
    EXIT = "exit"


class NewsPolarity(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class RandomSource(Protocol):
    """Anything producing uniform floats in [0, 1); random.Random qualifies."""

    def random(self) -> float:  # pragma: no cover - interface only
        ...


@dataclass(frozen=True, slots=True)
class PathPoint:
    """Point produced by the path generator, before global statistics exist."""

    index: int
    t: float
    prob: float
    momentum: float
    raw_change: float
    drift: float


@dataclass(frozen=True, slots=True)
class SimulationPoint:
    """Fully enriched point after the signal and decision pass.

    Fields:
        z: Momentum z-score against the run's global statistics
        news_relevance: Relevance of the recent news event, 0 when none
        signal_score: Blend of momentum and news, in [0, 1]
        position_size: Signed position after this point's decision, in [-1, 1]
        risk_utilization: Percentage of the risk budget in use, in [0, 100]
    """

    index: int
    t: float
    prob: float
    momentum: float
    raw_change: float
    drift: float
    z: float
    abs_z: float
    news_relevance: float
    news_polarity: NewsPolarity
    signal_score: float
    trade_threshold: float
    position_size: float
    risk_utilization: int
    decision: Decision

    @classmethod
    def from_path_point(cls, point: PathPoint, **derived: Any) -> SimulationPoint:
        return cls(
            index=point.index,
            t=point.t,
            prob=point.prob,
            momentum=point.momentum,
            raw_change=point.raw_change,
            drift=point.drift,
            **derived,
        )

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["news_polarity"] = self.news_polarity.value
        data["decision"] = self.decision.value
        return data


@dataclass(frozen=True, slots=True)
class NewsEvent:
    """Synthetic news headline tied to an anomalous momentum point."""

    t: float
    index: int
    relevance: float
    polarity: NewsPolarity
    headline: str

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["polarity"] = self.polarity.value
        return data


@dataclass(frozen=True, slots=True)
class DecisionRecord:
    """Log entry captured for every point whose decision is not OBSERVE."""

    t: float
    index: int
    prob: float
    decision: Decision
    signal_score: float
    news_relevance: float
    momentum: float
    position_size: float

    @classmethod
    def from_point(cls, point: SimulationPoint) -> DecisionRecord:
        return cls(
            t=point.t,
            index=point.index,
            prob=point.prob,
            decision=point.decision,
            signal_score=point.signal_score,
            news_relevance=point.news_relevance,
            momentum=point.momentum,
            position_size=point.position_size,
        )

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["decision"] = self.decision.value
        return data


__all__ = [
    "Decision",
    "NewsPolarity",
    "RandomSource",
    "PathPoint",
    "SimulationPoint",
    "NewsEvent",
    "DecisionRecord",
]
