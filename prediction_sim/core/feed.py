"""Read-only views over a simulation result for log, feed and state renderers."""

from __future__ import annotations

import bisect
from typing import Sequence, TypeVar

from prediction_sim.core.simulation import SimulationResult
from prediction_sim.core.types import Decision, DecisionRecord, NewsEvent, SimulationPoint

DEFAULT_DECISION_WINDOW = 40.0
DEFAULT_NEWS_WINDOW = 50.0

# Display floor for the momentum scale, keeps the threshold line off zero
MIN_MOMENTUM_SCALE = 0.0001

_DECISION_LABELS: dict[Decision, str] = {
    Decision.OBSERVE: "Observe",
    Decision.ENTER: "Entry",
    Decision.SCALE: "Scale",
    Decision.HOLD: "Hold",
    Decision.EXIT: "Exit",
}

_AGENT_MODES: dict[Decision, str] = {
    Decision.OBSERVE: "Idle / observing",
    Decision.ENTER: "Entering position",
    Decision.SCALE: "Scaling position",
    Decision.HOLD: "Holding risk",
    Decision.EXIT: "Exiting / de-risking",
}

T = TypeVar("T", DecisionRecord, NewsEvent)


def _in_window(items: Sequence[T], now: float, window: float) -> list[T]:
    return [item for item in items if now - window <= item.t <= now]


def decisions_in_window(
    decisions: Sequence[DecisionRecord],
    now: float,
    window: float = DEFAULT_DECISION_WINDOW,
) -> list[DecisionRecord]:
    """Decisions with ``now - window <= t <= now``, in time order."""
    return _in_window(decisions, now, window)


def news_in_window(
    news_events: Sequence[NewsEvent],
    now: float,
    window: float = DEFAULT_NEWS_WINDOW,
) -> list[NewsEvent]:
    """News events with ``now - window <= t <= now``, in time order."""
    return _in_window(news_events, now, window)


def news_impact(relevance: float) -> str:
    """Bucket relevance into "high" (> 0.7), "medium" (> 0.45) or "low"."""
    if relevance > 0.7:
        return "high"
    if relevance > 0.45:
        return "medium"
    return "low"


def decision_label(decision: Decision) -> str:
    return _DECISION_LABELS[decision]


def agent_mode(decision: Decision) -> str:
    return _AGENT_MODES[decision]


def describe_decision(record: DecisionRecord) -> str:
    """Human-readable one-liner for a decision log entry.

    Example:
        "Opening long position · dP/dt = 0.012 · news relevance = 0.61 · position = 0.21"
    """
    side = "long" if record.momentum >= 0 else "short"
    pieces: list[str] = []

    if record.decision is Decision.ENTER:
        pieces.append(f"Opening {side} position")
    elif record.decision is Decision.SCALE:
        pieces.append(f"Adding to {side} position")
    elif record.decision is Decision.HOLD:
        pieces.append("Maintaining exposure")
    elif record.decision is Decision.EXIT:
        pieces.append("Reducing or closing exposure")

    pieces.append(f"dP/dt = {record.momentum:.3f}")

    if record.news_relevance > 0.25:
        pieces.append(f"news relevance = {record.news_relevance:.2f}")

    pieces.append(f"position = {record.position_size:.2f}")
    return " · ".join(pieces)


def momentum_display_threshold(
    points: Sequence[SimulationPoint],
    trade_threshold: float,
) -> float:
    """Rescale the signal threshold onto the momentum axis of a chart.

    Display-only: the decision engine never uses this value.
    """
    scale = max((abs(p.momentum) for p in points), default=0.0)
    return trade_threshold * max(scale, MIN_MOMENTUM_SCALE)


def point_at(result: SimulationResult, t: float) -> SimulationPoint:
    """Return the last point whose time is not after ``t``.

    Times before the first point map to the first point.
    """
    times = [p.t for p in result.points]
    idx = bisect.bisect_right(times, t) - 1
    return result.points[max(idx, 0)]


__all__ = [
    "DEFAULT_DECISION_WINDOW",
    "DEFAULT_NEWS_WINDOW",
    "decisions_in_window",
    "news_in_window",
    "news_impact",
    "decision_label",
    "agent_mode",
    "describe_decision",
    "momentum_display_threshold",
    "point_at",
]
