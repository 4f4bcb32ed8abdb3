"""Decision state machine and risk-bounded position sizing.

Transitions are pure functions of (signal score, position, direction), so the
machine can be exercised without generating a path:

- signal > trade_threshold:
    flat                                  -> ENTER
    signal > high_conviction, |pos| < max -> SCALE
    otherwise                             -> HOLD
- signal < trade_threshold * exit_relaxation with open risk -> EXIT
  (risk-off overrides everything above)
- otherwise -> OBSERVE

Position updates per decision:
    ENTER   pos + signal * entry_size * direction          (clamped to +-max)
    SCALE   pos + signal * entry_size * scale_factor * dir (clamped to +-max)
    HOLD    pos * hold_decay
    EXIT    pos * exit_decay
    OBSERVE pos
"""

from __future__ import annotations

import math
from typing import Callable

from prediction_sim.config.models import SignalConfig
from prediction_sim.core.noise import clamp
from prediction_sim.core.types import Decision

PositionUpdate = Callable[[float, float, int, SignalConfig], float]


def _enter(position: float, score: float, direction: int, config: SignalConfig) -> float:
    return clamp(
        position + score * config.entry_size * direction,
        -config.max_position,
        config.max_position,
    )


def _scale(position: float, score: float, direction: int, config: SignalConfig) -> float:
    return clamp(
        position + score * config.entry_size * config.scale_factor * direction,
        -config.max_position,
        config.max_position,
    )


POSITION_UPDATES: dict[Decision, PositionUpdate] = {
    Decision.OBSERVE: lambda position, score, direction, config: position,
    Decision.ENTER: _enter,
    Decision.SCALE: _scale,
    Decision.HOLD: lambda position, score, direction, config: position * config.hold_decay,
    Decision.EXIT: lambda position, score, direction, config: position * config.exit_decay,
}


def direction_from_z(z: float) -> int:
    """Trade direction from the raw momentum sign: +1 for z >= 0, else -1."""
    return 1 if z >= 0 else -1


def decide(signal_score: float, position_size: float, config: SignalConfig) -> Decision:
    """Pick the decision for one point.

    Args:
        signal_score: Combined signal in [0, 1]
        position_size: Position held before this point
        config: Signal parameters

    Returns:
        The Decision for this point
    """
    if signal_score < config.exit_threshold and position_size != 0:
        return Decision.EXIT

    if signal_score > config.trade_threshold:
        if position_size == 0:
            return Decision.ENTER
        if signal_score > config.high_conviction and abs(position_size) < config.max_position:
            return Decision.SCALE
        return Decision.HOLD

    return Decision.OBSERVE


def apply_decision(
    decision: Decision,
    position_size: float,
    signal_score: float,
    direction: int,
    config: SignalConfig,
) -> float:
    """Return the position after applying ``decision``."""
    return POSITION_UPDATES[decision](position_size, signal_score, direction, config)


def transition(
    signal_score: float,
    position_size: float,
    direction: int,
    config: SignalConfig,
) -> tuple[Decision, float]:
    """Run one step of the state machine.

    Returns:
        Tuple of (decision, new_position_size)
    """
    decision = decide(signal_score, position_size, config)
    return decision, apply_decision(decision, position_size, signal_score, direction, config)


def risk_utilization(position_size: float, config: SignalConfig) -> int:
    """Percentage of the allowed position currently held, rounded half up."""
    ratio = abs(position_size) / (config.max_position * config.risk_budget)
    return int(math.floor(ratio * 100 + 0.5))


__all__ = [
    "POSITION_UPDATES",
    "direction_from_z",
    "decide",
    "apply_decision",
    "transition",
    "risk_utilization",
]
