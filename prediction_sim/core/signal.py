"""Signal scoring: momentum anomaly blended with recent news relevance."""

from __future__ import annotations

from typing import Sequence

from prediction_sim.config.models import SignalConfig
from prediction_sim.core.noise import clamp
from prediction_sim.core.types import NewsEvent


class NewsCursor:
    """Forward-only cursor over time-ordered news events.

    Tracks the most recent event not after the current time. Relies on both
    points and news being scanned in time order, so it never rewinds.
    """

    def __init__(self, events: Sequence[NewsEvent]) -> None:
        """Initialize cursor.

        Args:
            events: News events ordered by time
        """
        self.events = events
        self.index = 0

    @property
    def current(self) -> NewsEvent | None:
        if not self.events:
            return None
        return self.events[self.index]

    def advance(self, t: float) -> NewsEvent | None:
        """Move forward past every event whose successor is not after ``t``.

        Returns:
            The selected event, or None when there is no news at all
        """
        while self.index < len(self.events) - 1 and self.events[self.index + 1].t <= t:
            self.index += 1
        return self.current

    def recent(self, t: float, window: float) -> NewsEvent | None:
        """Advance to ``t`` and return the selected event if within ``window``."""
        event = self.advance(t)
        if event is not None and abs(event.t - t) < window:
            return event
        return None


def momentum_component(abs_z: float, config: SignalConfig) -> float:
    """Map |z| onto [0, 1], zero below momentum_offset."""
    return clamp((abs_z - config.momentum_offset) / config.momentum_span, 0.0, 1.0)


def signal_score(abs_z: float, news_relevance: float, config: SignalConfig) -> float:
    """Combine momentum and news into a bounded score.

    Args:
        abs_z: Absolute momentum z-score
        news_relevance: Relevance of recent news, 0 when there is none
        config: Signal parameters

    Returns:
        Signal score in [0, 1]
    """
    return clamp(
        config.momentum_weight * momentum_component(abs_z, config)
        + config.news_weight * news_relevance,
        0.0,
        1.0,
    )


__all__ = ["NewsCursor", "momentum_component", "signal_score"]
