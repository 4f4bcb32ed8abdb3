"""Configuration models for the prediction market simulator using Pydantic."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RegimeShift(BaseModel):
    """One-time drift adjustment applied when simulated time crosses a trigger."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    trigger_time: float = Field(
        ge=0.0,
        description="Simulated time at which the drift adjustment fires"
    )
    drift_delta: float = Field(
        description="Amount added to the cumulative drift when the regime fires"
    )


DEFAULT_REGIMES: tuple[RegimeShift, ...] = (
    RegimeShift(trigger_time=20.0, drift_delta=0.02),
    RegimeShift(trigger_time=45.0, drift_delta=-0.03),
    RegimeShift(trigger_time=70.0, drift_delta=0.025),
)


class PathConfig(BaseModel):
    """Probability path synthesis parameters."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    horizon: float = Field(
        default=100.0,
        gt=0.0,
        description="Simulated time span covered by the path, independent of length"
    )
    initial_prob: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Starting probability"
    )
    prob_floor: float = Field(
        default=0.04,
        ge=0.0,
        le=1.0,
        description="Lower bound the probability is clamped to at every step"
    )
    prob_ceiling: float = Field(
        default=0.96,
        ge=0.0,
        le=1.0,
        description="Upper bound the probability is clamped to at every step"
    )
    noise_intensity: float = Field(
        default=0.35,
        ge=0.0,
        description="Width of the uniform perturbation fed into the smoothed noise"
    )
    drift_coefficient: float = Field(
        default=0.04,
        description="Drift-to-step coefficient"
    )
    noise_coefficient: float = Field(
        default=0.02,
        description="Noise-to-step coefficient"
    )
    regimes: tuple[RegimeShift, ...] = Field(
        default=DEFAULT_REGIMES,
        description="Regime schedule, each entry fires at most once per run"
    )

    @model_validator(mode="after")
    def _check_bounds(self) -> PathConfig:
        if self.prob_floor >= self.prob_ceiling:
            raise ValueError(
                f"prob_floor ({self.prob_floor}) must be below prob_ceiling ({self.prob_ceiling})"
            )
        if not self.prob_floor <= self.initial_prob <= self.prob_ceiling:
            raise ValueError(
                f"initial_prob ({self.initial_prob}) must lie in "
                f"[{self.prob_floor}, {self.prob_ceiling}]"
            )
        return self


class NewsConfig(BaseModel):
    """News synthesis parameters."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    z_threshold: float = Field(
        default=1.3,
        ge=0.0,
        description="Minimum |z| of momentum for a point to be news-eligible"
    )
    emission_probability: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Chance that an eligible point actually produces a news event"
    )
    base_relevance: float = Field(
        default=0.4,
        ge=0.0,
        le=1.0,
        description="Relevance assigned at exactly the z threshold"
    )
    relevance_slope: float = Field(
        default=0.4,
        ge=0.0,
        description="Relevance gained per unit of |z| above the threshold"
    )
    relevance_jitter: float = Field(
        default=0.2,
        ge=0.0,
        le=1.0,
        description="Width of the uniform relevance jitter"
    )


class SignalConfig(BaseModel):
    """Signal scoring, decision and position sizing parameters."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    news_window: float = Field(
        default=6.0,
        gt=0.0,
        description="Time distance within which a news event counts as recent"
    )
    trade_threshold: float = Field(
        default=0.35,
        ge=0.0,
        le=1.0,
        description="Signal score above which the agent takes or keeps risk"
    )
    high_conviction: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Signal score above which an open position is scaled up"
    )
    exit_relaxation: float = Field(
        default=0.6,
        ge=0.0,
        le=1.0,
        description="Fraction of trade_threshold below which open risk is cut"
    )
    max_position: float = Field(
        default=1.0,
        gt=0.0,
        le=1.0,
        description="Absolute position limit, positions stay within [-1, 1]"
    )
    risk_budget: float = Field(
        default=1.0,
        ge=1.0,
        description="Risk budget multiplier; >= 1 keeps risk utilization within 100%"
    )
    entry_size: float = Field(
        default=0.35,
        ge=0.0,
        description="Position added per unit of signal score on entry"
    )
    scale_factor: float = Field(
        default=0.7,
        ge=0.0,
        description="Fraction of entry_size added per unit of signal score on scale"
    )
    hold_decay: float = Field(
        default=0.995,
        ge=0.0,
        le=1.0,
        description="Per-step multiplier applied to the position while holding"
    )
    exit_decay: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Multiplier applied to the position on exit"
    )
    momentum_offset: float = Field(
        default=0.4,
        ge=0.0,
        description="|z| below which momentum contributes nothing to the signal"
    )
    momentum_span: float = Field(
        default=2.4,
        gt=0.0,
        description="|z| range over which the momentum component ramps from 0 to 1"
    )
    momentum_weight: float = Field(
        default=0.6,
        ge=0.0,
        le=1.0,
        description="Weight of the momentum component in the signal score"
    )
    news_weight: float = Field(
        default=0.4,
        ge=0.0,
        le=1.0,
        description="Weight of recent news relevance in the signal score"
    )

    @model_validator(mode="after")
    def _check_thresholds(self) -> SignalConfig:
        if self.high_conviction < self.trade_threshold:
            raise ValueError(
                f"high_conviction ({self.high_conviction}) must not be below "
                f"trade_threshold ({self.trade_threshold})"
            )
        return self

    @property
    def exit_threshold(self) -> float:
        """Signal score below which an open position is forced out."""
        return self.trade_threshold * self.exit_relaxation


class FeedConfig(BaseModel):
    """Trailing windows used when presenting decisions and news at a point in time."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    decision_window: float = Field(
        default=40.0,
        ge=0.0,
        description="Trailing time window for the decision log"
    )
    news_window: float = Field(
        default=50.0,
        ge=0.0,
        description="Trailing time window for the news feed"
    )


class SimulationConfig(BaseModel):
    """Root configuration for a single simulation run."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    length: int = Field(
        default=400,
        ge=2,
        description="Number of points sampled over the fixed horizon"
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the default random source (None = nondeterministic)"
    )

    path: PathConfig = Field(default_factory=PathConfig)
    news: NewsConfig = Field(default_factory=NewsConfig)
    signal: SignalConfig = Field(default_factory=SignalConfig)
    feed: FeedConfig = Field(default_factory=FeedConfig)
