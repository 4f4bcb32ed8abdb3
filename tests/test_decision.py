"""Unit tests for the decision state machine and position sizing."""

from __future__ import annotations

import unittest

from prediction_sim.config.models import SignalConfig
from prediction_sim.core.decision import (
    POSITION_UPDATES,
    apply_decision,
    decide,
    direction_from_z,
    risk_utilization,
    transition,
)
from prediction_sim.core.types import Decision


class TestDecide(unittest.TestCase):
    """Test decision selection."""

    def setUp(self) -> None:
        self.config = SignalConfig()

    def test_enter_when_flat(self) -> None:
        self.assertEqual(decide(0.5, 0.0, self.config), Decision.ENTER)
        self.assertEqual(decide(0.9, 0.0, self.config), Decision.ENTER)

    def test_scale_on_high_conviction_when_positioned(self) -> None:
        """A score above 0.7 with a 0.5 position scales rather than enters."""
        self.assertEqual(decide(0.8, 0.5, self.config), Decision.SCALE)
        self.assertEqual(decide(0.8, -0.5, self.config), Decision.SCALE)

    def test_hold_at_position_limit(self) -> None:
        self.assertEqual(decide(0.8, 1.0, self.config), Decision.HOLD)
        self.assertEqual(decide(0.8, -1.0, self.config), Decision.HOLD)

    def test_hold_on_moderate_signal(self) -> None:
        self.assertEqual(decide(0.5, 0.3, self.config), Decision.HOLD)
        self.assertEqual(decide(0.7, 0.3, self.config), Decision.HOLD)

    def test_exit_on_weak_signal_with_open_risk(self) -> None:
        self.assertEqual(decide(0.1, 0.3, self.config), Decision.EXIT)
        self.assertEqual(decide(0.1, -0.3, self.config), Decision.EXIT)
        self.assertEqual(decide(0.0, 1e-9, self.config), Decision.EXIT)

    def test_observe_otherwise(self) -> None:
        self.assertEqual(decide(0.1, 0.0, self.config), Decision.OBSERVE)
        self.assertEqual(decide(0.3, 0.3, self.config), Decision.OBSERVE)
        self.assertEqual(decide(0.35, 0.0, self.config), Decision.OBSERVE)

    def test_thresholds_follow_config(self) -> None:
        config = SignalConfig(trade_threshold=0.2, high_conviction=0.4, exit_relaxation=0.5)
        self.assertEqual(decide(0.25, 0.0, config), Decision.ENTER)
        self.assertEqual(decide(0.5, 0.2, config), Decision.SCALE)
        self.assertEqual(decide(0.09, 0.2, config), Decision.EXIT)
        self.assertEqual(decide(0.15, 0.2, config), Decision.OBSERVE)


class TestPositionUpdates(unittest.TestCase):
    """Test position sizing per decision."""

    def setUp(self) -> None:
        self.config = SignalConfig()

    def test_every_decision_has_an_update(self) -> None:
        self.assertEqual(set(POSITION_UPDATES), set(Decision))

    def test_enter_adds_in_momentum_direction(self) -> None:
        self.assertAlmostEqual(apply_decision(Decision.ENTER, 0.0, 0.5, 1, self.config), 0.175)
        self.assertAlmostEqual(apply_decision(Decision.ENTER, 0.0, 0.5, -1, self.config), -0.175)

    def test_scale_adds_reduced_size(self) -> None:
        self.assertAlmostEqual(
            apply_decision(Decision.SCALE, 0.5, 0.8, 1, self.config), 0.5 + 0.8 * 0.245
        )
        self.assertAlmostEqual(
            apply_decision(Decision.SCALE, -0.5, 0.8, -1, self.config), -0.5 - 0.8 * 0.245
        )

    def test_position_is_clamped_to_limit(self) -> None:
        self.assertEqual(apply_decision(Decision.SCALE, 0.95, 1.0, 1, self.config), 1.0)
        self.assertEqual(apply_decision(Decision.SCALE, -0.95, 1.0, -1, self.config), -1.0)

    def test_hold_decays_slowly(self) -> None:
        self.assertAlmostEqual(apply_decision(Decision.HOLD, 0.5, 0.5, 1, self.config), 0.4975)

    def test_exit_derisks_without_flattening(self) -> None:
        self.assertAlmostEqual(apply_decision(Decision.EXIT, 0.5, 0.1, 1, self.config), 0.15)
        self.assertAlmostEqual(apply_decision(Decision.EXIT, -0.5, 0.1, 1, self.config), -0.15)

    def test_observe_keeps_position(self) -> None:
        self.assertEqual(apply_decision(Decision.OBSERVE, 0.42, 0.9, -1, self.config), 0.42)


class TestTransition(unittest.TestCase):
    """Test the composed state machine step."""

    def setUp(self) -> None:
        self.config = SignalConfig()

    def test_forced_scale_sequence(self) -> None:
        position = 0.5
        decisions = []
        for _ in range(4):
            decision, position = transition(0.9, position, 1, self.config)
            decisions.append(decision)

        self.assertEqual(decisions, [Decision.SCALE, Decision.SCALE, Decision.SCALE, Decision.HOLD])
        self.assertEqual(position, 1.0 * 0.995)

    def test_enter_then_exit(self) -> None:
        decision, position = transition(0.6, 0.0, -1, self.config)
        self.assertEqual(decision, Decision.ENTER)
        self.assertAlmostEqual(position, -0.21)

        decision, position = transition(0.05, position, 1, self.config)
        self.assertEqual(decision, Decision.EXIT)
        self.assertAlmostEqual(position, -0.063)

    def test_position_stays_bounded(self) -> None:
        position = 0.0
        for step in range(200):
            score = (step * 37 % 100) / 100
            direction = 1 if step % 3 else -1
            _, position = transition(score, position, direction, self.config)
            self.assertLessEqual(abs(position), 1.0)


class TestHelpers(unittest.TestCase):
    """Test direction and risk helpers."""

    def test_direction_from_z(self) -> None:
        self.assertEqual(direction_from_z(0.0), 1)
        self.assertEqual(direction_from_z(2.5), 1)
        self.assertEqual(direction_from_z(-0.1), -1)

    def test_risk_utilization(self) -> None:
        config = SignalConfig()
        self.assertEqual(risk_utilization(0.0, config), 0)
        self.assertEqual(risk_utilization(-1.0, config), 100)
        self.assertEqual(risk_utilization(0.42, config), 42)

    def test_risk_utilization_rounds_half_up(self) -> None:
        config = SignalConfig()
        self.assertEqual(risk_utilization(0.125, config), 13)
        self.assertEqual(risk_utilization(-0.125, config), 13)

    def test_risk_budget_scales_utilization(self) -> None:
        config = SignalConfig(risk_budget=2.0)
        self.assertEqual(risk_utilization(1.0, config), 50)


if __name__ == "__main__":
    unittest.main()
