"""Tests for global momentum statistics."""

from __future__ import annotations

import random
import statistics

import pytest

from prediction_sim.config.models import PathConfig
from prediction_sim.core.path_generator import generate_path
from prediction_sim.core.statistics import STD_EPSILON, MomentumStats, compute_momentum_stats
from prediction_sim.errors import InvalidArgumentError


def test_matches_population_formulas() -> None:
    rng = random.Random(5)
    momenta = [rng.uniform(-0.05, 0.05) for _ in range(500)]

    stats = compute_momentum_stats(momenta)

    assert stats.count == 500
    assert stats.mean == pytest.approx(statistics.fmean(momenta), abs=1e-9)
    assert stats.std == pytest.approx(statistics.pstdev(momenta), abs=1e-9)


def test_uses_population_not_sample_deviation() -> None:
    stats = compute_momentum_stats([1.0, 3.0])
    assert stats.mean == 2.0
    assert stats.std == 1.0


def test_matches_formulas_on_generated_path() -> None:
    momenta = [p.momentum for p in generate_path(400, PathConfig(), random.Random(9))]
    stats = compute_momentum_stats(momenta)

    assert stats.mean == pytest.approx(statistics.fmean(momenta), abs=1e-9)
    assert stats.std == pytest.approx(statistics.pstdev(momenta), abs=1e-9)


def test_flat_series_floors_std() -> None:
    stats = compute_momentum_stats([0.25] * 10)
    assert stats.mean == 0.25
    assert stats.std == STD_EPSILON
    assert stats.z_score(0.25) == 0.0


def test_single_sample_floors_std() -> None:
    stats = compute_momentum_stats([0.0])
    assert stats.std == STD_EPSILON


def test_two_point_path() -> None:
    momenta = [p.momentum for p in generate_path(2, PathConfig(), random.Random(2))]
    assert momenta[0] == 0.0

    stats = compute_momentum_stats(momenta)
    expected_std = abs(momenta[1]) / 2 or STD_EPSILON
    assert stats.mean == pytest.approx(momenta[1] / 2)
    assert stats.std == pytest.approx(expected_std)


def test_empty_series_is_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        compute_momentum_stats([])


def test_z_score() -> None:
    stats = MomentumStats(mean=1.0, std=2.0, count=3)
    assert stats.z_score(5.0) == 2.0
    assert stats.z_score(-1.0) == -1.0
