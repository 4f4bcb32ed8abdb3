#!/usr/bin/env python3
"""CLI for running a prediction market simulation and inspecting its output."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from prediction_sim.config.models import SimulationConfig
from prediction_sim.config.service import build_config, load_config
from prediction_sim.core.feed import (
    agent_mode,
    decision_label,
    decisions_in_window,
    describe_decision,
    news_impact,
    news_in_window,
    point_at,
)
from prediction_sim.core.simulation import SimulationResult, generate_simulation
from prediction_sim.core.types import NewsPolarity
from prediction_sim.errors import InvalidArgumentError


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def resolve_config(
    config_path: Path | None,
    length: int | None,
    seed: int | None,
) -> SimulationConfig:
    """Load the base config and apply command-line overrides."""
    config = load_config(config_path)
    overrides = {}
    if length is not None:
        overrides["length"] = length
    if seed is not None:
        overrides["seed"] = seed
    if not overrides:
        return config
    return build_config({**config.model_dump(), **overrides})


def print_summary(result: SimulationResult) -> None:
    """Print run statistics in a readable format."""
    points = result.points
    counts = {}
    for record in result.decisions:
        counts[record.decision.value] = counts.get(record.decision.value, 0) + 1
    peak_risk = max(p.risk_utilization for p in points)

    print("\n" + "=" * 60)
    print("SIMULATION RESULTS")
    print("=" * 60)
    print(f"Points:          {len(points)}")
    print(f"Final prob:      {points[-1].prob:.4f}")
    print(f"Momentum mean:   {result.stats.mean:+.5f}")
    print(f"Momentum std:    {result.stats.std:.5f}")
    print(f"News events:     {len(result.news_events)}")
    print(f"Decisions:       {len(result.decisions)}")
    for name in ("enter", "scale", "hold", "exit"):
        print(f"  {name:<14} {counts.get(name, 0)}")
    print(f"Final position:  {points[-1].position_size:+.4f}")
    print(f"Peak risk:       {peak_risk}%")
    print("=" * 60)


def print_state_at(result: SimulationResult, t: float) -> None:
    """Print agent state, decision log and news feed as seen at time ``t``."""
    point = point_at(result, t)
    feed = result.config.feed

    print(f"\nAgent state at t = {point.t:.1f}")
    print("-" * 60)
    print(f"Probability:     {point.prob:.2f}")
    print(f"Momentum:        {point.momentum:.3f}")
    print(f"News relevance:  {point.news_relevance:.2f}")
    print(f"Signal score:    {point.signal_score:.2f}")
    print(f"Position:        {point.position_size:.2f}")
    print(f"Risk:            {point.risk_utilization}%")
    print(f"Mode:            {agent_mode(point.decision)}")

    print("\nDecision log")
    print("-" * 60)
    for record in decisions_in_window(result.decisions, point.t, feed.decision_window):
        print(
            f"t = {record.t:5.1f}  {decision_label(record.decision):<6} "
            f"Signal {record.signal_score:.2f} · P={record.prob:.2f}"
        )
        print(f"    {describe_decision(record)}")

    print("\nNews feed")
    print("-" * 60)
    for event in news_in_window(result.news_events, point.t, feed.news_window):
        stance = "Supports event" if event.polarity is NewsPolarity.POSITIVE else "Challenges event"
        print(
            f"t = {event.t:5.1f}  Relevance {event.relevance:.2f}  "
            f"[{news_impact(event.relevance)} impact, {stance}]"
        )
        print(f"    {event.headline}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Simulate a prediction market path and a momentum/news trading agent",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to JSON simulation configuration file",
    )
    parser.add_argument(
        "--length",
        type=int,
        help="Number of points to sample (default: 400)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for the random source (default: nondeterministic)",
    )

    # Output options
    parser.add_argument(
        "--at",
        type=float,
        help="Show agent state, decision log and news feed at this simulated time",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Dump the full result as JSON to stdout",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)
    if args.json and args.at is not None:
        parser.error("--at cannot be combined with --json")

    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config = resolve_config(args.config, args.length, args.seed)
        result = generate_simulation(config)
    except FileNotFoundError as e:
        logger.error("File not found: %s", e)
        sys.exit(1)
    except InvalidArgumentError as e:
        logger.error("Configuration error: %s", e)
        sys.exit(2)

    if args.json:
        json.dump(result.to_dict(), sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        print_summary(result)
        if args.at is not None:
            print_state_at(result, args.at)

    sys.exit(0)


if __name__ == "__main__":
    main()
