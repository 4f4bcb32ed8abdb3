"""Configuration service for building and loading SimulationConfig."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping

from pydantic import ValidationError

from prediction_sim.config.models import SimulationConfig
from prediction_sim.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def build_config(config: SimulationConfig | Mapping[str, Any] | None = None) -> SimulationConfig:
    """Normalize the accepted config forms into a validated SimulationConfig.

    Args:
        config: A SimulationConfig, a plain mapping of its fields, or None for defaults

    Returns:
        Validated SimulationConfig

    Raises:
        InvalidArgumentError: If any value lies outside its valid domain
    """
    if isinstance(config, SimulationConfig):
        return config
    if config is None:
        return SimulationConfig()
    if not isinstance(config, Mapping):
        raise InvalidArgumentError(
            f"config must be a SimulationConfig or a mapping, got {type(config).__name__}"
        )
    try:
        return SimulationConfig.model_validate(dict(config))
    except ValidationError as exc:
        raise InvalidArgumentError(f"Invalid simulation config: {exc}") from exc


def _load_from_env() -> SimulationConfig:
    """Build configuration from environment variables.

    Recognized variables: SIM_LENGTH, SIM_SEED. Everything else uses defaults.
    """
    data: dict[str, Any] = {}

    length = os.getenv("SIM_LENGTH")
    if length:
        data["length"] = length

    seed = os.getenv("SIM_SEED")
    if seed:
        data["seed"] = seed

    return build_config(data)


def load_config(path: Path | str | None = None) -> SimulationConfig:
    """Load simulation configuration.

    Loading priority:
    1. If path is given, load from that JSON file
    2. Otherwise, build from environment variables

    Returns:
        SimulationConfig instance

    Raises:
        FileNotFoundError: If path is given but does not exist
        InvalidArgumentError: If the file is not valid JSON or fails validation
    """
    if path is None:
        logger.debug("No config file given, building from environment variables")
        return _load_from_env()

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    logger.info("Loading configuration from %s", config_path)
    try:
        with open(config_path, encoding="utf-8") as f:
            data: dict[str, Any] = json.load(f)
    except json.JSONDecodeError as exc:
        logger.error("Failed to parse config file %s: %s", config_path, exc)
        raise InvalidArgumentError(f"Invalid configuration file: {exc}") from exc

    return build_config(data)
