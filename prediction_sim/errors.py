"""Exception hierarchy for the prediction market simulator."""

from __future__ import annotations


class SimulationError(Exception):
    """Base class for all simulator errors."""


class InvalidArgumentError(SimulationError, ValueError):
    """Raised when a run is requested with an out-of-domain configuration.

    Subclasses ValueError so callers that already guard against bad input
    with ``except ValueError`` keep working.
    """


__all__ = ["SimulationError", "InvalidArgumentError"]
