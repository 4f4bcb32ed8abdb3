"""Command-line interface.

- simulate_cli: Run a simulation and print a summary, a point-in-time view or JSON
"""

__all__ = []
