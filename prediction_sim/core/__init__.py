"""Core simulation logic.

This module contains the generation-and-decision pipeline:
- path_generator: Probability path from regime drift plus smoothed noise
- statistics: Global momentum mean / standard deviation
- news: Synthetic news events tied to momentum anomalies
- signal, decision: Signal scoring and the decision state machine
- simulation: End-to-end pipeline orchestration
- feed: Read-only views for log and feed renderers
"""

# Submodules can be imported individually as needed
# e.g., from prediction_sim.core.decision import transition

__all__ = [
    "types",
    "noise",
    "path_generator",
    "statistics",
    "news",
    "signal",
    "decision",
    "simulation",
    "feed",
]
