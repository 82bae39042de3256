"""
Infrastructure layer for tone-metrics.

This layer contains:
- Configuration: AnalysisConfiguration, optionally read from the environment
- Container: Wires concrete scorers and classifiers to domain interfaces
"""

from .container import AnalysisConfiguration, Container

__all__ = [
    "AnalysisConfiguration",
    "Container",
]
