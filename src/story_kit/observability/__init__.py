"""Metrics hooks for story-kit.

Parsers, the parser registry and the differ accept a ``metrics_hook``;
the default ``NoOpMetricsHook`` records nothing.
"""

from . import names
from .base import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

__all__ = [
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    "names",
]
