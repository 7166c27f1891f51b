"""Goodness-of-fit metrics for comparing simulated and observed discharge.

Provides hydrological metrics (NSE, R², volume error, Lindström measure) and
a registry for looking them up by name.
"""

# Import functions first to trigger @register decorators
from .functions import lindstrom, nse, r_squared, volume_error
from .registry import METRICS, MetricFunction, get_metric, list_metrics, register

__all__ = [
    "METRICS",
    "MetricFunction",
    "get_metric",
    "lindstrom",
    "list_metrics",
    "nse",
    "r_squared",
    "register",
    "volume_error",
]
