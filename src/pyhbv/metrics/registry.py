"""Name lookup for goodness-of-fit statistics.

Backs the ``--objective`` option of the command-line tool: every function
decorated with ``register`` becomes selectable by its ``__name__``.
"""

import logging
from collections.abc import Callable
from typing import TypeAlias

from numpy.typing import ArrayLike

logger = logging.getLogger(__name__)

# (observed, simulated) -> score
MetricFunction: TypeAlias = Callable[[ArrayLike, ArrayLike], float]

METRICS: dict[str, MetricFunction] = {}


def register(func: MetricFunction) -> MetricFunction:
    """Make a metric selectable by name; returns it unchanged.

    Registering a second function under an existing name replaces the first.
    """
    if func.__name__ in METRICS:
        logger.warning("Metric '%s' is already registered and will be replaced", func.__name__)
    METRICS[func.__name__] = func
    return func


def get_metric(name: str) -> MetricFunction:
    """Look up a registered metric.

    Raises:
        KeyError: If no metric of that name is registered.
    """
    try:
        return METRICS[name]
    except KeyError:
        msg = f"Unknown metric '{name}'. Available: {', '.join(list_metrics())}"
        raise KeyError(msg) from None


def list_metrics() -> list[str]:
    return sorted(METRICS)
