"""HBV routing: triangular MAXBAS kernel and forward convolution.

Groundwater discharge of one timestep is spread over the following
ceil(MAXBAS) timesteps with weights taken from a triangular kernel.
"""

import math

import numpy as np
from numba import njit

from .constants import MAXBAS_DX
from .validation import ConfigurationError


def _triangle(x: np.ndarray, maxbas: float) -> np.ndarray:
    """Evaluate the MAXBAS triangle (base MAXBAS, peak 2/MAXBAS) at x."""
    peak = 2.0 / maxbas
    slope = 4.0 / maxbas**2
    # Zero outside the base; only reached in the last bin of a fractional MAXBAS
    return np.maximum(peak - np.abs(x - maxbas / 2.0) * slope, 0.0)


def compute_maxbas_weights(maxbas: float) -> np.ndarray:
    """Compute triangular routing weights.

    The triangle is sampled every MAXBAS_DX days within each unit-day bin and
    integrated per bin with the trapezoidal rule. Weights are then divided by
    their total so they sum to 1.0 regardless of the integration error.

    Args:
        maxbas: Base length of the triangle [days].

    Returns:
        Array of weights with length ceil(MAXBAS), summing to 1.0.

    Raises:
        ConfigurationError: If maxbas is not a positive finite number.
    """
    if not math.isfinite(maxbas) or maxbas <= 0.0:
        msg = f"maxbas must be positive, got {maxbas}"
        raise ConfigurationError(msg)

    n = int(math.ceil(maxbas))
    n_samples = int(round(1.0 / MAXBAS_DX)) + 1

    weights = np.zeros(n, dtype=np.float64)
    for i in range(n):
        x = np.linspace(float(i), float(i + 1), n_samples)
        weights[i] = np.trapezoid(_triangle(x, maxbas), x)

    return weights / weights.sum()


@njit(cache=True)
def route_discharge(qgw: float, index: int, weights: np.ndarray, streamflow: np.ndarray) -> None:
    """Add the routed contributions of one timestep's discharge.

    streamflow[index + j] receives qgw * weights[j]. Contributions that fall
    past the end of the buffer are dropped. Earlier contributions are only
    ever added to, never overwritten.

    Args:
        qgw: Groundwater discharge of timestep `index` [mm/day].
        index: Timestep that produced the discharge.
        weights: Routing weights from compute_maxbas_weights().
        streamflow: Pre-sized accumulation buffer, modified in place.
    """
    n = len(streamflow)
    for j in range(len(weights)):
        target = index + j
        if target >= n:
            break
        streamflow[target] += qgw * weights[j]
