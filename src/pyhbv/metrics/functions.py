"""Goodness-of-fit statistics for simulated discharge.

All metrics take (observed, simulated) arrays and return a scalar score.
Timesteps with missing (NaN) observations are left out.
"""

import numpy as np
from numpy.typing import ArrayLike

from .registry import register


def _paired(observed: ArrayLike, simulated: ArrayLike) -> tuple[np.ndarray, np.ndarray]:
    """Return observed/simulated arrays without timesteps lacking observations."""
    obs = np.asarray(observed, dtype=np.float64)
    sim = np.asarray(simulated, dtype=np.float64)
    if obs.shape != sim.shape:
        msg = f"observed and simulated must have the same shape, got {obs.shape} and {sim.shape}"
        raise ValueError(msg)
    mask = ~np.isnan(obs)
    return obs[mask], sim[mask]


@register
def nse(observed: ArrayLike, simulated: ArrayLike) -> float:
    """Nash-Sutcliffe Efficiency.

    NSE = 1 - sum((obs - sim)^2) / sum((obs - mean(obs))^2)

    Range: (-inf, 1], where 1 is perfect match.
    """
    obs, sim = _paired(observed, simulated)
    numerator = np.sum((obs - sim) ** 2)
    denominator = np.sum((obs - np.mean(obs)) ** 2)
    if denominator == 0:
        return -np.inf
    return float(1.0 - numerator / denominator)


@register
def r_squared(observed: ArrayLike, simulated: ArrayLike) -> float:
    """Coefficient of determination as squared Pearson correlation.

    Range: [0, 1], where 1 is perfect linear agreement.
    """
    obs, sim = _paired(observed, simulated)
    if np.std(obs) == 0 or np.std(sim) == 0:
        return 0.0
    r = float(np.corrcoef(obs, sim)[0, 1])
    return r**2


@register
def volume_error(observed: ArrayLike, simulated: ArrayLike) -> float:
    """Relative volume error (bias) over the whole period.

    DV = sum(sim - obs) / sum(obs)

    Positive DV = overestimation. Optimal value is 0.
    See Lindström (1997), Nordic Hydrology 28(3), 153-168.
    """
    obs, sim = _paired(observed, simulated)
    if np.sum(obs) == 0:
        return np.inf
    return float(np.sum(sim - obs) / np.sum(obs))


@register
def lindstrom(observed: ArrayLike, simulated: ArrayLike, weight: float = 0.1) -> float:
    """NSE penalized by the weighted absolute volume error.

    LM = NSE - weight * |DV|
    """
    return nse(observed, simulated) - weight * abs(volume_error(observed, simulated))
