"""Configuration checks performed before a simulation allocates any state.

A configuration that fails here can never produce a meaningful trajectory, so
the run is aborted as a whole with a ConfigurationError.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from .constants import MIN_TIMESTEPS, PARAM_NAMES

if TYPE_CHECKING:
    from .inputs import ForcingData
    from .types import Parameters


class ConfigurationError(ValueError):
    """Raised when parameters or forcing cannot be simulated."""


# Parameters that divide or seed storages and must be strictly positive
_POSITIVE: tuple[str, ...] = ("fc", "lp", "k2", "maxbas")

# Rates and thresholds that must not be negative
_NON_NEGATIVE: tuple[str, ...] = ("cfmax", "sfcf", "cfr", "cwh", "beta", "perc", "uzl", "k0", "k1")


def validate_parameters(params: Parameters) -> None:
    """Check that parameters lie in the domain the engine can simulate.

    Args:
        params: Model parameters.

    Raises:
        ConfigurationError: If any parameter is non-finite or out of domain.
    """
    for name in PARAM_NAMES:
        value = getattr(params, name)
        if not math.isfinite(value):
            msg = f"Parameter {name} must be finite, got {value}"
            raise ConfigurationError(msg)

    for name in _POSITIVE:
        value = getattr(params, name)
        if value <= 0.0:
            msg = f"Parameter {name} must be positive, got {value}"
            raise ConfigurationError(msg)

    for name in _NON_NEGATIVE:
        value = getattr(params, name)
        if value < 0.0:
            msg = f"Parameter {name} must be non-negative, got {value}"
            raise ConfigurationError(msg)

    # Recession coefficients above these limits drain more than the stores hold
    if params.k0 + params.k1 > 1.0:
        msg = f"k0 + k1 must not exceed 1, got {params.k0 + params.k1}"
        raise ConfigurationError(msg)
    if params.k2 > 1.0:
        msg = f"Parameter k2 must not exceed 1, got {params.k2}"
        raise ConfigurationError(msg)


def validate_forcing(forcing: ForcingData) -> None:
    """Check that forcing can drive a simulation.

    Args:
        forcing: Input forcing data.

    Raises:
        ConfigurationError: If the series is too short.
    """
    if len(forcing) < MIN_TIMESTEPS:
        msg = f"Forcing must contain at least {MIN_TIMESTEPS} timesteps, got {len(forcing)}"
        raise ConfigurationError(msg)


def validate_configuration(params: Parameters, forcing: ForcingData) -> None:
    """Run all configuration checks for a simulation."""
    validate_parameters(params)
    validate_forcing(forcing)
