"""PyHBV hydrological modeling package.

The HBV lumped conceptual rainfall-runoff model for daily discharge simulation:
snow, soil moisture, groundwater response and triangular MAXBAS routing.
"""

from .constants import DEFAULT_BOUNDS, PARAM_NAMES
from .inputs import ForcingData
from .io import read_forcing, read_parameters, write_results
from .metrics import get_metric, list_metrics
from .outputs import HBVFluxes, ModelOutput, RunOutcome, RunStatus
from .routing import compute_maxbas_weights, route_discharge
from .run import run, simulate, step
from .types import ModelState, Parameters
from .validation import ConfigurationError, validate_configuration

__all__ = [
    "DEFAULT_BOUNDS",
    "PARAM_NAMES",
    "ConfigurationError",
    "ForcingData",
    "HBVFluxes",
    "ModelOutput",
    "ModelState",
    "Parameters",
    "RunOutcome",
    "RunStatus",
    "compute_maxbas_weights",
    "get_metric",
    "list_metrics",
    "read_forcing",
    "read_parameters",
    "route_discharge",
    "run",
    "simulate",
    "step",
    "validate_configuration",
    "write_results",
]
