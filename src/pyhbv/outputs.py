"""Structured output dataclasses for HBV model results.

This module provides dataclasses for organizing and accessing model outputs:
- HBVFluxes: The state trajectory as one array per variable
- ModelOutput: Trajectory with time index and DataFrame conversion
- RunOutcome: Success or configuration failure of a run
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, fields
from enum import Enum

import numpy as np
import pandas as pd

from .types import ModelState


@dataclass(frozen=True)
class HBVFluxes:
    """HBV storages and fluxes as arrays.

    All arrays have the same length as the input forcing data. Index 0 holds
    the initial condition. Field meanings and units follow ModelState.
    """

    # Snow routine
    snow_solid: np.ndarray
    snow_liquid: np.ndarray
    snow_storage: np.ndarray
    snow_cover: np.ndarray
    snowfall: np.ndarray
    rainfall: np.ndarray
    snow_melt: np.ndarray
    refreezing: np.ndarray
    liquid_in: np.ndarray

    # Soil routine
    soil_moisture: np.ndarray
    recharge_sm: np.ndarray
    recharge_gw: np.ndarray
    actual_et: np.ndarray

    # Response routine
    upper_zone: np.ndarray
    lower_zone: np.ndarray
    percolation: np.ndarray
    q0: np.ndarray
    q1: np.ndarray
    q2: np.ndarray
    qgw: np.ndarray

    # Routing
    streamflow: np.ndarray

    @classmethod
    def from_states(cls, states: Sequence[ModelState]) -> HBVFluxes:
        """Collect a state trajectory into per-variable arrays."""
        arrays = {}
        for field in fields(cls):
            dtype = np.int64 if field.name == "snow_cover" else np.float64
            arrays[field.name] = np.array([getattr(s, field.name) for s in states], dtype=dtype)
        return cls(**arrays)

    def to_dict(self) -> dict[str, np.ndarray]:
        """Convert to dictionary of arrays.

        Returns:
            Dictionary mapping field names to their numpy array values.
        """
        return {field.name: getattr(self, field.name) for field in fields(self)}


@dataclass(frozen=True)
class ModelOutput:
    """Complete model output for one run.

    The state trajectory is positionally aligned with the forcing: states[i]
    belongs to time[i].

    Attributes:
        time: Datetime array for each timestep.
        states: State of every timestep, index 0 being the initial condition.
        fluxes: The same trajectory as arrays.
    """

    time: np.ndarray
    states: tuple[ModelState, ...]
    fluxes: HBVFluxes

    @property
    def streamflow(self) -> np.ndarray:
        """Return the simulated runoff array [mm/day]."""
        return self.fluxes.streamflow

    def __len__(self) -> int:
        """Return the number of timesteps."""
        return len(self.time)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to DataFrame with time index.

        Returns:
            DataFrame with one column per state variable and time as index.
        """
        df = pd.DataFrame(self.fluxes.to_dict(), index=self.time)
        df.index.name = "time"
        return df


class RunStatus(str, Enum):
    """Final status of a simulation run."""

    success = "success"
    configuration_error = "configuration_error"


@dataclass(frozen=True)
class RunOutcome:
    """Outcome of a simulation run.

    Attributes:
        status: Whether the run completed or was rejected before it started.
        message: Description of the configuration error, if any.
    """

    status: RunStatus
    message: str | None = None

    @property
    def ok(self) -> bool:
        """True if the run completed."""
        return self.status is RunStatus.success

    @classmethod
    def succeeded(cls) -> RunOutcome:
        return cls(status=RunStatus.success)

    @classmethod
    def failed(cls, message: str) -> RunOutcome:
        return cls(status=RunStatus.configuration_error, message=message)
