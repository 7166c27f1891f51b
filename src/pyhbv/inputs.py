"""Input data structures for the HBV model.

This module defines the validated forcing container:
- ForcingData: Daily forcing series (precipitation, temperature, PET) and
  optional observed discharge
"""

from __future__ import annotations

import numpy as np
from pydantic import BaseModel, ConfigDict, field_validator, model_validator


def _as_forcing_array(v: np.ndarray, name: str, allow_negative: bool = True) -> np.ndarray:
    """Coerce to a 1D float64 array without NaN (and optionally negative) values."""
    arr = np.asarray(v, dtype=np.float64)
    if arr.ndim != 1:
        msg = f"{name} array must be 1D, got {arr.ndim}D"
        raise ValueError(msg)
    if np.any(np.isnan(arr)):
        msg = f"{name} array contains NaN values"
        raise ValueError(msg)
    if not allow_negative and np.any(arr < 0):
        msg = f"{name} array contains negative values"
        raise ValueError(msg)
    return arr


class ForcingData(BaseModel):
    """Validated forcing data for the HBV model.

    All arrays must be 1D with the same length. NaN values are rejected in the
    forcing columns; observed discharge may contain NaN to mark gaps. Precipitation
    and PET must be non-negative; temperature may be negative.
    Numeric arrays are coerced to float64.

    Attributes:
        time: Date label for each timestep (coerced to datetime64).
        precip: Precipitation [mm/day].
        temp: Temperature [C].
        pet: Potential evapotranspiration [mm/day].
        discharge: Observed discharge [mm/day]. Reference only, never read by the model.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    time: np.ndarray  # datetime64
    precip: np.ndarray  # [mm/day]
    temp: np.ndarray  # [C]
    pet: np.ndarray  # [mm/day]
    discharge: np.ndarray | None = None  # [mm/day]

    @field_validator("time", mode="before")
    @classmethod
    def validate_time(cls, v: np.ndarray) -> np.ndarray:
        """Validate time array: must be 1D and coerced to datetime64."""
        arr = np.asarray(v)
        if arr.ndim != 1:
            msg = f"time array must be 1D, got {arr.ndim}D"
            raise ValueError(msg)
        return arr.astype("datetime64[ns]")

    @field_validator("precip", mode="before")
    @classmethod
    def validate_precip(cls, v: np.ndarray) -> np.ndarray:
        """Validate precip array: must be 1D float64, non-negative, no NaN values."""
        return _as_forcing_array(v, "precip", allow_negative=False)

    @field_validator("temp", mode="before")
    @classmethod
    def validate_temp(cls, v: np.ndarray) -> np.ndarray:
        """Validate temp array: must be 1D float64 with no NaN values."""
        return _as_forcing_array(v, "temp")

    @field_validator("pet", mode="before")
    @classmethod
    def validate_pet(cls, v: np.ndarray) -> np.ndarray:
        """Validate pet array: must be 1D float64, non-negative, no NaN values."""
        return _as_forcing_array(v, "pet", allow_negative=False)

    @field_validator("discharge", mode="before")
    @classmethod
    def validate_discharge(cls, v: np.ndarray | None) -> np.ndarray | None:
        """Validate discharge array: must be 1D float64 if provided."""
        if v is None:
            return None
        arr = np.asarray(v, dtype=np.float64)
        if arr.ndim != 1:
            msg = f"discharge array must be 1D, got {arr.ndim}D"
            raise ValueError(msg)
        return arr

    @model_validator(mode="after")
    def validate_array_lengths(self) -> ForcingData:
        """Ensure all arrays have the same length."""
        n = len(self.time)
        for name in ("precip", "temp", "pet", "discharge"):
            arr = getattr(self, name)
            if arr is not None and len(arr) != n:
                msg = f"{name} length {len(arr)} does not match time length {n}"
                raise ValueError(msg)
        return self

    def __len__(self) -> int:
        """Return the number of timesteps."""
        return len(self.time)
