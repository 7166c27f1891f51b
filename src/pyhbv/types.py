"""HBV data structures for parameters and state variables.

This module defines the core data types used by the HBV model:
- Parameters: The 16 model constants of a run
- ModelState: The storages and fluxes of one timestep
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .constants import DEFAULT_BOUNDS

logger = logging.getLogger(__name__)


def _warn_if_outside_bounds(params: Parameters) -> None:
    """Log warnings for parameters outside typical calibration ranges.

    This does not raise errors - parameters outside bounds may still be valid
    for specific catchments or research purposes.
    """
    for name, (lower, upper) in DEFAULT_BOUNDS.items():
        value = getattr(params, name)
        if value < lower or value > upper:
            logger.warning(
                "Parameter %s=%.4f is outside typical range [%.2f, %.2f]",
                name,
                value,
                lower,
                upper,
            )


@dataclass(frozen=True)
class Parameters:
    """HBV model parameters.

    Attributes:
        tt: Threshold temperature for rain/snow partition [C].
        cfmax: Degree-day factor for snowmelt [mm/C/d].
        sfcf: Snowfall correction factor [-].
        cfr: Refreezing coefficient [-].
        cwh: Water holding capacity of snow [-].
        fc: Field capacity / maximum soil moisture storage [mm].
        lp: Limit for potential evapotranspiration as fraction of FC [-].
        beta: Shape coefficient for soil moisture recharge [-].
        perc: Maximum percolation rate to lower zone [mm/d].
        uzl: Upper zone threshold for K0 flow [mm].
        k0: Surface/quick flow recession coefficient [1/d].
        k1: Interflow recession coefficient [1/d].
        k2: Baseflow recession coefficient [1/d].
        maxbas: Length of triangular routing kernel [d].
        pcalt: Precipitation altitude correction [%/100 m]. Not used by the engine.
        tcalt: Temperature altitude correction [C/100 m]. Not used by the engine.
    """

    tt: float
    cfmax: float
    sfcf: float
    cfr: float
    cwh: float
    fc: float
    lp: float
    beta: float
    perc: float
    uzl: float
    k0: float
    k1: float
    k2: float
    maxbas: float
    pcalt: float = 0.0
    tcalt: float = 0.0

    def __post_init__(self) -> None:
        """Warn about parameters outside typical ranges."""
        _warn_if_outside_bounds(self)


@dataclass(frozen=True)
class ModelState:
    """HBV storages and fluxes at the end of one timestep.

    Storages are in mm, fluxes in mm/day. The state at index 0 of a run is the
    seeded initial condition; every later state is derived from its predecessor.

    Attributes:
        snow_solid: Solid water content of the snowpack [mm].
        snow_liquid: Liquid water held in the snowpack [mm].
        snow_storage: Total snow storage, solid + liquid [mm].
        snow_cover: 1 if solid snow was on the ground at the start of the step, else 0.
        snowfall: Corrected snowfall [mm/day].
        rainfall: Rainfall [mm/day].
        snow_melt: Snowmelt [mm/day].
        refreezing: Liquid water refrozen in the snowpack [mm/day].
        liquid_in: Water released from the snow routine to the soil [mm/day].
        soil_moisture: Soil moisture storage [mm].
        recharge_sm: Gain of soil moisture from liquid_in [mm/day].
        recharge_gw: Recharge to the upper groundwater zone [mm/day].
        actual_et: Actual evapotranspiration [mm/day].
        upper_zone: SUZ - Upper groundwater zone storage [mm].
        lower_zone: SLZ - Lower groundwater zone storage [mm].
        percolation: Percolation from upper to lower zone [mm/day].
        q0: Fast flow from upper zone above UZL [mm/day].
        q1: Interflow from upper zone [mm/day].
        q2: Baseflow from lower zone [mm/day].
        qgw: Total groundwater discharge before routing [mm/day].
        streamflow: Simulated runoff after routing [mm/day].
    """

    snow_solid: float = 0.0
    snow_liquid: float = 0.0
    snow_storage: float = 0.0
    snow_cover: int = 0
    snowfall: float = 0.0
    rainfall: float = 0.0
    snow_melt: float = 0.0
    refreezing: float = 0.0
    liquid_in: float = 0.0
    soil_moisture: float = 0.0
    recharge_sm: float = 0.0
    recharge_gw: float = 0.0
    actual_et: float = 0.0
    upper_zone: float = 0.0
    lower_zone: float = 0.0
    percolation: float = 0.0
    q0: float = 0.0
    q1: float = 0.0
    q2: float = 0.0
    qgw: float = 0.0
    streamflow: float = 0.0

    @classmethod
    def initialize(cls, params: Parameters) -> ModelState:
        """Create the initial state from parameters.

        Uses the standard HBV initialization:
        - Soil moisture at LP * FC
        - Lower zone at PERC / K2 (equilibrium with maximum percolation)
        - Everything else at zero
        """
        return cls(
            soil_moisture=params.fc * params.lp,
            lower_zone=params.perc / params.k2,
        )
