"""HBV model orchestration functions.

This module provides the main entry points for running the HBV model:
- step(): Execute the snow, soil and response routines for one timestep
- simulate(): Execute the model over a timeseries, raising on bad configuration
- run(): Execute the model over a timeseries, reporting the outcome
"""

from __future__ import annotations

import logging
from dataclasses import replace

import numpy as np

from .inputs import ForcingData
from .outputs import HBVFluxes, ModelOutput, RunOutcome
from .processes import response_routine, snow_routine, soil_routine
from .routing import compute_maxbas_weights, route_discharge
from .types import ModelState, Parameters
from .validation import ConfigurationError, validate_configuration

logger = logging.getLogger(__name__)


def step(
    state: ModelState,
    params: Parameters,
    precip: float,
    temp: float,
    pet: float,
) -> ModelState:
    """Execute one timestep of the HBV model.

    Runs the routines in their fixed order, each one consuming the
    same-step output of the previous:
    1. Snow routine (partitioning, melt, refreezing, retention)
    2. Soil routine (recharge split, evapotranspiration)
    3. Response routine (percolation, upper/lower zone outflows)

    Routing is left to the caller because it writes into later timesteps;
    the returned state has streamflow = 0.0.

    Args:
        state: State at the end of the previous timestep.
        params: Model parameters.
        precip: Daily precipitation [mm/day].
        temp: Daily mean temperature [C].
        pet: Daily potential evapotranspiration [mm/day].

    Returns:
        New ModelState for the timestep. The input state is not modified.
    """
    # 1. Snow routine
    (
        snow_cover,
        snowfall,
        rainfall,
        melt,
        refreezing,
        snow_solid,
        snow_liquid,
        liquid_in,
    ) = snow_routine(
        state.snow_solid,
        state.snow_liquid,
        precip,
        temp,
        params.tt,
        params.cfmax,
        params.sfcf,
        params.cfr,
        params.cwh,
    )

    # 2. Soil routine
    recharge_sm, recharge_gw, actual_et, soil_moisture = soil_routine(
        state.soil_moisture,
        liquid_in,
        snow_cover,
        pet,
        params.fc,
        params.lp,
        params.beta,
    )

    # 3. Response routine
    percolation, q0, q1, q2, qgw, upper_zone, lower_zone = response_routine(
        state.upper_zone,
        state.lower_zone,
        recharge_gw,
        params.perc,
        params.uzl,
        params.k0,
        params.k1,
        params.k2,
    )

    return ModelState(
        snow_solid=snow_solid,
        snow_liquid=snow_liquid,
        snow_storage=snow_solid + snow_liquid,
        snow_cover=int(snow_cover),
        snowfall=snowfall,
        rainfall=rainfall,
        snow_melt=melt,
        refreezing=refreezing,
        liquid_in=liquid_in,
        soil_moisture=soil_moisture,
        recharge_sm=recharge_sm,
        recharge_gw=recharge_gw,
        actual_et=actual_et,
        upper_zone=upper_zone,
        lower_zone=lower_zone,
        percolation=percolation,
        q0=q0,
        q1=q1,
        q2=q2,
        qgw=qgw,
    )


def simulate(params: Parameters, forcing: ForcingData) -> ModelOutput:
    """Run the HBV model over a timeseries.

    The first forcing record only dates the initial state, which is seeded
    with soil moisture at LP * FC and the lower zone at PERC / K2. Every later
    record advances the model by one timestep and routes its groundwater
    discharge forward into the streamflow buffer.

    Args:
        params: Model parameters.
        forcing: Input forcing data with at least two timesteps.

    Returns:
        ModelOutput with the full state trajectory, aligned with forcing.time.

    Raises:
        ConfigurationError: If parameters or forcing cannot be simulated.
            Raised before any state is allocated.
    """
    validate_configuration(params, forcing)

    n_timesteps = len(forcing)
    logger.debug("Simulating %d timesteps with MAXBAS=%.3f", n_timesteps, params.maxbas)

    # Compute routing weights once
    weights = compute_maxbas_weights(params.maxbas)

    # Streamflow of step i is final once step i has been routed
    streamflow = np.zeros(n_timesteps, dtype=np.float64)

    soil_deficit_logged = False
    states: list[ModelState] = [ModelState.initialize(params)]
    for t in range(1, n_timesteps):
        new_state = step(
            states[t - 1],
            params,
            float(forcing.precip[t]),
            float(forcing.temp[t]),
            float(forcing.pet[t]),
        )
        if new_state.soil_moisture < 0.0 and not soil_deficit_logged:
            logger.warning(
                "Soil moisture fell below zero (%.4f mm) at timestep %d; later steps may yield NaN",
                new_state.soil_moisture,
                t,
            )
            soil_deficit_logged = True
        route_discharge(new_state.qgw, t, weights, streamflow)
        states.append(replace(new_state, streamflow=float(streamflow[t])))

    return ModelOutput(
        time=forcing.time,
        states=tuple(states),
        fluxes=HBVFluxes.from_states(states),
    )


def run(params: Parameters, forcing: ForcingData) -> tuple[tuple[ModelState, ...], RunOutcome]:
    """Run the HBV model and report the outcome instead of raising.

    Args:
        params: Model parameters.
        forcing: Input forcing data.

    Returns:
        Tuple of (states, outcome). On success states holds one ModelState per
        forcing record; on a configuration error it is empty and
        outcome.message describes the problem.
    """
    try:
        output = simulate(params, forcing)
    except ConfigurationError as e:
        logger.error("HBV run rejected: %s", e)
        return (), RunOutcome.failed(str(e))
    return output.states, RunOutcome.succeeded()
