"""HBV snow, soil moisture and response process functions.

Numba-compiled functions implementing one timestep of each HBV routine:
- snow_routine: precipitation partitioning, accumulation, melt, refreezing and
  liquid water retention in the snowpack
- soil_routine: recharge split of the snow routine outflow and actual
  evapotranspiration
- response_routine: percolation and outflows of the upper and lower
  groundwater zones

Each function takes the storages of the previous timestep and the forcing of
the current one and returns new values; nothing is modified in place.
"""

import math

from numba import njit


@njit(cache=True)
def snow_routine(
    snow_solid: float,
    snow_liquid: float,
    precip: float,
    temp: float,
    tt: float,
    cfmax: float,
    sfcf: float,
    cfr: float,
    cwh: float,
) -> tuple[int, float, float, float, float, float, float, float]:
    """Advance the snowpack by one timestep.

    Below or at the threshold temperature precipitation falls as snow and part
    of the liquid water in the pack refreezes. Above it precipitation falls as
    rain, the pack melts, and liquid water beyond the holding capacity of the
    remaining solid pack is released to the soil.

    Args:
        snow_solid: Solid water in snowpack at the end of the previous step [mm].
        snow_liquid: Liquid water in snowpack at the end of the previous step [mm].
        precip: Precipitation [mm/day].
        temp: Air temperature [deg C].
        tt: Threshold temperature [deg C].
        cfmax: Degree-day factor [mm/deg C/day].
        sfcf: Snowfall correction factor [-].
        cfr: Refreezing coefficient [-].
        cwh: Water holding capacity of snow [-].

    Returns:
        Tuple of (snow_cover, snowfall, rainfall, melt, refreezing,
        new_solid, new_liquid, liquid_in).
    """
    # Snow cover at the beginning of the day
    if snow_solid > 0.0:
        snow_cover = 1
    else:
        snow_cover = 0

    if temp <= tt:
        snowfall = precip * sfcf
        rainfall = 0.0
        new_solid = snow_solid + snowfall

        pot_refreeze = cfmax * cfr * (tt - temp)
        refreezing = min(pot_refreeze, snow_liquid)
        new_solid = new_solid + refreezing
        new_liquid = snow_liquid - refreezing

        melt = 0.0
        liquid_in = 0.0
    else:
        rainfall = precip
        snowfall = 0.0
        refreezing = 0.0

        pot_melt = max(cfmax * (temp - tt), 0.0)
        melt = min(pot_melt, snow_solid)
        new_solid = max(snow_solid - melt, 0.0)

        # Holding capacity uses the solid pack left after melt
        pot_liquid = new_solid * cwh
        new_liquid = snow_liquid + precip + melt

        liquid_in = max(new_liquid - pot_liquid, 0.0)
        new_liquid = new_liquid - liquid_in

    return snow_cover, snowfall, rainfall, melt, refreezing, new_solid, new_liquid, liquid_in


@njit(cache=True)
def soil_routine(
    soil_moisture: float,
    liquid_in: float,
    snow_cover: int,
    pet: float,
    fc: float,
    lp: float,
    beta: float,
) -> tuple[float, float, float, float]:
    """Split snow routine outflow into soil storage and recharge, then evaporate.

    Uses the HBV relationship Recharge/Input = (SM/FC)^BETA, applied 1 mm at a
    time with a final fractional increment so that the soil moisture used in
    the exponent follows the water entering the soil.

    Actual ET is zero under snow cover; otherwise it is reduced linearly below
    LP * FC, evaluated at the mean soil moisture over the recharge.

    Args:
        soil_moisture: Soil moisture at the end of the previous step [mm].
        liquid_in: Water released from the snow routine [mm/day].
        snow_cover: 1 if snow was on the ground at the start of the step.
        pet: Potential evapotranspiration [mm/day].
        fc: Field capacity [mm].
        lp: Limit for potential ET as fraction of FC [-].
        beta: Shape coefficient [-].

    Returns:
        Tuple of (recharge_sm, recharge_gw, actual_et, new_soil_moisture).
    """
    sm_current = soil_moisture
    recharge_gw = 0.0
    recharge_sm = 0.0

    if liquid_in > 0.0:
        n_whole = int(math.floor(liquid_in))
        remainder = liquid_in - math.floor(liquid_in)

        for _ in range(n_whole):
            recharge = 1.0 * (sm_current / fc) ** beta
            sm_current += 1.0 - recharge
            recharge_gw += recharge

        recharge = remainder * (sm_current / fc) ** beta
        sm_current += remainder - recharge
        recharge_gw += recharge

        recharge_sm = sm_current - soil_moisture

    # Trapezoidal mean of soil moisture over the recharge
    sm_mean = (sm_current - soil_moisture) / 2.0 + soil_moisture
    if snow_cover == 1:
        actual_et = 0.0
    else:
        actual_et = pet * min(1.0, sm_mean * (1.0 / (lp * fc)))

    new_sm = soil_moisture - actual_et + recharge_sm

    return recharge_sm, recharge_gw, actual_et, new_sm


@njit(cache=True)
def response_routine(
    upper_zone: float,
    lower_zone: float,
    recharge_gw: float,
    perc: float,
    uzl: float,
    k0: float,
    k1: float,
    k2: float,
) -> tuple[float, float, float, float, float, float, float]:
    """Advance the two groundwater reservoirs by one timestep.

    Recharge enters the upper zone (SUZ), which percolates up to PERC into the
    lower zone (SLZ). Outflows are computed on the updated storages:
    Q2 = K2 * SLZ (baseflow), Q1 = K1 * SUZ (interflow) and
    Q0 = K0 * max(SUZ - UZL, 0) (fast flow).

    Args:
        upper_zone: Upper zone storage at the end of the previous step [mm].
        lower_zone: Lower zone storage at the end of the previous step [mm].
        recharge_gw: Recharge from the soil routine [mm/day].
        perc: Maximum percolation rate [mm/day].
        uzl: Upper zone threshold for Q0 [mm].
        k0: Fast flow recession coefficient [1/day].
        k1: Interflow recession coefficient [1/day].
        k2: Baseflow recession coefficient [1/day].

    Returns:
        Tuple of (percolation, q0, q1, q2, qgw, new_upper_zone, new_lower_zone).
    """
    suz = upper_zone + recharge_gw
    percolation = min(perc, suz)
    suz = suz - percolation
    slz = lower_zone + percolation

    q2 = k2 * slz
    q1 = k1 * suz
    q0 = k0 * max(suz - uzl, 0.0)
    qgw = q2 + q1 + q0

    # Storages are not floored: validated K coefficients keep them non-negative
    slz = slz - q2
    suz = suz - q1 - q0

    return percolation, q0, q1, q2, qgw, suz, slz
