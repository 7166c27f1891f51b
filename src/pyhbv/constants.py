"""HBV numerical constants.

Parameter names in canonical order, literature-based parameter bounds used for
validation warnings, and the fixed settings of the routing kernel and the
results writer.
"""

# Model parameter names in canonical order
PARAM_NAMES: tuple[str, ...] = (
    "tt",
    "cfmax",
    "sfcf",
    "cfr",
    "cwh",
    "fc",
    "lp",
    "beta",
    "perc",
    "uzl",
    "k0",
    "k1",
    "k2",
    "maxbas",
    "pcalt",
    "tcalt",
)

# Literature-based parameter bounds (pcalt/tcalt are not used by the engine)
DEFAULT_BOUNDS: dict[str, tuple[float, float]] = {
    "tt": (-2.5, 2.5),  # Threshold temperature [°C]
    "cfmax": (0.5, 10.0),  # Degree-day factor [mm/°C/d]
    "sfcf": (0.4, 1.4),  # Snowfall correction factor [-]
    "cfr": (0.0, 0.2),  # Refreezing coefficient [-]
    "cwh": (0.0, 0.2),  # Water holding capacity of snow [-]
    "fc": (50.0, 700.0),  # Field capacity [mm]
    "lp": (0.3, 1.0),  # Limit for potential ET [-]
    "beta": (1.0, 6.0),  # Shape coefficient [-]
    "perc": (0.0, 6.0),  # Maximum percolation rate [mm/d]
    "uzl": (0.0, 100.0),  # Upper zone threshold [mm]
    "k0": (0.05, 0.99),  # Surface flow recession [1/d]
    "k1": (0.01, 0.5),  # Interflow recession [1/d]
    "k2": (0.001, 0.2),  # Baseflow recession [1/d]
    "maxbas": (1.0, 7.0),  # Routing time [d]
}

# Sampling step of the MAXBAS triangle inside each unit-day bin [d]
MAXBAS_DX: float = 0.1

# Minimum number of forcing records (index 0 only seeds the initial state)
MIN_TIMESTEPS: int = 2

# Columns written by io.write_results unless overridden
DEFAULT_OUTPUT_COLUMNS: tuple[str, ...] = (
    "snow_storage",
    "recharge_gw",
    "soil_moisture",
    "upper_zone",
    "streamflow",
)
