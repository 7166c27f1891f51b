"""Readers and writers for HBV parameter, forcing and result files.

- Parameters: JSON object keyed by parameter name, e.g. {"TT": 0.0, "CFMAX": 3.0, ...}
- Forcing: CSV with a header row and the columns date, precipitation,
  temperature, observed discharge and potential ET, in that order
- Results: CSV with a date column followed by selected state variables
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path

import pandas as pd
from pydantic import TypeAdapter

from .constants import DEFAULT_OUTPUT_COLUMNS
from .inputs import ForcingData
from .outputs import ModelOutput
from .types import Parameters

logger = logging.getLogger(__name__)

# Column order of forcing CSV files
FORCING_COLUMNS: tuple[str, ...] = ("date", "precip", "temp", "discharge", "pet")

_parameters_adapter = TypeAdapter(Parameters)


def parse_parameters(data: dict[str, float]) -> Parameters:
    """Validate a mapping of parameter values into Parameters.

    Keys are matched case-insensitively; pcalt and tcalt may be omitted.

    Raises:
        pydantic.ValidationError: If a parameter is missing or not numeric.
    """
    return _parameters_adapter.validate_python({key.lower(): value for key, value in data.items()})


def read_parameters(path: str | Path) -> Parameters:
    """Read a parameter set from a JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        Validated Parameters.
    """
    with Path(path).open() as f:
        data = json.load(f)
    if not isinstance(data, dict):
        msg = f"Parameter file {path} must contain a JSON object, got {type(data).__name__}"
        raise ValueError(msg)
    return parse_parameters(data)


def read_forcing(path: str | Path) -> ForcingData:
    """Read forcing data from a CSV file.

    The header row is skipped; columns are taken by position.

    Args:
        path: Path to the CSV file.

    Returns:
        Validated ForcingData.
    """
    df = pd.read_csv(path)
    if df.shape[1] < len(FORCING_COLUMNS):
        msg = f"Forcing file {path} has {df.shape[1]} columns, expected {len(FORCING_COLUMNS)}"
        raise ValueError(msg)
    df = df.iloc[:, : len(FORCING_COLUMNS)]
    df.columns = list(FORCING_COLUMNS)
    logger.debug("Read %d forcing records from %s", len(df), path)

    return ForcingData(
        time=pd.to_datetime(df["date"]).to_numpy(),
        precip=df["precip"].to_numpy(),
        temp=df["temp"].to_numpy(),
        pet=df["pet"].to_numpy(),
        discharge=pd.to_numeric(df["discharge"], errors="coerce").to_numpy(),
    )


def write_results(
    output: ModelOutput,
    path: str | Path,
    columns: Sequence[str] = DEFAULT_OUTPUT_COLUMNS,
) -> None:
    """Write a simulation trajectory to a CSV file.

    Args:
        output: Result of a simulation.
        path: Destination CSV file.
        columns: State variables to write, after the date column.

    Raises:
        KeyError: If a column is not a state variable.
    """
    df = output.to_dataframe()
    unknown = [c for c in columns if c not in df.columns]
    if unknown:
        msg = f"Unknown output columns: {', '.join(unknown)}"
        raise KeyError(msg)

    df = df.loc[:, list(columns)]
    df.index = df.index.strftime("%Y-%m-%d")
    df.index.name = "date"
    df.to_csv(path, float_format="%.4f")
    logger.debug("Wrote %d records to %s", len(df), path)
