"""Tests for parameter, forcing and result files."""

import json
from pathlib import Path

import numpy as np
import pandas as pd
import pytest
from pydantic import ValidationError

from pyhbv import Parameters, read_forcing, read_parameters, simulate, write_results

REFERENCE_JSON = {
    "TT": 0.0,
    "CFMAX": 3.0,
    "SFCF": 1.0,
    "CFR": 0.05,
    "CWH": 0.1,
    "FC": 200.0,
    "LP": 0.7,
    "BETA": 2.0,
    "PERC": 1.0,
    "UZL": 20.0,
    "K0": 0.3,
    "K1": 0.1,
    "K2": 0.01,
    "MAXBAS": 2.0,
    "PCALT": 10.0,
    "TCALT": 0.6,
}

FORCING_CSV = """Date,Precipitation,Temperature,Discharge,PotentialET
2020-01-01,0.0,-5.0,0.1,0.0
2020-01-02,10.0,5.0,0.6,2.0
2020-01-03,0.0,5.0,,2.0
"""


@pytest.fixture
def parameter_file(tmp_path: Path) -> Path:
    path = tmp_path / "parameters.json"
    path.write_text(json.dumps(REFERENCE_JSON))
    return path


@pytest.fixture
def forcing_file(tmp_path: Path) -> Path:
    path = tmp_path / "forcing.csv"
    path.write_text(FORCING_CSV)
    return path


class TestReadParameters:
    """Tests for reading parameter JSON files."""

    def test_uppercase_keys(self, parameter_file: Path) -> None:
        params = read_parameters(parameter_file)
        assert isinstance(params, Parameters)
        assert params.cfmax == 3.0
        assert params.maxbas == 2.0
        assert params.pcalt == 10.0
        assert params.tcalt == 0.6

    def test_lowercase_keys_and_optional_altitude_fields(self, tmp_path: Path) -> None:
        data = {k.lower(): v for k, v in REFERENCE_JSON.items() if k not in ("PCALT", "TCALT")}
        path = tmp_path / "p.json"
        path.write_text(json.dumps(data))
        params = read_parameters(path)
        assert params.fc == 200.0
        assert params.pcalt == 0.0

    def test_integers_accepted(self, tmp_path: Path) -> None:
        data = {**REFERENCE_JSON, "FC": 200}
        path = tmp_path / "p.json"
        path.write_text(json.dumps(data))
        params = read_parameters(path)
        assert params.fc == 200.0

    def test_missing_parameter_raises(self, tmp_path: Path) -> None:
        data = {k: v for k, v in REFERENCE_JSON.items() if k != "BETA"}
        path = tmp_path / "p.json"
        path.write_text(json.dumps(data))
        with pytest.raises(ValidationError, match="beta"):
            read_parameters(path)

    def test_non_numeric_parameter_raises(self, tmp_path: Path) -> None:
        data = {**REFERENCE_JSON, "K1": "fast"}
        path = tmp_path / "p.json"
        path.write_text(json.dumps(data))
        with pytest.raises(ValidationError):
            read_parameters(path)

    def test_non_object_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "p.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(ValueError, match="must contain a JSON object"):
            read_parameters(path)


class TestReadForcing:
    """Tests for reading forcing CSV files."""

    def test_columns_by_position(self, forcing_file: Path) -> None:
        forcing = read_forcing(forcing_file)
        assert len(forcing) == 3
        np.testing.assert_array_equal(forcing.precip, [0.0, 10.0, 0.0])
        np.testing.assert_array_equal(forcing.temp, [-5.0, 5.0, 5.0])
        np.testing.assert_array_equal(forcing.pet, [0.0, 2.0, 2.0])
        assert forcing.time[0] == np.datetime64("2020-01-01")

    def test_missing_discharge_is_nan(self, forcing_file: Path) -> None:
        forcing = read_forcing(forcing_file)
        assert forcing.discharge[1] == 0.6
        assert np.isnan(forcing.discharge[2])

    def test_too_few_columns_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "short.csv"
        path.write_text("Date,Precipitation,Temperature\n2020-01-01,1.0,2.0\n")
        with pytest.raises(ValueError, match="expected 5"):
            read_forcing(path)

    def test_missing_forcing_value_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "gap.csv"
        path.write_text(FORCING_CSV.replace("10.0,5.0", ",5.0"))
        with pytest.raises(ValidationError, match="precip array contains NaN values"):
            read_forcing(path)

    def test_negative_precipitation_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "negative.csv"
        path.write_text(FORCING_CSV.replace("10.0,5.0", "-10.0,5.0"))
        with pytest.raises(ValidationError, match="precip array contains negative values"):
            read_forcing(path)


class TestWriteResults:
    """Tests for writing result CSV files."""

    def test_default_columns(self, parameter_file: Path, forcing_file: Path, tmp_path: Path) -> None:
        output = simulate(read_parameters(parameter_file), read_forcing(forcing_file))
        path = tmp_path / "results.csv"
        write_results(output, path)

        df = pd.read_csv(path)
        assert list(df.columns) == [
            "date",
            "snow_storage",
            "recharge_gw",
            "soil_moisture",
            "upper_zone",
            "streamflow",
        ]
        assert list(df["date"]) == ["2020-01-01", "2020-01-02", "2020-01-03"]
        assert df["soil_moisture"].iloc[1] == pytest.approx(142.9406)
        assert df["streamflow"].iloc[2] == pytest.approx(1.3456)

    def test_four_decimals(self, parameter_file: Path, forcing_file: Path, tmp_path: Path) -> None:
        output = simulate(read_parameters(parameter_file), read_forcing(forcing_file))
        path = tmp_path / "results.csv"
        write_results(output, path, columns=("qgw",))
        lines = path.read_text().splitlines()
        assert lines[0] == "date,qgw"
        assert lines[2] == "2020-01-02,1.4159"

    def test_unknown_column_raises(self, parameter_file: Path, forcing_file: Path, tmp_path: Path) -> None:
        output = simulate(read_parameters(parameter_file), read_forcing(forcing_file))
        with pytest.raises(KeyError, match="Unknown output columns: discharge"):
            write_results(output, tmp_path / "results.csv", columns=("streamflow", "discharge"))
