"""Tests for MAXBAS weights and forward routing."""

import math

import numpy as np
import pytest

from pyhbv.routing import compute_maxbas_weights, route_discharge
from pyhbv.validation import ConfigurationError


class TestMaxbasWeights:
    """Tests for the triangular kernel."""

    @pytest.mark.parametrize("maxbas", [0.3, 1.0, 1.5, 2.0, 2.3, 2.5, 3.0, 4.7, 7.0, 10.2])
    def test_length_sign_and_sum(self, maxbas: float) -> None:
        """ceil(MAXBAS) non-negative weights summing to 1."""
        weights = compute_maxbas_weights(maxbas)
        assert len(weights) == math.ceil(maxbas)
        assert np.all(weights >= 0.0)
        assert abs(weights.sum() - 1.0) < 1e-9

    def test_single_day(self) -> None:
        """MAXBAS=1 passes discharge through unchanged."""
        np.testing.assert_allclose(compute_maxbas_weights(1.0), [1.0])

    def test_two_days(self) -> None:
        """MAXBAS=2 splits discharge evenly."""
        np.testing.assert_allclose(compute_maxbas_weights(2.0), [0.5, 0.5])

    def test_three_days(self) -> None:
        """MAXBAS=3 matches the analytic triangle integrals."""
        np.testing.assert_allclose(compute_maxbas_weights(3.0), [2 / 9, 5 / 9, 2 / 9])

    def test_symmetric_for_integer_maxbas(self) -> None:
        """Integer MAXBAS gives a symmetric kernel."""
        weights = compute_maxbas_weights(5.0)
        np.testing.assert_allclose(weights, weights[::-1])

    def test_fractional_tail_is_small(self) -> None:
        """The last bin of a fractional MAXBAS only covers the end of the triangle."""
        weights = compute_maxbas_weights(2.5)
        assert weights[2] < weights[0] < weights[1]

    @pytest.mark.parametrize("maxbas", [0.0, -1.0, float("nan"), float("inf")])
    def test_invalid_maxbas_raises(self, maxbas: float) -> None:
        """Non-positive or non-finite MAXBAS is a configuration error."""
        with pytest.raises(ConfigurationError, match="maxbas"):
            compute_maxbas_weights(maxbas)


class TestRouteDischarge:
    """Tests for the forward accumulation into the streamflow buffer."""

    def test_spreads_over_following_steps(self) -> None:
        """Discharge of step i lands on steps i .. i + len(weights) - 1."""
        streamflow = np.zeros(6)
        route_discharge(4.0, 1, np.array([0.25, 0.5, 0.25]), streamflow)
        np.testing.assert_allclose(streamflow, [0.0, 1.0, 2.0, 1.0, 0.0, 0.0])

    def test_accumulates_without_overwriting(self) -> None:
        """Later contributions are added to earlier ones."""
        streamflow = np.zeros(4)
        weights = np.array([0.5, 0.5])
        route_discharge(2.0, 1, weights, streamflow)
        route_discharge(4.0, 2, weights, streamflow)
        np.testing.assert_allclose(streamflow, [0.0, 1.0, 3.0, 2.0])

    def test_drops_contributions_past_horizon(self) -> None:
        """Only indices inside the buffer are written."""
        streamflow = np.zeros(5)
        route_discharge(6.0, 4, np.array([0.2, 0.3, 0.5]), streamflow)
        np.testing.assert_allclose(streamflow, [0.0, 0.0, 0.0, 0.0, 1.2])
