"""Tests for the metrics registry."""

import logging

import pytest

from pyhbv.metrics import METRICS, get_metric, list_metrics, nse, register, volume_error


class TestRegistry:
    """Tests for metric registration and retrieval."""

    def test_metrics_populated(self) -> None:
        """The functions module registers the four goodness-of-fit measures."""
        assert {"nse", "r_squared", "volume_error", "lindstrom"} <= set(METRICS)

    def test_get_metric_returns_function(self) -> None:
        assert get_metric("nse") is nse
        assert get_metric("volume_error") is volume_error

    def test_get_metric_unknown_raises_keyerror(self) -> None:
        with pytest.raises(KeyError, match="Unknown metric 'nonexistent'"):
            get_metric("nonexistent")

    def test_unknown_metric_lists_available(self) -> None:
        with pytest.raises(KeyError, match="lindstrom, nse"):
            get_metric("kge")

    def test_list_metrics_returns_sorted_names(self) -> None:
        names = list_metrics()
        assert names == sorted(names)
        assert "lindstrom" in names

    def test_register_returns_function_unchanged(self) -> None:
        def peak_error(observed, simulated):  # noqa: ANN001, ANN202
            return 0.0

        try:
            assert register(peak_error) is peak_error
            assert get_metric("peak_error") is peak_error
        finally:
            METRICS.pop("peak_error", None)

    def test_reregister_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        original = METRICS["nse"]
        try:
            with caplog.at_level(logging.WARNING, logger="pyhbv.metrics.registry"):

                def nse(observed, simulated):  # noqa: ANN001, ANN202
                    return 0.0

                register(nse)
            assert "already registered" in caplog.text
        finally:
            METRICS["nse"] = original
