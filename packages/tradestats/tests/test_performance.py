"""Tests for trade performance metrics."""

import pytest

from src.metrics.performance import (
    calculate_expected_value,
    calculate_profit_metrics,
    calculate_success_rate,
    determine_probability_status,
)
from src.types import InvalidArgumentError


class TestCalculateSuccessRate:
    """Tests for calculate_success_rate function."""

    def test_one_decimal_string(self) -> None:
        assert calculate_success_rate(75, 100) == "75.0"

    def test_rounding(self) -> None:
        assert calculate_success_rate(2, 3) == "66.7"

    def test_no_trades_is_numeric_zero(self) -> None:
        """Test the empty case returns the number 0, not a string."""
        result = calculate_success_rate(0, 0)
        assert result == 0
        assert not isinstance(result, str)


class TestCalculateProfitMetrics:
    """Tests for calculate_profit_metrics function."""

    def test_basic(self) -> None:
        result = calculate_profit_metrics(1000, 10, -500, 5)
        assert result == {
            "avgProfit": "100.00",
            "avgLoss": "-100.00",
            "riskReward": "1:1.00",
        }

    def test_ratio_from_rounded_averages(self) -> None:
        result = calculate_profit_metrics(300, 3, -150, 3)
        assert result == {"avgProfit": "100.00", "avgLoss": "-50.00", "riskReward": "1:0.50"}

    def test_no_losses(self) -> None:
        result = calculate_profit_metrics(500, 5, 0, 0)
        assert result["avgLoss"] == 0
        assert result["riskReward"] == "N/A"

    def test_no_profits(self) -> None:
        result = calculate_profit_metrics(0, 0, -200, 4)
        assert result["avgProfit"] == 0
        assert result["avgLoss"] == "-50.00"
        assert result["riskReward"] == "1:inf"


class TestCalculateExpectedValue:
    """Tests for calculate_expected_value function."""

    def test_positive_edge(self) -> None:
        # 0.75 * 1.95 - 0.25 * 1
        assert calculate_expected_value(0.75, "1:1.95") == pytest.approx(1.2125, abs=1e-4)

    def test_break_even(self) -> None:
        assert calculate_expected_value(0.5, "1:1") == pytest.approx(0.0)

    def test_negative_edge(self) -> None:
        assert calculate_expected_value(0.3, "1:2") == pytest.approx(-0.1)

    def test_malformed_ratio_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            calculate_expected_value(0.5, "2")


class TestDetermineProbabilityStatus:
    """Tests for determine_probability_status function."""

    def test_profitable(self) -> None:
        assert determine_probability_status(75, 1.95) == "Profitable"

    def test_within_band_is_break_even(self) -> None:
        """Test 40% at RR 1.5 sits inside the 5-point band under 45%."""
        assert determine_probability_status(40, 1.5) == "Break Even"

    def test_not_profitable(self) -> None:
        assert determine_probability_status(39, 1.5) == "Not Profitable"

    @pytest.mark.parametrize(
        "rate, rr, status",
        [
            (55, 1.0, "Profitable"),
            (50, 1.0, "Break Even"),
            (49.9, 1.0, "Not Profitable"),
            (45, 2.0, "Profitable"),
            (40, 2.0, "Break Even"),
            (35, 2.5, "Profitable"),
            (30, 2.5, "Break Even"),
            (29, 2.5, "Not Profitable"),
        ],
    )
    def test_thresholds(self, rate: float, rr: float, status: str) -> None:
        assert determine_probability_status(rate, rr) == status

    def test_accepts_success_rate_string(self) -> None:
        """Test the string output of calculate_success_rate feeds straight in."""
        rate = calculate_success_rate(48, 100)
        assert determine_probability_status(rate, 1.8) == "Profitable"
