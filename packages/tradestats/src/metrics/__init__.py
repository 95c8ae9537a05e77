"""tradestats metrics — Risk of Ruin, trade performance and distribution shape."""

from .distribution import calculate_kurtosis, calculate_skewness
from .performance import (
    calculate_expected_value,
    calculate_profit_metrics,
    calculate_success_rate,
    determine_probability_status,
)
from .risk import (
    calculate_detailed_risk_of_ruin,
    calculate_risk_of_ruin,
    drawdown_factor,
    kelly_fraction,
)

__all__ = [
    # Risk
    "calculate_risk_of_ruin",
    "calculate_detailed_risk_of_ruin",
    "kelly_fraction",
    "drawdown_factor",
    # Performance
    "calculate_success_rate",
    "calculate_profit_metrics",
    "calculate_expected_value",
    "determine_probability_status",
    # Distribution
    "calculate_skewness",
    "calculate_kurtosis",
]
