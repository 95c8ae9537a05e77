"""tradestats — Statistics and trading-risk metrics.

Pure, stateless functions over price/return arrays and trade records.
Every call is independent; nothing is cached or shared.

Top-level exports: the full function API plus the result and error types.

Submodules (import directly)::

    src.descriptive            — mean, median, mode, value_range, gcd, max_or_min
    src.transforms.arrays      — normalize_array, sum_arr, sum_one_array,
                                 standard_deviation, standard_deviation_of_two_numbers,
                                 longest_run
    src.transforms.fractions   — decimal_to_fraction, simplify_fractions
    src.transforms.records     — calculate_average_by_key, sum_by_key,
                                 count_value_by_key, consecutive_of_occurrence_by_key
    src.metrics.risk           — calculate_risk_of_ruin, calculate_detailed_risk_of_ruin,
                                 kelly_fraction, drawdown_factor
    src.metrics.performance    — calculate_success_rate, calculate_profit_metrics,
                                 calculate_expected_value, determine_probability_status
    src.metrics.distribution   — calculate_skewness, calculate_kurtosis
    src.analysis.market        — skewned_standard_deviation, analyze_ohlc_frame,
                                 interpret_market_patterns
    src.analysis.skewness      — interpret_skewness, get_simple_skewness_interpretation
    src.config                 — MarketPatternConfig, load_market_pattern_config
"""

from .analysis import (
    analyze_ohlc_frame,
    get_simple_skewness_interpretation,
    interpret_market_patterns,
    interpret_skewness,
    skewned_standard_deviation,
)
from .config import MarketPatternConfig, load_market_pattern_config
from .descriptive import gcd, max_or_min, mean, median, mode, value_range
from .metrics import (
    calculate_detailed_risk_of_ruin,
    calculate_expected_value,
    calculate_kurtosis,
    calculate_profit_metrics,
    calculate_risk_of_ruin,
    calculate_skewness,
    calculate_success_rate,
    determine_probability_status,
    drawdown_factor,
    kelly_fraction,
)
from .transforms import (
    calculate_average_by_key,
    consecutive_of_occurrence_by_key,
    count_value_by_key,
    decimal_to_fraction,
    longest_run,
    normalize_array,
    simplify_fractions,
    standard_deviation,
    standard_deviation_of_two_numbers,
    sum_arr,
    sum_by_key,
    sum_one_array,
)
from .types import DeviationResult, FractionResult, InvalidArgumentError, ParseFailureError

__all__ = [
    # Types
    "InvalidArgumentError",
    "ParseFailureError",
    "FractionResult",
    "DeviationResult",
    "MarketPatternConfig",
    "load_market_pattern_config",
    # Primitives
    "mean",
    "median",
    "mode",
    "value_range",
    "gcd",
    "max_or_min",
    # Transforms
    "normalize_array",
    "decimal_to_fraction",
    "simplify_fractions",
    "sum_arr",
    "sum_one_array",
    "standard_deviation",
    "standard_deviation_of_two_numbers",
    "longest_run",
    "calculate_average_by_key",
    "sum_by_key",
    "count_value_by_key",
    "consecutive_of_occurrence_by_key",
    # Trading risk
    "calculate_risk_of_ruin",
    "calculate_detailed_risk_of_ruin",
    "kelly_fraction",
    "drawdown_factor",
    "calculate_success_rate",
    "calculate_profit_metrics",
    "calculate_expected_value",
    "determine_probability_status",
    "calculate_skewness",
    "calculate_kurtosis",
    # Composite analysis
    "skewned_standard_deviation",
    "analyze_ohlc_frame",
    "interpret_market_patterns",
    "interpret_skewness",
    "get_simple_skewness_interpretation",
]
