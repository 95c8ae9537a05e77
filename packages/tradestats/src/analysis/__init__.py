"""tradestats analysis — composite OHLC reports and their interpretation."""

from .market import analyze_ohlc_frame, interpret_market_patterns, skewned_standard_deviation
from .skewness import get_simple_skewness_interpretation, interpret_skewness

__all__ = [
    "skewned_standard_deviation",
    "analyze_ohlc_frame",
    "interpret_market_patterns",
    "interpret_skewness",
    "get_simple_skewness_interpretation",
]
