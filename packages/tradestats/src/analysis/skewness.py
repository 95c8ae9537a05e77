"""Plain-language readings of skewness values.

Thresholds sit at +/-0.5 (moderate) and +/-1 (high).
"""
from __future__ import annotations

import logging
import math
from typing import Any, Mapping

from ..formatting import to_fixed

logger = logging.getLogger(__name__)

MODERATE = 0.5
HIGH = 1.0

_DIMENSIONS = ("returns", "prices", "ranges")


def get_simple_skewness_interpretation(skewness: float) -> str:
    """Five-bucket label for a skewness value.

    The negative buckets are checked before the positive ones and every
    comparison is strict, so the boundaries resolve as: -1.0 is moderately
    negative, 1.0 is moderately positive, and both 0.5 and -0.5 fall
    through to moderately positive.

    Examples
    --------
    >>> get_simple_skewness_interpretation(0.2)
    'approximately symmetric'
    >>> get_simple_skewness_interpretation(-1.5)
    'highly negatively skewed'
    """
    if not math.isfinite(skewness):
        return "insufficient data"
    if abs(skewness) < MODERATE:
        return "approximately symmetric"
    if skewness < -HIGH:
        return "highly negatively skewed"
    if skewness < -MODERATE:
        return "moderately negatively skewed"
    if skewness > HIGH:
        return "highly positively skewed"
    return "moderately positively skewed"


def _returns_reading(value: float) -> str:
    if value > MODERATE:
        return "More frequent small losses but potential for larger gains. Good for long positions."
    if value < -MODERATE:
        return "More frequent small gains but risk of larger losses. Consider quick profit taking."
    return "Balanced return distribution. No strong bias in gains or losses."


def _prices_reading(value: float) -> str:
    if abs(value) < MODERATE:
        return "Price movements are balanced. No strong directional bias."
    if value > MODERATE:
        return "Price tends to make larger upward moves. Favor upside breakouts."
    return "Price tends to make larger downward moves. Watch for downside risks."


def _ranges_reading(value: float) -> str:
    if value > MODERATE:
        return "Expect occasional large trading ranges. Watch for breakout opportunities."
    if value < -MODERATE:
        return "Trading ranges are typically consistent with occasional very quiet days."
    return "Trading ranges are fairly consistent. Good for range-based strategies."


def _market_bias(returns: float, prices: float, ranges: float) -> str:
    if returns > MODERATE and ranges > MODERATE:
        return "Market shows potential for explosive upward moves"
    if returns < -MODERATE and ranges > MODERATE:
        return "Market shows risk of sharp downward moves"
    if abs(returns) < MODERATE and abs(prices) < MODERATE:
        return "Market is well-balanced with no strong directional bias"
    if returns > MODERATE and abs(prices) < MODERATE:
        return "Market favors longer-term upward positions"
    if returns < -MODERATE and abs(prices) < MODERATE:
        return "Market favors shorter-term trading approaches"
    return "Market shows mixed signals - trade with caution"


def _coerce(value: Any) -> float:
    """Numeric value, 0.0 for anything missing or non-numeric."""
    if value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if not math.isnan(number) else 0.0


def interpret_skewness(skewness: Mapping[str, Any] | None) -> dict[str, Any]:
    """Interpret returns, prices and ranges skewness for trading.

    Parameters
    ----------
    skewness : Mapping[str, Any]
        Values under ``returns``, ``prices`` and ``ranges``; missing or
        non-numeric entries count as 0.

    Returns
    -------
    dict[str, Any]
        ``marketBias`` sentence and per-dimension ``analysis`` with the
        value to 4 decimals and its reading. Input that is not a mapping
        yields an "Unable to analyze" report instead of raising.
    """
    if not isinstance(skewness, Mapping):
        logger.warning("interpret_skewness: expected a mapping, got %s", type(skewness).__name__)
        return {
            "marketBias": "Unable to analyze - invalid data",
            "analysis": {
                name: {"value": "N/A", "interpretation": "No data"} for name in _DIMENSIONS
            },
        }

    returns = _coerce(skewness.get("returns"))
    prices = _coerce(skewness.get("prices"))
    ranges = _coerce(skewness.get("ranges"))

    return {
        "marketBias": _market_bias(returns, prices, ranges),
        "analysis": {
            "returns": {"value": to_fixed(returns, 4), "interpretation": _returns_reading(returns)},
            "prices": {"value": to_fixed(prices, 4), "interpretation": _prices_reading(prices)},
            "ranges": {"value": to_fixed(ranges, 4), "interpretation": _ranges_reading(ranges)},
        },
    }
