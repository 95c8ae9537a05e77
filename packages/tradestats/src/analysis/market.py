"""Composite OHLC market analysis.

skewned_standard_deviation turns parallel open/high/low/close arrays into
a report of distribution shape, price action and up/down day patterns;
interpret_market_patterns reads the patterns block back as market type,
bias and volatility.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

import numpy as np
import pandas as pd

from ..config import DEFAULT_MARKET_PATTERN_CONFIG, MarketPatternConfig
from ..descriptive import max_or_min, mean, median, mode
from ..formatting import percent, to_fixed
from ..metrics.distribution import calculate_kurtosis, calculate_skewness
from ..transforms.arrays import longest_run, standard_deviation
from ..types import OHLC_COLUMNS, InvalidArgumentError
from .skewness import get_simple_skewness_interpretation

logger = logging.getLogger(__name__)


def _validate_ohlc(
    opens: Sequence[float] | None,
    highs: Sequence[float] | None,
    lows: Sequence[float] | None,
    closes: Sequence[float] | None,
) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    series = (opens, highs, lows, closes)
    if any(s is None or len(s) == 0 for s in series):
        raise InvalidArgumentError("All price arrays must be provided and non-empty")
    if len({len(s) for s in series}) != 1:
        raise InvalidArgumentError(
            "All price arrays must have the same length, got "
            f"{[len(s) for s in series]}"
        )
    return tuple(np.asarray(s, dtype=float) for s in series)


def skewned_standard_deviation(
    opens: Sequence[float],
    highs: Sequence[float],
    lows: Sequence[float],
    closes: Sequence[float],
) -> dict[str, Any]:
    """
    Analyze OHLC data with emphasis on distribution skewness.

    Parameters
    ----------
    opens, highs, lows, closes : Sequence[float]
        Equal-length price arrays, one element per period.

    Returns
    -------
    dict[str, Any]
        ``distribution`` (skewness with readings, standard deviation and
        central tendency of returns/prices/ranges), ``priceAction``
        (latest bar, overall high/low, average ranges) and ``patterns``
        (longest up/down runs and up/down/neutral day counts).

    Raises
    ------
    InvalidArgumentError
        If any array is missing or empty, or the lengths differ.

    Notes
    -----
    Returns are close-to-close, ``(close[i] - close[i-1]) / close[i-1]``.
    A return of exactly 0 is a neutral day, so
    ``upDays + downDays + neutralDays == len(closes) - 1``.

    Examples
    --------
    >>> report = skewned_standard_deviation(
    ...     [10, 11, 12], [11, 12, 13], [9, 10, 11], [11, 12, 13]
    ... )
    >>> report["patterns"]["distribution"]
    {'upDays': 2, 'downDays': 0, 'neutralDays': 0}
    """
    opens, highs, lows, closes = _validate_ohlc(opens, highs, lows, closes)

    with np.errstate(divide="ignore", invalid="ignore"):
        returns = np.diff(closes) / closes[:-1]
    daily_ranges = highs - lows
    open_close_ranges = closes - opens

    skew_returns = calculate_skewness(returns)
    skew_prices = calculate_skewness(closes)
    skew_ranges = calculate_skewness(daily_ranges)

    up = returns > 0
    down = returns < 0

    logger.info(
        "Analyzed %d periods: %d up, %d down", len(closes), int(up.sum()), int(down.sum())
    )

    return {
        "distribution": {
            "skewness": {
                "returns": skew_returns,
                "prices": skew_prices,
                "ranges": skew_ranges,
                "interpretation": {
                    "returns": get_simple_skewness_interpretation(skew_returns),
                    "prices": get_simple_skewness_interpretation(skew_prices),
                    "ranges": get_simple_skewness_interpretation(skew_ranges),
                },
            },
            "standardDeviation": {
                "returns": standard_deviation(returns).sd,
                "prices": standard_deviation(closes).sd,
                "ranges": standard_deviation(daily_ranges).sd,
            },
            "normality": {
                "mean": mean(closes),
                "median": median(closes),
                "mode": float(mode(closes)),
                "kurtosis": calculate_kurtosis(closes),
            },
        },
        "priceAction": {
            "latest": {
                "open": float(opens[-1]),
                "high": float(highs[-1]),
                "low": float(lows[-1]),
                "close": float(closes[-1]),
            },
            "ranges": {
                "total": {
                    "high": max_or_min(highs, "max"),
                    "low": max_or_min(lows, "min"),
                },
                "average": {
                    "daily": mean(daily_ranges),
                    "openClose": mean(open_close_ranges),
                },
            },
        },
        "patterns": {
            "consecutiveMovements": {
                "up": longest_run(up),
                "down": longest_run(down),
            },
            "distribution": {
                "upDays": int(up.sum()),
                "downDays": int(down.sum()),
                "neutralDays": int((returns == 0).sum()),
            },
        },
    }


def analyze_ohlc_frame(
    frame: pd.DataFrame,
    *,
    columns: Sequence[str] = OHLC_COLUMNS,
) -> dict[str, Any]:
    """
    Run skewned_standard_deviation over a DataFrame of bars.

    Parameters
    ----------
    frame : pd.DataFrame
        One row per period, in time order.
    columns : Sequence[str], default ("open", "high", "low", "close")
        Column names for open, high, low and close.

    Returns
    -------
    dict[str, Any]
        Same report as skewned_standard_deviation.

    Raises
    ------
    InvalidArgumentError
        If ``frame`` is not a DataFrame or a column is missing.
    """
    if not isinstance(frame, pd.DataFrame):
        raise InvalidArgumentError(f"Expected a DataFrame, got {type(frame).__name__}")
    if len(columns) != 4:
        raise InvalidArgumentError(f"columns must name open, high, low, close; got {columns}")
    missing = [col for col in columns if col not in frame.columns]
    if missing:
        raise InvalidArgumentError(f"Missing required columns: {missing}")

    return skewned_standard_deviation(*(frame[col].to_numpy(dtype=float) for col in columns))


def _market_type(up_run: float, down_run: float, config: MarketPatternConfig) -> str:
    if abs(up_run - down_run) <= config.ranging_run_gap:
        return "ranging"
    return "trending up" if up_run > down_run else "trending down"


def _bias(up_share: float, down_share: float, threshold: float) -> str:
    if abs(up_share - down_share) < threshold:
        return "neutral"
    return "bullish" if up_share > down_share else "bearish"


def _volatility(neutral_share: float, config: MarketPatternConfig) -> str:
    if neutral_share > config.low_volatility_neutral:
        return "low"
    if neutral_share < config.high_volatility_neutral:
        return "high"
    return "moderate"


def interpret_market_patterns(
    patterns: Mapping[str, Any],
    threshold: float | None = None,
    *,
    config: MarketPatternConfig | None = None,
) -> dict[str, Any]:
    """
    Interpret the ``patterns`` block of skewned_standard_deviation.

    Parameters
    ----------
    patterns : Mapping[str, Any]
        Must hold ``consecutiveMovements`` (``up``, ``down``) and
        ``distribution`` (``upDays``, ``downDays``, ``neutralDays``).
    threshold : float | None
        Up/down share gap needed for a bullish or bearish bias.
        Defaults to ``config.bias_threshold`` (0.15).
    config : MarketPatternConfig | None
        Thresholds; the defaults when None.

    Returns
    -------
    dict[str, Any]
        ``summary`` sentence, ``details`` (market type, bias, volatility,
        run strength) and ``metrics`` (day shares as percentages).

    Raises
    ------
    InvalidArgumentError
        If either required block is missing.

    Examples
    --------
    >>> patterns = {
    ...     "consecutiveMovements": {"up": 3, "down": 2},
    ...     "distribution": {"upDays": 10, "downDays": 8, "neutralDays": 2},
    ... }
    >>> interpret_market_patterns(patterns)["summary"]
    'Market is ranging with neutral bias and moderate volatility'
    """
    if (
        not isinstance(patterns, Mapping)
        or patterns.get("consecutiveMovements") is None
        or patterns.get("distribution") is None
    ):
        raise InvalidArgumentError("Invalid patterns object provided")

    config = config or DEFAULT_MARKET_PATTERN_CONFIG
    if threshold is None:
        threshold = config.bias_threshold

    try:
        up_run = patterns["consecutiveMovements"]["up"]
        down_run = patterns["consecutiveMovements"]["down"]
        up_days = patterns["distribution"]["upDays"]
        down_days = patterns["distribution"]["downDays"]
        neutral_days = patterns["distribution"]["neutralDays"]
    except (KeyError, TypeError) as exc:
        raise InvalidArgumentError(f"Incomplete patterns object: {exc}") from exc

    total_days = np.float64(up_days + down_days + neutral_days)

    # An empty distribution gives NaN shares rather than an error
    with np.errstate(divide="ignore", invalid="ignore"):
        up_share = up_days / total_days
        down_share = down_days / total_days
        neutral_share = neutral_days / total_days
        up_strength = up_run / total_days * 100
        down_strength = down_run / total_days * 100

    market_type = _market_type(up_run, down_run, config)
    bias = _bias(up_share, down_share, threshold)
    volatility = _volatility(neutral_share, config)

    return {
        "summary": f"Market is {market_type} with {bias} bias and {volatility} volatility",
        "details": {
            "marketType": market_type,
            "bias": bias,
            "volatility": volatility,
            "strength": {
                "upStrength": to_fixed(up_strength, 1),
                "downStrength": to_fixed(down_strength, 1),
            },
        },
        "metrics": {
            "upPercentage": percent(up_share, 1),
            "downPercentage": percent(down_share, 1),
            "neutralPercentage": percent(neutral_share, 1),
        },
    }
