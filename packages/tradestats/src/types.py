"""Core types for tradestats.

Result tuples and the error hierarchy shared by every layer.
"""
from __future__ import annotations

from typing import NamedTuple


class InvalidArgumentError(ValueError):
    """Malformed input: wrong shape, wrong type, mismatched lengths,
    empty where non-empty is required, or an unrecognized choice."""


class ParseFailureError(InvalidArgumentError):
    """Numeric text that could not be parsed."""


class FractionResult(NamedTuple):
    """Fraction produced by decimal conversion.

    Parameters
    ----------
    numerator : int
        Reduced numerator (carries the sign).
    denominator : int
        Reduced positive denominator.
    display : str
        ``"numerator/denominator"``.
    """

    numerator: int
    denominator: int
    display: str


class DeviationResult(NamedTuple):
    """Population standard deviation together with the mean it was taken around.

    Parameters
    ----------
    sd : float
        Standard deviation, rounded to 6 significant digits.
    mean : float
        Unrounded arithmetic mean.
    """

    sd: float
    mean: float


# Report keys of an OHLC frame accepted by analyze_ohlc_frame
OHLC_COLUMNS = ("open", "high", "low", "close")
