"""Array transforms — rescaling, pairwise averaging, sums and deviation.

Implements: normalize_array, sum_arr, sum_one_array, standard_deviation,
standard_deviation_of_two_numbers, longest_run.
"""
from __future__ import annotations

import logging
from typing import Any, Sequence

import numpy as np
import pandas as pd

from ..descriptive import mean, value_range
from ..formatting import to_precision
from ..parsing import parse_float
from ..types import DeviationResult, InvalidArgumentError, ParseFailureError

logger = logging.getLogger(__name__)


def _is_sequence(obj: Any) -> bool:
    return isinstance(obj, (list, tuple, np.ndarray, pd.Series))


def normalize_array(
    values: Sequence[float],
    target_range: Sequence[float],
) -> np.ndarray:
    """Linearly rescale values so their own range maps onto ``target_range``.

    result[i] = (values[i] - min) * (target_max - target_min) / (max - min) + target_min

    Parameters
    ----------
    values : Sequence[float]
        Input numbers.
    target_range : Sequence[float]
        ``[target_min, target_max]``.

    Returns
    -------
    np.ndarray
        Rescaled values. All NaN when every input value is equal.

    Raises
    ------
    InvalidArgumentError
        If either argument is not a sequence or ``target_range`` does not
        hold exactly two values.
    """
    if not _is_sequence(values) or not _is_sequence(target_range):
        raise InvalidArgumentError("Invalid arguments to normalize")
    if len(target_range) != 2:
        raise InvalidArgumentError(
            f"target_range must hold [min, max], got {len(target_range)} values"
        )

    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        return arr

    low, high = value_range(arr)
    target_min, target_max = (float(v) for v in target_range)
    if high == low:
        logger.warning("normalize_array: zero source range, result is NaN")

    with np.errstate(divide="ignore", invalid="ignore"):
        scale = np.float64(target_max - target_min) / np.float64(high - low)
        return (arr - low) * scale + target_min


def sum_arr(first: Sequence[float], second: Sequence[float]) -> np.ndarray:
    """Element-wise average of two equal-length sequences.

    Raises
    ------
    InvalidArgumentError
        If the lengths differ.
    """
    a = np.asarray(first, dtype=float)
    b = np.asarray(second, dtype=float)
    if a.shape != b.shape:
        raise InvalidArgumentError(
            f"Arrays must have the same length, got {a.size} and {b.size}"
        )
    return (a + b) / 2


def sum_one_array(values: Sequence[Any]) -> float:
    """Sum numbers or numeric strings.

    Raises
    ------
    ParseFailureError
        On the first element that does not parse as a number.
    """
    total = 0.0
    for value in values:
        number = parse_float(value)
        if np.isnan(number):
            raise ParseFailureError(
                f"Invalid input {value!r}. Please provide an array of valid numbers."
            )
        total += number
    return total


def standard_deviation(values: Sequence[float]) -> DeviationResult:
    """Population standard deviation (divide by N) and mean.

    Parameters
    ----------
    values : Sequence[float]
        Input numbers.

    Returns
    -------
    DeviationResult
        ``sd`` rounded to 6 significant digits, ``mean`` unrounded.
        Both NaN for empty input.

    Examples
    --------
    >>> standard_deviation([2, 4, 4, 4, 5, 5, 7, 9])
    DeviationResult(sd=2.0, mean=5.0)
    """
    arr = np.asarray(values, dtype=float)
    # Non-finite input propagates as NaN
    with np.errstate(invalid="ignore", over="ignore"):
        avg = mean(arr)
        if arr.size == 0:
            return DeviationResult(sd=np.nan, mean=avg)
        variance = mean((arr - avg) ** 2)
    return DeviationResult(sd=to_precision(np.sqrt(variance), 6), mean=avg)


def standard_deviation_of_two_numbers(first: Any, second: Any) -> float:
    """Population standard deviation of two numbers or numeric strings.

    Raises
    ------
    ParseFailureError
        If either operand does not parse.
    """
    a, b = parse_float(first), parse_float(second)
    if np.isnan(a) or np.isnan(b):
        raise ParseFailureError(
            f"Invalid input ({first!r}, {second!r}). Please provide valid numbers."
        )
    avg = (a + b) / 2
    return float(np.sqrt(((a - avg) ** 2 + (b - avg) ** 2) / 2))


def longest_run(flags: Sequence[bool]) -> int:
    """Length of the longest run of consecutive true flags.

    Examples
    --------
    >>> longest_run([True, True, False, True])
    2
    """
    mask = pd.Series(flags, dtype=bool)
    if mask.empty:
        return 0

    # A new group starts at every flag change; count within true groups
    groups = mask.astype(int).diff().ne(0).cumsum()
    runs = mask.groupby(groups).cumcount() + 1
    return int(runs[mask].max()) if mask.any() else 0
