from __future__ import annotations

"""Descriptive statistics primitives.

Leaf-level functions with no dependencies on the rest of the package:
mean, median, mode, range, greatest common divisor and extrema.
"""

from typing import Any, Sequence

import numpy as np

from .types import InvalidArgumentError


def mean(values: Sequence[float]) -> float:
    """
    Compute the arithmetic mean.

    Parameters
    ----------
    values : Sequence[float]
        Input numbers.

    Returns
    -------
    float
        Mean of the values. NaN if empty.

    Examples
    --------
    >>> mean([1, 2, 3, 4, 5])
    3.0
    """
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        return np.nan
    return float(arr.mean())


def median(values: Sequence[float]) -> float:
    """
    Compute the median.

    Middle element of the sorted values, or the average of the two
    middle elements for an even count.

    Parameters
    ----------
    values : Sequence[float]
        Input numbers.

    Returns
    -------
    float
        Median. NaN if empty.
    """
    arr = np.sort(np.asarray(values, dtype=float))
    n = arr.size
    if n == 0:
        return np.nan
    mid = n // 2
    if n % 2 == 0:
        return float((arr[mid - 1] + arr[mid]) / 2)
    return float(arr[mid])


def mode(values: Sequence[Any]) -> Any:
    """
    Find the most frequent value.

    Parameters
    ----------
    values : Sequence
        Input values.

    Returns
    -------
    Any
        Most frequent value, None if empty.

    Notes
    -----
    On ties the winner is the first value to reach the running maximum
    count while scanning left to right, so ``mode([1, 1, 2, 2, 3])`` is 1
    and ``mode([2, 1, 1, 2])`` is 1.
    """
    counts: dict[Any, int] = {}
    best = None
    best_count = 0
    for value in values:
        counts[value] = counts.get(value, 0) + 1
        if counts[value] > best_count:
            best_count = counts[value]
            best = value
    return best


def value_range(values: Sequence[float]) -> tuple[float, float]:
    """
    Return the ``(min, max)`` pair.

    Raises
    ------
    InvalidArgumentError
        If ``values`` is empty.
    """
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        raise InvalidArgumentError("Cannot take the range of an empty sequence")
    return float(arr.min()), float(arr.max())


def gcd(a: float, b: float) -> float:
    """
    Greatest common divisor by the Euclidean algorithm.

    Parameters
    ----------
    a, b : float
        Operands. Zero and negative values are allowed.

    Returns
    -------
    float
        Non-negative divisor; ``gcd(a, 0) == abs(a)``.

    Examples
    --------
    >>> gcd(48, 18)
    6
    >>> gcd(0, 5)
    5
    """
    while b != 0:
        a, b = b, a % b
    return abs(a)


def max_or_min(values: Sequence[float], choice: str) -> float:
    """
    Return the maximum or the minimum of the values.

    Parameters
    ----------
    values : Sequence[float]
        Input numbers.
    choice : str
        ``"max"`` or ``"min"``, case-insensitive.

    Returns
    -------
    float
        The selected extreme.

    Raises
    ------
    InvalidArgumentError
        If ``values`` is empty or ``choice`` is neither max nor min.
    """
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        raise InvalidArgumentError("The input array is empty")

    selected = choice.lower() if isinstance(choice, str) else None
    if selected == "max":
        return float(arr.max())
    if selected == "min":
        return float(arr.min())
    raise InvalidArgumentError(
        f"Invalid choice {choice!r}, specify either 'max' or 'min'"
    )
