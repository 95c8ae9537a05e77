"""Distribution shape — skewness and kurtosis.

Skewness uses the adjusted Fisher-Pearson form over the population
standard deviation reported by ``standard_deviation`` (6 significant
digits), so it agrees with the deviation figures shown next to it in
the market report.
"""
from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
from scipy import stats as scipy_stats

from ..descriptive import mean
from ..transforms.arrays import standard_deviation

logger = logging.getLogger(__name__)


def calculate_skewness(values: Sequence[float]) -> float:
    """Adjusted Fisher-Pearson skewness.

    skew = n / ((n-1)(n-2)) * sum(((x - mean) / sd) ** 3)

    Parameters
    ----------
    values : Sequence[float]
        Input numbers.

    Returns
    -------
    float
        Skewness. NaN if fewer than 3 values; 0.0 if all values are equal.
    """
    arr = np.asarray(values, dtype=float)
    n = arr.size
    if n < 3:
        logger.debug("calculate_skewness: %d values, need at least 3", n)
        return np.nan

    sd = standard_deviation(arr).sd
    if sd == 0:
        return 0.0

    with np.errstate(invalid="ignore", over="ignore"):
        cubed = ((arr - mean(arr)) / sd) ** 3
        return float(n / ((n - 1) * (n - 2)) * cubed.sum())


def calculate_kurtosis(values: Sequence[float]) -> float:
    """Excess kurtosis (Fisher definition, normal = 0).

    Parameters
    ----------
    values : Sequence[float]
        Input numbers.

    Returns
    -------
    float
        Biased sample excess kurtosis. NaN if fewer than 4 values or
        zero variance.
    """
    arr = np.asarray(values, dtype=float)
    with np.errstate(invalid="ignore", over="ignore"):
        if arr.size < 4 or np.ptp(arr) == 0:
            return np.nan
        return float(scipy_stats.kurtosis(arr, fisher=True, bias=True))
