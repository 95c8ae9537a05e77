"""Lenient numeric parsing.

Numeric strings are read by their leading numeric prefix: ``"12.5abc"``
parses as 12.5 while ``"abc"`` does not parse at all. Values that do not
parse come back as NaN (floats) or None (integers) so callers decide
whether that is an error.
"""
from __future__ import annotations

import math
import re
from numbers import Real
from typing import Any

import numpy as np

from .types import InvalidArgumentError, ParseFailureError

_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"[+-]?\d+")


def parse_float(value: Any) -> float:
    """Parse a number or numeric string, NaN when it does not parse.

    Examples
    --------
    >>> parse_float("3.5%")
    3.5
    >>> parse_float("n/a")
    nan
    """
    if isinstance(value, (bool, np.bool_)) or value is None:
        return np.nan
    if isinstance(value, (Real, np.number)):
        return float(value)
    match = _FLOAT_PREFIX.match(str(value).strip())
    if match is None:
        return np.nan
    return float(match.group(0))


def parse_int(value: Any) -> int | None:
    """Parse the integer part of a number or numeric string.

    Floats truncate toward zero; anything that does not parse gives None.
    """
    if isinstance(value, (bool, np.bool_)) or value is None:
        return None
    if isinstance(value, (Real, np.number)):
        number = float(value)
        if not math.isfinite(number):
            return None
        return int(number)
    match = _INT_PREFIX.match(str(value).strip())
    if match is None:
        return None
    return int(match.group(0))


def parse_risk_reward(ratio: str) -> float:
    """Extract X from a ``"1:X"`` risk/reward string.

    Raises
    ------
    InvalidArgumentError
        If ``ratio`` is not a string containing ``":"``.
    ParseFailureError
        If the reward part is not numeric.
    """
    if not isinstance(ratio, str) or ":" not in ratio:
        raise InvalidArgumentError(
            f"risk/reward ratio must look like '1:X', got {ratio!r}"
        )
    reward = parse_float(ratio.split(":")[1])
    if np.isnan(reward):
        raise ParseFailureError(f"Could not parse reward from ratio {ratio!r}")
    return reward
