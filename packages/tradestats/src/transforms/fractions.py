"""Fraction conversion and simplification."""
from __future__ import annotations

import math
from decimal import Decimal
from numbers import Real

import numpy as np

from ..descriptive import gcd
from ..types import FractionResult, InvalidArgumentError


def decimal_to_fraction(decimal: float) -> FractionResult:
    """Convert a terminating decimal to a reduced fraction.

    The denominator starts as 10 to the number of digits after the decimal
    point in the shortest representation of ``decimal``, then both parts are
    divided by their gcd.

    Parameters
    ----------
    decimal : float
        Finite number.

    Returns
    -------
    FractionResult
        Integers come back over 1, e.g. ``(3, 1, "3/1")``.

    Examples
    --------
    >>> decimal_to_fraction(0.5)
    FractionResult(numerator=1, denominator=2, display='1/2')
    >>> decimal_to_fraction(-1.25)
    FractionResult(numerator=-5, denominator=4, display='-5/4')
    """
    if isinstance(decimal, (bool, np.bool_)) or not isinstance(decimal, Real):
        raise InvalidArgumentError(f"Expected a number, got {decimal!r}")
    if not math.isfinite(decimal):
        raise InvalidArgumentError(f"Cannot convert {decimal!r} to a fraction")

    if float(decimal).is_integer():
        whole = int(decimal)
        return FractionResult(whole, 1, f"{whole}/1")

    exact = Decimal(repr(float(decimal)))
    places = -exact.as_tuple().exponent
    denominator = 10**places
    numerator = int(exact.scaleb(places))

    divisor = gcd(numerator, denominator)
    top, bottom = numerator // divisor, denominator // divisor
    return FractionResult(top, bottom, f"{top}/{bottom}")


def simplify_fractions(text: str) -> str:
    """Reduce a ``"numerator/denominator"`` string.

    Examples
    --------
    >>> simplify_fractions("4/6")
    '2/3'
    >>> simplify_fractions("4/4")
    '1'

    Raises
    ------
    InvalidArgumentError
        If the text is not two integers separated by ``/`` or is ``0/0``.
    """
    parts = text.split("/") if isinstance(text, str) else []
    if len(parts) != 2:
        raise InvalidArgumentError(f"Expected 'numerator/denominator', got {text!r}")
    try:
        numerator, denominator = (int(part) for part in parts)
    except ValueError as exc:
        raise InvalidArgumentError(f"Non-integer fraction {text!r}") from exc

    divisor = gcd(numerator, denominator)
    if divisor == 0:
        raise InvalidArgumentError("Cannot simplify 0/0")
    top, bottom = numerator // divisor, denominator // divisor
    return str(top) if bottom == 1 else f"{top}/{bottom}"
