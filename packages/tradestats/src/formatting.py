"""Formatting of numeric results into their reported string form.

Decimal places and the ``%`` / ``1:`` affixes are part of the output
contract, so every formatted field goes through these helpers after the
arithmetic is done.
"""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

# Wide enough for any finite double plus its decimals
_CONTEXT = Context(prec=400)


def to_fixed(value: float, digits: int) -> str:
    """Format with exactly ``digits`` decimals, rounding half away from zero.

    Rounding is applied to the exact binary value of the float, so
    ``to_fixed(1.005, 2)`` is ``"1.00"`` (1.005 is stored slightly below).
    Non-finite values are rendered as ``"nan"``, ``"inf"`` or ``"-inf"``.

    Examples
    --------
    >>> to_fixed(0.125, 2)
    '0.13'
    >>> to_fixed(-100, 2)
    '-100.00'
    """
    value = float(value)
    if not math.isfinite(value):
        return str(value)
    if value == 0:
        value = 0.0  # drop the sign of -0.0
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_CONTEXT)
    return str(rounded)


def to_precision(value: float, significant: int = 6) -> float:
    """Round to ``significant`` significant digits, ties away from zero.

    Examples
    --------
    >>> to_precision(2.015625, 6)
    2.01563
    """
    value = float(value)
    if not math.isfinite(value) or value == 0:
        return value
    exact = Decimal(value)
    quantum = Decimal(1).scaleb(exact.adjusted() - significant + 1)
    return float(exact.quantize(quantum, rounding=ROUND_HALF_UP, context=_CONTEXT))


def percent(value: float, digits: int = 2) -> str:
    """Format a fraction as a percentage string, ``0.2435`` -> ``"24.35%"``."""
    return f"{to_fixed(value * 100, digits)}%"


def ratio_label(reward: float, digits: int = 2) -> str:
    """Format a reward multiple as a risk/reward string, ``1.5`` -> ``"1:1.50"``."""
    return f"1:{to_fixed(reward, digits)}"
