"""Aggregations over keyed record collections.

Records are a sequence of mappings (e.g. a trade log as a list of dicts)
or a DataFrame. Each function pulls one field out as a Series and
reduces it.
"""
from __future__ import annotations

from typing import Any, Mapping, Sequence

import numpy as np
import pandas as pd

from ..formatting import to_precision
from ..parsing import parse_float, parse_int
from ..types import InvalidArgumentError, ParseFailureError
from .arrays import longest_run

Records = Sequence[Mapping[str, Any]] | pd.DataFrame


def _field(records: Records, key: str) -> pd.Series:
    """Values at ``key`` in record order, None where the field is absent."""
    if isinstance(records, pd.DataFrame):
        if key not in records.columns:
            return pd.Series([None] * len(records), dtype=object)
        return records[key].astype(object).reset_index(drop=True)
    try:
        values = [record.get(key) for record in records]
    except AttributeError as exc:
        raise InvalidArgumentError("records must be a sequence of mappings") from exc
    return pd.Series(values, dtype=object)


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and np.isnan(value))


def calculate_average_by_key(records: Records, key: str) -> float:
    """
    Average the numeric values stored at ``key``.

    Values that do not parse as numbers are skipped.

    Parameters
    ----------
    records : Sequence[Mapping] | pd.DataFrame
        Input records.
    key : str
        Field to average.

    Returns
    -------
    float
        Mean rounded to 6 significant digits. 0 when nothing parses.

    Examples
    --------
    >>> calculate_average_by_key([{"value": "1"}, {"value": "2"}, {"value": "3"}], "value")
    2.0
    """
    numbers = _field(records, key).map(parse_float).astype(float).dropna()
    if numbers.empty:
        return 0
    return to_precision(numbers.sum() / len(numbers), 6)


def sum_by_key(records: Records, key: str) -> float:
    """
    Sum the numeric values stored at ``key``, missing fields counting as 0.

    Raises
    ------
    ParseFailureError
        If a present value is not numeric.
    """
    total = 0
    for value in _field(records, key):
        if _is_missing(value):
            continue
        number = parse_float(value)
        if np.isnan(number):
            raise ParseFailureError(f"Non-numeric value {value!r} at key {key!r}")
        total += number
    return total


def _strict_equal(item: Any, value: Any) -> bool:
    # Text never matches a number and booleans never match 0/1
    if isinstance(item, str) != isinstance(value, str):
        return False
    if isinstance(item, (bool, np.bool_)) != isinstance(value, (bool, np.bool_)):
        return False
    return bool(item == value)


def count_value_by_key(records: Records, key: str, value: Any) -> int:
    """Count records whose field at ``key`` equals ``value`` exactly."""
    return sum(1 for item in _field(records, key) if _strict_equal(item, value))


def consecutive_of_occurrence_by_key(
    records: Records,
    key: str,
    target: int,
) -> int:
    """
    Longest run of consecutive records whose field equals ``target``.

    The field is read through integer parsing, so ``"1"`` and ``1.0``
    both match a target of 1. Any non-matching record resets the run.

    Parameters
    ----------
    records : Sequence[Mapping] | pd.DataFrame
        Ordered records, e.g. a trade log.
    key : str
        Field to test.
    target : int
        Value that extends the run.

    Returns
    -------
    int
        Maximum run length. 0 when nothing matches.

    Examples
    --------
    >>> data = [{"status": 1}, {"status": 1}, {"status": 0}, {"status": 1}]
    >>> consecutive_of_occurrence_by_key(data, "status", 1)
    2
    """
    matches = _field(records, key).map(parse_int) == target
    return longest_run(matches.tolist())
