"""Tests for keyed-record aggregations."""

import numpy as np
import pandas as pd
import pytest

from src.transforms.records import (
    calculate_average_by_key,
    consecutive_of_occurrence_by_key,
    count_value_by_key,
    sum_by_key,
)
from src.types import InvalidArgumentError, ParseFailureError


class TestCalculateAverageByKey:
    """Tests for calculate_average_by_key function."""

    def test_numeric_strings(self) -> None:
        """Test numeric strings are parsed before averaging."""
        data = [{"value": "1"}, {"value": "2"}, {"value": "3"}]
        assert calculate_average_by_key(data, "value") == 2

    def test_six_digit_tie_rounds_up(self) -> None:
        assert calculate_average_by_key([{"v": 2.015625}], "v") == 2.01563

    def test_empty_returns_zero(self) -> None:
        assert calculate_average_by_key([], "value") == 0

    def test_skips_unparseable_and_missing(self) -> None:
        data = [{"value": 4}, {"value": "n/a"}, {}, {"value": None}, {"value": 8}]
        assert calculate_average_by_key(data, "value") == 6

    def test_all_invalid_returns_zero(self) -> None:
        data = [{"value": "x"}, {"other": 1}]
        assert calculate_average_by_key(data, "value") == 0

    def test_six_significant_digits(self) -> None:
        data = [{"value": 1}, {"value": 1}, {"value": 2}]
        # 4/3 = 1.3333333...
        assert calculate_average_by_key(data, "value") == 1.33333

    def test_dataframe_input(self) -> None:
        frame = pd.DataFrame({"pnl": [10.0, np.nan, 30.0]})
        assert calculate_average_by_key(frame, "pnl") == 20


class TestSumByKey:
    """Tests for sum_by_key function."""

    def test_basic(self) -> None:
        data = [{"amount": 10}, {"amount": 20}, {"amount": 30}]
        assert sum_by_key(data, "amount") == 60

    def test_missing_counts_as_zero(self) -> None:
        data = [{"amount": 10}, {}, {"amount": None}, {"amount": 5}]
        assert sum_by_key(data, "amount") == 15

    def test_empty(self) -> None:
        assert sum_by_key([], "amount") == 0

    def test_non_numeric_raises(self) -> None:
        with pytest.raises(ParseFailureError):
            sum_by_key([{"amount": "lots"}], "amount")

    def test_non_mapping_records_raise(self) -> None:
        with pytest.raises(InvalidArgumentError):
            sum_by_key([1, 2, 3], "amount")


class TestCountValueByKey:
    """Tests for count_value_by_key function."""

    def test_basic(self) -> None:
        data = [{"status": "active"}, {"status": "inactive"}, {"status": "active"}]
        assert count_value_by_key(data, "status", "active") == 2

    def test_exact_match_only(self) -> None:
        """Test text never matches a number and booleans never match 1."""
        data = [{"flag": 1}, {"flag": "1"}, {"flag": True}, {"flag": 1.0}]
        assert count_value_by_key(data, "flag", 1) == 2

    def test_missing_key(self) -> None:
        assert count_value_by_key([{"a": 1}], "b", 1) == 0


class TestConsecutiveOfOccurrenceByKey:
    """Tests for consecutive_of_occurrence_by_key function."""

    def test_basic(self) -> None:
        data = [{"status": 1}, {"status": 1}, {"status": 0}, {"status": 1}]
        assert consecutive_of_occurrence_by_key(data, "status", 1) == 2

    def test_reset_on_mismatch(self) -> None:
        data = [{"s": 1}, {"s": 0}, {"s": 1}, {"s": 1}, {"s": 1}, {"s": 2}]
        assert consecutive_of_occurrence_by_key(data, "s", 1) == 3

    def test_integer_parsing(self) -> None:
        """Test strings and floats are read through their integer part."""
        data = [{"s": "1"}, {"s": 1.7}, {"s": "1 win"}, {"s": "x"}]
        assert consecutive_of_occurrence_by_key(data, "s", 1) == 3

    def test_no_matches(self) -> None:
        data = [{"s": 0}, {"s": 0}]
        assert consecutive_of_occurrence_by_key(data, "s", 1) == 0

    def test_empty(self) -> None:
        assert consecutive_of_occurrence_by_key([], "s", 1) == 0

    def test_dataframe_input(self) -> None:
        trades = pd.DataFrame({"result": [0, 0, 0, 1, 0, 0]})
        assert consecutive_of_occurrence_by_key(trades, "result", 0) == 3
