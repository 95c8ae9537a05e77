"""tradestats transforms — array, fraction and keyed-record computations."""

from .arrays import (
    longest_run,
    normalize_array,
    standard_deviation,
    standard_deviation_of_two_numbers,
    sum_arr,
    sum_one_array,
)
from .fractions import decimal_to_fraction, simplify_fractions
from .records import (
    calculate_average_by_key,
    consecutive_of_occurrence_by_key,
    count_value_by_key,
    sum_by_key,
)

__all__ = [
    "normalize_array",
    "sum_arr",
    "sum_one_array",
    "standard_deviation",
    "standard_deviation_of_two_numbers",
    "longest_run",
    "decimal_to_fraction",
    "simplify_fractions",
    "calculate_average_by_key",
    "sum_by_key",
    "count_value_by_key",
    "consecutive_of_occurrence_by_key",
]
