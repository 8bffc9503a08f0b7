"""
Validation utilities public API.

Re-exports:
    - Oracle:
        ORACLE_NAME
        oracle_sort
        equals_oracle

    - Property checks:
        is_nondecreasing
        first_order_violation_index
        is_permutation
        permutation_counter_diff
        assert_unchanged

    - Zero-one principle:
        binary_inputs
        sorts_all_binary
        first_unsorted_binary
"""

from .oracle import ORACLE_NAME, equals_oracle, oracle_sort
from .properties import (
    assert_unchanged,
    first_order_violation_index,
    is_nondecreasing,
    is_permutation,
    permutation_counter_diff,
)
from .zero_one import binary_inputs, first_unsorted_binary, sorts_all_binary

__all__ = [
    "ORACLE_NAME",
    "oracle_sort",
    "equals_oracle",
    "is_nondecreasing",
    "first_order_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_unchanged",
    "binary_inputs",
    "sorts_all_binary",
    "first_unsorted_binary",
]
