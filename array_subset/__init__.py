from array_subset.asserts import (
    ArraySubsetAsserts,
    InvalidArgumentError,
    assert_array_subset,
    assert_that,
)
from array_subset.coercion import SupportsArrayCopy, UnsupportedInputError
from array_subset.constraint import ArraySubset
from array_subset.failure import MatchFailure, MatchFailureError

__all__ = [
    "ArraySubset",
    "ArraySubsetAsserts",
    "InvalidArgumentError",
    "MatchFailure",
    "MatchFailureError",
    "SupportsArrayCopy",
    "UnsupportedInputError",
    "assert_array_subset",
    "assert_that",
]
