"""
Entry points for test code.

    from array_subset import assert_array_subset

    def test_payload() -> None:
        assert_array_subset({"status": "ok"}, response.json())

unittest users can mix ArraySubsetAsserts into their TestCase instead.
"""
from typing import Any, Optional

from typing_extensions import Protocol

from array_subset.coercion import UnsupportedInputError, is_supported
from array_subset.constraint import ArraySubset
from array_subset.failure import MatchFailure

_ACCEPTED = "a mapping, sequence or iterable of pairs"


class InvalidArgumentError(UnsupportedInputError):
    def __init__(self, position: int, function_name: str, value: Any) -> None:
        super(InvalidArgumentError, self).__init__(
            f"Argument #{position} of {function_name}() must be {_ACCEPTED}, "
            f"got {type(value).__name__}"
        )
        self.position = position


class Constraint(Protocol):
    def evaluate(
        self, other: Any, description: str = "", return_result: bool = False
    ) -> Optional[bool]:
        pass


def _check_arguments(function_name: str, subset: Any, array: Any) -> None:
    if not is_supported(subset):
        raise InvalidArgumentError(1, function_name, subset)
    if not is_supported(array):
        raise InvalidArgumentError(2, function_name, array)


def assert_that(value: Any, constraint: Constraint, message: str = "") -> None:
    constraint.evaluate(value, message)


def assert_array_subset(
    subset: Any, array: Any, strict: bool = False, message: str = ""
) -> None:
    """
    Asserts that `array` contains `subset`.
    With strict=True leaf values must also have the same type.
    Raises MatchFailureError (an AssertionError) on a mismatch.
    """
    _check_arguments("assert_array_subset", subset, array)
    assert_that(array, ArraySubset(subset, strict), message)


class ArraySubsetAsserts:
    """
    Mix into a unittest.TestCase:

        class TestPayload(ArraySubsetAsserts, unittest.TestCase):
            ...
    """

    def _report_failure(self, failure: MatchFailure) -> None:
        failure_exception = getattr(self, "failureException", AssertionError)
        raise failure_exception(failure.render())

    def assertArraySubset(
        self, subset: Any, array: Any, strict: bool = False, msg: Optional[str] = None
    ) -> None:
        _check_arguments("assertArraySubset", subset, array)
        constraint = ArraySubset(subset, strict, reporter=self._report_failure)
        constraint.evaluate(array, msg or "")
