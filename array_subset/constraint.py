"""
Constraint that asserts that the structure it is evaluated for has a
specified subset.

The subset is laid over the subject with deep_overlay(); if that changes
nothing, the subject already contained the subset.
"""
from typing import Any, Optional

from array_subset.coercion import Canonical, to_canonical
from array_subset.comparison import is_identical, loose_equals
from array_subset.exporter import export
from array_subset.failure import FailureReporter, MatchFailure, raise_match_failure
from array_subset.logger import get_module_logger
from array_subset.overlay import deep_overlay

LOGGER = get_module_logger(__name__)


class ArraySubset:
    def __init__(
        self,
        subset: Any,
        strict: bool = False,
        reporter: Optional[FailureReporter] = None,
    ) -> None:
        self.strict = strict
        self._subset = subset
        self._reporter: FailureReporter = reporter or raise_match_failure

    def _canonical_subset(self) -> Canonical:
        # Replace our own reference so a one-shot iterator is consumed once.
        self._subset = to_canonical(self._subset)
        return self._subset

    def evaluate(
        self, other: Any, description: str = "", return_result: bool = False
    ) -> Optional[bool]:
        """
        Evaluates the constraint for `other`.

        With return_result=False (the default) a mismatch goes to the
        reporter, which raises MatchFailureError unless another reporter was
        given, and None is returned. With return_result=True the verdict is
        returned as a bool instead and nothing is reported.

        Raises UnsupportedInputError in both modes if `other` or the subset
        cannot be read as a mapping or sequence.
        """
        subject = to_canonical(other)
        subset = self._canonical_subset()
        patched = deep_overlay(subject, subset)

        if self.strict:
            result = is_identical(subject, patched)
        else:
            result = loose_equals(subject, patched)
        LOGGER.debug("evaluated array subset", strict=self.strict, result=result)

        if return_result:
            return result
        if result:
            return None

        self.fail(patched, subject, description)
        return None

    def fail(self, patched: Any, subject: Any, description: str = "") -> None:
        message = f"Failed asserting that {self.failure_description(subject)}."
        if description:
            message = f"{description}\n{message}"

        failure = MatchFailure(
            expected=patched,
            actual=subject,
            expected_as_string=export(patched),
            actual_as_string=export(subject),
            description=message,
        )
        LOGGER.debug("array subset mismatch", strict=self.strict, diff=failure.diff())
        self._reporter(failure)

    def to_string(self) -> str:
        return "has the subset " + export(self._canonical_subset())

    def failure_description(self, other: Any) -> str:
        """
        The second half of "Failed asserting that ...".
        `other` is accepted for symmetry with other constraints.
        """
        return "an array " + self.to_string()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"ArraySubset({self._subset!r}, strict={self.strict!r})"
