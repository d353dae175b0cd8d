import difflib
from dataclasses import dataclass
from typing import Any

from typing_extensions import Protocol


@dataclass(frozen=True)
class MatchFailure:
    """
    What a failed evaluation reports.
    `expected` is the subject with the subset laid over it,
    `actual` is the subject as given.
    """

    expected: Any
    actual: Any
    expected_as_string: str
    actual_as_string: str
    description: str

    def diff(self) -> str:
        lines = difflib.unified_diff(
            self.expected_as_string.splitlines(),
            self.actual_as_string.splitlines(),
            fromfile="Expected",
            tofile="Actual",
            lineterm="",
        )
        return "\n".join(lines)

    def render(self) -> str:
        diff = self.diff()
        if not diff:
            return self.description
        return f"{self.description}\n{diff}"


class MatchFailureError(AssertionError):
    def __init__(self, failure: MatchFailure) -> None:
        super(MatchFailureError, self).__init__(failure.render())
        self.failure = failure


class FailureReporter(Protocol):
    def __call__(self, failure: MatchFailure) -> None:
        pass


def raise_match_failure(failure: MatchFailure) -> None:
    raise MatchFailureError(failure)
