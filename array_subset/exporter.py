from collections.abc import Mapping
from typing import Any, FrozenSet, List

from array_subset.coercion import is_container

INDENT = "    "


def _export(value: Any, depth: int, seen: FrozenSet[int]) -> str:
    if isinstance(value, Mapping):
        if id(value) in seen:
            return "{...}"
        if not value:
            return "{}"
        inner = INDENT * (depth + 1)
        seen = seen | {id(value)}
        lines = [
            f"{inner}{_export(key, depth + 1, seen)}: {_export(item, depth + 1, seen)},"
            for key, item in value.items()
        ]
        return "{\n" + "\n".join(lines) + "\n" + INDENT * depth + "}"

    if is_container(value):
        if isinstance(value, list):
            opening, closing = "[", "]"
        elif isinstance(value, tuple):
            opening, closing = "(", ")"
        else:
            opening, closing = f"{type(value).__name__}([", "])"
        if id(value) in seen:
            return f"{opening}...{closing}"
        if not value:
            return opening + closing
        inner = INDENT * (depth + 1)
        seen = seen | {id(value)}
        lines = [f"{inner}{_export(item, depth + 1, seen)}," for item in value]
        return opening + "\n" + "\n".join(lines) + "\n" + INDENT * depth + closing

    if isinstance(value, (set, frozenset)):
        # Iteration order of a set changes between runs; elements stay on
        # one line, sorted by their repr.
        elements: List[str] = sorted(repr(element) for element in value)
        body = "{" + ", ".join(elements) + "}" if elements else ""
        if isinstance(value, frozenset):
            return f"frozenset({body})"
        return body or "set()"

    return repr(value)


def export(value: Any) -> str:
    """
    Deterministic multi-line rendering used in failure messages.
    Mappings keep insertion order, sets are sorted, and every nesting
    level is indented four spaces so two exports diff line by line.
    """
    return _export(value, 0, frozenset())
