import re
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Tuple, Union

from array_subset.coercion import is_container

Number = Union[int, float]

_NUMERIC_STRING = re.compile(
    r"\s*[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?\s*\Z"
)
_INTEGER_KEY = re.compile(r"(0|-?[1-9][0-9]*)\Z")


def _items(container: Any) -> List[Tuple[Any, Any]]:
    if isinstance(container, Mapping):
        return list(container.items())
    return list(enumerate(container))


def _same_scalar(left: Any, right: Any) -> bool:
    return type(left) is type(right) and left == right


def is_identical(left: Any, right: Any) -> bool:
    """
    Strict comparison: same items in the same order, with keys and leaves
    of the same type. A list and a mapping keyed 0..n-1 holding the same
    items are identical.
    """
    if is_container(left) and is_container(right):
        left_items = _items(left)
        right_items = _items(right)
        if len(left_items) != len(right_items):
            return False
        return all(
            _same_scalar(left_key, right_key) and is_identical(left_value, right_value)
            for (left_key, left_value), (right_key, right_value) in zip(
                left_items, right_items
            )
        )
    if is_container(left) or is_container(right):
        return False
    return _same_scalar(left, right)


def _as_number(value: Any) -> Optional[Number]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str) and _NUMERIC_STRING.match(value):
        stripped = value.strip()
        try:
            return int(stripped)
        except ValueError:
            return float(stripped)
    return None


def _normalize_key(key: Any) -> Any:
    if isinstance(key, bool):
        return int(key)
    if isinstance(key, str) and _INTEGER_KEY.match(key):
        return int(key)
    return key


def _normalized(container: Any) -> Optional[Dict[Any, Any]]:
    """None if two keys collapse onto one, e.g. "1" and 1."""
    items = _items(container)
    normalized = {_normalize_key(key): value for key, value in items}
    if len(normalized) != len(items):
        return None
    return normalized


def _is_empty(value: Any) -> bool:
    if is_container(value):
        return len(value) == 0
    if isinstance(value, str):
        return value == ""
    number = _as_number(value)
    return number is not None and number == 0


def loose_equals(left: Any, right: Any) -> bool:
    """
    Type-juggling comparison; key order does not matter.

    Example: {"a": "1", "b": 2}, {"b": 2.0, "a": 1} => True
    """
    if is_container(left) and is_container(right):
        left_map = _normalized(left)
        right_map = _normalized(right)
        if left_map is None or right_map is None:
            # colliding keys are matched exactly on both sides
            left_map = dict(_items(left))
            right_map = dict(_items(right))
        if left_map.keys() != right_map.keys():
            return False
        return all(
            loose_equals(value, right_map[key]) for key, value in left_map.items()
        )

    if isinstance(left, bool) or isinstance(right, bool):
        return bool(left) == bool(right)

    if left is None or right is None:
        if left is None and right is None:
            return True
        return _is_empty(right if left is None else left)

    if is_container(left) or is_container(right):
        return False

    left_number = _as_number(left)
    right_number = _as_number(right)
    if left_number is not None and right_number is not None:
        return left_number == right_number

    return bool(left == right)
