"""
Turn whatever the caller handed us into something the overlay and the
comparisons can walk: a Mapping, or a Sequence keyed by position.
Text and binary buffers are Sequences too, but are never containers here.
"""
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Dict, Union

from typing_extensions import Protocol, runtime_checkable

Canonical = Union[Mapping, Sequence]

_TEXT_TYPES = (str, bytes, bytearray, memoryview)


class UnsupportedInputError(TypeError):
    pass


@runtime_checkable
class SupportsArrayCopy(Protocol):
    """
    Array-like wrappers expose their contents through get_array_copy()
    instead of being iterated.
    """

    def get_array_copy(self) -> Any:
        ...


def is_container(value: object) -> bool:
    if isinstance(value, _TEXT_TYPES):
        return False
    return isinstance(value, (Mapping, Sequence))


def is_supported(value: object) -> bool:
    """Would to_canonical() accept this value? Never consumes iterators."""
    if is_container(value) or isinstance(value, SupportsArrayCopy):
        return True
    return isinstance(value, Iterable) and not isinstance(value, _TEXT_TYPES)


def _materialize_pairs(value: Iterable) -> Dict[Any, Any]:
    # Terminal: an infinite iterator never returns from here.
    materialized: Dict[Any, Any] = {}
    for idx, item in enumerate(value):
        if not isinstance(item, tuple) or len(item) != 2:
            raise UnsupportedInputError(
                f"Element {idx} of {type(value).__name__} is not a (key, value) pair: {item!r}"
            )
        key, val = item
        materialized[key] = val
    return materialized


def to_canonical(value: object) -> Canonical:
    if is_container(value):
        return value  # type: ignore[return-value]
    if isinstance(value, SupportsArrayCopy):
        copied = value.get_array_copy()
        if isinstance(copied, SupportsArrayCopy) and not is_container(copied):
            raise UnsupportedInputError(
                f"{type(value).__name__}.get_array_copy() returned another array-like object"
            )
        return to_canonical(copied)
    if isinstance(value, Iterable) and not isinstance(value, _TEXT_TYPES):
        return _materialize_pairs(value)
    raise UnsupportedInputError(
        f"Cannot use a {type(value).__name__} as a mapping or sequence: {value!r}"
    )
