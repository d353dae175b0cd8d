import unittest
from collections import UserList, deque
from typing import Any, Dict

import pytest

from array_subset.coercion import (
    SupportsArrayCopy,
    UnsupportedInputError,
    is_container,
    is_supported,
    to_canonical,
)


class ArrayObject:
    def __init__(self, storage: Dict[Any, Any]) -> None:
        self._storage = storage

    def get_array_copy(self) -> Dict[Any, Any]:
        return dict(self._storage)


class TestToCanonical(unittest.TestCase):
    def test_native_containers_are_used_as_is(self) -> None:
        mapping = {"a": 1}
        sequence = [1, 2]
        pair = (1, 2)
        assert to_canonical(mapping) is mapping
        assert to_canonical(sequence) is sequence
        assert to_canonical(pair) is pair

    def test_array_copy_capability(self) -> None:
        wrapped = ArrayObject({"a": 1})
        assert isinstance(wrapped, SupportsArrayCopy)
        assert to_canonical(wrapped) == {"a": 1}

    def test_iterable_of_pairs_is_materialized(self) -> None:
        assert to_canonical(iter([("a", 1), ("b", 2)])) == {"a": 1, "b": 2}
        assert to_canonical({"x": 1}.items()) == {"x": 1}
        assert to_canonical(zip("ab", [1, 2])) == {"a": 1, "b": 2}
        assert to_canonical(iter([])) == {}

    def test_iterable_of_non_pairs_is_rejected(self) -> None:
        with pytest.raises(UnsupportedInputError) as excinfo:
            to_canonical(iter([1, 2]))
        assert "Element 0" in str(excinfo.value)

    def test_scalars_are_rejected(self) -> None:
        for value in (5, 1.5, None, True, "abc", b"abc", object()):
            with pytest.raises(UnsupportedInputError):
                to_canonical(value)

    def test_unsupported_input_is_a_type_error(self) -> None:
        with pytest.raises(TypeError):
            to_canonical(42)


class TestIsSupported(unittest.TestCase):
    def test_accepted(self) -> None:
        for value in ({}, [], (), ArrayObject({}), iter([]), {"a": 1}.items()):
            assert is_supported(value), value

    def test_rejected(self) -> None:
        for value in (5, None, "abc", b"abc", bytearray(b"x"), object()):
            assert not is_supported(value), value

    def test_does_not_consume_iterators(self) -> None:
        pairs = iter([("a", 1)])
        assert is_supported(pairs)
        assert to_canonical(pairs) == {"a": 1}


class TestSequences(unittest.TestCase):
    def test_any_sequence_is_used_as_is(self) -> None:
        for value in (UserList([1, 2]), deque([("a", 1)]), range(3)):
            assert to_canonical(value) is value
            assert is_supported(value)

    def test_text_and_buffers_are_not_sequences_here(self) -> None:
        for value in ("ab", b"ab", bytearray(b"ab"), memoryview(b"ab")):
            assert not is_container(value)
            with pytest.raises(UnsupportedInputError):
                to_canonical(value)
