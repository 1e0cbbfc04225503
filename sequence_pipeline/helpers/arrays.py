"""
Array operations that never modify their input. Instead of changing a list in place, each operation returns new tuples.
"""

__all__ = ["push", "pop", "shift", "unshift", "index_of", "includes"]

import collections.abc
from typing import Any, Iterable, Tuple, TypeVar

from sequence_pipeline.errors import InvalidInputError

_T = TypeVar("_T")


def _as_tuple(sequence: Iterable[_T]) -> Tuple[_T, ...]:
    if isinstance(sequence, (str, bytes)) or not isinstance(sequence, collections.abc.Iterable):
        raise InvalidInputError(f"Expected a sequence, but got {type(sequence).__name__} {sequence!r}")
    return tuple(sequence)


def push(sequence: Iterable[_T], *items: _T) -> Tuple[_T, ...]:
    return _as_tuple(sequence) + items


def pop(sequence: Iterable[_T]) -> Tuple[Tuple[_T, ...], _T]:
    """
    Remove the last element.

    :returns: The remaining elements and the removed element.
    """
    elements = _as_tuple(sequence)
    if len(elements) == 0:
        raise InvalidInputError("Cannot pop from an empty sequence")
    return elements[:-1], elements[-1]


def shift(sequence: Iterable[_T]) -> Tuple[_T, Tuple[_T, ...]]:
    """
    Remove the first element.

    :returns: The removed element and the remaining elements.
    """
    elements = _as_tuple(sequence)
    if len(elements) == 0:
        raise InvalidInputError("Cannot shift from an empty sequence")
    return elements[0], elements[1:]


def unshift(sequence: Iterable[_T], *items: _T) -> Tuple[_T, ...]:
    return items + _as_tuple(sequence)


def index_of(sequence: Iterable[Any], item: Any) -> int:
    for index, element in enumerate(_as_tuple(sequence)):
        if element == item:
            return index
    return -1


def includes(sequence: Iterable[Any], item: Any) -> bool:
    return index_of(sequence, item) != -1
