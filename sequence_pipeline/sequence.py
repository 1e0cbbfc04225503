__all__ = ["Number", "NumericSequence", "is_number", "validate_sequence", "validate_number"]

import collections.abc
from typing import Any, Tuple, TypeAlias, Union

import numpy as np
from typing_extensions import TypeGuard

from sequence_pipeline.errors import InvalidInputError

Number: TypeAlias = Union[int, float, np.integer, np.floating]
NumericSequence: TypeAlias = Tuple[Number, ...]


def is_number(value: Any) -> TypeGuard[Number]:
    """
    Check whether :param:`value` is a number. Booleans are not considered numbers, although they are ints in python.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))


def validate_number(value: Any, what: str = "value") -> Number:
    if not is_number(value):
        raise InvalidInputError(f"Expected {what} to be a number, but got {type(value).__name__} {value!r}")
    return value


def validate_sequence(values: Any) -> NumericSequence:
    """
    Validate that :param:`values` is a finite ordered sequence of numbers and return it as an immutable tuple.

    :param values: A list, tuple, range, one dimensional numpy array or any other sized and ordered iterable.

    :returns: The elements of :param:`values` in their original order.
    :raises InvalidInputError: If :param:`values` is unordered, unsized, a string or contains non-numeric elements.
    """
    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise InvalidInputError(f"Expected a one dimensional array, but got an array with {values.ndim} dimensions")
        values = values.tolist()
    elif isinstance(values, (str, bytes, bytearray)):
        raise InvalidInputError(f"Expected a sequence of numbers, but got the text {values!r}")
    elif isinstance(values, (collections.abc.Mapping, collections.abc.Set)):
        raise InvalidInputError(f"Expected an ordered sequence of numbers, but got an unordered {type(values).__name__}")
    elif not isinstance(values, collections.abc.Iterable) or not isinstance(values, collections.abc.Sized):
        # Iterators and generators might be infinite, so they are not accepted
        raise InvalidInputError(f"Expected a finite sequence of numbers, but got {type(values).__name__}")

    sequence = tuple(values)
    for index, value in enumerate(sequence):
        if not is_number(value):
            raise InvalidInputError(
                f"Expected a sequence of numbers, but element {index} is {type(value).__name__} {value!r}"
            )
    return sequence
