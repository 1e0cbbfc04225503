__all__ = ["ceil", "floor", "round_half_up", "maximum", "minimum", "max_of", "min_of", "random_unit"]

import functools
import math
from typing import Callable, Optional

import numpy as np

from sequence_pipeline.errors import InvalidInputError
from sequence_pipeline.sequence import Number, validate_number


def _to_int(rounding: Callable[[Number], int], value: Number) -> int:
    validate_number(value)
    # Integers are returned exactly, without a conversion to float
    if isinstance(value, (int, np.integer)):
        return int(value)
    try:
        return rounding(value)
    except (ValueError, OverflowError) as e:
        raise InvalidInputError(f"Cannot round {value!r} to an integer") from e


def _floor_half_up(value: Number) -> int:
    lower = math.floor(value)
    return lower + 1 if value - lower >= 0.5 else lower


def _is_nan(value: Number) -> bool:
    return isinstance(value, (float, np.floating)) and math.isnan(value)


def ceil(value: Number) -> int:
    return _to_int(math.ceil, value)


def floor(value: Number) -> int:
    return _to_int(math.floor, value)


def round_half_up(value: Number) -> int:
    """
    Round to the nearest integer. Halves are rounded towards positive infinity, so 4.5 becomes 5 and -4.5 becomes -4.

    This differs from python's `round`, which rounds halves to the nearest even integer.
    """
    return _to_int(_floor_half_up, value)


def maximum(first: Number, second: Number) -> Number:
    """
    The larger of two numbers. NaN wins over every other number, independent of the argument order.
    """
    if _is_nan(first):
        return first
    if _is_nan(second):
        return second
    return max(first, second)


def minimum(first: Number, second: Number) -> Number:
    """
    The smaller of two numbers. NaN wins over every other number, independent of the argument order.
    """
    if _is_nan(first):
        return first
    if _is_nan(second):
        return second
    return min(first, second)


def max_of(*values: Number) -> Number:
    """
    Largest of :param:`values`, NaN if any value is NaN, or negative infinity if no values are given.
    """
    for value in values:
        validate_number(value)
    return functools.reduce(maximum, values, -math.inf)


def min_of(*values: Number) -> Number:
    """
    Smallest of :param:`values`, NaN if any value is NaN, or positive infinity if no values are given.
    """
    for value in values:
        validate_number(value)
    return functools.reduce(minimum, values, math.inf)


def random_unit(rng: Optional[np.random.Generator] = None) -> float:
    """
    Draw a random float from the half open interval [0, 1).

    :param rng: The generator to draw from. If omitted, a new unseeded generator is used.
    """
    if rng is None:
        rng = np.random.default_rng()
    return float(rng.random())
