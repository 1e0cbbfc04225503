import collections.abc
from typing import Any

import numpy as np

from sequence_pipeline.sequence import is_number


def describe_kind(value: Any) -> str:
    """
    Name the kind of :param:`value`: one of null, boolean, number, string, function, array or object.
    """
    if value is None:
        return "null"
    if isinstance(value, (bool, np.bool_)):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if callable(value):
        return "function"
    if isinstance(value, collections.abc.Sequence):
        return "array"
    return "object"
