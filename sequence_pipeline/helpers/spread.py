__all__ = ["merge_sequences", "merge_mappings", "apply_spread"]

import collections.abc
from typing import Any, Callable, Dict, Iterable, Mapping, Tuple, TypeVar

from sequence_pipeline.errors import InvalidInputError

_T = TypeVar("_T")


def merge_sequences(*sequences: Iterable[_T]) -> Tuple[_T, ...]:
    """
    Concatenate all :param:`sequences` into a new tuple. None of the inputs is modified.
    """
    merged = []
    for sequence in sequences:
        if isinstance(sequence, (str, bytes)) or not isinstance(sequence, collections.abc.Iterable):
            raise InvalidInputError(f"Cannot spread {type(sequence).__name__} {sequence!r} into a sequence")
        merged.extend(sequence)
    return tuple(merged)


def merge_mappings(*mappings: Mapping[str, Any], **overrides: Any) -> Dict[str, Any]:
    """
    Create a new dict from :param:`mappings` and :param:`overrides`. Keys from later mappings replace earlier ones, and the overrides are applied last.
    """
    merged: Dict[str, Any] = {}
    for mapping in mappings:
        if not isinstance(mapping, collections.abc.Mapping):
            raise InvalidInputError(f"Cannot spread {type(mapping).__name__} {mapping!r} into a mapping")
        merged.update(mapping)
    merged.update(overrides)
    return merged


def apply_spread(func: Callable[..., _T], args: Iterable[Any]) -> _T:
    if not callable(func):
        raise InvalidInputError(f"Cannot apply arguments to {func!r}: it is not callable")
    return func(*args)
