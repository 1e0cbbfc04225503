__all__ = ["length", "to_upper", "to_lower", "contains", "index_of", "slice_text", "replace_first"]

from typing import Any, Optional

from sequence_pipeline.errors import InvalidInputError


def _validate_text(value: Any, what: str = "text") -> str:
    if not isinstance(value, str):
        raise InvalidInputError(f"Expected {what} to be a string, but got {type(value).__name__} {value!r}")
    return value


def length(text: str) -> int:
    return len(_validate_text(text))


def to_upper(text: str) -> str:
    return _validate_text(text).upper()


def to_lower(text: str) -> str:
    return _validate_text(text).lower()


def contains(text: str, search: str) -> bool:
    return _validate_text(search, "search") in _validate_text(text)


def index_of(text: str, search: str) -> int:
    """
    Index of the first occurrence of :param:`search` in :param:`text`, or -1 if it does not occur.
    """
    return _validate_text(text).find(_validate_text(search, "search"))


def slice_text(text: str, start: int, end: Optional[int] = None) -> str:
    """
    Extract the part of :param:`text` from :param:`start` up to, but not including, :param:`end`. Negative indices count from the end of the text.
    """
    return _validate_text(text)[start:end]


def replace_first(text: str, search: str, replacement: str) -> str:
    """
    Replace only the first occurrence of :param:`search`.
    """
    return _validate_text(text).replace(
        _validate_text(search, "search"), _validate_text(replacement, "replacement"), 1
    )
