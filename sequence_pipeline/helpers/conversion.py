"""
Explicit conversions between booleans, numbers and strings. Unlike implicit coercion, every conversion either returns a value of the requested type or raises a `ConversionError`.
"""

__all__ = ["to_boolean", "to_string", "to_number", "parse_int", "parse_float"]

import decimal
import math
import re
import string
from typing import Any, Optional

import numpy as np

from sequence_pipeline.errors import ConversionError, InvalidInputError
from sequence_pipeline.sequence import Number, is_number

_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER_PATTERN = re.compile(r"[+-]?\d+")
_PREFIXED_INTEGER_PATTERN = re.compile(r"0([xXoObB])([0-9a-fA-F]+)")
_INFINITY_PATTERN = re.compile(r"([+-]?)Infinity")
_PREFIX_BASES = {"x": 16, "o": 8, "b": 2}
_DIGITS = string.digits + string.ascii_lowercase


def to_boolean(value: Any) -> bool:
    """
    Only `None`, `False`, zero, NaN and the empty string are false. Every other value, including empty containers, is true.
    """
    if value is None:
        return False
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if is_number(value):
        return not (value == 0 or math.isnan(value))
    if isinstance(value, str):
        return len(value) > 0
    return True


def _number_to_string(value: Number) -> str:
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    # Shortest digits that round trip in the precision of the value, e.g. 0.1 instead of 0.10000000149011612 for float32
    shortest = str(value) if isinstance(value, np.floating) else repr(float(value))
    sign, digit_tuple, exponent = decimal.Decimal(shortest).normalize().as_tuple()
    digits = "".join(str(digit) for digit in digit_tuple)
    # Position of the decimal point relative to the start of the digits
    point = len(digits) + exponent
    if len(digits) <= point <= 21:
        text = digits + "0" * (point - len(digits))
    elif 0 < point <= 21:
        text = digits[:point] + "." + digits[point:]
    elif -6 < point <= 0:
        text = "0." + "0" * -point + digits
    else:
        mantissa = digits[0] if len(digits) == 1 else digits[0] + "." + digits[1:]
        text = f"{mantissa}e{point - 1:+d}"
    return "-" + text if sign else text


def to_string(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, (bool, np.bool_)):
        return "true" if value else "false"
    if is_number(value):
        return _number_to_string(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return ",".join("" if element is None else to_string(element) for element in value)
    raise ConversionError(value, "string", f"{type(value).__name__} has no string representation")


def to_number(value: Any) -> Number:
    """
    Convert :param:`value` to a number. For strings the whole trimmed string must be a number; the empty string converts to 0.
    """
    if is_number(value):
        return value
    if isinstance(value, (bool, np.bool_)):
        return int(value)
    if value is None:
        return 0
    if not isinstance(value, str):
        raise ConversionError(value, "number", f"{type(value).__name__} cannot be converted")

    text = value.strip()
    if text == "":
        return 0
    if _INTEGER_PATTERN.fullmatch(text):
        return int(text)
    if _DECIMAL_PATTERN.fullmatch(text):
        return float(text)
    prefixed_match = _PREFIXED_INTEGER_PATTERN.fullmatch(text)
    if prefixed_match is not None:
        try:
            return int(prefixed_match.group(2), _PREFIX_BASES[prefixed_match.group(1).lower()])
        except ValueError as e:
            raise ConversionError(value, "number") from e
    infinity_match = _INFINITY_PATTERN.fullmatch(text)
    if infinity_match is not None:
        return -math.inf if infinity_match.group(1) == "-" else math.inf
    raise ConversionError(value, "number")


def parse_int(text: str, base: Optional[int] = None) -> int:
    """
    Parse the longest integer prefix of :param:`text` after leading whitespace and an optional sign.

    :param base: The base between 2 and 36. If omitted, base 16 is used for texts starting with '0x' and base 10 otherwise.
    :raises ConversionError: If :param:`text` does not start with a digit of :param:`base`.
    """
    if not isinstance(text, str):
        raise ConversionError(text, "integer", "only strings can be parsed")
    if base is not None and (isinstance(base, (bool, np.bool_)) or not isinstance(base, (int, np.integer))):
        raise InvalidInputError(f"Base must be an integer, but got {type(base).__name__} {base!r}")
    if base is not None and not 2 <= base <= 36:
        raise InvalidInputError(f"Base must be between 2 and 36, but got {base}")

    remaining = text.lstrip()
    sign = 1
    if remaining[:1] in ("+", "-"):
        sign = -1 if remaining[0] == "-" else 1
        remaining = remaining[1:]

    if base in (None, 16) and remaining[:2].lower() == "0x":
        base = 16
        remaining = remaining[2:]
    elif base is None:
        base = 10

    valid_digits = _DIGITS[:base]
    end = 0
    while end < len(remaining) and remaining[end].lower() in valid_digits:
        end += 1

    if end == 0:
        raise ConversionError(text, "integer", f"no digits of base {base} found")
    return sign * int(remaining[:end], base)


def parse_float(text: str) -> float:
    """
    Parse the longest decimal prefix of :param:`text` after leading whitespace, e.g. '3.14abc' is parsed as 3.14.

    :raises ConversionError: If :param:`text` does not start with a decimal number.
    """
    if not isinstance(text, str):
        raise ConversionError(text, "float", "only strings can be parsed")

    remaining = text.lstrip()
    infinity_match = _INFINITY_PATTERN.match(remaining)
    if infinity_match is not None:
        return -math.inf if infinity_match.group(1) == "-" else math.inf

    decimal_match = _DECIMAL_PATTERN.match(remaining)
    if decimal_match is None:
        raise ConversionError(text, "float", "no decimal number found")
    return float(decimal_match.group(0))
