"""
Explicit helpers for spreading, math, text, arrays and conversions. None of them modifies its arguments.
"""

__all__ = ["arrays", "conversion", "kinds", "numeric", "spread", "text", "describe_kind"]

from . import arrays, conversion, kinds, numeric, spread, text
from .kinds import describe_kind
