"""
Walk through the features of the package section by section and emit the results line by line.
"""

__all__ = ["run_demo"]

import logging
from typing import Any, Callable, List, Optional

import click

from sequence_pipeline.helpers import arrays, conversion, numeric, spread, text
from sequence_pipeline.helpers.kinds import describe_kind
from sequence_pipeline.pipeline import Pipeline, PipelineContext
from sequence_pipeline.transformer import filter_seq, fold, transform

_LOGGER = logging.getLogger(__name__)

_NUMBERS = (1, 2, 3, 4, 5)


def _greet() -> str:
    return "Hello"


def _sum_three(a, b, c):
    return a + b + c


def _variables_and_kinds(ctx: PipelineContext) -> List[str]:
    name = "Alice"
    age = None
    big_num = 12345678901234567890
    person = {"name": "Alice", "age": 25}
    return [
        "== Variables & Kinds ==",
        " ".join(describe_kind(value) for value in (name, age, big_num, person)),
        _greet(),
    ]


def _map_filter_fold(ctx: PipelineContext) -> List[str]:
    doubled = transform(_NUMBERS, lambda n: n * 2)
    even_numbers = filter_seq(_NUMBERS, lambda n: n % 2 == 0)
    total = fold(_NUMBERS, lambda acc, curr: acc + curr, 0)
    combined = (
        Pipeline()
        .map(lambda n: n * 2)
        .filter(lambda n: n > 5)
        .fold(lambda acc, n: acc + n, 0)
        .execute(_NUMBERS, ctx)
    )
    return [
        "== Map, Filter & Fold ==",
        f"Doubled: {list(doubled)}",
        f"Even numbers: {list(even_numbers)}",
        f"Sum: {total}",
        f"Combined result: {combined.value}",
    ]


def _spread(ctx: PipelineContext) -> List[str]:
    merged = spread.merge_sequences((1, 2, 3), (4, 5))
    copied = spread.merge_mappings({"name": "Alice", "age": 25}, country="India")
    return [
        "== Spread ==",
        f"Merged array: {list(merged)}",
        f"Copied object: {copied}",
        f"Sum using spread: {spread.apply_spread(_sum_three, [1, 2, 3])}",
    ]


def _math(ctx: PipelineContext) -> List[str]:
    return [
        "== Math ==",
        f"random_unit(): {numeric.random_unit(ctx.create_random_generator())}",
        f"ceil(4.2): {numeric.ceil(4.2)}",
        f"round_half_up(4.7): {numeric.round_half_up(4.7)}",
        f"floor(4.7): {numeric.floor(4.7)}",
        f"max_of(1, 5, 3): {numeric.max_of(1, 5, 3)}",
        f"min_of(1, 5, 3): {numeric.min_of(1, 5, 3)}",
    ]


def _text(ctx: PipelineContext) -> List[str]:
    greeting = "Hello World"
    return [
        "== Text ==",
        str(text.length(greeting)),
        text.to_upper(greeting),
        text.to_lower(greeting),
        conversion.to_string(text.contains(greeting, "Hello")),
        str(text.index_of(greeting, "World")),
        text.slice_text(greeting, 0, 5),
        text.replace_first(greeting, "World", "Python"),
    ]


def _arrays(ctx: PipelineContext) -> List[str]:
    values = arrays.push((1, 2, 3), 4)
    lines = ["== Arrays ==", f"Push: {list(values)}"]
    values, _ = arrays.pop(values)
    lines.append(f"Pop: {list(values)}")
    _, values = arrays.shift(values)
    lines.append(f"Shift: {list(values)}")
    values = arrays.unshift(values, 0)
    lines.append(f"Unshift: {list(values)}")
    lines.append(f"Index of 3: {arrays.index_of(values, 3)}")
    lines.append(f"Includes 2? {conversion.to_string(arrays.includes(values, 2))}")
    return lines


def _conversion(ctx: PipelineContext) -> List[str]:
    return [
        "== Conversion ==",
        conversion.to_string(conversion.to_boolean(0)),
        conversion.to_string(123),
        conversion.to_string(conversion.to_number("10")),
        conversion.to_string(conversion.parse_int("42")),
        conversion.to_string(conversion.parse_float("3.14")),
    ]


_SECTIONS = [_variables_and_kinds, _map_filter_fold, _spread, _math, _text, _arrays, _conversion]


def run_demo(emit: Callable[[str], Any] = click.echo, ctx: Optional[PipelineContext] = None) -> List[str]:
    """
    Run all demo sections and pass each produced line to :param:`emit`.

    :param emit: Receives the lines in order.
    :param ctx: Provides the seed for the random value. If omitted, the default configuration is used.

    :returns: All emitted lines.
    """
    if ctx is None:
        ctx = PipelineContext()

    all_lines = []
    for section in _SECTIONS:
        _LOGGER.debug("Running demo section %s", section.__name__)
        lines = section(ctx)
        for line in lines:
            emit(line)
        all_lines.extend(lines)
    return all_lines
