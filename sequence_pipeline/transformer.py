"""
Functional interface of the sequence transformer. Every function validates its input, never modifies it and returns a new value.
"""

__all__ = ["transform", "filter_seq", "fold", "run_pipeline"]

import collections.abc
from typing import Any, Iterable

from sequence_pipeline.errors import InvalidPipelineError
from sequence_pipeline.pipeline import FilterStage, FoldStage, MapStage, Pipeline, PipelineStep
from sequence_pipeline.pipeline.pipeline_step import (
    PipelineFilterFuncType,
    PipelineFoldFuncType,
    PipelineMapFuncType,
)
from sequence_pipeline.sequence import NumericSequence, validate_sequence


def transform(sequence: Any, map_fn: PipelineMapFuncType) -> NumericSequence:
    """
    Apply :param:`map_fn` on every element of :param:`sequence`.

    :returns: A new sequence of the same length, where the i-th element is `map_fn(sequence[i])`.
    :raises InvalidInputError: If :param:`sequence` is not a numeric sequence or :param:`map_fn` is not callable, raises or does not return a number.
    """
    stage = MapStage(map_fn)
    return stage.apply(validate_sequence(sequence))


def filter_seq(sequence: Any, predicate_fn: PipelineFilterFuncType) -> NumericSequence:
    """
    Select the elements of :param:`sequence` for which :param:`predicate_fn` is true, in their original order.
    """
    stage = FilterStage(predicate_fn)
    return stage.apply(validate_sequence(sequence))


def fold(sequence: Any, combine_fn: PipelineFoldFuncType, initial: Any) -> Any:
    """
    Fold :param:`sequence` from left to right: `combine_fn(...combine_fn(initial, sequence[0])..., sequence[n-1])`.

    For an empty sequence :param:`initial` is returned unchanged.
    """
    stage = FoldStage(combine_fn, initial)
    return stage.apply(validate_sequence(sequence))


def run_pipeline(sequence: Any, stages: Iterable[PipelineStep]) -> Any:
    """
    Apply :param:`stages` in order, each on the output of the previous one.

    :returns: A sequence, or a single value if the last stage is a fold.
    :raises InvalidPipelineError: If the stages cannot be composed. In this case no stage is applied.
    :raises InvalidInputError: If :param:`sequence` is not a numeric sequence or a stage function fails.
    """
    if not isinstance(stages, collections.abc.Iterable) or isinstance(stages, PipelineStep):
        raise InvalidPipelineError(f"Expected a list of stages, but got {type(stages).__name__}")
    return Pipeline(stages).execute(sequence).value
