from dataclasses import dataclass

from sequence_pipeline.pipeline import (
    PipelineStepArguments,
    pipeline_filter,
    pipeline_fold,
    pipeline_map,
    pipeline_map_with_args,
)


@pipeline_map()
def pipeline_simple_map(value: int) -> int:
    return value**2


@pipeline_filter()
def pipeline_even_filter(value: int) -> bool:
    return value % 2 == 0


@pipeline_fold(initial=0)
def pipeline_simple_fold(total: int, value: int) -> int:
    return total + value


@dataclass
class ScaleArguments(PipelineStepArguments):
    factor: float
    offset: float = 0.0


@pipeline_map_with_args()
def pipeline_scale(args: ScaleArguments, value: float) -> float:
    return value * args.factor + args.offset


class CallCounter:
    """Wraps a function and counts how often it was called."""

    def __init__(self, func):
        self.func = func
        self.calls = 0
        self.__name__ = getattr(func, "__name__", "call_counter")

    def __call__(self, *args):
        self.calls += 1
        return self.func(*args)
