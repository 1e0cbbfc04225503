import functools
import uuid
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, ClassVar, Generic, Optional, TypeAlias, TypeVar

from sequence_pipeline.errors import InvalidInputError
from sequence_pipeline.sequence import Number, NumericSequence, is_number


def _get_function_name(func) -> str:
    """
    Get a human readable name of a python function even if it is wrapped in a partial.
    """
    if isinstance(func, functools.partial) or isinstance(func, functools.partialmethod):
        return _get_function_name(func.func)
    if hasattr(func, "__name__"):
        return func.__name__
    else:
        return str(func)


# Upper Type bound for arguments to pipeline steps
class PipelineStepArguments: ...


# We want to use PipelineStepArguments as a type parameter in Callable, which requires covariant types
_PipelineStepArgumentsTypeT = TypeVar(
    "_PipelineStepArgumentsTypeT", bound=PipelineStepArguments, covariant=True
)
_AccumulatorT = TypeVar("_AccumulatorT")

# Type aliases to make the function definitions more readable
PipelineMapFuncType: TypeAlias = Callable[[Number], Number]
_PipelineMapFuncWithArgsType: TypeAlias = Callable[[_PipelineStepArgumentsTypeT, Number], Number]

PipelineFilterFuncType: TypeAlias = Callable[[Number], bool]

PipelineFoldFuncType: TypeAlias = Callable[[_AccumulatorT, Number], _AccumulatorT]


class PipelineStepType(Enum):
    MAP = auto()
    """Sequence to sequence of the same length"""

    FILTER = auto()
    """Sequence to an order preserving subsequence"""

    FOLD = auto()
    """Sequence to a single value. Must be the last step of a pipeline."""


_AnyPipelineStep = TypeVar(
    "_AnyPipelineStep",
    PipelineMapFuncType,
    PipelineFilterFuncType,
    PipelineFoldFuncType,
)


class PipelineStep(Generic[_AnyPipelineStep]):
    """
    A `PipelineStep` is a wrapper around the real step function, that adds information about the step like its type and applies it to a whole sequence.
    """

    type: ClassVar[PipelineStepType]

    def __init__(self, step_func: _AnyPipelineStep, name: Optional[str] = None):
        if not callable(step_func):
            raise InvalidInputError(
                f"Cannot create a {self.type.name.lower()} step from {step_func!r}: it is not callable"
            )
        self._step_func: _AnyPipelineStep = step_func

        self._name = _get_function_name(self._step_func) if name is None else name
        # The name cannot be used to compare steps, because many steps share the name '<lambda>'.
        self._id = uuid.uuid4()

    @property
    def name(self) -> str:
        return self._name

    @property
    def identifier(self) -> uuid.UUID:
        return self._id

    @property
    def produces_sequence(self) -> bool:
        return self.type != PipelineStepType.FOLD

    def apply(self, sequence: NumericSequence) -> Any:
        """
        Apply this step on a whole validated sequence. The sequence itself is never modified.
        """
        raise NotImplementedError()

    def _call_step_func(self, *args):
        try:
            return self._step_func(*args)
        except Exception as e:
            raise InvalidInputError(
                f"{self.type.name.capitalize()} step '{self._name}' failed for element {args[-1]!r}: {e}"
            ) from e

    def __eq__(self, other) -> bool:
        if not isinstance(other, PipelineStep):
            return False

        return self.identifier == other.identifier

    def __call__(self, *args, **kwargs):
        return self._step_func(*args, **kwargs)

    def __hash__(self) -> int:
        # bind the hash dunder to the identifier, so it can be used reliably as dict keys
        return self._id.int

    def __str__(self) -> str:
        return f"{self.type.name.lower()} {self._name} ({self._id})"


class MapStage(PipelineStep[PipelineMapFuncType]):
    type = PipelineStepType.MAP

    def apply(self, sequence: NumericSequence) -> NumericSequence:
        output = []
        for value in sequence:
            new_value = self._call_step_func(value)
            # The output of a map step is the input of the next step, so it must stay numeric
            if not is_number(new_value):
                raise InvalidInputError(
                    f"Map step '{self.name}' produced the non-numeric value {new_value!r} for element {value!r}"
                )
            output.append(new_value)
        return tuple(output)


class FilterStage(PipelineStep[PipelineFilterFuncType]):
    type = PipelineStepType.FILTER

    def apply(self, sequence: NumericSequence) -> NumericSequence:
        return tuple(value for value in sequence if self._matches(value))

    def _matches(self, value: Number) -> bool:
        verdict = self._call_step_func(value)
        # bool() can fail as well, e.g. for multi element numpy arrays
        try:
            return bool(verdict)
        except Exception as e:
            raise InvalidInputError(
                f"Filter step '{self.name}' returned {verdict!r} for element {value!r}, which has no truth value: {e}"
            ) from e


class FoldStage(PipelineStep[PipelineFoldFuncType]):
    type = PipelineStepType.FOLD

    def __init__(self, step_func: PipelineFoldFuncType, initial: Any, name: Optional[str] = None):
        super().__init__(step_func, name)
        self._initial = initial

    @property
    def initial(self) -> Any:
        return self._initial

    def apply(self, sequence: NumericSequence) -> Any:
        accumulator = self._initial
        for value in sequence:
            accumulator = self._call_step_func(accumulator, value)
        return accumulator

    def __str__(self) -> str:
        return f"fold {self.name} from {self._initial!r} ({self.identifier})"


def map_stage(func: PipelineMapFuncType) -> MapStage:
    return MapStage(func)


def filter_stage(func: PipelineFilterFuncType) -> FilterStage:
    return FilterStage(func)


def fold_stage(func: PipelineFoldFuncType, initial: Any) -> FoldStage:
    return FoldStage(func, initial)


def pipeline_map() -> Callable[[PipelineMapFuncType], MapStage]:
    """
    Decorate a function to indicate that is used as a map function for the pipeline.
    """

    def decorator(func: PipelineMapFuncType) -> MapStage:
        return MapStage(func)

    return decorator


def pipeline_map_with_args() -> Callable[
    [_PipelineMapFuncWithArgsType],
    Callable[[PipelineStepArguments], MapStage],
]:
    """
    Decorate a function to indicate its use as a map function for the pipeline. This decorator will partially apply the function by setting the args parameter.
    """

    def decorator(
        func: _PipelineMapFuncWithArgsType,
    ) -> Callable[[PipelineStepArguments], MapStage]:
        def inner_wrapper(args: PipelineStepArguments) -> MapStage:
            step_func_with_args_applied = functools.partial(func, args)
            return MapStage(step_func_with_args_applied)

        return inner_wrapper

    return decorator


def pipeline_filter() -> Callable[[PipelineFilterFuncType], FilterStage]:
    """
    Decorate a function to indicate that is used as a filter function for the pipeline.
    """

    def decorator(func: PipelineFilterFuncType) -> FilterStage:
        return FilterStage(func)

    return decorator


def pipeline_fold(initial: Any = 0) -> Callable[[PipelineFoldFuncType], FoldStage]:
    """
    Decorate a function to indicate that is used as the terminal fold function of the pipeline.

    :param initial: The accumulator value the fold starts with. Also the result of folding an empty sequence.
    """

    def decorator(func: PipelineFoldFuncType) -> FoldStage:
        return FoldStage(func, initial)

    return decorator


@dataclass
class PipelineStepResult:
    """
    Result of the execution of one pipeline step on a whole sequence.
    """

    step: PipelineStep
    input: NumericSequence
    output: Any
    exec_time: int
