import logging
import time
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from sequence_pipeline.errors import InvalidPipelineError
from sequence_pipeline.pipeline.context import PipelineContext
from sequence_pipeline.pipeline.pipeline_step import (
    FilterStage,
    FoldStage,
    MapStage,
    PipelineFilterFuncType,
    PipelineFoldFuncType,
    PipelineMapFuncType,
    PipelineStep,
    PipelineStepResult,
    PipelineStepType,
)
from sequence_pipeline.sequence import validate_sequence

_LOGGER = logging.getLogger(__name__)

_NO_INITIAL = object()


@dataclass
class PipelineExecutionResult:
    value: Any
    results: Sequence[PipelineStepResult]
    exec_time_ns: int

    def cum_time_per_step(self) -> Dict[str, Tuple[int, int]]:
        """
        Sum up the execution times by step name.

        :returns: A mapping from step name to the cumulative execution time in ns and the number of executions.
        """
        cum_time_by_pipeline_step: Dict[str, int] = defaultdict(lambda: 0)
        cum_executions_by_pipeline_step: Dict[str, int] = defaultdict(lambda: 0)
        for result in self.results:
            cum_time_by_pipeline_step[result.step.name] += result.exec_time
            cum_executions_by_pipeline_step[result.step.name] += 1

        return {
            name: (cum_time_ns, cum_executions_by_pipeline_step[name])
            for name, cum_time_ns in cum_time_by_pipeline_step.items()
        }

    def print_cum_time_per_step(self, emit: Callable[[str], Any] = print) -> None:
        fmt_str = "{:<40} {:>24} {:>6}"
        emit(fmt_str.format("Pipeline Step", "Total Execution Time (s)", "Num."))
        for pipeline_step, (cum_time_ns, num) in self.cum_time_per_step().items():
            emit(fmt_str.format(pipeline_step, round(cum_time_ns / 1000000000, 6), num))


class Pipeline:
    """
    A pipeline defines the sequential execution of map and filter steps, optionally terminated by a fold step.
    """

    def __init__(self, steps: Optional[Iterable[PipelineStep]] = None):
        if steps is None:
            self._steps: List[PipelineStep] = []
        else:
            self._steps = list(steps)

    @property
    def steps(self) -> Tuple[PipelineStep, ...]:
        return tuple(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    @property
    def produces_scalar(self) -> bool:
        """Whether the pipeline is terminated by a fold step and therefore produces a single value instead of a sequence."""
        return len(self._steps) > 0 and not self._steps[-1].produces_sequence

    def map(self, map_step: Union[MapStage, PipelineMapFuncType]) -> "Pipeline":
        """
        Insert a map step. Plain functions are wrapped in a `MapStage`.
        """
        if not isinstance(map_step, PipelineStep):
            map_step = MapStage(map_step)
        self._steps.append(map_step)
        return self

    def filter(self, filter_step: Union[FilterStage, PipelineFilterFuncType]) -> "Pipeline":
        """
        Insert a filter step. Plain predicates are wrapped in a `FilterStage`.
        """
        if not isinstance(filter_step, PipelineStep):
            filter_step = FilterStage(filter_step)
        self._steps.append(filter_step)
        return self

    def fold(self, fold_step: Union[FoldStage, PipelineFoldFuncType], initial: Any = _NO_INITIAL) -> "Pipeline":
        """
        Insert a fold step. A plain combine function requires the :param:`initial` accumulator.
        """
        if isinstance(fold_step, FoldStage):
            if initial is not _NO_INITIAL:
                raise InvalidPipelineError(
                    f"Fold step '{fold_step.name}' already has the initial value {fold_step.initial!r}"
                )
        elif isinstance(fold_step, PipelineStep):
            raise InvalidPipelineError(f"Cannot insert the {fold_step.type.name.lower()} step '{fold_step.name}' as fold")
        else:
            if initial is _NO_INITIAL:
                raise InvalidPipelineError("Cannot insert a fold step without an initial value")
            fold_step = FoldStage(fold_step, initial)
        self._steps.append(fold_step)
        return self

    def chain(self, other: "Pipeline") -> "Pipeline":
        """
        Create a new pipeline by appending all steps from :param:`other` to the steps of this pipeline.
        """
        new_pipeline = Pipeline(self._steps + other._steps)
        return new_pipeline

    def validate(self) -> None:
        """
        Check that the steps of this pipeline can be composed.

        :raises InvalidPipelineError: If the pipeline is empty, contains objects that are not steps or a step follows a fold step.
        """
        if len(self._steps) < 1:
            raise InvalidPipelineError(
                f"Cannot execute pipeline: pipeline has {len(self._steps)} steps, but at least 1 step is required."
            )

        for index, step in enumerate(self._steps):
            if not isinstance(step, PipelineStep):
                raise InvalidPipelineError(f"Cannot execute pipeline: element {index} ({step!r}) is not a pipeline step")

        for previous_step, step in zip(self._steps, self._steps[1:]):
            if not previous_step.produces_sequence:
                # A fold produces a scalar, while every step expects a sequence as input
                raise InvalidPipelineError(
                    f"Cannot execute pipeline: {step.type.name.lower()} step '{step.name}' expects a sequence, "
                    f"but follows fold step '{previous_step.name}' which produces a scalar."
                )

    def is_valid(self) -> bool:
        try:
            self.validate()
        except InvalidPipelineError:
            return False
        return True

    def execute(self, input_values: Any, ctx: Optional[PipelineContext] = None) -> PipelineExecutionResult:
        """
        Execute the pipeline on the :param:`input_values` with :param:`ctx`.

        :param input_values: A finite ordered sequence of numbers, that is the input for the first step in the pipeline
        :param ctx: The pipeline context for this specific execution. If omitted, the default configuration is used.

        :returns: The result of the execution
        :raises InvalidPipelineError: If the steps cannot be composed. No step is executed in this case.
        :raises InvalidInputError: If the input values are not a numeric sequence or a step function fails.
        """
        self.validate()
        if ctx is None:
            ctx = PipelineContext()
        record_step_results = ctx.get_sequence_pipeline_config().record_step_results

        start_time = time.time_ns()

        state = validate_sequence(input_values)
        results: List[PipelineStepResult] = []
        for step in self._steps:
            _LOGGER.debug("Applying %s on %s", step, state)
            step_start_time = time.time_ns()
            output = step.apply(state)
            step_end_time = time.time_ns()
            if record_step_results:
                results.append(PipelineStepResult(step, state, output, step_end_time - step_start_time))
            state = output

        end_time = time.time_ns()

        return PipelineExecutionResult(value=state, results=results, exec_time_ns=end_time - start_time)
