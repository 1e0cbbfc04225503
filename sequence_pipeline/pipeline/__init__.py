__all__ = [
    "Pipeline",
    "PipelineContext",
    "PipelineExecutionResult",
    "PipelineStep",
    "PipelineStepArguments",
    "PipelineStepResult",
    "PipelineStepType",
    "MapStage",
    "FilterStage",
    "FoldStage",
    "map_stage",
    "filter_stage",
    "fold_stage",
    "pipeline_map",
    "pipeline_map_with_args",
    "pipeline_filter",
    "pipeline_fold",
    "BatchRunResult",
    "run_pipelines",
]

from .context import PipelineContext
from .executor import BatchRunResult, run_pipelines
from .pipeline import Pipeline, PipelineExecutionResult
from .pipeline_step import (
    FilterStage,
    FoldStage,
    MapStage,
    PipelineStep,
    PipelineStepArguments,
    PipelineStepResult,
    PipelineStepType,
    filter_stage,
    fold_stage,
    map_stage,
    pipeline_filter,
    pipeline_fold,
    pipeline_map,
    pipeline_map_with_args,
)
