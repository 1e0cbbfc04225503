__all__ = [
    "Pipeline",
    "PipelineContext",
    "MapStage",
    "FilterStage",
    "FoldStage",
    "map_stage",
    "filter_stage",
    "fold_stage",
    "transform",
    "filter_seq",
    "fold",
    "run_pipeline",
    "run_pipelines",
    "SequencePipelineConfig",
    "SequencePipelineError",
    "InvalidInputError",
    "InvalidPipelineError",
    "ConversionError",
]

from .config import SequencePipelineConfig
from .errors import ConversionError, InvalidInputError, InvalidPipelineError, SequencePipelineError
from .pipeline import (
    FilterStage,
    FoldStage,
    MapStage,
    Pipeline,
    PipelineContext,
    filter_stage,
    fold_stage,
    map_stage,
    run_pipelines,
)
from .transformer import filter_seq, fold, run_pipeline, transform
