from typing import Optional

import numpy as np

from sequence_pipeline.config import SequencePipelineConfig


class PipelineContext:
    """The context contains the configuration that is shared by all runs of a pipeline"""

    def __init__(self, sequence_pipeline_config: Optional[SequencePipelineConfig] = None):
        if sequence_pipeline_config is None:
            self._sequence_pipeline_config = SequencePipelineConfig()
        else:
            self._sequence_pipeline_config = sequence_pipeline_config

    def get_sequence_pipeline_config(self) -> SequencePipelineConfig:
        return self._sequence_pipeline_config

    def create_random_generator(self) -> np.random.Generator:
        """
        Create a new numpy random generator that is seeded from the configured seed.
        """
        return np.random.default_rng(self._sequence_pipeline_config.seed)
