from dataclasses import dataclass
from typing import Optional


@dataclass
class SequencePipelineConfig:
    # Seed for python's random module and numpy in worker processes and for the demo
    seed: int = 12345

    # Number of worker processes used for batch runs. None or 1 executes all runs on the calling process.
    num_processes: Optional[int] = None

    # If disabled, the execution result of a pipeline only contains the final value and no per stage results
    record_step_results: bool = True
