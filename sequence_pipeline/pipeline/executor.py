__all__ = ["BatchRunResult", "run_pipelines"]

import logging
import random
import signal
import time
import traceback
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

import numpy as np
from multiprocess import Pool

from sequence_pipeline.pipeline.context import PipelineContext
from sequence_pipeline.pipeline.pipeline import Pipeline

_LOGGER = logging.getLogger(__name__)


@dataclass
class BatchRunResult:
    """
    Result of the successfull or failed execution of a pipeline on one input sequence.
    """

    input: Any
    value: Optional[Any]
    error: Optional[str]
    exec_time: int

    @property
    def succeeded(self) -> bool:
        return self.error is None


def _execute_pipeline_run(pipeline: Pipeline, ctx: PipelineContext, input_value: Any) -> BatchRunResult:
    """
    Helper function to execute a pipeline on an arbirtary input. Will capture all errors.
    """
    value, error = None, None
    start_time = time.time_ns()
    try:
        value = pipeline.execute(input_value, ctx).value
    except Exception:
        error = traceback.format_exc()
    end_time = time.time_ns()

    return BatchRunResult(input_value, value, error, end_time - start_time)


def _process_worker_init(seed: int) -> None:
    # Ignore KeyboardInterrupts in the worker processes, so we can orchestrate a clean shutdown.
    # If this is not ignored, all processes will react to the KeyboardInterrupt and spam output to the console.
    signal.signal(signal.SIGINT, signal.SIG_IGN)
    random.seed(seed)
    np.random.seed(seed)


def run_pipelines(
    inputs: Iterable[Any],
    pipeline: Pipeline,
    ctx: Optional[PipelineContext] = None,
    num_processes: Optional[int] = None,
) -> List[BatchRunResult]:
    """
    Execute :param:`pipeline` once for every input sequence. The runs are independent of each other, so a failing run does not influence the others.

    :param inputs: The input sequences.
    :param pipeline: The pipeline that is executed for each input sequence.
    :param ctx: The pipeline context that is shared by all runs.
    :param num_processes: Number of worker processes. Overrides the value from the config of :param:`ctx`. If None or 1, all runs are executed sequentially in this process.

    :returns: One result per input sequence, in input order.
    :raises InvalidPipelineError: If the pipeline is invalid. No run is executed in this case.
    """
    pipeline.validate()

    if ctx is None:
        ctx = PipelineContext()
    config = ctx.get_sequence_pipeline_config()
    if num_processes is None:
        num_processes = config.num_processes

    if num_processes is not None and num_processes < 1:
        raise ValueError("Number of processes for pipeline execution must be at least 1")

    input_values = list(inputs)
    if num_processes is None or num_processes == 1:
        results = [_execute_pipeline_run(pipeline, ctx, input_value) for input_value in input_values]
    else:
        _LOGGER.debug("Distributing %s runs on %s processes", len(input_values), num_processes)
        pool = Pool(processes=num_processes, initializer=_process_worker_init, initargs=(config.seed,))
        try:
            results = pool.starmap(
                _execute_pipeline_run, [(pipeline, ctx, input_value) for input_value in input_values]
            )
        except KeyboardInterrupt:
            _LOGGER.info("Received shutdown signal, terminating all remaining runs...")
            raise
        finally:
            pool.terminate()
            pool.join()

    for result in results:
        if result.error is not None:
            _LOGGER.error("Encountered an error while processing %s: %s", result.input, result.error)

    return results
