import logging
from pathlib import Path
from typing import Any, List, Sequence

import click

from sequence_pipeline.config import SequencePipelineConfig
from sequence_pipeline.demo import run_demo
from sequence_pipeline.errors import InvalidInputError, InvalidPipelineError
from sequence_pipeline.helpers.conversion import to_string
from sequence_pipeline.pipeline import Pipeline, PipelineContext, run_pipelines
from sequence_pipeline.stage_library import StageDescriptor, build_pipeline, parse_number, parse_stage_descriptor

_LOG_HANDLER_NAME = "sequence_pipeline_cli"
_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class _NumberParamType(click.ParamType):
    name = "number"

    def convert(self, value, param, ctx):
        if isinstance(value, (int, float)):
            return value
        try:
            return parse_number(value)
        except ValueError:
            self.fail(f"{value!r} is not a number", param, ctx)


class _StageParamType(click.ParamType):
    name = "stage"

    def convert(self, value, param, ctx):
        if isinstance(value, StageDescriptor):
            return value
        try:
            return parse_stage_descriptor(value)
        except InvalidPipelineError as e:
            self.fail(str(e), param, ctx)


NUMBER = _NumberParamType()
STAGE = _StageParamType()

_stage_option = click.option(
    "--stage",
    "-s",
    "stages",
    type=STAGE,
    multiple=True,
    required=True,
    help="Stage descriptor <kind>:<operation>[:<operand>], e.g. map:mul:2, filter:gt:5 or fold:add:0. Can be repeated.",
)


def _setup_logging(log_level: str) -> logging.Logger:
    root_logger = logging.getLogger("sequence_pipeline")
    root_logger.setLevel(log_level.upper())
    # Replace the handler of a previous invocation, it might be bound to a stream that is already closed
    for handler in list(root_logger.handlers):
        if handler.get_name() == _LOG_HANDLER_NAME:
            root_logger.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.set_name(_LOG_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(fmt="%(asctime)s | %(name)s | %(levelname)s | %(message)s"))
    root_logger.addHandler(handler)
    return root_logger


def _format_value(value: Any) -> str:
    if isinstance(value, tuple):
        return ", ".join(to_string(element) for element in value)
    return to_string(value)


def _build_pipeline_or_fail(stages: Sequence[StageDescriptor]) -> Pipeline:
    try:
        return build_pipeline(stages)
    except InvalidPipelineError as e:
        raise click.UsageError(str(e))


def _parse_token(token: str) -> Any:
    # Tokens that are not numbers are kept, so that only the run of this line fails
    try:
        return parse_number(token)
    except ValueError:
        return token


def _read_sequences(input_file: Path) -> List[List[Any]]:
    sequences = []
    with open(input_file, "rt", encoding="utf-8") as file:
        for line in file:
            if line.strip() == "":
                continue
            sequences.append([_parse_token(token) for token in line.split(",") if token.strip() != ""])
    return sequences


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    help="Minimum level of log messages that are written to stderr",
)
def cli(log_level: str):
    """Apply map, filter and fold stages to sequences of numbers."""
    _setup_logging(log_level)


@cli.command()
@click.argument("numbers", nargs=-1, type=NUMBER)
@_stage_option
@click.option("--timings", is_flag=True, default=False, help="Print the execution time of every stage")
def run(numbers: Sequence[Any], stages: Sequence[StageDescriptor], timings: bool):
    """
    Run the stages on NUMBERS. Use '--' before the numbers if the first one is negative.
    """
    pipeline = _build_pipeline_or_fail(stages)
    try:
        result = pipeline.execute(list(numbers))
    except InvalidInputError as e:
        raise click.ClickException(str(e))

    click.echo(_format_value(result.value))
    if timings:
        result.print_cum_time_per_step(emit=click.echo)


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, readable=True))
@_stage_option
@click.option("--processes", "-p", type=click.IntRange(min=1), default=None, help="Number of worker processes")
@click.option("--seed", type=int, default=12345)
def batch(input_file: str, stages: Sequence[StageDescriptor], processes: int, seed: int):
    """
    Run the stages on every line of INPUT_FILE. Each line contains one comma separated sequence.
    """
    root_logger = logging.getLogger("sequence_pipeline")
    pipeline = _build_pipeline_or_fail(stages)
    sequences = _read_sequences(Path(input_file))
    root_logger.info(f"Processing {len(sequences)} sequences")

    ctx = PipelineContext(SequencePipelineConfig(seed=seed, num_processes=processes))
    results = run_pipelines(sequences, pipeline, ctx)
    for result in results:
        click.echo(_format_value(result.value) if result.succeeded else "error")

    num_errors = len([result for result in results if not result.succeeded])
    if num_errors > 0:
        root_logger.warning(f"Encountered {num_errors} errors while processing {len(results)} sequences")
    else:
        root_logger.info(f"Successfully processed {len(results)} sequences")


@cli.command()
@click.option("--seed", type=int, default=12345, help="Seed for the random value in the math section")
def demo(seed: int):
    """Print a walk through all features."""
    run_demo(click.echo, PipelineContext(SequencePipelineConfig(seed=seed)))


if __name__ == "__main__":
    cli()
