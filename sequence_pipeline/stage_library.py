"""
Named stage operations and the textual stage descriptor format `<kind>:<operation>[:<operand>]`, e.g. `map:mul:2` or `filter:even`.
"""

__all__ = [
    "StageDescriptor",
    "MAP_OPERATIONS",
    "FILTER_OPERATIONS",
    "FOLD_OPERATIONS",
    "parse_number",
    "parse_stage_descriptor",
    "build_stage",
    "build_pipeline",
]

import functools
import math
import operator
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Union

from sequence_pipeline.errors import InvalidPipelineError
from sequence_pipeline.helpers import numeric
from sequence_pipeline.pipeline import FilterStage, FoldStage, MapStage, Pipeline, PipelineStep, PipelineStepType
from sequence_pipeline.sequence import Number


@dataclass(frozen=True)
class _Operation:
    func: Callable
    # Whether the operation needs an operand. For folds the operand is the initial value and always optional.
    needs_operand: bool


def _swap(func: Callable[[Number, Number], Number], operand: Number, value: Number) -> Number:
    # Operands are the right hand side: 'sub:2' means value - 2
    return func(value, operand)


def _is_even(value: Number) -> bool:
    return value % 2 == 0


def _is_odd(value: Number) -> bool:
    return value % 2 != 0


def _is_divisible(operand: Number, value: Number) -> bool:
    return value % operand == 0


MAP_OPERATIONS: Dict[str, _Operation] = {
    "add": _Operation(operator.add, True),
    "sub": _Operation(operator.sub, True),
    "mul": _Operation(operator.mul, True),
    "div": _Operation(operator.truediv, True),
    "pow": _Operation(operator.pow, True),
    "mod": _Operation(operator.mod, True),
    "neg": _Operation(operator.neg, False),
    "abs": _Operation(abs, False),
    "square": _Operation(lambda value: value * value, False),
}

FILTER_OPERATIONS: Dict[str, _Operation] = {
    "gt": _Operation(operator.gt, True),
    "ge": _Operation(operator.ge, True),
    "lt": _Operation(operator.lt, True),
    "le": _Operation(operator.le, True),
    "eq": _Operation(operator.eq, True),
    "ne": _Operation(operator.ne, True),
    "even": _Operation(_is_even, False),
    "odd": _Operation(_is_odd, False),
    "divisible": _Operation(_is_divisible, True),
}

FOLD_OPERATIONS: Dict[str, _Operation] = {
    "add": _Operation(operator.add, False),
    "mul": _Operation(operator.mul, False),
    "max": _Operation(numeric.maximum, False),
    "min": _Operation(numeric.minimum, False),
}

# Initial value of a fold if no operand is given
_FOLD_DEFAULT_INITIAL: Dict[str, Number] = {
    "add": 0,
    "mul": 1,
    "max": -math.inf,
    "min": math.inf,
}

_OPERATIONS_BY_KIND: Dict[PipelineStepType, Dict[str, _Operation]] = {
    PipelineStepType.MAP: MAP_OPERATIONS,
    PipelineStepType.FILTER: FILTER_OPERATIONS,
    PipelineStepType.FOLD: FOLD_OPERATIONS,
}


@dataclass(frozen=True)
class StageDescriptor:
    kind: PipelineStepType
    operation: str
    operand: Optional[Number] = None

    def __str__(self) -> str:
        if self.operand is None:
            return f"{self.kind.name.lower()}:{self.operation}"
        return f"{self.kind.name.lower()}:{self.operation}:{self.operand}"


def parse_number(text: str) -> Number:
    """
    Parse an int or float from :param:`text`.

    :raises ValueError: If :param:`text` is not a number.
    """
    stripped = text.strip()
    try:
        return int(stripped)
    except ValueError:
        return float(stripped)


def parse_stage_descriptor(text: str) -> StageDescriptor:
    """
    Parse a stage descriptor like `map:mul:2`, `filter:even` or `fold:add:0`.

    :raises InvalidPipelineError: If the descriptor is malformed or references an unknown operation.
    """
    parts = [part.strip() for part in text.split(":")]
    if len(parts) not in (2, 3) or not all(parts):
        raise InvalidPipelineError(
            f"Invalid stage descriptor '{text}': expected the format <kind>:<operation>[:<operand>]"
        )

    kind_name, operation_name = parts[0].lower(), parts[1].lower()
    kind = next((kind for kind in PipelineStepType if kind.name.lower() == kind_name), None)
    if kind is None:
        raise InvalidPipelineError(f"Invalid stage descriptor '{text}': unknown stage kind '{parts[0]}'")

    operations = _OPERATIONS_BY_KIND[kind]
    if operation_name not in operations:
        raise InvalidPipelineError(
            f"Invalid stage descriptor '{text}': unknown {kind_name} operation '{parts[1]}', "
            f"expected one of {', '.join(sorted(operations))}"
        )
    operation = operations[operation_name]

    operand = None
    if len(parts) == 3:
        if not operation.needs_operand and kind != PipelineStepType.FOLD:
            raise InvalidPipelineError(f"Invalid stage descriptor '{text}': '{operation_name}' takes no operand")
        try:
            operand = parse_number(parts[2])
        except ValueError as e:
            raise InvalidPipelineError(f"Invalid stage descriptor '{text}': operand '{parts[2]}' is not a number") from e
    elif operation.needs_operand:
        raise InvalidPipelineError(f"Invalid stage descriptor '{text}': '{operation_name}' requires an operand")

    return StageDescriptor(kind, operation_name, operand)


def build_stage(descriptor: Union[StageDescriptor, str]) -> PipelineStep:
    """
    Create the stage that is described by :param:`descriptor`.
    """
    if isinstance(descriptor, str):
        descriptor = parse_stage_descriptor(descriptor)

    operation = _OPERATIONS_BY_KIND[descriptor.kind][descriptor.operation]
    if descriptor.kind == PipelineStepType.FOLD:
        initial = _FOLD_DEFAULT_INITIAL[descriptor.operation] if descriptor.operand is None else descriptor.operand
        return FoldStage(operation.func, initial, name=str(descriptor))

    func = operation.func
    if operation.needs_operand:
        if descriptor.kind == PipelineStepType.FILTER and descriptor.operation == "divisible":
            func = functools.partial(func, descriptor.operand)
        else:
            func = functools.partial(_swap, func, descriptor.operand)

    if descriptor.kind == PipelineStepType.MAP:
        return MapStage(func, name=str(descriptor))
    return FilterStage(func, name=str(descriptor))


def build_pipeline(descriptors: Iterable[Union[StageDescriptor, str]]) -> Pipeline:
    pipeline = Pipeline([build_stage(descriptor) for descriptor in descriptors])
    pipeline.validate()
    return pipeline
