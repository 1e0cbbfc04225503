__all__ = [
    "SequencePipelineError",
    "InvalidInputError",
    "InvalidPipelineError",
    "ConversionError",
]


class SequencePipelineError(Exception):
    """Base class for all errors raised by the sequence pipeline."""


class InvalidInputError(SequencePipelineError):
    """
    Raised if the input of an operation is not a finite ordered numeric sequence, or if a stage function fails while it is applied.
    """


class InvalidPipelineError(SequencePipelineError):
    """
    Raised if the stages of a pipeline cannot be composed, e.g. because a map stage follows a fold stage.
    """


class ConversionError(InvalidInputError):
    def __init__(self, value, target: str, reason: str = "not a valid representation"):
        super().__init__(f"Cannot convert {value!r} to {target}: {reason}")
        self.value = value
        self.target = target
