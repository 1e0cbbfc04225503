from __future__ import annotations

import inspect
from typing import Sequence

import pytest

from tests.automation.datasets import DatasetInterface

_DATASET_MARKER_ATTRIBUTE_NAME = "__mark_test_with_dataset"


def get_param_names_from_signature(func) -> list[str]:
    """
    Extracts the parameter names of a test function, excluding self.
    """
    names = []
    for name, parameter in inspect.signature(func).parameters.items():
        if name == "self":
            continue
        if parameter.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
            raise RuntimeError("The with_dataset decorator does not support test functions with variadic parameters.")
        names.append(name)
    return names


class _DatasetMarker:
    """
    Injected on a test function by the with_dataset decorator and resolved by the pytest hook.
    """

    def __init__(self, dataset: DatasetInterface, parameter_names: list[str]):
        self.dataset = dataset
        self.parameter_names = parameter_names


class with_dataset:
    """
    Decorator to parametrize a test function with the entries of a dataset. Each entry becomes one test, identified by its label.
    """

    def __init__(self, dataset: DatasetInterface, parameter_names: Sequence[str] | None = None):
        """
        :param dataset: The dataset containing the cases.
        :param parameter_names: Attribute names of the dataset entries that are mapped onto the parameters of the test function. Defaults to the parameter names of the test function.
        """
        self._dataset = dataset
        self._parameter_names = None if parameter_names is None else list(parameter_names)

    def __call__(self, func):
        if hasattr(func, _DATASET_MARKER_ATTRIBUTE_NAME):
            raise RuntimeError(f"Test function {func.__name__} is already parametrized with a dataset.")
        parameter_names = (
            get_param_names_from_signature(func) if self._parameter_names is None else self._parameter_names
        )
        setattr(func, _DATASET_MARKER_ATTRIBUTE_NAME, _DatasetMarker(self._dataset, parameter_names))
        return func


def apply_pytest_hook(metafunc: pytest.Metafunc):
    """
    Running this function from a pytest hook enables loading test cases from datasets.
    :param metafunc: The test function to parametrize, if it is marked accordingly.
    """
    marker = getattr(metafunc.function, _DATASET_MARKER_ATTRIBUTE_NAME, None)
    if marker is None:
        return
    params = [
        pytest.param(*(getattr(case, name) for name in marker.parameter_names), id=case.label)
        for case in marker.dataset.iterate_entries()
    ]
    metafunc.parametrize(", ".join(marker.parameter_names), params)
