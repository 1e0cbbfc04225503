from __future__ import annotations

import csv
import json
from abc import ABC, abstractmethod
from enum import Enum, auto
from pathlib import Path
from typing import Generator, Iterable

from tests.automation.validation import TestCase
from tests.datasets.interface import get_test_dataset_root


class DatasetInterface(ABC):
    """
    Specifies the functionality that should be supported by a dataset containing test cases.
    """

    @abstractmethod
    def iterate_entries(self) -> Generator[TestCase, None, None]:
        """
        Iterates over all test cases in the dataset.
        :return: A generator of the test cases.
        """


class Dataset(DatasetInterface):
    """
    Dataset whose entries are created in python code.
    """

    _entries: dict[str, TestCase]

    def __init__(self, entries: Iterable[TestCase]):
        self._entries = {}
        for case in entries:
            self.add_entry(case)

    def add_entry(self, case: TestCase):
        if case.label in self._entries:
            raise ValueError(f"Dataset already contains a test case with label: {case.label}")
        self._entries[case.label] = case

    def iterate_entries(self) -> Generator[TestCase, None, None]:
        yield from self._entries.values()


class FileDatasetFormat(Enum):
    CSV = auto()
    JSON = auto()


class FileDataset(DatasetInterface):
    """
    Dataset that is lazily loaded from a file in the tests/datasets/ folder.
    """

    _filename: Path
    _file_format: FileDatasetFormat
    _entry_model: type[TestCase]
    _cache: dict[str, TestCase] | None

    def __init__(self, filename: Path | str, file_format: FileDatasetFormat, entry_model: type[TestCase]):
        """
        :param filename: The path relative to the tests/datasets/ folder.
        :param file_format: The format of the file (CSV or JSON).
        :param entry_model: The pydantic model (inheriting from TestCase) that is used to safely load the entries.
        """
        self._filename = Path(filename)
        self._file_format = file_format
        if not issubclass(entry_model, TestCase):
            raise TypeError("Expected a subclass of TestCase for the entry model.")
        self._entry_model = entry_model
        self._cache = None

    def iterate_entries(self) -> Generator[TestCase, None, None]:
        """
        :raises FileNotFoundError: If the referenced file could not be found.
        """
        yield from self._get_entries().values()

    def _get_entries(self) -> dict[str, TestCase]:
        if self._cache is None:
            entries: dict[str, TestCase] = {}
            for case in self._load_from_file():
                if case.label in entries:
                    raise ValueError(f"Dataset {self._filename} contains the label {case.label} twice.")
                entries[case.label] = case
            self._cache = entries
        return self._cache

    def _load_from_file(self) -> list[TestCase]:
        complete_path = get_test_dataset_root() / self._filename
        if not complete_path.exists():
            raise FileNotFoundError(f"The dataset could not be loaded, because {complete_path} does not exist.")

        if self._file_format == FileDatasetFormat.JSON:
            with open(complete_path, "rt", encoding="utf-8") as file:
                data = json.load(file)
        elif self._file_format == FileDatasetFormat.CSV:
            with open(complete_path, "rt", encoding="utf-8", newline="") as file:
                data = list(csv.DictReader(file))
        else:
            raise ValueError(f"Unknown file format: {self._file_format}.")

        return [self._entry_model(**item) for item in data]
