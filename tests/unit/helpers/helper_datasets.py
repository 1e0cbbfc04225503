from tests.automation.datasets import Dataset, FileDataset, FileDatasetFormat
from tests.automation.validation import TestCase


# ---------------------------------
# Entry Models
# ---------------------------------


class ToNumberTestCase(TestCase):
    value: str
    valid: bool
    expected: int | float | None


class ParseIntTestCase(TestCase):
    text: str
    base: int | None
    valid: bool
    expected: int | None


class RoundingTestCase(TestCase):
    value: int | float
    expected_ceil: int
    expected_floor: int
    expected_round: int


# ---------------------------------
# File Datasets
# ---------------------------------

TO_NUMBER_TEST_DATASET = FileDataset(
    "unit/helpers/to_number.json",
    file_format=FileDatasetFormat.JSON,
    entry_model=ToNumberTestCase,
)
PARSE_INT_TEST_DATASET = FileDataset(
    "unit/helpers/parse_int.json",
    file_format=FileDatasetFormat.JSON,
    entry_model=ParseIntTestCase,
)


# ---------------------------------
# Dynamic Datasets
# ---------------------------------


def _rounding_case(label: str, value: int | float, ceil: int, floor: int, rounded: int) -> RoundingTestCase:
    return RoundingTestCase(
        label=label, value=value, expected_ceil=ceil, expected_floor=floor, expected_round=rounded
    )


ROUNDING_TEST_DATASET = Dataset(
    [
        _rounding_case("fraction_below_half", 4.2, 5, 4, 4),
        _rounding_case("fraction_above_half", 4.7, 5, 4, 5),
        _rounding_case("positive_half", 4.5, 5, 4, 5),
        _rounding_case("negative_half", -4.5, -4, -5, -4),
        _rounding_case("negative_fraction", -4.7, -4, -5, -5),
        _rounding_case("even_half", 2.5, 3, 2, 3),
        _rounding_case("integral", 3.0, 3, 3, 3),
        _rounding_case("zero", 0.0, 0, 0, 0),
        _rounding_case("negative_small_half", -0.5, 0, -1, 0),
        _rounding_case("just_below_half", 0.49999999999999994, 1, 0, 0),
        _rounding_case("exact_integer_beyond_float", 2**53 + 1, 2**53 + 1, 2**53 + 1, 2**53 + 1),
        _rounding_case("huge_integer", 10**400, 10**400, 10**400, 10**400),
        _rounding_case("large_float", 1e300, int(1e300), int(1e300), int(1e300)),
    ]
)
