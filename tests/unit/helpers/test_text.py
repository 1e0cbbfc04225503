import pytest

from sequence_pipeline.errors import InvalidInputError
from sequence_pipeline.helpers import text

GREETING = "Hello World"


def test_length():
    assert text.length(GREETING) == 11


def test_case_conversion():
    assert text.to_upper(GREETING) == "HELLO WORLD"
    assert text.to_lower(GREETING) == "hello world"


def test_contains():
    assert text.contains(GREETING, "Hello")
    assert not text.contains(GREETING, "hello")


def test_index_of():
    assert text.index_of(GREETING, "World") == 6
    assert text.index_of(GREETING, "Python") == -1


@pytest.mark.parametrize(
    "start, end, expected", [(0, 5, "Hello"), (6, None, "World"), (-5, None, "World"), (3, 1, "")]
)
def test_slice_text(start, end, expected):
    assert text.slice_text(GREETING, start, end) == expected


def test_replace_first_only_replaces_first_occurrence():
    assert text.replace_first(GREETING, "World", "Python") == "Hello Python"
    assert text.replace_first("a-a-a", "a", "b") == "b-a-a"


@pytest.mark.parametrize("value", [None, 42, ["Hello"]])
def test_fails_for_non_strings(value):
    with pytest.raises(InvalidInputError):
        text.length(value)


def test_fails_for_non_string_search():
    with pytest.raises(InvalidInputError):
        text.contains(GREETING, 1)
