import pytest

from sequence_pipeline.errors import InvalidInputError
from sequence_pipeline.helpers import arrays


def test_push_returns_new_tuple():
    values = [1, 2, 3]
    assert arrays.push(values, 4) == (1, 2, 3, 4)
    assert values == [1, 2, 3]


def test_pop():
    values = [1, 2, 3, 4]
    rest, last = arrays.pop(values)
    assert rest == (1, 2, 3)
    assert last == 4
    assert values == [1, 2, 3, 4]


def test_shift():
    first, rest = arrays.shift((1, 2, 3))
    assert first == 1
    assert rest == (2, 3)


def test_unshift():
    assert arrays.unshift((2, 3), 0, 1) == (0, 1, 2, 3)


@pytest.mark.parametrize("operation", [arrays.pop, arrays.shift])
def test_removing_from_empty_sequence_fails(operation):
    with pytest.raises(InvalidInputError):
        operation(())


def test_index_of():
    assert arrays.index_of((0, 2, 3), 3) == 2
    assert arrays.index_of((0, 2, 3), 5) == -1
    assert arrays.index_of((1, 2, 1), 1) == 0


def test_includes():
    assert arrays.includes((0, 2, 3), 2)
    assert not arrays.includes((), 2)


@pytest.mark.parametrize("value", ["abc", 5, None])
def test_fails_for_non_sequences(value):
    with pytest.raises(InvalidInputError):
        arrays.push(value, 1)
