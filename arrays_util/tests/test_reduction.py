import pytest

from arrays_util.errors import EmptyInputError
from arrays_util.reduction import MaxOccurrence, MaxValue, MinValue, Summation


def test_max_occurrence_scenario():
    assert MaxOccurrence().execute([3, 3, 5, 5, 5, 2], 6) == 3


@pytest.mark.parametrize("data, expected", [
    ([1], 1),
    ([2, 2, 2], 3),
    ([9, 1, 9, 1], 2),
    ([1, 2, 3], 1),
    ([-4, -7, -4], 2),
])
def test_max_occurrence(data, expected):
    assert MaxOccurrence().execute(data, len(data)) == expected


def test_min_and_max():
    data = [4, -2, 9, 0, 9, -2]
    assert MinValue().execute(data, len(data)) == -2
    assert MaxValue().execute(data, len(data)) == 9
    assert MaxValue().execute(data, 2) == 4


@pytest.mark.parametrize("operation", [MinValue(), MaxValue(), MaxOccurrence()])
def test_extremum_empty_input(operation):
    with pytest.raises(EmptyInputError):
        operation.execute([], 0)
    with pytest.raises(ValueError):
        operation.execute([1, 2], 0)


def test_sum_returns_computed_total():
    assert Summation().execute([1, 2, 3, 4], 4) == 10
    assert Summation().execute([5, -5, 7], 3) == 7
    assert Summation().execute([1, 2, 3, 4], 2) == 3
    assert Summation().execute([], 0) == 0


def test_sum_does_not_wrap():
    data = [2 ** 31 - 1, 2 ** 31 - 1]
    assert Summation().execute(data, 2) == 2 ** 32 - 2


def test_reduction_rejects_out_of_range_elements():
    with pytest.raises(ValueError):
        Summation().execute([2 ** 31], 1)
    with pytest.raises(TypeError):
        MaxValue().execute([1.5, 2], 2)
    with pytest.raises(TypeError):
        MinValue().execute([True, 2], 2)


def test_validation_can_be_disabled():
    assert Summation(validate_elements=False).execute([2 ** 40, 1], 2) == 2 ** 40 + 1
