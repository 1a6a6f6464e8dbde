import array
import random

import pytest

from arrays_util.errors import DivideByZeroError, OutOfBoundsError
from arrays_util.transform import Concatenate, CopyOfRange, Reverse, Rotate


def test_rotate_scenario():
    data = [1, 2, 3, 4, 5]
    assert Rotate().execute(data, 5, 2) is data
    assert data == [4, 5, 1, 2, 3]


@pytest.mark.parametrize("k, expected", [
    (0, [1, 2, 3, 4, 5]),
    (5, [1, 2, 3, 4, 5]),
    (7, [4, 5, 1, 2, 3]),
    (-1, [2, 3, 4, 5, 1]),
    (-12, [3, 4, 5, 1, 2]),
])
def test_rotate_normalizes_k(k, expected):
    assert Rotate().execute([1, 2, 3, 4, 5], 5, k) == expected


def test_rotate_inverse():
    rng = random.Random(5)
    for _ in range(50):
        n = rng.randint(1, 12)
        data = [rng.randint(-9, 9) for _ in range(n)]
        original = list(data)
        k = rng.randint(-30, 30)
        Rotate().execute(data, n, k)
        Rotate().execute(data, n, (n - k) % n)
        assert data == original


def test_rotate_prefix_only():
    assert Rotate().execute([1, 2, 3, 9], 3, 1) == [3, 1, 2, 9]


def test_rotate_zero_length():
    with pytest.raises(DivideByZeroError):
        Rotate().execute([], 0, 3)
    with pytest.raises(ZeroDivisionError):
        Rotate().execute([1, 2], 0, 1)


def test_rotate_works_on_array_module():
    data = array.array("i", [1, 2, 3, 4, 5])
    Rotate().execute(data, 5, 2)
    assert list(data) == [4, 5, 1, 2, 3]


def test_reverse():
    data = [1, 2, 3, 4]
    assert Reverse().execute(data, 4) is data
    assert data == [4, 3, 2, 1]


@pytest.mark.parametrize("data", [[], [1], [1, 2, 3], [5, -5, 5, -5, 0]])
def test_reverse_involution(data):
    original = list(data)
    Reverse().execute(data, len(data))
    Reverse().execute(data, len(data))
    assert data == original


def test_reverse_short_arrays_unchanged():
    assert Reverse().execute([], 0) == []
    assert Reverse().execute([7], 1) == [7]


def test_copy_of_range():
    data = [1, 2, 3, 4, 5]
    copy = CopyOfRange().execute(data, 1, 4)
    assert copy == [2, 3, 4]
    copy[0] = 99
    assert data == [1, 2, 3, 4, 5]
    assert CopyOfRange().execute(data, 2, 2) == []
    assert CopyOfRange().execute(data, 0, 5) == data


@pytest.mark.parametrize("start, end", [(-1, 2), (0, 6), (3, 2)])
def test_copy_of_range_out_of_bounds(start, end):
    with pytest.raises(OutOfBoundsError):
        CopyOfRange().execute([1, 2, 3, 4, 5], start, end)


def test_concat_scenario():
    assert Concatenate().execute([1, 2], 2, [3, 4, 5], 3) == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("data", [[], [1], [4, 2, 4]])
def test_concat_identity(data):
    assert Concatenate().execute(data, len(data), [], 0) == data
    assert Concatenate().execute([], 0, data, len(data)) == data


def test_concat_returns_new_list_of_prefixes():
    first = [1, 2, 3]
    result = Concatenate().execute(first, 2, [8, 9], 1)
    assert result == [1, 2, 8]
    assert result is not first


def test_concat_size_out_of_bounds():
    with pytest.raises(OutOfBoundsError):
        Concatenate().execute([1], 2, [2], 1)
