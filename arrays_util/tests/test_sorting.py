import random

import pytest

from arrays_util.errors import OutOfBoundsError
from arrays_util.sorting import DualPivotQuickSort, PivotRecord, pivot_partition


def test_sort_full_range_scenario():
    data = [5, -3, 0, 0, 5, 2]
    DualPivotQuickSort().execute(data, 0, len(data) - 1)
    assert data == [-3, 0, 0, 2, 5, 5]


@pytest.mark.parametrize("data", [
    [],
    [1],
    [2, 1],
    [1, 2],
    [7, 7, 7, 7],
    [3, -1, 2, -1, 3, 0],
    list(range(50)),
    list(range(50, 0, -1)),
    [-(2 ** 31), 2 ** 31 - 1, 0, -1, 1],
])
def test_sort_matches_sorted(data):
    expected = sorted(data)
    DualPivotQuickSort().execute(data, 0, len(data) - 1)
    assert data == expected


def test_sort_random_arrays_are_sorted_permutations():
    rng = random.Random(1234)
    sorter = DualPivotQuickSort()
    for _ in range(200):
        data = [rng.randint(-50, 50) for _ in range(rng.randint(0, 60))]
        original = list(data)
        sorter.execute(data, 0, len(data) - 1)
        assert data == sorted(original)


def test_sort_sub_range_only():
    data = [9, 5, 4, 3, 2, 0]
    DualPivotQuickSort().execute(data, 1, 4)
    assert data == [9, 2, 3, 4, 5, 0]


def test_sort_terminal_ranges_are_noops():
    data = [3, 2, 1]
    sorter = DualPivotQuickSort()
    sorter.execute(data, 2, 2)
    sorter.execute(data, 2, 0)
    assert data == [3, 2, 1]


def test_sort_already_sorted_large_input_does_not_recurse():
    data = list(range(3000))
    DualPivotQuickSort().execute(data, 0, len(data) - 1)
    assert data == list(range(3000))


@pytest.mark.parametrize("low, high", [(-1, 2), (0, 3), (1, 10)])
def test_sort_out_of_bounds(low, high):
    with pytest.raises(OutOfBoundsError):
        DualPivotQuickSort().execute([3, 2, 1], low, high)


def test_sort_type_error():
    with pytest.raises(TypeError):
        DualPivotQuickSort().execute([1, "a"], 0, 1)


def test_sort_checks_only_elements_inside_range():
    data = ["x", 3, 1, 2, "y"]
    DualPivotQuickSort().execute(data, 1, 3)
    assert data == ["x", 1, 2, 3, "y"]

    with pytest.raises(TypeError):
        DualPivotQuickSort().execute(["x", 3, "z", 2, "y"], 1, 3)


def test_sort_copy_leaves_input_untouched():
    data = [5, 1, 4, 2, 8]
    original = list(data)
    assert DualPivotQuickSort().sort_copy(data) == sorted(data)
    assert data == original


def test_parallel_sort_matches_serial():
    rng = random.Random(99)
    data = [rng.randint(-1000, 1000) for _ in range(3000)]
    serial = list(data)
    parallel = list(data)

    DualPivotQuickSort().execute(serial, 0, len(serial) - 1)
    DualPivotQuickSort(max_workers=3, parallel_threshold=64).execute_parallel(
        parallel, 0, len(parallel) - 1
    )
    assert parallel == serial == sorted(data)


def test_parallel_sort_small_and_empty_inputs():
    sorter = DualPivotQuickSort(parallel_threshold=2)
    empty = []
    sorter.execute_parallel(empty, 0, -1)
    assert empty == []

    data = [2, 1]
    sorter.execute_parallel(data, 0, 1)
    assert data == [1, 2]


def _check_partition(arr, low, high, pivot):
    p, q = arr[pivot.left], arr[pivot.right]
    assert low <= pivot.left < pivot.right <= high
    assert p <= q
    assert all(v < p for v in arr[low:pivot.left])
    assert all(p <= v <= q for v in arr[pivot.left + 1:pivot.right])
    assert all(v > q for v in arr[pivot.right + 1:high + 1])


def test_partition_three_zones():
    data = [4, 9, 1, 6, 8, 2, 7, 5]
    original = sorted(data)
    pivot = pivot_partition(data, 0, len(data) - 1)
    assert isinstance(pivot, PivotRecord)
    assert (data[pivot.left], data[pivot.right]) == (4, 5)
    _check_partition(data, 0, len(data) - 1, pivot)
    assert sorted(data) == original


def test_partition_swaps_reversed_endpoints():
    data = [9, 3, 5, 1]
    pivot = pivot_partition(data, 0, 3)
    assert (data[pivot.left], data[pivot.right]) == (1, 9)
    _check_partition(data, 0, 3, pivot)


def test_partition_length_two_range():
    data = [8, 3]
    assert pivot_partition(data, 0, 1) == PivotRecord(0, 1)
    assert data == [3, 8]


def test_partition_all_duplicates_land_in_middle():
    data = [4, 4, 4, 4, 4]
    pivot = pivot_partition(data, 0, 4)
    assert pivot == PivotRecord(0, 4)
    assert data == [4, 4, 4, 4, 4]


def test_partition_random_postconditions():
    rng = random.Random(7)
    for _ in range(100):
        data = [rng.randint(-10, 10) for _ in range(rng.randint(2, 30))]
        low = rng.randint(0, len(data) - 2)
        high = rng.randint(low + 1, len(data) - 1)
        before = list(data)
        pivot = pivot_partition(data, low, high)
        _check_partition(data, low, high, pivot)
        assert data[:low] == before[:low]
        assert data[high + 1:] == before[high + 1:]
        assert sorted(data[low:high + 1]) == sorted(before[low:high + 1])


def test_partition_rejects_trivial_range():
    with pytest.raises(OutOfBoundsError):
        pivot_partition([1, 2], 1, 1)
