"""Dual-pivot partitioning step."""
from typing import MutableSequence, NamedTuple

from ...errors import OutOfBoundsError
from ...utils import check_range, swap


class PivotRecord(NamedTuple):
    """Final positions of the two pivots after one partition step."""

    left: int
    right: int


def pivot_partition(arr: MutableSequence[int], low: int, high: int) -> PivotRecord:
    """Partition ``arr[low..high]`` around the values at its two endpoints.

    The smaller endpoint value becomes the low pivot ``p`` and the larger the
    high pivot ``q``.  After the call::

        arr[low .. left-1]      < p
        arr[left]              == p
        arr[left+1 .. right-1]  in [p, q]
        arr[right]             == q
        arr[right+1 .. high]    > q

    Args:
        arr: the array to rearrange in place
        low: first index of the range (inclusive)
        high: last index of the range (inclusive), ``low < high``

    Returns:
        PivotRecord: the final indices of the low and high pivot

    Raises:
        OutOfBoundsError: the range does not lie inside ``arr`` or is trivial
    """
    check_range(arr, low, high)
    if low >= high:
        raise OutOfBoundsError(f"partition needs low < high, got [{low}, {high}]")

    if arr[low] > arr[high]:
        swap(arr, low, high)
    pivot_low = arr[low]
    pivot_high = arr[high]

    left_pivot = low + 1
    right_pivot = high - 1
    iterator = low + 1
    while iterator <= right_pivot:
        value = arr[iterator]
        if value < pivot_low:
            swap(arr, iterator, left_pivot)
            iterator += 1
            left_pivot += 1
        elif value > pivot_high:
            # the element swapped in from the right is unexamined
            swap(arr, iterator, right_pivot)
            right_pivot -= 1
        else:
            iterator += 1

    left_pivot -= 1
    right_pivot += 1
    swap(arr, low, left_pivot)
    swap(arr, high, right_pivot)
    return PivotRecord(left_pivot, right_pivot)
