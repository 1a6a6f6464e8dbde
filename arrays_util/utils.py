"""Shared helpers for the array operations.

The helpers cover the in-place element swap used by the sort and transform
operations and the argument checks that turn the unchecked index arithmetic
of a raw array library into explicit errors.
"""
from numbers import Integral
from typing import Any, MutableSequence, Optional, Sequence

from .errors import OutOfBoundsError

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


def swap(items: MutableSequence[Any], i: int, j: int) -> None:
    """Swap two elements of ``items`` in place.

    Args:
        items: the sequence to modify
        i: index of the first element
        j: index of the second element

    Example:
        >>> arr = [1, 2, 3]
        >>> swap(arr, 0, 2)
        >>> arr
        [3, 2, 1]
    """
    items[i], items[j] = items[j], items[i]


def _is_int(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def check_elements(arr: Sequence[Any], n: Optional[int] = None, start: int = 0) -> None:
    """Check that ``arr[start:n]`` holds signed 32-bit integers.

    Raises:
        TypeError: an element is not integral (``bool`` counts as non-integral)
        ValueError: an element does not fit in a signed 32-bit integer
    """
    if arr is None:
        raise TypeError("array must not be None")
    count = len(arr) if n is None else n
    for i in range(start, count):
        value = arr[i]
        if not _is_int(value):
            raise TypeError(f"element {i} is not an integer: {value!r}")
        if not INT_MIN <= value <= INT_MAX:
            raise ValueError(f"element {i} does not fit in 32 bits: {value}")


def check_length(arr: Sequence[Any], n: int) -> None:
    """Check that ``n`` is a usable prefix length of ``arr``."""
    if arr is None:
        raise TypeError("array must not be None")
    if not _is_int(n):
        raise TypeError(f"length must be an integer, got {type(n).__name__}")
    if n < 0 or n > len(arr):
        raise OutOfBoundsError(f"length {n} outside [0, {len(arr)}]")


def check_range(arr: Sequence[Any], low: int, high: int) -> None:
    """Check the inclusive ``[low, high]`` range of a non-trivial sort step."""
    if arr is None:
        raise TypeError("array must not be None")
    if not (_is_int(low) and _is_int(high)):
        raise TypeError("range bounds must be integers")
    if low < 0 or high >= len(arr):
        raise OutOfBoundsError(
            f"range [{low}, {high}] outside array of length {len(arr)}"
        )
