"""Single-pass extremum reductions."""
from typing import Sequence

from ...base import ArrayOperation
from ...errors import EmptyInputError
from ...utils import check_elements, check_length


class _Extremum(ArrayOperation):
    def _check(self, arr: Sequence[int], n: int) -> None:
        check_length(arr, n)
        if n == 0:
            raise EmptyInputError(f"{self.name} of an empty array")
        if self.validate_elements:
            check_elements(arr, n)


class MinValue(_Extremum):
    """Smallest value among ``arr[0:n]``."""

    name = "minValue"

    def execute(self, arr: Sequence[int], n: int) -> int:
        self._check(arr, n)
        minimum = arr[0]
        for i in range(1, n):
            if arr[i] < minimum:
                minimum = arr[i]
        return minimum


class MaxValue(_Extremum):
    """Largest value among ``arr[0:n]``."""

    name = "maxValue"

    def execute(self, arr: Sequence[int], n: int) -> int:
        self._check(arr, n)
        maximum = arr[0]
        for i in range(1, n):
            if arr[i] > maximum:
                maximum = arr[i]
        return maximum


class MaxOccurrence(_Extremum):
    """Count the elements tied for the maximum value (mode of the maximum).

    One pass: a new maximum resets the count to 1, a repeat of the current
    maximum increments it.

    Example:
        >>> MaxOccurrence().execute([3, 3, 5, 5, 5, 2], 6)
        3
    """

    name = "getMaxOccurrence"

    def execute(self, arr: Sequence[int], n: int) -> int:
        self._check(arr, n)
        maximum = arr[0]
        count = 1
        for i in range(1, n):
            if arr[i] > maximum:
                maximum = arr[i]
                count = 1
            elif arr[i] == maximum:
                count += 1
        return count
