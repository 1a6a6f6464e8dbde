"""Structural comparisons."""
from typing import Sequence

from ...base import ArrayOperation
from ...utils import check_elements, check_length


class CompareArrays(ArrayOperation):
    """Structural equality of two array prefixes."""

    name = "compare"

    def execute(self, arr1: Sequence[int], size1: int,
                arr2: Sequence[int], size2: int) -> bool:
        """Return True when both prefixes have the same length and elements.

        Arrays of different size compare unequal without looking at any
        element.
        """
        check_length(arr1, size1)
        check_length(arr2, size2)
        if size1 != size2:
            return False
        if self.validate_elements:
            check_elements(arr1, size1)
            check_elements(arr2, size2)

        for i in range(size1):
            if arr1[i] != arr2[i]:
                return False
        return True


class IsSorted(ArrayOperation):
    """Check that ``arr[0:n]`` is non-decreasing."""

    name = "isSorted"

    def execute(self, arr: Sequence[int], n: int) -> bool:
        check_length(arr, n)
        if self.validate_elements:
            check_elements(arr, n)
        for i in range(1, n):
            if arr[i] < arr[i - 1]:
                return False
        return True
