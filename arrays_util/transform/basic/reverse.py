"""In-place reversal."""
from typing import MutableSequence

from ...base import ArrayOperation
from ...utils import check_elements, check_length, swap


def reverse_range(arr: MutableSequence[int], start: int, end: int) -> None:
    """Reverse ``arr[start:end]`` in place by swapping symmetric pairs."""
    end -= 1
    while start < end:
        swap(arr, start, end)
        start += 1
        end -= 1


class Reverse(ArrayOperation):
    """Reverse the first ``n`` elements of an array in place.

    Time complexity: O(n), ``n // 2`` swaps
    Space complexity: O(1)
    """

    name = "reverse"

    def execute(self, arr: MutableSequence[int], n: int) -> MutableSequence[int]:
        """Reverse ``arr[0:n]`` and return ``arr`` itself.

        Arrays with ``n <= 1`` are returned unchanged.
        """
        check_length(arr, n)
        if self.validate_elements:
            check_elements(arr, n)
        reverse_range(arr, 0, n)
        return arr
