"""Binary search implementation."""
from typing import Sequence

from ...base import ArrayOperation
from ...errors import NOT_FOUND
from ...utils import check_elements, check_length


class BinarySearch(ArrayOperation):
    """Find a value in an ascending array by repeated halving.

    The search keeps a half-open window ``[start, end)`` that always contains
    the first position whose value is not below the target:

        1. look at the middle element
        2. if it is below the target, drop the lower half including it
        3. otherwise drop the upper half but keep the middle element
        4. stop when the window is empty and check the element it points at

    Because the middle element is kept on a match, the index returned is the
    lowest one holding the target when it is repeated.
    """

    name = "searchBIN"

    def execute(self, arr: Sequence[int], n: int, target: int) -> int:
        """Return the first index of ``target`` in the sorted ``arr[0:n]``.

        Args:
            arr: array whose first ``n`` elements are in ascending order
            n: number of elements to search
            target: value to look for

        Returns:
            int: index of the first occurrence, or -1 when absent

        Time complexity: O(log n)
        Space complexity: O(1)

        Note:
            the ordering is not verified; on unsorted input the result is
            unreliable

        Example:
            >>> BinarySearch().execute([1, 3, 5, 7, 9], 5, 5)
            2
            >>> BinarySearch().execute([1, 3, 5, 7, 9], 5, 4)
            -1
        """
        check_length(arr, n)
        if self.validate_elements:
            check_elements(arr, n)

        start, end = 0, n
        while start < end:
            mid = (start + end) // 2
            if arr[mid] < target:
                start = mid + 1
            else:
                end = mid

        if start < n and arr[start] == target:
            return start
        return NOT_FOUND
