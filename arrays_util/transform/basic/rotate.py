"""In-place right rotation."""
from typing import MutableSequence

from ...base import ArrayOperation
from ...errors import DivideByZeroError
from ...utils import check_elements, check_length
from .reverse import reverse_range


class Rotate(ArrayOperation):
    """Rotate the first ``n`` elements of an array to the right.

    The rotation uses three reversals (whole prefix, head, tail), so it runs
    in O(n) swaps without allocating a second buffer.

    Example:
        >>> Rotate().execute([1, 2, 3, 4, 5], 5, 2)
        [4, 5, 1, 2, 3]
    """

    name = "rotate"

    def execute(self, arr: MutableSequence[int], n: int, k: int) -> MutableSequence[int]:
        """Right-rotate ``arr[0:n]`` by ``k mod n`` positions and return ``arr``.

        ``k`` may be negative (a left rotation) or larger than ``n``.

        Raises:
            DivideByZeroError: ``n`` is zero
            OutOfBoundsError: ``n`` exceeds the array length
        """
        check_length(arr, n)
        if n == 0:
            raise DivideByZeroError("cannot rotate an array of length 0")
        if self.validate_elements:
            check_elements(arr, n)

        k %= n
        if k:
            reverse_range(arr, 0, n)
            reverse_range(arr, 0, k)
            reverse_range(arr, k, n)
        return arr
