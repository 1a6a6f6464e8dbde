"""Sum of array elements."""
import logging
from typing import Sequence

from ...base import ArrayOperation
from ...utils import check_elements, check_length

logger = logging.getLogger(__name__)


class Summation(ArrayOperation):
    """Add up the first ``n`` elements of an array.

    The result is the exact sum as a Python integer; it is not wrapped to 32
    bits, so large arrays of large values never overflow silently.
    """

    name = "sum"

    def execute(self, arr: Sequence[int], n: int) -> int:
        """Return ``arr[0] + ... + arr[n - 1]``; 0 for an empty prefix."""
        check_length(arr, n)
        if self.validate_elements:
            check_elements(arr, n)
        if n == 0:
            logger.debug("sum of an empty array is 0")

        total = 0
        for i in range(n):
            total += int(arr[i])
        return total
