"""Linear search operations."""
import logging
from typing import Callable, Optional, Sequence

from ...base import ArrayOperation
from ...errors import NOT_FOUND
from ...logging_setup import SEARCH_LOGGER
from ...utils import check_elements, check_length

logger = logging.getLogger(SEARCH_LOGGER)


class _PrefixScan(ArrayOperation):
    def _check(self, arr: Sequence[int], n: int) -> None:
        check_length(arr, n)
        if self.validate_elements:
            check_elements(arr, n)


class LinearSearch(_PrefixScan):
    """Find the first index of a value by scanning from the front.

    Linear search needs no ordering of the data and inspects at most ``n``
    elements.

    Time complexity:
        - best case: O(1), target at index 0
        - worst case: O(n), target last or absent
    Space complexity: O(1)
    """

    name = "searchLIN"

    def execute(self, arr: Sequence[int], n: int, target: int) -> int:
        """Return the index of the first ``target`` in ``arr[0:n]``, or -1.

        Example:
            >>> LinearSearch().execute([3, 1, 4, 1, 5], 5, 1)
            1
            >>> LinearSearch().execute([3, 1, 4, 1, 5], 5, 9)
            -1
        """
        self._check(arr, n)
        for i in range(n):
            if arr[i] == target:
                return i
        return NOT_FOUND


class FirstIndexOf(LinearSearch):
    """Same scan as :class:`LinearSearch`, bound under the ``indexOf`` name."""

    name = "indexOf"


class OccurrenceSearch(_PrefixScan):
    """Count every occurrence of a value and report each matching index.

    Each match is emitted as a diagnostic: logged at INFO on the
    ``arrays_util.searching`` logger and passed to ``sink`` when one is given.
    """

    name = "search"

    def execute(self, arr: Sequence[int], n: int, target: int,
                sink: Optional[Callable[[int], None]] = None) -> int:
        """Return how many elements of ``arr[0:n]`` equal ``target``."""
        self._check(arr, n)
        count = 0
        for i in range(n):
            if arr[i] == target:
                logger.info("match for %d at index %d", target, i)
                if sink is not None:
                    sink(i)
                count += 1
        return count
