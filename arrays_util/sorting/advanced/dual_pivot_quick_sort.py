"""Dual-pivot quicksort."""
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, MutableSequence, Tuple

from ...base import ArrayOperation
from ...utils import check_elements, check_range
from .partition import PivotRecord, pivot_partition

logger = logging.getLogger(__name__)


class DualPivotQuickSort(ArrayOperation):
    """Sort an integer array in place with a dual-pivot quicksort.

    Each step partitions a range around the values found at its two ends
    (see :func:`pivot_partition`) and then sorts the three resulting zones
    independently.  The zones never overlap, so they may be sorted in any
    order, or concurrently, without coordination.

    Time complexity:
        - average: O(n log n)
        - worst case: O(n^2), for inputs whose endpoints are always extreme,
          e.g. already sorted or reverse sorted data
    Space complexity: O(log n) average, O(n) worst case for the work stack

    The sort is not stable; with plain integers this is unobservable.
    """

    name = "sort"

    def __init__(
        self,
        validate_elements: bool = True,
        max_workers: int = 4,
        parallel_threshold: int = 2048,
    ) -> None:
        super().__init__(validate_elements)
        self.max_workers = max_workers
        self.parallel_threshold = parallel_threshold

    def execute(self, arr: MutableSequence[int], low: int, high: int) -> None:
        """Sort ``arr[low..high]`` (both ends inclusive) in place, ascending.

        A range with ``low >= high`` holds at most one element and is left
        untouched, so ``execute(arr, 0, len(arr) - 1)`` is valid for empty
        arrays.

        Raises:
            OutOfBoundsError: ``low < high`` but the range leaves the array
            TypeError: an element is not an integer
        """
        if low >= high:
            return
        self._check(arr, low, high)
        self._sort_range(arr, low, high)

    def execute_parallel(self, arr: MutableSequence[int], low: int, high: int) -> None:
        """Sort like :meth:`execute`, forking large zones onto a thread pool.

        Ranges of at least ``parallel_threshold`` elements are partitioned by
        the calling thread; every smaller zone is handed to the pool as an
        independent task.  All tasks are joined before returning and the first
        task failure is re-raised.
        """
        if low >= high:
            return
        self._check(arr, low, high)

        futures: List[Future] = []
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            pending: List[Tuple[int, int]] = [(low, high)]
            while pending:
                lo, hi = pending.pop()
                if lo >= hi:
                    continue
                if hi - lo + 1 < self.parallel_threshold:
                    futures.append(executor.submit(self._sort_range, arr, lo, hi))
                    continue
                pivot = self._partition(arr, lo, hi)
                pending.append((pivot.right + 1, hi))
                pending.append((pivot.left + 1, pivot.right - 1))
                pending.append((lo, pivot.left - 1))
            for future in futures:
                future.result()
        logger.debug("parallel sort of [%d, %d] joined %d tasks", low, high, len(futures))

    def sort_copy(self, data: MutableSequence[int]) -> List[int]:
        """Return a sorted copy of ``data`` and leave ``data`` untouched."""
        arr = list(data)
        self.execute(arr, 0, len(arr) - 1)
        return arr

    def _check(self, arr: MutableSequence[int], low: int, high: int) -> None:
        check_range(arr, low, high)
        if self.validate_elements:
            check_elements(arr, high + 1, start=low)

    def _sort_range(self, arr: MutableSequence[int], low: int, high: int) -> None:
        # LIFO stack, zones pushed right to left: same visiting order as
        # recursing on the left, middle and right zone in turn.
        stack: List[Tuple[int, int]] = [(low, high)]
        while stack:
            lo, hi = stack.pop()
            if lo >= hi:
                continue
            pivot = self._partition(arr, lo, hi)
            stack.append((pivot.right + 1, hi))
            stack.append((pivot.left + 1, pivot.right - 1))
            stack.append((lo, pivot.left - 1))

    def _partition(self, arr: MutableSequence[int], low: int, high: int) -> PivotRecord:
        pivot = pivot_partition(arr, low, high)
        logger.debug("partition [%d, %d] -> pivots at %d, %d", low, high, pivot.left, pivot.right)
        return pivot

