"""Operations that allocate and return a new array."""
from typing import List, Sequence

from ...base import ArrayOperation
from ...errors import OutOfBoundsError
from ...utils import check_elements, check_length


class CopyOfRange(ArrayOperation):
    """Copy a half-open slice ``[start, end)`` of an array into a new list."""

    name = "copyOfRange"

    def execute(self, arr: Sequence[int], start: int, end: int) -> List[int]:
        """
        Args:
            arr: source array, left untouched
            start: first index copied
            end: one past the last index copied

        Returns:
            List[int]: a new list of length ``end - start``

        Raises:
            OutOfBoundsError: ``start``/``end`` outside ``[0, len(arr)]`` or
            ``start > end``
        """
        check_length(arr, end)
        if start < 0 or start > end:
            raise OutOfBoundsError(f"invalid range [{start}, {end})")
        if self.validate_elements:
            check_elements(arr, end)
        return [arr[i] for i in range(start, end)]


class Concatenate(ArrayOperation):
    """Join the prefixes of two arrays into a new list."""

    name = "concat"

    def execute(self, arr1: Sequence[int], size1: int,
                arr2: Sequence[int], size2: int) -> List[int]:
        """Return ``arr1[0:size1] + arr2[0:size2]`` as a new list."""
        check_length(arr1, size1)
        check_length(arr2, size2)
        if self.validate_elements:
            check_elements(arr1, size1)
            check_elements(arr2, size2)

        result = [arr1[i] for i in range(size1)]
        result.extend(arr2[i] for i in range(size2))
        return result
