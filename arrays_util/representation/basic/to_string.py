"""String rendering of an array."""
from typing import List, Sequence

from ...base import ArrayOperation
from ...utils import check_elements, check_length

EMPTY_ARRAY_TEXT = "[NULL]"


class ToString(ArrayOperation):
    """Render ``arr[0:n]`` as ``"[v1, v2, ..., vn]"``.

    An empty prefix renders as ``"[NULL]"``.

    Example:
        >>> ToString().execute([1, 2], 2)
        '[1, 2]'
        >>> ToString().execute([], 0)
        '[NULL]'
    """

    name = "toString"

    def execute(self, arr: Sequence[int], n: int) -> str:
        check_length(arr, n)
        if n == 0:
            return EMPTY_ARRAY_TEXT
        if self.validate_elements:
            check_elements(arr, n)

        parts: List[str] = []
        for i in range(n):
            parts.append(str(int(arr[i])))
        return "[" + ", ".join(parts) + "]"
