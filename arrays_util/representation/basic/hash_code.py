"""Order-sensitive content hash."""
from typing import Optional, Sequence

from ...base import ArrayOperation
from ...utils import check_elements, check_length

HASH_SEED = 1
HASH_MULTIPLIER = 19
_UINT64_MASK = (1 << 64) - 1


class HashCode(ArrayOperation):
    """Hash the first ``n`` elements of an array into an unsigned 64-bit value.

    Starting from ``h = 1``, every element ``v`` is folded in as::

        h = h * 19 + (v ^ (v >> 31))    (mod 2**64)

    For a 32-bit ``v`` the arithmetic shift ``v >> 31`` is 0 for
    non-negative values and -1 for negative ones, so the XOR maps a negative
    ``v`` to ``-v - 1``.  Every contribution is therefore non-negative, but
    ``v`` and ``-v - 1`` contribute the same amount: ``[-1]`` and ``[0]`` hash
    alike.
    """

    name = "hashCode"

    def execute(self, arr: Optional[Sequence[int]], n: int) -> int:
        """Return the hash, or 0 when ``arr`` is None.

        The result is deterministic: equal prefixes always hash equally.
        """
        if arr is None:
            return 0
        check_length(arr, n)
        if self.validate_elements:
            check_elements(arr, n)

        h = HASH_SEED
        for i in range(n):
            value = int(arr[i])
            h = (h * HASH_MULTIPLIER + (value ^ (value >> 31))) & _UINT64_MASK
        return h
