"""Operations that rearrange or copy array contents."""

from .basic.copy import Concatenate, CopyOfRange
from .basic.reverse import Reverse
from .basic.rotate import Rotate

__all__ = ["Concatenate", "CopyOfRange", "Reverse", "Rotate"]
