"""Error taxonomy shared by all array operations.

``NOT_FOUND`` is the result value of an unsuccessful search, not an exception.
"""

NOT_FOUND = -1


class ArraysError(Exception):
    """Base class for errors raised by array operations."""


class OutOfBoundsError(ArraysError, IndexError):
    """An index, length or range argument falls outside the array."""


class EmptyInputError(ArraysError, ValueError):
    """An element had to be inspected but the array is empty."""


class DivideByZeroError(ArraysError, ZeroDivisionError):
    """A modulo by a zero length was requested."""
