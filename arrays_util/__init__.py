"""Fixed-size integer array operations behind one dispatch table.

Usage::

    from arrays_util import use_array_functions

    arrays = use_array_functions()
    data = [5, -3, 0, 0, 5, 2]
    arrays.sort(data, 0, len(data) - 1)
    arrays.to_string(data, len(data))   # '[-3, 0, 0, 2, 5, 5]'
"""

from .array_functions import (
    ArrayFunctions,
    ArrayManager,
    OperationCategory,
    OperationRegistry,
    use_array_functions,
)
from .config import ArraysConfig, load_config
from .errors import (
    NOT_FOUND,
    ArraysError,
    DivideByZeroError,
    EmptyInputError,
    OutOfBoundsError,
)

__all__ = [
    "ArrayFunctions",
    "ArrayManager",
    "ArraysConfig",
    "ArraysError",
    "DivideByZeroError",
    "EmptyInputError",
    "NOT_FOUND",
    "OperationCategory",
    "OperationRegistry",
    "OutOfBoundsError",
    "load_config",
    "use_array_functions",
]
