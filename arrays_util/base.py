from abc import ABC, abstractmethod
from typing import Any


class ArrayOperation(ABC):
    """Base class for every operation exposed by the array function table.

    Concrete operations implement :meth:`execute`.  An instance keeps no
    per-call state, so a single instance is bound into the dispatch table and
    reused for every call.

    Subclasses must implement:
        execute: run the operation and return its result
    """

    #: Stable dispatch name, e.g. ``"searchBIN"``.
    name: str = ""

    def __init__(self, validate_elements: bool = True) -> None:
        """
        Args:
            validate_elements: check element types and widths on every call
        """
        self.validate_elements = validate_elements

    @abstractmethod
    def execute(self, *args, **kwargs) -> Any:
        """Run the operation and return its result.

        Args:
            *args: positional arguments, defined by the concrete operation
            **kwargs: keyword arguments, defined by the concrete operation

        Returns:
            Any: the operation result; in-place operations return the mutated
            sequence or ``None``

        Raises:
            NotImplementedError: if a subclass does not implement it
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
