"""
Array function table - single entry point for all array operations.

Operations are registered by stable name in an ``OperationRegistry``; the
registry is frozen and turned into an immutable ``ArrayFunctions`` table by
``use_array_functions()``.  Callers keep a reference to the table and pass it
around explicitly.  ``ArrayManager`` adds timing metrics and logging on top of
the table for callers that dispatch by name.
"""

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Type

from .base import ArrayOperation
from .comparison.basic.equality import CompareArrays, IsSorted
from .config import ArraysConfig
from .logging_setup import setup_logging
from .reduction.basic.extremum import MaxOccurrence, MaxValue, MinValue
from .reduction.basic.summation import Summation
from .representation.basic.hash_code import HashCode
from .representation.basic.to_string import ToString
from .searching.basic.binary_search import BinarySearch
from .searching.basic.linear_search import FirstIndexOf, LinearSearch, OccurrenceSearch
from .sorting.advanced.dual_pivot_quick_sort import DualPivotQuickSort
from .transform.basic.copy import Concatenate, CopyOfRange
from .transform.basic.reverse import Reverse
from .transform.basic.rotate import Rotate

logger = logging.getLogger(__name__)


class OperationCategory(Enum):
    """Operation categories."""
    SEARCHING = "searching"
    SORTING = "sorting"
    TRANSFORM = "transform"
    REDUCTION = "reduction"
    COMPARISON = "comparison"
    REPRESENTATION = "representation"


# stable name -> ArrayFunctions attribute
FIELD_NAMES: Mapping[str, str] = MappingProxyType({
    "copyOfRange": "copy_of_range",
    "rotate": "rotate",
    "searchLIN": "search_lin",
    "search": "search",
    "searchBIN": "search_bin",
    "reverse": "reverse",
    "maxValue": "max_value",
    "minValue": "min_value",
    "getMaxOccurrence": "get_max_occurrence",
    "toString": "to_string",
    "sort": "sort",
    "compare": "compare",
    "sum": "sum",
    "isSorted": "is_sorted",
    "concat": "concat",
    "indexOf": "index_of",
    "hashCode": "hash_code",
})


@dataclass
class OperationMetrics:
    """Execution record of one call made through ``ArrayManager``."""
    execution_time: float
    success: bool = True
    error_message: Optional[str] = None
    input_size: Optional[int] = None


class OperationRegistry:
    """Registry of operation classes, writable until frozen."""

    def __init__(self) -> None:
        self._operations: Dict[str, Type[ArrayOperation]] = {}
        self._categories: Dict[str, OperationCategory] = {}
        self._frozen = False
        self._register_default_operations()

    def _register_default_operations(self) -> None:
        # searching
        self.register("searchLIN", LinearSearch, OperationCategory.SEARCHING)
        self.register("search", OccurrenceSearch, OperationCategory.SEARCHING)
        self.register("searchBIN", BinarySearch, OperationCategory.SEARCHING)
        self.register("indexOf", FirstIndexOf, OperationCategory.SEARCHING)

        # sorting
        self.register("sort", DualPivotQuickSort, OperationCategory.SORTING)

        # transform
        self.register("copyOfRange", CopyOfRange, OperationCategory.TRANSFORM)
        self.register("rotate", Rotate, OperationCategory.TRANSFORM)
        self.register("reverse", Reverse, OperationCategory.TRANSFORM)
        self.register("concat", Concatenate, OperationCategory.TRANSFORM)

        # reduction
        self.register("maxValue", MaxValue, OperationCategory.REDUCTION)
        self.register("minValue", MinValue, OperationCategory.REDUCTION)
        self.register("getMaxOccurrence", MaxOccurrence, OperationCategory.REDUCTION)
        self.register("sum", Summation, OperationCategory.REDUCTION)

        # comparison
        self.register("compare", CompareArrays, OperationCategory.COMPARISON)
        self.register("isSorted", IsSorted, OperationCategory.COMPARISON)

        # representation
        self.register("toString", ToString, OperationCategory.REPRESENTATION)
        self.register("hashCode", HashCode, OperationCategory.REPRESENTATION)

    def register(self, name: str, operation_class: Type[ArrayOperation],
                 category: OperationCategory) -> None:
        """
        Register an operation class under a stable name.

        Args:
            name: stable dispatch name, one of ``FIELD_NAMES``
            operation_class: the ``ArrayOperation`` subclass implementing it
            category: operation category

        Raises:
            RuntimeError: the registry is frozen
            KeyError: ``name`` is not a slot of the function table
            ValueError: ``operation_class`` is not an ``ArrayOperation``
        """
        if self._frozen:
            raise RuntimeError(f"registry is frozen, cannot register {name}")
        if name not in FIELD_NAMES:
            raise KeyError(f"unknown operation slot: {name}")
        if not (isinstance(operation_class, type) and issubclass(operation_class, ArrayOperation)):
            raise ValueError(f"operation class {operation_class} must subclass ArrayOperation")

        self._operations[name] = operation_class
        self._categories[name] = category

    def freeze(self) -> None:
        """Reject any further registration."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get_operation(self, name: str) -> Type[ArrayOperation]:
        """Return the operation class registered under ``name``."""
        if name not in self._operations:
            raise KeyError(f"operation not found: {name}")
        return self._operations[name]

    def get_category(self, name: str) -> Optional[OperationCategory]:
        return self._categories.get(name)

    def list_operations(self, category: Optional[OperationCategory] = None) -> List[str]:
        """List registered names, optionally restricted to one category."""
        if category is None:
            return list(self._operations.keys())
        return [name for name, cat in self._categories.items() if cat == category]


@dataclass(frozen=True)
class ArrayFunctions:
    """Immutable table of bound array operations.

    Attributes use snake_case; :meth:`get` resolves the stable camelCase
    names (``"searchBIN"``, ``"getMaxOccurrence"``, ...).
    """
    copy_of_range: Callable[..., List[int]]
    rotate: Callable[..., Any]
    search_lin: Callable[..., int]
    search: Callable[..., int]
    search_bin: Callable[..., int]
    reverse: Callable[..., Any]
    max_value: Callable[..., int]
    min_value: Callable[..., int]
    get_max_occurrence: Callable[..., int]
    to_string: Callable[..., str]
    sort: Callable[..., None]
    compare: Callable[..., bool]
    sum: Callable[..., int]
    is_sorted: Callable[..., bool]
    concat: Callable[..., List[int]]
    index_of: Callable[..., int]
    hash_code: Callable[..., int]
    config: ArraysConfig = field(default_factory=ArraysConfig, compare=False)

    def get(self, name: str) -> Callable[..., Any]:
        """Return the operation bound under the stable ``name``."""
        try:
            return getattr(self, FIELD_NAMES[name])
        except KeyError:
            raise KeyError(f"operation not found: {name}") from None

    def names(self) -> List[str]:
        return list(FIELD_NAMES.keys())


def _instantiate(operation_class: Type[ArrayOperation], config: ArraysConfig) -> ArrayOperation:
    if issubclass(operation_class, DualPivotQuickSort):
        return operation_class(
            validate_elements=config.validate_elements,
            max_workers=config.max_workers,
            parallel_threshold=config.parallel_threshold,
        )
    return operation_class(validate_elements=config.validate_elements)


def use_array_functions(config: Optional[ArraysConfig] = None,
                        registry: Optional[OperationRegistry] = None) -> ArrayFunctions:
    """Build the array function table.

    This is the one setup call; the returned table never changes afterwards.
    The registry, when given, is frozen as part of the call. A ``logging``
    section in the config is applied through :func:`setup_logging`.
    """
    config = config or ArraysConfig()
    if config.logging is not None:
        setup_logging(config.logging)
    registry = registry or OperationRegistry()
    registry.freeze()

    bound: Dict[str, Callable[..., Any]] = {}
    for name, attribute in FIELD_NAMES.items():
        operation = _instantiate(registry.get_operation(name), config)
        if config.parallel_sort and isinstance(operation, DualPivotQuickSort):
            bound[attribute] = operation.execute_parallel
        else:
            bound[attribute] = operation.execute

    logger.debug("array function table ready with %d operations", len(bound))
    return ArrayFunctions(config=config, **bound)


class ArrayManager:
    """
    Dispatch operations by name with timing metrics and logging.

    Errors raised by an operation are logged and re-raised unchanged; there
    are no retries.
    """

    def __init__(self, functions: Optional[ArrayFunctions] = None):
        self.logger = logging.getLogger(__name__)
        self.functions = functions or use_array_functions()
        self.config = self.functions.config
        self._metrics_history: Dict[str, List[OperationMetrics]] = {}

    def execute(self, operation_name: str, *args, **kwargs) -> Any:
        """
        Execute an operation.

        Args:
            operation_name: stable operation name
            *args: operation arguments
            **kwargs: operation keyword arguments

        Returns:
            the operation result

        Raises:
            KeyError: the operation does not exist
            Exception: whatever the operation raises
        """
        operation = self.functions.get(operation_name)
        start_time = time.perf_counter()

        try:
            result = operation(*args, **kwargs)
        except Exception as e:
            execution_time = time.perf_counter() - start_time
            if self.config.enable_metrics:
                self._record_metrics(operation_name, OperationMetrics(
                    execution_time=execution_time,
                    success=False,
                    error_message=str(e),
                    input_size=self._estimate_input_size(args),
                ))
            self.logger.error("operation %s failed: %s", operation_name, e)
            raise

        execution_time = time.perf_counter() - start_time
        if self.config.enable_metrics:
            self._record_metrics(operation_name, OperationMetrics(
                execution_time=execution_time,
                input_size=self._estimate_input_size(args),
            ))
        self.logger.debug("operation %s finished in %.6fs", operation_name, execution_time)
        return result

    def get_metrics(self, operation_name: str) -> List[OperationMetrics]:
        """Metrics recorded for ``operation_name``, oldest first."""
        return self._metrics_history.get(operation_name, [])

    def get_performance_summary(self, operation_name: str) -> Dict[str, Any]:
        """
        Summarize the recorded metrics of an operation.

        Returns:
            dict with execution counts, success rate and timing statistics;
            empty when nothing was recorded
        """
        metrics = self.get_metrics(operation_name)
        if not metrics:
            return {}

        successful_metrics = [m for m in metrics if m.success]
        if not successful_metrics:
            return {"total_executions": len(metrics), "success_rate": 0.0}

        execution_times = [m.execution_time for m in successful_metrics]

        return {
            "total_executions": len(metrics),
            "successful_executions": len(successful_metrics),
            "success_rate": len(successful_metrics) / len(metrics),
            "avg_execution_time": sum(execution_times) / len(execution_times),
            "min_execution_time": min(execution_times),
            "max_execution_time": max(execution_times),
            "total_execution_time": sum(execution_times),
        }

    def _estimate_input_size(self, args: tuple) -> Optional[int]:
        """Total length of the sized positional arguments."""
        total_size = 0
        for arg in args:
            if hasattr(arg, "__len__") and not isinstance(arg, str):
                try:
                    total_size += len(arg)
                except TypeError:
                    # 0-d numpy arrays define __len__ but are unsized
                    continue
        return total_size if total_size > 0 else None

    def _record_metrics(self, operation_name: str, metrics: OperationMetrics) -> None:
        history = self._metrics_history.setdefault(operation_name, [])
        history.append(metrics)

        max_history = self.config.max_metrics_history
        if len(history) > max_history:
            self._metrics_history[operation_name] = history[-max_history:]
