"""Sorting operations."""

from .advanced.dual_pivot_quick_sort import DualPivotQuickSort
from .advanced.partition import PivotRecord, pivot_partition

__all__ = ["DualPivotQuickSort", "PivotRecord", "pivot_partition"]
