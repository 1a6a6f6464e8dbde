"""Comparison operations."""

from .basic.equality import CompareArrays, IsSorted

__all__ = ["CompareArrays", "IsSorted"]
