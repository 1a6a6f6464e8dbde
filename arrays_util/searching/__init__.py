"""Searching operations."""

from .basic.binary_search import BinarySearch
from .basic.linear_search import FirstIndexOf, LinearSearch, OccurrenceSearch

__all__ = ["BinarySearch", "FirstIndexOf", "LinearSearch", "OccurrenceSearch"]
