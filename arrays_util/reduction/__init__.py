"""Reductions over an array."""

from .basic.extremum import MaxOccurrence, MaxValue, MinValue
from .basic.summation import Summation

__all__ = ["MaxOccurrence", "MaxValue", "MinValue", "Summation"]
