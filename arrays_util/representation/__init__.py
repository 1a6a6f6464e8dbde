"""Rendering and hashing of arrays."""

from .basic.hash_code import HashCode
from .basic.to_string import ToString

__all__ = ["HashCode", "ToString"]
