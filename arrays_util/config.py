"""Configuration for the array function table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import yaml

from .logging_setup import LoggingConfig


@dataclass(frozen=True)
class ArraysConfig:
    """Settings applied when the function table is built.

    Parameters
    ----------
    enable_metrics:
        Record execution time of every call made through ``ArrayManager``.
    max_metrics_history:
        Number of metric records kept per operation; older ones are dropped.
    parallel_sort:
        Bind ``sort`` to the thread-pool variant of the dual-pivot sort.
    max_workers:
        Thread pool size used by the parallel sort.
    parallel_threshold:
        Zones smaller than this are sorted serially inside one task.
    validate_elements:
        Check element types and 32-bit width on every call.
    logging:
        Logging section; applied by ``use_array_functions`` when present.
        A plain mapping (as read from YAML) is turned into a
        :class:`LoggingConfig`.
    """

    enable_metrics: bool = True
    max_metrics_history: int = 1000
    parallel_sort: bool = False
    max_workers: int = 4
    parallel_threshold: int = 2048
    validate_elements: bool = True
    logging: Optional[LoggingConfig] = None

    def __post_init__(self) -> None:
        if isinstance(self.logging, dict):
            object.__setattr__(self, "logging", LoggingConfig(**self.logging))
        if self.max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        if self.parallel_threshold < 2:
            raise ValueError("parallel_threshold must be at least 2")
        if self.max_metrics_history < 1:
            raise ValueError("max_metrics_history must be at least 1")


def load_config(path: str) -> ArraysConfig:
    """Load :class:`ArraysConfig` from a YAML file."""
    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    return ArraysConfig(**data)
