"""Sort benchmarking."""

from .benchmark_system import (
    BenchmarkConfig,
    BenchmarkResult,
    BenchmarkStatus,
    DataGenerator,
    DataPattern,
    SortBenchmark,
)

__all__ = [
    "BenchmarkConfig",
    "BenchmarkResult",
    "BenchmarkStatus",
    "DataGenerator",
    "DataPattern",
    "SortBenchmark",
]
