"""
Sort benchmark.

Measures the dual-pivot sort of the function table across input sizes and
data patterns.  Sorted and reverse-sorted inputs show the quadratic worst case
of endpoint pivots, random and duplicate-heavy inputs the n log n average.
Every measured output is checked with ``is_sorted``.
"""

import json
import statistics
import time
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np

from ..array_functions import ArrayFunctions, use_array_functions
from ..logging_setup import get_logger

logger = get_logger(__name__)


class BenchmarkStatus(Enum):
    """Benchmark run status."""
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class DataPattern(Enum):
    """Shape of the generated input."""
    RANDOM = "random"
    SORTED = "sorted"
    REVERSED = "reversed"
    NEARLY_SORTED = "nearly_sorted"
    DUPLICATE_HEAVY = "duplicate_heavy"


@dataclass
class BenchmarkConfig:
    """Benchmark configuration."""
    test_sizes: List[int]
    patterns: List[DataPattern] = field(default_factory=lambda: [DataPattern.RANDOM])
    iterations: int = 3
    warmup_iterations: int = 1
    seed: Optional[int] = None


@dataclass
class PerformanceMetrics:
    """Timing of one sort run."""
    pattern: str
    input_size: int
    execution_time: float
    throughput: Optional[float] = None
    timestamp: Optional[str] = None

    def __post_init__(self):
        if self.timestamp is None:
            self.timestamp = datetime.now().isoformat()

        # elements per second
        if self.throughput is None and self.execution_time > 0:
            self.throughput = self.input_size / self.execution_time


@dataclass
class BenchmarkResult:
    """Outcome of one benchmark run."""
    config: BenchmarkConfig
    metrics: List[PerformanceMetrics]
    status: BenchmarkStatus
    start_time: str
    end_time: Optional[str] = None
    error_message: Optional[str] = None

    def get_summary_statistics(self) -> Dict[str, Any]:
        """Timing statistics grouped by pattern and input size."""
        if not self.metrics:
            return {}

        groups: Dict[str, List[PerformanceMetrics]] = {}
        for metric in self.metrics:
            key = f"{metric.pattern}_size_{metric.input_size}"
            groups.setdefault(key, []).append(metric)

        summary = {}
        for key, group_metrics in groups.items():
            execution_times = [m.execution_time for m in group_metrics]
            summary[key] = {
                "pattern": group_metrics[0].pattern,
                "input_size": group_metrics[0].input_size,
                "sample_count": len(execution_times),
                "execution_time": {
                    "mean": statistics.mean(execution_times),
                    "median": statistics.median(execution_times),
                    "std": statistics.stdev(execution_times) if len(execution_times) > 1 else 0,
                    "min": min(execution_times),
                    "max": max(execution_times),
                },
            }
        return summary

    def to_dict(self) -> Dict[str, Any]:
        return {
            "config": {
                "test_sizes": list(self.config.test_sizes),
                "patterns": [p.value for p in self.config.patterns],
                "iterations": self.config.iterations,
                "warmup_iterations": self.config.warmup_iterations,
                "seed": self.config.seed,
            },
            "metrics": [vars(m) for m in self.metrics],
            "status": self.status.value,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "error_message": self.error_message,
            "summary": self.get_summary_statistics(),
        }


class DataGenerator:
    """Test data generator producing 32-bit integer lists."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = np.random.default_rng(seed)

    def generate(self, pattern: DataPattern, size: int) -> List[int]:
        if pattern is DataPattern.RANDOM:
            return self.generate_random_integers(size)
        if pattern is DataPattern.SORTED:
            return self.generate_sorted_integers(size)
        if pattern is DataPattern.REVERSED:
            return self.generate_sorted_integers(size, reverse=True)
        if pattern is DataPattern.NEARLY_SORTED:
            return self.generate_nearly_sorted(size)
        return self.generate_duplicate_heavy(size)

    def generate_random_integers(self, size: int, min_val: int = 0,
                                 max_val: Optional[int] = None) -> List[int]:
        if max_val is None:
            max_val = max(1, size * 2)
        return [int(v) for v in self.rng.integers(min_val, max_val, size)]

    @staticmethod
    def generate_sorted_integers(size: int, reverse: bool = False) -> List[int]:
        data = list(range(size))
        return data[::-1] if reverse else data

    def generate_nearly_sorted(self, size: int, disorder_ratio: float = 0.1) -> List[int]:
        data = list(range(size))
        if size < 2:
            return data
        for _ in range(int(size * disorder_ratio)):
            i, j = self.rng.choice(size, 2, replace=False)
            data[i], data[j] = data[j], data[i]
        return data

    def generate_duplicate_heavy(self, size: int, unique_ratio: float = 0.1) -> List[int]:
        unique_count = max(1, int(size * unique_ratio))
        return [int(v) for v in self.rng.integers(0, unique_count, size)]


class SortBenchmark:
    """
    Benchmark of the function table's ``sort``.

    Results are written as JSON to ``results_dir`` when one is given.
    """

    def __init__(self, functions: Optional[ArrayFunctions] = None,
                 results_dir: Optional[str] = None):
        self.functions = functions or use_array_functions()
        self.results_dir = Path(results_dir) if results_dir else None
        if self.results_dir is not None:
            self.results_dir.mkdir(parents=True, exist_ok=True)

    def run(self, config: BenchmarkConfig) -> BenchmarkResult:
        """
        Run the benchmark.

        A run whose output is not sorted stops the benchmark and marks the
        result FAILED with the error message.
        """
        generator = DataGenerator(config.seed)
        result = BenchmarkResult(
            config=config,
            metrics=[],
            status=BenchmarkStatus.RUNNING,
            start_time=datetime.now().isoformat(),
        )

        try:
            for pattern in config.patterns:
                for size in config.test_sizes:
                    log = logger.bind(pattern=pattern.value, size=size)
                    log.info("benchmark.size.start")
                    test_data = generator.generate(pattern, size)

                    for _ in range(config.warmup_iterations):
                        self._sort(list(test_data))

                    for _ in range(config.iterations):
                        result.metrics.append(self._measure(test_data, pattern, size))

            result.status = BenchmarkStatus.COMPLETED
            logger.info("benchmark.completed", samples=len(result.metrics))
        except Exception as e:
            result.status = BenchmarkStatus.FAILED
            result.error_message = str(e)
            logger.error("benchmark.failed", error=str(e))
        finally:
            result.end_time = datetime.now().isoformat()
            if self.results_dir is not None:
                self._save_result(result)

        return result

    def _sort(self, data: List[int]) -> List[int]:
        self.functions.sort(data, 0, len(data) - 1)
        return data

    def _measure(self, test_data: List[int], pattern: DataPattern, size: int) -> PerformanceMetrics:
        data_copy = list(test_data)

        start_time = time.perf_counter()
        self._sort(data_copy)
        execution_time = time.perf_counter() - start_time

        if not self.functions.is_sorted(data_copy, len(data_copy)):
            raise RuntimeError(f"sort produced unsorted output ({pattern.value}, size={size})")

        return PerformanceMetrics(
            pattern=pattern.value,
            input_size=size,
            execution_time=execution_time,
        )

    def _save_result(self, result: BenchmarkResult) -> Path:
        result_file = self.results_dir / f"sort_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}.json"
        with open(result_file, "w", encoding="utf-8") as f:
            json.dump(result.to_dict(), f, indent=2, ensure_ascii=False)
        return result_file
