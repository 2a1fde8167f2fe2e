"""
Execution, comparison and benchmarking of the GCD variants.

Nothing here is global: callers that want cumulative statistics create an
``ExecutionStats`` and pass it to each call.
"""

import logging
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .algorithms import ALL_ALGORITHMS, Algorithm
from .int64 import GcdError, check_operands
from .recursive import ExtendedGcd, gcd_extended
from .validation import validate, validate_consistency, validate_extended

logger = logging.getLogger(__name__)


@dataclass
class Measurement:
    algorithm: Algorithm
    a: int
    b: int
    value: Optional[int]
    elapsed: float
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed * 1000.0


@dataclass
class ExecutionStats:
    """Cumulative counters for one session; owned by the caller."""

    runs: int = 0
    failures: int = 0
    total_time: float = 0.0
    per_algorithm: Counter = field(default_factory=Counter)

    def record(self, m: Measurement) -> None:
        self.runs += 1
        self.total_time += m.elapsed
        self.per_algorithm[m.algorithm] += 1
        if not m.ok:
            self.failures += 1

    @property
    def successes(self) -> int:
        return self.runs - self.failures

    @property
    def average_time(self) -> float:
        return self.total_time / self.runs if self.runs else 0.0


@dataclass
class Comparison:
    a: int
    b: int
    measurements: List[Measurement]

    @property
    def values(self) -> List[Optional[int]]:
        return [m.value for m in self.measurements]

    @property
    def consistent(self) -> bool:
        return validate_consistency(self.values)

    @property
    def valid(self) -> bool:
        """All computed values agree and are the true GCD."""
        if not self.consistent:
            return False
        return all(validate(self.a, self.b, v) for v in self.values if v is not None)


@dataclass
class BenchmarkResult:
    algorithm: Algorithm
    iterations: int
    successful_runs: int
    value: Optional[int]
    mean: float
    minimum: float
    maximum: float
    std: float
    error: Optional[str] = None

    @property
    def mean_ms(self) -> float:
        return self.mean * 1000.0


def execute(algorithm: Algorithm, a, b,
            stats: Optional[ExecutionStats] = None) -> Measurement:
    """
    Run one algorithm and time it.

    Input errors raised by the algorithm are captured in the returned
    measurement rather than propagated.
    """
    value = None
    error = None
    t0 = time.perf_counter()
    try:
        value = algorithm.compute(a, b)
    except (GcdError, TypeError) as exc:
        error = str(exc)
    elapsed = time.perf_counter() - t0

    if error is not None:
        logger.warning("%s rejected gcd(%s, %s): %s",
                       algorithm.display_name, a, b, error)
    else:
        logger.debug("%s: gcd(%s, %s) = %s in %.6f ms",
                     algorithm.display_name, a, b, value, elapsed * 1000.0)

    m = Measurement(algorithm, a, b, value, elapsed, error)
    if stats is not None:
        stats.record(m)
    return m


def execute_all(a, b, stats: Optional[ExecutionStats] = None,
                algorithms: Optional[Iterable[Algorithm]] = None) -> List[Measurement]:
    algorithms = ALL_ALGORITHMS if algorithms is None else list(algorithms)
    return [execute(alg, a, b, stats) for alg in algorithms]


def compare(a, b, stats: Optional[ExecutionStats] = None) -> Comparison:
    a, b = check_operands(a, b)
    result = Comparison(a, b, execute_all(a, b, stats))
    if not result.consistent:
        logger.warning("Inconsistent results for gcd(%d, %d): %s",
                       a, b, result.values)
    return result


def execute_extended(a, b) -> Tuple[ExtendedGcd, bool]:
    """Extended GCD together with its Bezout verification verdict."""
    ext = gcd_extended(a, b)
    ok = validate_extended(a, b, ext.gcd, ext.x, ext.y)
    if not ok:
        logger.warning("Bezout identity failed for gcd_extended(%s, %s) = %s",
                       a, b, ext)
    return ext, ok


def benchmark(a, b, iterations: int,
              algorithms: Optional[Iterable[Algorithm]] = None,
              stats: Optional[ExecutionStats] = None) -> List[BenchmarkResult]:
    """
    Time each algorithm over ``iterations`` sequential runs.

    Timing statistics cover successful runs only; an algorithm that
    rejects the input reports its error and zero timings.
    """
    if iterations <= 0:
        raise ValueError(f"iterations must be positive, got {iterations}")
    a, b = check_operands(a, b)
    algorithms = ALL_ALGORITHMS if algorithms is None else list(algorithms)

    results = []
    for alg in algorithms:
        logger.debug("Benchmarking %s x%d", alg.display_name, iterations)
        timings = []
        value = None
        error = None
        for _ in range(iterations):
            m = execute(alg, a, b, stats)
            if m.ok:
                timings.append(m.elapsed)
                value = m.value
            else:
                error = m.error
                break

        if timings:
            arr = np.asarray(timings, dtype=float)
            mean, lo, hi, std = (float(arr.mean()), float(arr.min()),
                                 float(arr.max()), float(arr.std()))
        else:
            mean = lo = hi = std = 0.0

        results.append(BenchmarkResult(
            algorithm=alg,
            iterations=iterations,
            successful_runs=len(timings),
            value=value,
            mean=mean,
            minimum=lo,
            maximum=hi,
            std=std,
            error=error,
        ))
    return results


def find_fastest(a, b, stats: Optional[ExecutionStats] = None,
                 iterations: int = 1) -> Optional[Tuple[Algorithm, float]]:
    """Algorithm with the lowest mean time on (a, b), or None if all fail."""
    best = None
    for r in benchmark(a, b, iterations, stats=stats):
        if r.successful_runs == 0:
            continue
        if best is None or r.mean < best[1]:
            best = (r.algorithm, r.mean)
    return best
