# tcping/core/state.py
import math
from dataclasses import dataclass


@dataclass
class ResultCollection:
    """
    Running statistics over connection attempts, without keeping the samples.
    Only successful attempts feed the totals and extrema; min/max start at
    +inf/-inf so the first real sample wins both comparisons.
    All getters return 0.0 while there are no successes.
    """
    iterations: int = 0
    successes: int = 0
    total: float = 0.0
    total_squared: float = 0.0
    min_observed: float = math.inf
    max_observed: float = -math.inf

    def record(self, success: bool, elapsed_ms: float) -> None:
        self.iterations += 1
        if not success:
            return
        self.successes += 1
        self.total += elapsed_ms
        self.total_squared += elapsed_ms * elapsed_ms
        if elapsed_ms < self.min_observed:
            self.min_observed = elapsed_ms
        if elapsed_ms > self.max_observed:
            self.max_observed = elapsed_ms

    @property
    def failures(self) -> int:
        return self.iterations - self.successes

    def mean(self) -> float:
        if self.successes == 0:
            return 0.0
        return self.total / self.successes

    def std_dev(self) -> float:
        # population std dev from the running sums: (Σx² + nμ² - 2μΣx) / n
        if self.successes == 0:
            return 0.0
        n = self.successes
        avg = self.mean()
        variance = (self.total_squared + n * avg * avg - 2.0 * avg * self.total) / n
        return math.sqrt(max(variance, 0.0))

    def min(self) -> float:
        return self.min_observed if self.successes else 0.0

    def max(self) -> float:
        return self.max_observed if self.successes else 0.0

    def as_dict(self) -> dict:
        return {
            "iterations": self.iterations,
            "successes": self.successes,
            "failures": self.failures,
            "min_ms": self.min(),
            "max_ms": self.max(),
            "avg_ms": self.mean(),
            "dev_ms": self.std_dev(),
        }
