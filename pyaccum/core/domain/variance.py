"""
Variance and standard deviation accumulators.

All four share one running mean / M2 recurrence (Welford, 1962; Knuth,
TAOCP vol. 2, p. 232), which avoids the cancellation of the naive
sum-of-squares formula:

    delta = x - mean
    mean += delta / n
    M2   += delta * (x - mean)

Sample statistics divide M2 by n - 1, population statistics by n. The
standard deviations are the square root of the same ratio.
"""

from typing import Optional

from pyaccum.core.ports.accumulator import Accumulator
from pyaccum.utils.floats import fsqrt


class _Welford:
    __slots__ = ("n", "mean", "m2")

    def __init__(self):
        self.n = 0
        self.mean = 0.0
        self.m2 = 0.0

    def update(self, x: float) -> None:
        self.n += 1
        delta = x - self.mean
        self.mean += delta / self.n
        self.m2 += delta * (x - self.mean)

    def sample(self) -> Optional[float]:
        if self.n > 1:
            return self.m2 / (self.n - 1)
        return None

    def population(self) -> Optional[float]:
        if self.n > 0:
            return self.m2 / self.n
        return None


class _WelfordAccumulator(Accumulator):
    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self._state = _Welford()

    def add(self, x: float) -> None:
        self._state.update(float(x))

    @property
    def count(self) -> int:
        return self._state.n


class SampleVariance(_WelfordAccumulator):
    """Unbiased sample variance. Undefined for fewer than two points."""

    @property
    def value(self) -> Optional[float]:
        return self._state.sample()


class PopulationVariance(_WelfordAccumulator):
    """Population variance. Undefined only when empty."""

    @property
    def value(self) -> Optional[float]:
        return self._state.population()


class SampleStandardDeviation(_WelfordAccumulator):
    @property
    def value(self) -> Optional[float]:
        var = self._state.sample()
        return None if var is None else fsqrt(var)


class PopulationStandardDeviation(_WelfordAccumulator):
    @property
    def value(self) -> Optional[float]:
        var = self._state.population()
        return None if var is None else fsqrt(var)
