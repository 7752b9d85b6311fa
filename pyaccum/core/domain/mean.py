from typing import Optional

from pyaccum.core.ports.accumulator import Accumulator


class Mean(Accumulator):
    """Arithmetic mean, updated in place (Welford, 1962)."""

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self._mean = 0.0
        self._n = 0

    def add(self, x: float) -> None:
        self._n += 1
        self._mean += (float(x) - self._mean) / self._n

    @property
    def value(self) -> Optional[float]:
        return self._mean if self._n > 0 else None

    @property
    def count(self) -> int:
        return self._n


class GeometricMean(Accumulator):
    """
    Geometric mean of strictly positive sample points.

    Adding a point <= 0 never fails, but leaves the value undefined
    until the next reset, whatever is added afterwards.
    """

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self._product = 1.0
        self._n = 0
        self._invalid = False

    def add(self, x: float) -> None:
        x = float(x)
        if x <= 0.0:
            self._invalid = True
        self._product *= x
        self._n += 1

    @property
    def value(self) -> Optional[float]:
        if self._n == 0 or self._invalid:
            return None
        return self._product ** (1.0 / self._n)

    @property
    def count(self) -> int:
        return self._n
