import math
from typing import Optional

from pyaccum.core.ports.accumulator import Accumulator


class Sum(Accumulator):
    """Running total of the sample points."""

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self._sum = 0.0
        self._n = 0

    def add(self, x: float) -> None:
        self._sum += float(x)
        self._n += 1

    @property
    def value(self) -> Optional[float]:
        return self._sum if self._n > 0 else None

    @property
    def count(self) -> int:
        return self._n


class Maximum(Accumulator):
    """
    Largest sample point seen.

    A nan point never compares greater, so it is counted but otherwise
    ignored.
    """

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self._max = -math.inf
        self._n = 0

    def add(self, x: float) -> None:
        x = float(x)
        if x > self._max:
            self._max = x
        self._n += 1

    @property
    def value(self) -> Optional[float]:
        return self._max if self._n > 0 else None

    @property
    def count(self) -> int:
        return self._n


class Minimum(Accumulator):
    """Smallest sample point seen. nan points are counted but ignored."""

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self._min = math.inf
        self._n = 0

    def add(self, x: float) -> None:
        x = float(x)
        if x < self._min:
            self._min = x
        self._n += 1

    @property
    def value(self) -> Optional[float]:
        return self._min if self._n > 0 else None

    @property
    def count(self) -> int:
        return self._n
