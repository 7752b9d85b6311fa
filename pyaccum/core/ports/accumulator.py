from abc import ABC, abstractmethod
from typing import Optional

UNDEFINED = "undefined"


def describe(acc: "AccumulatorBase") -> str:
    """Plain rendering: the value, or 'undefined' when there is none."""
    value = acc.value
    return UNDEFINED if value is None else str(value)


def debug_describe(acc: "AccumulatorBase") -> str:
    """Debug rendering: the value together with the sample count."""
    return f"{type(acc).__name__}(value={describe(acc)}, count={acc.count})"


class AccumulatorBase(ABC):
    """
    Incrementally gathers a sample of data and reports a statistic on it.

    `value` is None whenever too few points have been accumulated for the
    statistic to be defined.
    """

    @property
    @abstractmethod
    def value(self) -> Optional[float]:
        pass

    @property
    @abstractmethod
    def count(self) -> int:
        """Number of sample points (or pairs) accumulated."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Discard all accumulated data."""
        pass

    def __str__(self) -> str:
        return describe(self)

    def __repr__(self) -> str:
        return debug_describe(self)


class Accumulator(AccumulatorBase):
    @abstractmethod
    def add(self, x: float) -> None:
        """Add one sample point."""
        pass


class PairAccumulator(AccumulatorBase):
    @abstractmethod
    def add(self, x: float, y: float, weight: float = 1.0) -> None:
        """Add one pair of sample points with the given weight."""
        pass
