"""
Sequence adapters.

Each function folds an iterable through a fresh accumulator and returns the
accumulator's final value, or None when the statistic is undefined for the
data. Iterables are consumed once, so generators and readers work as well
as lists or numpy arrays.
"""

from typing import Dict, Iterable, Optional, Sequence, Tuple, Union

from pyaccum.core.domain.correlation import PearsonCorrelation
from pyaccum.core.domain.extrema import Maximum, Minimum, Sum
from pyaccum.core.domain.mean import GeometricMean, Mean
from pyaccum.core.domain.variance import (
    PopulationStandardDeviation,
    PopulationVariance,
    SampleStandardDeviation,
    SampleVariance,
)
from pyaccum.core.ports.accumulator import Accumulator, PairAccumulator
from pyaccum.core.ports.statistic import Statistic

Pair = Union[Tuple[float, float], Tuple[float, float, float]]


def accumulate(values: Iterable[float], accumulator: Accumulator) -> Optional[float]:
    for x in values:
        accumulator.add(x)
    return accumulator.value


def accumulate_pairs(
    pairs: Iterable[Pair], accumulator: PairAccumulator
) -> Optional[float]:
    """Feed (x, y) or (x, y, weight) tuples through a pair accumulator."""
    for pair in pairs:
        accumulator.add(*pair)
    return accumulator.value


def sum(values: Iterable[float]) -> Optional[float]:
    return accumulate(values, Sum())


def minimum(values: Iterable[float]) -> Optional[float]:
    return accumulate(values, Minimum())


def maximum(values: Iterable[float]) -> Optional[float]:
    return accumulate(values, Maximum())


def mean(values: Iterable[float]) -> Optional[float]:
    return accumulate(values, Mean())


def geometric_mean(values: Iterable[float]) -> Optional[float]:
    """None if `values` is empty or holds any value <= 0."""
    return accumulate(values, GeometricMean())


def variance(values: Iterable[float]) -> Optional[float]:
    """Sample variance; None for fewer than two values."""
    return accumulate(values, SampleVariance())


def population_variance(values: Iterable[float]) -> Optional[float]:
    return accumulate(values, PopulationVariance())


def standard_deviation(values: Iterable[float]) -> Optional[float]:
    """Sample standard deviation; None for fewer than two values."""
    return accumulate(values, SampleStandardDeviation())


def sample_variance(values: Iterable[float]) -> Optional[float]:
    return accumulate(values, SampleVariance())


def sample_standard_deviation(values: Iterable[float]) -> Optional[float]:
    return accumulate(values, SampleStandardDeviation())


def population_standard_deviation(values: Iterable[float]) -> Optional[float]:
    return accumulate(values, PopulationStandardDeviation())


def pearson_correlation(pairs: Iterable[Pair]) -> Optional[float]:
    """
    Pearson correlation of a sequence of (x, y) or (x, y, weight) tuples.

    Returns None if fewer than two pairs are given.
    """
    return accumulate_pairs(pairs, PearsonCorrelation())


def pearson_correlation_of(
    xs: Iterable[float], ys: Iterable[float]
) -> Optional[float]:
    """Pearson correlation of two sequences, truncated to the shorter one."""
    return accumulate_pairs(zip(xs, ys), PearsonCorrelation())


def summarize(
    values: Iterable[float], statistics: Optional[Sequence[Statistic]] = None
) -> Dict[str, Optional[float]]:
    """
    Compute several univariate statistics in a single pass.

    Args:
        values: Any iterable of numbers; consumed exactly once.
        statistics: Statistics to compute. Defaults to every univariate one.

    Returns:
        Mapping of statistic name (e.g. "mean") to its value or None.
    """
    if statistics is None:
        statistics = Statistic.univariate_list()

    pairwise = [s for s in statistics if s.is_pairwise()]
    if pairwise:
        raise ValueError(f"Pairwise statistics cannot summarize values: {pairwise}")

    accumulators = {s.value: s.accumulator() for s in statistics}
    for x in values:
        for acc in accumulators.values():
            acc.add(x)

    return {name: acc.value for name, acc in accumulators.items()}
