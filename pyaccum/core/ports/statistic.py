from __future__ import annotations
from enum import Enum

from pyaccum.core.domain.correlation import PearsonCorrelation
from pyaccum.core.domain.extrema import Maximum, Minimum, Sum
from pyaccum.core.domain.mean import GeometricMean, Mean
from pyaccum.core.domain.variance import (
    PopulationStandardDeviation,
    PopulationVariance,
    SampleStandardDeviation,
    SampleVariance,
)
from pyaccum.core.ports.accumulator import AccumulatorBase


class Statistic(Enum):
    SUM = "sum"
    MINIMUM = "minimum"
    MAXIMUM = "maximum"
    MEAN = "mean"
    GEOMETRIC_MEAN = "geometric_mean"
    SAMPLE_VARIANCE = "sample_variance"
    POPULATION_VARIANCE = "population_variance"
    SAMPLE_STANDARD_DEVIATION = "sample_standard_deviation"
    POPULATION_STANDARD_DEVIATION = "population_standard_deviation"
    PEARSON_CORRELATION = "pearson_correlation"

    @classmethod
    def from_name(cls, name: str) -> Statistic:
        """Parse 'SAMPLE_VARIANCE', 'sample-variance' and the like."""
        key = name.strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown statistic: {name}")

    def accumulator(self) -> AccumulatorBase:
        """Return a fresh, empty accumulator for this statistic."""
        return _ACCUMULATORS[self]()

    def is_pairwise(self) -> bool:
        return self in Statistic.pair_list()

    @classmethod
    def list(cls) -> list["Statistic"]:
        """Return a list of all Statistic variants."""
        return list(cls)

    @classmethod
    def univariate_list(cls) -> list["Statistic"]:
        """Return the statistics computed over single values."""
        return [
            cls.SUM,
            cls.MINIMUM,
            cls.MAXIMUM,
            cls.MEAN,
            cls.GEOMETRIC_MEAN,
            cls.SAMPLE_VARIANCE,
            cls.POPULATION_VARIANCE,
            cls.SAMPLE_STANDARD_DEVIATION,
            cls.POPULATION_STANDARD_DEVIATION,
        ]

    @classmethod
    def pair_list(cls) -> list["Statistic"]:
        """Return the statistics computed over (x, y) pairs."""
        return [cls.PEARSON_CORRELATION]


_ACCUMULATORS = {
    Statistic.SUM: Sum,
    Statistic.MINIMUM: Minimum,
    Statistic.MAXIMUM: Maximum,
    Statistic.MEAN: Mean,
    Statistic.GEOMETRIC_MEAN: GeometricMean,
    Statistic.SAMPLE_VARIANCE: SampleVariance,
    Statistic.POPULATION_VARIANCE: PopulationVariance,
    Statistic.SAMPLE_STANDARD_DEVIATION: SampleStandardDeviation,
    Statistic.POPULATION_STANDARD_DEVIATION: PopulationStandardDeviation,
    Statistic.PEARSON_CORRELATION: PearsonCorrelation,
}
