from typing import Optional

from pyaccum.core.ports.accumulator import PairAccumulator
from pyaccum.utils.floats import fdiv, fsqrt


class PearsonCorrelation(PairAccumulator):
    """
    Weighted Pearson product-moment correlation coefficient (r).

    Running weighted means, weighted sums of squared deviations and a
    weighted cross-product are updated per pair, extending Welford's
    recurrence to two variables.

    References:
        Welford (1962), Note on a method for calculating corrected sums of
        squares and products. Technometrics 4(3):419-420.
        Chan, Golub, LeVeque (1983), Algorithms for Computing the Sample
        Variance: Analysis and Recommendations.
    """

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self._mean_x = 0.0
        self._mean_y = 0.0
        self._var_x = 0.0
        self._var_y = 0.0
        self._r = 0.0
        self._weight_sum = 0.0
        self._n = 0

    def add(self, x: float, y: float, weight: float = 1.0) -> None:
        x, y, weight = float(x), float(y), float(weight)
        self._n += 1
        next_weight_sum = self._weight_sum + weight

        # var_* take the weight sum before this pair, mean_* the one after it.
        delta_x = x - self._mean_x
        scale_x = fdiv(delta_x * weight, next_weight_sum)
        self._var_x += scale_x * delta_x * self._weight_sum
        self._mean_x += scale_x

        delta_y = y - self._mean_y
        scale_y = fdiv(delta_y * weight, next_weight_sum)
        self._mean_y += scale_y
        self._var_y += scale_y * delta_y * self._weight_sum

        # Keeps r == sum(w * (x - mean_x) * (y - mean_y)), the weighted
        # co-moment. With unit weights weight_sum / next_weight_sum == (n - 1) / n.
        self._r += fdiv(
            delta_x * delta_y * weight * self._weight_sum, next_weight_sum
        )
        self._weight_sum = next_weight_sum

    @property
    def value(self) -> Optional[float]:
        if self._n > 1:
            return fdiv(self._r, fsqrt(self._var_x * self._var_y))
        return None

    @property
    def count(self) -> int:
        return self._n
