import math


def fdiv(a: float, b: float) -> float:
    """
    Divide with IEEE-754 semantics.

    Python raises ZeroDivisionError for float division by zero; the
    accumulators must instead yield +-inf or nan, as the hardware would.
    """
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def fsqrt(x: float) -> float:
    """Square root returning nan for negative input instead of raising."""
    if x >= 0.0:
        return math.sqrt(x)
    return math.nan
