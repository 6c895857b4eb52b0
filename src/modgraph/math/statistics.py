"""Division-safe ratios, means and half-up rounding."""

import math
from typing import Sequence

import numpy as np


class Statistics:
    """Statistical helpers. None of these ever divide by zero."""

    @staticmethod
    def mean(values: Sequence[float]) -> float:
        """Arithmetic mean; 0.0 for an empty sequence."""
        if len(values) == 0:
            return 0.0
        return float(np.mean(np.asarray(values, dtype=float)))

    @staticmethod
    def ratio(numerator: float, denominator: float) -> float:
        """numerator / denominator, 0.0 when the denominator is not positive."""
        if denominator <= 0:
            return 0.0
        return numerator / denominator

    @staticmethod
    def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
        return max(low, min(high, value))

    @staticmethod
    def round_half_up(value: float, digits: int = 0) -> float:
        """Round halves away from zero for positives (2.5 -> 3, 0.125 -> 0.13)."""
        factor = 10 ** digits
        return math.floor(value * factor + 0.5) / factor
