"""Window statistics shared by band indicators."""

import math
from typing import Sequence

from domain.indicators.base import Sample


def standard_deviation(
    window: Sequence[Sample],
    index: int,
    is_ohlc: bool,
    mean: float,
) -> float:
    """Calculate the sample standard deviation of a window.

    Uses Bessel's correction: variance is divided by n - 1.

    Args:
        window: Scalars or OHLC tuples
        index: OHLC field to use, ignored for scalars
        is_ohlc: Whether window samples are OHLC tuples
        mean: Precomputed mean of the selected field

    Returns:
        Sample standard deviation

    Raises:
        ValueError: If the window has fewer than 2 samples

    Example:
        >>> standard_deviation([1, 2, 3], 3, False, 2.0)
        1.0
    """
    n = len(window)
    if n < 2:
        raise ValueError(f"Sample standard deviation needs at least 2 values, got {n}")

    variance = 0.0
    for sample in window:
        deviation = (sample[index] if is_ohlc else sample) - mean
        variance += deviation * deviation

    return math.sqrt(variance / (n - 1))
