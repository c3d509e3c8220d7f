"""Rolling-window overlay indicators for charting.

Pure Python implementations computing derived series from a source time
series. Every computation is a stateless batch transform: identical input
gives identical, immutable output, and a series shorter than the period
gives None.

Indicators:
    - SMA: Arithmetic mean over a sliding window (single line)
    - Bollinger Bands: SMA middle line with standard deviation bands

Example:
    >>> from domain.indicators import bollinger_bands
    >>>
    >>> x = list(range(1, 11))
    >>> output = bollinger_bands(x, x, period=3)
    >>> output.values[0]
    (3, 4.0, 2.0, 0.0)
"""

from domain.indicators.base import (
    CLOSE,
    HIGH,
    LOW,
    OPEN,
    IndicatorOutput,
    IndicatorRow,
    SeriesError,
    SourceSeries,
)
from domain.indicators.bollinger import BollingerBandsComputer, bollinger_bands
from domain.indicators.lines import (
    LineDescriptor,
    MultiLineDescriptor,
    primary_value,
    row_as_dict,
    split_lines,
    translated_lines_names,
)
from domain.indicators.moving_averages import MovingAverageComputer, sma
from domain.indicators.statistics import standard_deviation

__all__ = [
    # Base types
    "IndicatorOutput",
    "IndicatorRow",
    "SeriesError",
    "SourceSeries",
    "OPEN",
    "HIGH",
    "LOW",
    "CLOSE",
    # Computers
    "MovingAverageComputer",
    "BollingerBandsComputer",
    "sma",
    "bollinger_bands",
    "standard_deviation",
    # Multi-line protocol
    "LineDescriptor",
    "MultiLineDescriptor",
    "primary_value",
    "row_as_dict",
    "split_lines",
    "translated_lines_names",
]
