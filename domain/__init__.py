from .indicators import (
    BollingerBandsComputer,
    IndicatorOutput,
    MovingAverageComputer,
    MultiLineDescriptor,
    SeriesError,
    SourceSeries,
)

__all__ = [
    "BollingerBandsComputer",
    "IndicatorOutput",
    "MovingAverageComputer",
    "MultiLineDescriptor",
    "SeriesError",
    "SourceSeries",
]
