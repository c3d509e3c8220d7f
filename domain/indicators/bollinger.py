"""Bollinger Bands indicator."""

import logging
from typing import Any, Callable, Mapping, Sequence

from config.loader import parse_params
from config.schema import BollingerOptions, BollingerParams, LineStyle
from domain.indicators.base import IndicatorOutput, Sample, SourceSeries
from domain.indicators.lines import LineDescriptor
from domain.indicators.moving_averages import MovingAverageComputer
from domain.indicators.statistics import standard_deviation

logger = logging.getLogger(__name__)

StdDevFunction = Callable[[Sequence[Sample], int, bool, float], float]


class BollingerBandsComputer:
    """Volatility bands around a moving average.

    Upper Band = SMA + (standard_deviation * sample std)
    Middle Band = SMA
    Lower Band = SMA - (standard_deviation * sample std)

    The moving average and the deviation function are injected, so any
    computer returning (x, mean) for a window can serve as the middle line.

    Example:
        >>> bb = BollingerBandsComputer()
        >>> series = SourceSeries(list(range(1, 11)), list(range(1, 11)))
        >>> bb.get_values(series, {"period": 3}).values[0]
        (3, 4.0, 2.0, 0.0)
    """

    short_name = "BB"
    name_components = ("period", "standard_deviation")
    # 0 - top, 1 - middle, 2 - bottom
    point_array_map = ("top", "middle", "bottom")
    point_val_key = "middle"
    lines_api_names = ("topLine", "bottomLine")
    area_lines_names = ("top", "bottom")

    def __init__(
        self,
        moving_average: MovingAverageComputer | None = None,
        std_dev: StdDevFunction = standard_deviation,
        options: BollingerOptions | None = None,
    ):
        self.moving_average = moving_average or MovingAverageComputer()
        self.std_dev = std_dev
        self.options = options or BollingerOptions()

    def get_values(
        self,
        series: SourceSeries,
        params: BollingerParams | Mapping[str, Any] | None = None,
    ) -> IndicatorOutput | None:
        """Calculate the three bands for every window of a series.

        Args:
            series: Source series, scalars or OHLC tuples
            params: Parameters, defaults to the configured options

        Returns:
            Rows of (x, top, middle, bottom), or None when the series is
            shorter than the period

        Raises:
            ConfigError: If params are invalid
            SeriesError: If x_data and y_data differ in length
        """
        params = parse_params(
            self.options.params if params is None else params, BollingerParams
        )
        period = params.period
        multiplier = params.standard_deviation
        series.check_lengths()
        length = len(series)

        if length < period:
            logger.debug(f"Insufficient data for {self.short_name}: {length} < {period}")
            return None

        is_ohlc = series.is_ohlc
        rows = []

        for i in range(period, length + 1):
            window = series.slice(i - period, i)

            date, middle = self.moving_average.compute(window, params)
            std = self.std_dev(window.y_data, params.value_index, is_ohlc, middle)

            top = middle + multiplier * std
            bottom = middle - multiplier * std
            rows.append((date, top, middle, bottom))

        logger.debug(f"Computed {len(rows)} {self.short_name} rows (period={period})")
        return IndicatorOutput.from_rows(rows)

    def name(self, params: BollingerParams | None = None) -> str:
        """Series name built from the name components, e.g. ``BB (20, 2)``."""
        params = params or self.options.params
        components = ", ".join(
            _format_component(getattr(params, c)) for c in self.name_components
        )
        return f"{self.short_name} ({components})"

    def line_descriptors(self, series_color: str | None = None) -> list[LineDescriptor]:
        """Styles of top, middle and bottom lines.

        Precedence: explicit line style > indicator color > built-in default.
        """
        options = self.options.with_series_color(series_color)
        middle = LineStyle(line_width=options.line_width, line_color=options.color)
        return [
            LineDescriptor("top", options.line_options("topLine").styles.resolve(options.color)),
            LineDescriptor("middle", middle.resolve(None)),
            LineDescriptor("bottom", options.line_options("bottomLine").styles.resolve(options.color)),
        ]


def _format_component(value: Any) -> str:
    # 2.0 -> "2"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def bollinger_bands(
    x_data: Sequence[float],
    y_data: Sequence[Sample],
    period: int = 20,
    std_dev: float = 2.0,
    value_index: int = 3,
) -> IndicatorOutput | None:
    """Calculate Bollinger Bands.

    Args:
        x_data: Strictly increasing x values
        y_data: Scalars or OHLC tuples
        period: Period for SMA and standard deviation (default: 20)
        std_dev: Number of standard deviations for bands (default: 2.0)
        value_index: OHLC field to use (default: close)

    Returns:
        IndicatorOutput with rows (x, top, middle, bottom),
        None for insufficient data

    Raises:
        ConfigError: If a parameter is invalid, including period < 2
    """
    params = parse_params({
        "period": period,
        "standard_deviation": std_dev,
        "value_index": value_index,
    })
    return BollingerBandsComputer().get_values(SourceSeries(x_data, y_data), params)
