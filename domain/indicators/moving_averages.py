"""Simple moving average, the base computation of band indicators."""

import logging
from typing import Any, Mapping, Sequence

from config.loader import parse_params
from config.schema import IndicatorParams, LineStyle
from domain.indicators.base import IndicatorOutput, Sample, SourceSeries, select_value
from domain.indicators.lines import LineDescriptor

logger = logging.getLogger(__name__)


class MovingAverageComputer:
    """Arithmetic mean over a sliding window.

    Single-line indicator: each row is (x, mean).
    """

    short_name = "SMA"
    name_components = ("period",)
    point_array_map = ("y",)
    point_val_key = "y"
    lines_api_names: tuple[str, ...] = ()
    area_lines_names: tuple[str, ...] = ()

    def compute(
        self,
        window: SourceSeries,
        params: IndicatorParams,
    ) -> tuple[float, float] | None:
        """Calculate the mean of one window.

        Args:
            window: Slice of the source series
            params: Validated window parameters

        Returns:
            (x, mean) anchored at the window's last x, or None when the
            window is shorter than the period

        Example:
            >>> window = SourceSeries([1, 2, 3], [10, 11, 12])
            >>> MovingAverageComputer().compute(window, IndicatorParams(period=3))
            (3, 11.0)
        """
        period = params.period
        length = len(window)
        if length < period:
            return None

        total = 0.0
        for sample in window.y_data[length - period:]:
            total += select_value(sample, params.value_index)

        return window.x_data[-1], total / period

    def get_values(
        self,
        series: SourceSeries,
        params: IndicatorParams | Mapping[str, Any] | None = None,
    ) -> IndicatorOutput | None:
        """Calculate the moving average over every window of a series.

        Returns:
            One row per window, or None when the series is shorter than
            the period
        """
        params = parse_params(params, IndicatorParams)
        period = params.period
        series.check_lengths()

        if len(series) < period:
            logger.debug(f"Insufficient data for {self.short_name}: {len(series)} < {period}")
            return None

        rows = []
        for i in range(period, len(series) + 1):
            x, mean = self.compute(series.slice(i - period, i), params)
            rows.append((x, mean))

        return IndicatorOutput.from_rows(rows)

    def name(self, params: IndicatorParams) -> str:
        components = ", ".join(str(getattr(params, c)) for c in self.name_components)
        return f"{self.short_name} ({components})"

    def line_descriptors(self, series_color: str | None = None) -> list[LineDescriptor]:
        return [LineDescriptor(self.point_val_key, LineStyle().resolve(series_color))]


def sma(
    x_data: Sequence[float],
    y_data: Sequence[Sample],
    period: int = 20,
    value_index: int = 3,
) -> IndicatorOutput | None:
    """Calculate Simple Moving Average.

    Args:
        x_data: Strictly increasing x values
        y_data: Scalars or OHLC tuples
        period: Number of samples per window
        value_index: OHLC field to average (default: close)

    Returns:
        IndicatorOutput with rows (x, mean), None for insufficient data

    Example:
        >>> sma([1, 2, 3, 4], [10, 11, 12, 13], period=3).y_data
        ((11.0,), (12.0,))
    """
    params = parse_params({"period": period, "value_index": value_index}, IndicatorParams)
    return MovingAverageComputer().get_values(SourceSeries(x_data, y_data), params)
