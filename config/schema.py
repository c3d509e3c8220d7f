"""
Indicator option schema with validation.

All parameters are validated eagerly using Pydantic. Field aliases accept
the chart-option spelling (``standardDeviation``, ``lineColor``, ...) and
unknown keys are ignored.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .settings import get_settings

_DEFAULTS = get_settings()


class IndicatorParams(BaseModel):
    """Window parameters shared by every rolling-window indicator."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    period: int = Field(default=_DEFAULTS.period, ge=1, description="Samples per window")
    value_index: int = Field(
        default=_DEFAULTS.value_index,
        ge=0,
        le=3,
        validation_alias=AliasChoices("value_index", "valueIndex", "index"),
        description="OHLC field used when samples are tuples",
    )


class BollingerParams(IndicatorParams):
    """Bollinger Bands parameters.

    A one-sample window has no sample standard deviation, so the period
    must be at least 2.
    """

    period: int = Field(default=_DEFAULTS.period, ge=2, description="Samples per window")
    standard_deviation: float = Field(
        default=_DEFAULTS.standard_deviation,
        gt=0.0,
        allow_inf_nan=False,
        validation_alias=AliasChoices("standard_deviation", "standardDeviation"),
        description="Band width in standard deviations",
    )


class LineStyle(BaseModel):
    """Style of one output line."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    line_width: float = Field(
        default=_DEFAULTS.line_width,
        ge=0.0,
        validation_alias=AliasChoices("line_width", "lineWidth"),
    )
    line_color: str | None = Field(
        default=None,
        validation_alias=AliasChoices("line_color", "lineColor"),
        description="Inherited from the indicator color when not set",
    )

    def resolve(self, series_color: str | None) -> "LineStyle":
        """Fill in the color: explicit > series color > built-in default."""
        if self.line_color:
            return self
        return self.model_copy(update={"line_color": series_color or _DEFAULTS.line_color})


class LineOptions(BaseModel):
    """Options block of an extra output line (``topLine``, ``bottomLine``)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    styles: LineStyle = Field(default_factory=LineStyle)


class BollingerOptions(BaseModel):
    """
    Root option model of the Bollinger Bands indicator.

    Line colors left unset here are derived from ``color`` by
    ``with_series_color``.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    color: str | None = Field(default=None, description="Indicator color, also the middle line")
    fill_color: str | None = Field(
        default=None,
        validation_alias=AliasChoices("fill_color", "fillColor"),
        description="Fill between top and bottom lines",
    )
    line_width: float = Field(
        default=_DEFAULTS.line_width,
        ge=0.0,
        validation_alias=AliasChoices("line_width", "lineWidth"),
        description="Width of the middle line",
    )
    params: BollingerParams = Field(default_factory=BollingerParams)
    top_line: LineOptions = Field(
        default_factory=LineOptions,
        validation_alias=AliasChoices("top_line", "topLine"),
    )
    bottom_line: LineOptions = Field(
        default_factory=LineOptions,
        validation_alias=AliasChoices("bottom_line", "bottomLine"),
    )
    tooltip_point_format: str = Field(default=_DEFAULTS.tooltip_point_format)
    marker_enabled: bool = Field(default=False)
    data_grouping_approximation: str = Field(default=_DEFAULTS.data_grouping_approximation)

    def line_options(self, api_name: str) -> LineOptions:
        """Look up an extra line's options by its chart option name."""
        mapping = {
            "topLine": self.top_line,
            "bottomLine": self.bottom_line,
        }
        if api_name not in mapping:
            raise KeyError(f"Unknown line: {api_name}")
        return mapping[api_name]

    def with_series_color(self, series_color: str | None) -> "BollingerOptions":
        """Return a copy with unset line colors taken from the indicator color.

        Without any color the options are returned as they are; the
        built-in default is applied only when line styles are resolved.
        """
        color = self.color or series_color
        if not color:
            return self
        return self.model_copy(update={
            "color": color,
            "top_line": LineOptions(styles=self.top_line.styles.resolve(color)),
            "bottom_line": LineOptions(styles=self.bottom_line.styles.resolve(color)),
        })
