from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class Settings:
    """Built-in defaults, the lowest configuration layer."""

    # Window parameters
    period: int = 20
    standard_deviation: float = 2.0
    value_index: int = 3  # close

    # Line styles, used when neither the user nor the series color sets one
    line_width: float = 1.0
    line_color: str = "#2caffe"

    # Presentation hints passed through to the chart layer
    tooltip_point_format: str = (
        '<span style="color:{point.color}">●</span><b> {series.name}</b><br/>'
        "Top: {point.top}<br/>Middle: {point.middle}<br/>Bottom: {point.bottom}<br/>"
    )
    data_grouping_approximation: str = "averages"


@lru_cache
def get_settings() -> Settings:
    """Get singleton settings instance."""
    return Settings()
