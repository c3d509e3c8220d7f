from .settings import Settings, get_settings
from .loader import (
    ConfigError,
    get_options,
    load_options,
    parse_options,
    parse_params,
    reload_options,
)
from .schema import (
    BollingerOptions,
    BollingerParams,
    IndicatorParams,
    LineOptions,
    LineStyle,
)

__all__ = [
    "Settings",
    "get_settings",
    "ConfigError",
    "load_options",
    "get_options",
    "reload_options",
    "parse_options",
    "parse_params",
    "BollingerOptions",
    "BollingerParams",
    "IndicatorParams",
    "LineOptions",
    "LineStyle",
]
