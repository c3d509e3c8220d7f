"""
Indicator option loader.

Options are layered, lowest first:
1. Built-in defaults (settings.Settings)
2. Color-derived defaults (line colors inherited from the indicator color)
3. User overrides: TOML config file, then environment variables

Priority: env vars > config file > series color > defaults
"""

import logging
import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ValidationError

from .schema import BollingerOptions, BollingerParams

logger = logging.getLogger(__name__)

# Config file search paths (in priority order)
CONFIG_PATHS = [
    Path("overlays.toml"),                                   # Current directory
    Path(".overlays.toml"),                                  # Hidden in current directory
    Path.home() / ".config" / "overlays" / "config.toml",    # User config
]

# Environment variable prefix
ENV_PREFIX = "OVERLAY_"

# Table holding Bollinger Bands options in the config file
BB_SECTION = "bb"


class ConfigError(Exception):
    """Configuration error with helpful message."""

    def __init__(self, message: str, source: str | None = None, field: str | None = None):
        self.source = source
        self.field = field
        super().__init__(message)

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.source:
            parts.append(f"Source: {self.source}")
        if self.field:
            parts.append(f"Field: {self.field}")
        return " | ".join(parts)


def _validate(model: type[BaseModel], data: Mapping[str, Any], source: str | None = None):
    """Build a model, translating pydantic errors into ConfigError."""
    try:
        return model.model_validate(dict(data))
    except ValidationError as e:
        errors = e.errors()
        if errors:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get("loc", []))
            msg = first_error.get("msg", "Validation error")
            raise ConfigError(f"Invalid configuration: {msg}", source=source, field=field)
        raise ConfigError(f"Invalid configuration: {e}", source=source)


def parse_params(
    raw: Mapping[str, Any] | None = None,
    model: type[BaseModel] = BollingerParams,
):
    """
    Validate indicator parameters.

    Args:
        raw: Parameter mapping, chart-option or snake_case keys
        model: Parameter model to validate against

    Returns:
        Validated, immutable parameters

    Raises:
        ConfigError: If a parameter is out of range
    """
    if isinstance(raw, model):
        return raw
    data = dict(raw or {})
    params = _validate(model, data)
    logger.debug(f"Parsed {model.__name__}: {params}")
    return params


def parse_options(
    raw: Mapping[str, Any] | None = None,
    series_color: str | None = None,
) -> BollingerOptions:
    """
    Validate Bollinger Bands options and resolve line colors.

    Args:
        raw: User options (top-level ``params``, ``topLine``, ...)
        series_color: Color assigned to the indicator by the chart

    Returns:
        Options with every line color filled in

    Raises:
        ConfigError: If an option is invalid
    """
    options = _validate(BollingerOptions, raw or {})
    return options.with_series_color(series_color)


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load TOML file if it exists."""
    if not path.exists():
        return {}

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        logger.info(f"Loaded config from: {path}")
        return data
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Failed to parse TOML: {e}", source=str(path))


def _find_config_file() -> Path | None:
    """Find the first existing config file."""
    for path in CONFIG_PATHS:
        if path.exists():
            return path
    return None


def _load_env_params() -> dict[str, str]:
    """Load parameter overrides from environment variables."""
    env = {
        "period": os.environ.get(f"{ENV_PREFIX}BB_PERIOD"),
        "standard_deviation": os.environ.get(f"{ENV_PREFIX}BB_STANDARD_DEVIATION"),
        "value_index": os.environ.get(f"{ENV_PREFIX}BB_VALUE_INDEX"),
    }
    return {k: v for k, v in env.items() if v is not None}


def load_options(
    config_path: Path | str | None = None,
    series_color: str | None = None,
) -> BollingerOptions:
    """
    Load and validate Bollinger Bands options.

    Args:
        config_path: Explicit path to config file (optional)
        series_color: Color assigned to the indicator by the chart

    Returns:
        Validated BollingerOptions with line colors resolved

    Raises:
        ConfigError: If configuration is invalid
    """
    source = None
    file_data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}", source=str(path))
        file_data = _load_toml_file(path)
        source = str(path)
    else:
        found_path = _find_config_file()
        if found_path:
            file_data = _load_toml_file(found_path)
            source = str(found_path)

    options_data = dict(file_data.get(BB_SECTION, {}))

    env_params = _load_env_params()
    if env_params:
        params = dict(options_data.get("params", {}))
        params.update(env_params)
        options_data["params"] = params
        logger.debug(f"Loaded {len(env_params)} parameter override(s) from environment")

    options = _validate(BollingerOptions, options_data, source=source)
    return options.with_series_color(series_color)


@lru_cache
def get_options() -> BollingerOptions:
    """
    Get singleton options instance.

    Uses LRU cache to ensure config is loaded only once.
    """
    return load_options()


def reload_options(config_path: Path | str | None = None) -> BollingerOptions:
    """
    Force reload options.

    Clears the cache and reloads from file/environment.
    """
    get_options.cache_clear()
    if config_path:
        return load_options(config_path)
    return get_options()
