"""Tests for indicator option validation and loading."""

import pytest

from config import (
    BollingerOptions,
    BollingerParams,
    ConfigError,
    IndicatorParams,
    LineStyle,
    get_settings,
    load_options,
    parse_options,
    parse_params,
    reload_options,
)
from config import loader
from domain.indicators import BollingerBandsComputer


@pytest.fixture
def no_config_files(tmp_path, monkeypatch):
    """Point the config search at an empty directory."""
    monkeypatch.setattr(loader, "CONFIG_PATHS", [tmp_path / "overlays.toml"])
    for name in ("PERIOD", "STANDARD_DEVIATION", "VALUE_INDEX"):
        monkeypatch.delenv(f"OVERLAY_BB_{name}", raising=False)
    return tmp_path


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "overlays.toml"
    path.write_text(
        '[bb]\n'
        'color = "#123456"\n'
        '\n'
        '[bb.params]\n'
        'period = 10\n'
        'standardDeviation = 2.5\n'
        '\n'
        '[bb.topLine.styles]\n'
        'lineWidth = 2\n'
        'lineColor = "#ff0000"\n'
    )
    return path


class TestParams:
    """Test parameter validation."""

    def test_defaults(self):
        params = BollingerParams()
        assert params.period == 20
        assert params.standard_deviation == 2.0
        assert params.value_index == 3

    def test_chart_option_aliases(self):
        params = parse_params({"period": 5, "standardDeviation": 3, "valueIndex": 1})
        assert params == BollingerParams(period=5, standard_deviation=3.0, value_index=1)

    def test_index_alias(self):
        assert parse_params({"index": 0}).value_index == 0

    def test_unknown_keys_ignored(self):
        assert parse_params({"period": 5, "unknown": True}) == BollingerParams(period=5)

    def test_passthrough_of_validated_params(self):
        params = BollingerParams(period=7)
        assert parse_params(params) is params

    def test_moving_average_allows_period_one(self):
        assert parse_params({"period": 1}, IndicatorParams).period == 1

    def test_bollinger_rejects_period_one(self):
        with pytest.raises(ConfigError) as exc_info:
            parse_params({"period": 1})
        assert exc_info.value.field == "period"

    def test_rejects_fractional_period(self):
        with pytest.raises(ConfigError):
            parse_params({"period": 2.5})

    def test_params_are_frozen(self):
        params = BollingerParams()
        with pytest.raises(Exception):
            params.period = 5

    def test_error_message(self):
        with pytest.raises(ConfigError) as exc_info:
            parse_params({"period": 0}, IndicatorParams)
        assert "Field: period" in str(exc_info.value)


class TestLineStyles:
    """Test layered line style resolution."""

    def test_builtin_default(self):
        style = LineStyle().resolve(None)
        assert style.line_color == get_settings().line_color
        assert style.line_width == 1.0

    def test_series_color_beats_builtin(self):
        assert LineStyle().resolve("#abcdef").line_color == "#abcdef"

    def test_explicit_beats_series_color(self):
        style = LineStyle(line_color="#000000").resolve("#abcdef")
        assert style.line_color == "#000000"

    def test_options_inherit_series_color(self):
        options = parse_options({}, series_color="#abcdef")
        assert options.color == "#abcdef"
        assert options.top_line.styles.line_color == "#abcdef"
        assert options.bottom_line.styles.line_color == "#abcdef"

    def test_user_color_beats_series_color(self):
        options = parse_options({"color": "#111111"}, series_color="#abcdef")
        assert options.top_line.styles.line_color == "#111111"

    def test_per_line_override(self):
        options = parse_options(
            {"bottomLine": {"styles": {"lineColor": "#00ff00", "lineWidth": 3}}},
            series_color="#abcdef",
        )
        assert options.bottom_line.styles.line_color == "#00ff00"
        assert options.bottom_line.styles.line_width == 3
        assert options.top_line.styles.line_color == "#abcdef"

    def test_no_color_leaves_lines_unset(self):
        options = parse_options({})
        assert options.color is None
        assert options.top_line.styles.line_color is None
        assert options.bottom_line.styles.line_color is None

    def test_unknown_line(self):
        with pytest.raises(KeyError):
            BollingerOptions().line_options("middleLine")

    def test_presentation_defaults(self):
        options = BollingerOptions()
        assert options.marker_enabled is False
        assert options.data_grouping_approximation == "averages"
        assert "{point.middle}" in options.tooltip_point_format


class TestLoader:
    """Test loading options from file and environment."""

    def test_defaults_without_file(self, no_config_files):
        options = load_options()
        assert options.params == BollingerParams()

    def test_explicit_file(self, no_config_files, config_file):
        options = load_options(config_file, series_color="#abcdef")
        assert options.params.period == 10
        assert options.params.standard_deviation == 2.5
        assert options.color == "#123456"
        assert options.top_line.styles.line_color == "#ff0000"
        assert options.top_line.styles.line_width == 2
        assert options.bottom_line.styles.line_color == "#123456"

    def test_found_file(self, no_config_files, config_file):
        assert load_options().params.period == 10

    def test_env_beats_file(self, no_config_files, config_file, monkeypatch):
        monkeypatch.setenv("OVERLAY_BB_PERIOD", "5")
        monkeypatch.setenv("OVERLAY_BB_STANDARD_DEVIATION", "1.5")
        options = load_options(config_file)
        assert options.params.period == 5
        assert options.params.standard_deviation == 1.5

    def test_missing_file(self, no_config_files):
        with pytest.raises(ConfigError, match="not found"):
            load_options(no_config_files / "missing.toml")

    def test_malformed_file(self, no_config_files):
        path = no_config_files / "broken.toml"
        path.write_text("[bb\nperiod = ")
        with pytest.raises(ConfigError, match="Failed to parse TOML"):
            load_options(path)

    def test_invalid_value_in_file(self, no_config_files):
        path = no_config_files / "invalid.toml"
        path.write_text("[bb.params]\nperiod = 1\n")
        with pytest.raises(ConfigError) as exc_info:
            load_options(path)
        assert exc_info.value.source == str(path)

    def test_invalid_env(self, no_config_files, monkeypatch):
        monkeypatch.setenv("OVERLAY_BB_STANDARD_DEVIATION", "-2")
        with pytest.raises(ConfigError):
            load_options()

    def test_loaded_options_defer_to_chart_color(self, no_config_files):
        options = load_options()
        assert options.top_line.styles.line_color is None
        assert options.bottom_line.styles.line_color is None

        descriptors = BollingerBandsComputer(options=options).line_descriptors("#abcdef")
        assert [d.style.line_color for d in descriptors] == ["#abcdef"] * 3

    def test_reload(self, no_config_files, config_file):
        assert reload_options(config_file).params.period == 10
        assert reload_options().params.period == 10
