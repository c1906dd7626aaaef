"""Tests for configuration resolution."""

import pytest

from money_input.config import (
    _load_config_dict,
    load_format_settings,
    parse_args,
    resolve_config,
)
from money_input.errors import InvalidConfiguration
from money_input.models import FormatterConfig


class TestParseArgs:
    """Tests for CLI argument parsing."""

    def test_no_args(self):
        args = parse_args([])
        assert args.decimal_separator is None
        assert args.thousand_separator is None
        assert args.precision is None

    def test_short_flags(self):
        args = parse_args(["-d", ".", "-t", ",", "-p", "3"])
        assert args.decimal_separator == "."
        assert args.thousand_separator == ","
        assert args.precision == 3

    def test_long_flags(self):
        args = parse_args(["--decimal-separator", ".", "--thousand-separator", " "])
        assert args.decimal_separator == "."
        assert args.thousand_separator == " "

    def test_precision_must_be_integer(self):
        with pytest.raises(SystemExit):
            parse_args(["--precision", "two"])


class TestLoadConfigDict:
    """Tests for the _load_config_dict private helper."""

    def test_returns_empty_dict_when_config_missing(self, config_path):
        """Returns an empty dict when the config file does not exist."""
        assert _load_config_dict() == {}

    def test_returns_empty_dict_on_malformed_toml(self, config_path):
        """Returns an empty dict when the TOML file is invalid."""
        config_path.write_text("not valid toml === !!!")
        assert _load_config_dict() == {}

    def test_returns_parsed_dict_from_valid_toml(self, config_path):
        """Returns the correct dict when the TOML file is valid."""
        config_path.write_text('[format]\nprecision = 3\n')
        assert _load_config_dict() == {"format": {"precision": 3}}


class TestLoadFormatSettings:
    """Tests for load_format_settings."""

    def test_empty_when_no_format_table(self, config_path):
        """Returns an empty dict when config.toml has no [format] table."""
        config_path.write_text('theme = "nord"\n')
        assert load_format_settings() == {}

    def test_reads_known_keys(self, config_path):
        config_path.write_text(
            '[format]\ndecimal_separator = "."\nthousand_separator = ","\nprecision = 0\n'
        )
        assert load_format_settings() == {
            "decimal_separator": ".",
            "thousand_separator": ",",
            "precision": 0,
        }

    def test_ignores_unknown_keys(self, config_path):
        config_path.write_text('[format]\nprecision = 1\ncurrency = "EUR"\n')
        assert load_format_settings() == {"precision": 1}

    def test_format_must_be_a_table(self, config_path):
        config_path.write_text('format = "euro"\n')
        with pytest.raises(InvalidConfiguration):
            load_format_settings()


class TestResolveConfig:
    """Tests for the CLI > config.toml > defaults priority chain."""

    def test_defaults(self, config_path):
        assert resolve_config() == FormatterConfig()

    def test_config_file_values(self, config_path):
        config_path.write_text('[format]\nprecision = 3\n')
        assert resolve_config(parse_args([])).precision == 3

    def test_cli_overrides_config_file(self, config_path):
        config_path.write_text('[format]\ndecimal_separator = "."\nthousand_separator = ","\n')
        config = resolve_config(parse_args(["-d", "'", "-p", "4"]))
        assert config.decimal_separator == "'"
        assert config.thousand_separator == ","
        assert config.precision == 4

    def test_invalid_merged_settings_raise(self, config_path):
        config_path.write_text('[format]\nthousand_separator = ","\n')
        with pytest.raises(InvalidConfiguration):
            resolve_config()
