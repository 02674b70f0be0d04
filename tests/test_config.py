"""
tests/test_config.py

Tests for CheckerConfig and load_config.
"""

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from swiftcheck import DEFAULT_CONFIG, CheckerConfig, ConfigError, load_config


class TestDefaults:
    """Default thresholds."""

    def test_thresholds(self):
        assert DEFAULT_CONFIG.complexity_threshold == 10
        assert DEFAULT_CONFIG.long_function_threshold == 50
        assert DEFAULT_CONFIG.max_optional_chain_depth == 3
        assert DEFAULT_CONFIG.duplicate_similarity_threshold == 0.8
        assert DEFAULT_CONFIG.magic_number_exemptions == frozenset({0, 1, 2, -1, 100})
        assert DEFAULT_CONFIG.allowed_indent_deltas == frozenset({-4, -2, 0, 2, 4})

    def test_deprecated_table(self):
        assert DEFAULT_CONFIG.deprecated_apis["UIWebView"] == "WKWebView"
        assert DEFAULT_CONFIG.deprecated_apis["NSURLConnection"] == "URLSession"

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.complexity_threshold = 3


class TestFromDict:
    """Merging overrides over the defaults."""

    def test_scalar_override(self):
        config = CheckerConfig.from_dict({"complexity_threshold": 15})
        assert config.complexity_threshold == 15
        assert config.long_function_threshold == 50

    def test_list_becomes_frozenset(self):
        config = CheckerConfig.from_dict({"short_name_whitelist": ["n"]})
        assert config.short_name_whitelist == frozenset({"n"})

    def test_mapping_is_merged(self):
        config = CheckerConfig.from_dict({"deprecated_apis": {"UIAlertView": "UIAlertController"}})
        assert config.deprecated_apis["UIAlertView"] == "UIAlertController"
        assert config.deprecated_apis["UIWebView"] == "WKWebView"

    def test_unknown_key(self):
        with pytest.raises(ConfigError, match="no_such_option"):
            CheckerConfig.from_dict({"no_such_option": 1})

    def test_wrong_types(self):
        with pytest.raises(ConfigError):
            CheckerConfig.from_dict({"complexity_threshold": "high"})
        with pytest.raises(ConfigError):
            CheckerConfig.from_dict({"dedupe_optional_chains": 1})
        with pytest.raises(ConfigError):
            CheckerConfig.from_dict({"magic_number_exemptions": 5})

    def test_fractional_value_for_integer_field(self):
        """A fractional number is rejected rather than truncated."""
        with pytest.raises(ConfigError):
            CheckerConfig.from_dict({"complexity_threshold": 10.7})

    def test_integral_float_for_integer_field(self):
        config = CheckerConfig.from_dict({"complexity_threshold": 12.0})
        assert config.complexity_threshold == 12
        assert isinstance(config.complexity_threshold, int)

    def test_float_field_keeps_fraction(self):
        config = CheckerConfig.from_dict({"duplicate_similarity_threshold": 0.75})
        assert config.duplicate_similarity_threshold == 0.75


class TestLoadConfig:
    """Reading configuration files."""

    def test_none_gives_defaults(self):
        assert load_config(None) is DEFAULT_CONFIG

    def test_reads_json(self, tmp_path):
        path = tmp_path / "swiftcheck.json"
        path.write_text(json.dumps({"max_blank_lines": 1, "flag_each_excess_blank_line": False}))

        config = load_config(path)
        assert config.max_blank_lines == 1
        assert config.flag_each_excess_blank_line is False

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(tmp_path / "absent.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_non_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigError):
            load_config(path)
