"""Tests for config module."""

import logging
from pathlib import Path

import pytest
import yaml

from src.config import (
    DEFAULT_MARKET_PATTERN_CONFIG,
    MarketPatternConfig,
    get_nested,
    load_config,
    load_market_pattern_config,
    market_pattern_config_from_dict,
)

REPO_CONF = Path(__file__).resolve().parents[3] / "conf" / "analysis.yaml"


class TestLoadConfig:
    """Tests for load_config function."""

    def test_reads_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "analysis.yaml"
        config_file.write_text(yaml.dump({"market_patterns": {"bias_threshold": 0.1}}))

        assert load_config(config_file) == {"market_patterns": {"bias_threshold": 0.1}}

    def test_string_path(self, tmp_path: Path) -> None:
        config_file = tmp_path / "analysis.yaml"
        config_file.write_text("market_patterns: {}\n")

        assert load_config(str(config_file)) == {"market_patterns": {}}

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test an empty file gives an empty dict."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        assert load_config(config_file) == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "absent.yaml")


class TestGetNested:
    """Tests for get_nested function."""

    def test_nested_value(self) -> None:
        config = {"market_patterns": {"bias_threshold": 0.2}}
        assert get_nested(config, "market_patterns", "bias_threshold") == 0.2

    def test_missing_returns_default(self) -> None:
        config = {"market_patterns": {}}
        assert get_nested(config, "market_patterns", "bias_threshold") is None
        assert get_nested(config, "other", "key", default=1) == 1

    def test_non_dict_intermediate(self) -> None:
        """Test walking into a scalar gives the default."""
        config = {"market_patterns": 5}
        assert get_nested(config, "market_patterns", "bias_threshold", default=0.15) == 0.15


class TestMarketPatternConfig:
    """Tests for market-pattern threshold loading."""

    def test_defaults(self) -> None:
        assert DEFAULT_MARKET_PATTERN_CONFIG == MarketPatternConfig(
            bias_threshold=0.15,
            low_volatility_neutral=0.2,
            high_volatility_neutral=0.1,
            ranging_run_gap=1,
        )

    def test_repo_conf_matches_defaults(self) -> None:
        assert load_market_pattern_config(REPO_CONF) == DEFAULT_MARKET_PATTERN_CONFIG

    def test_partial_section_keeps_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "analysis.yaml"
        config_file.write_text("market_patterns:\n  bias_threshold: 0.05\n")

        config = load_market_pattern_config(config_file)

        assert config.bias_threshold == 0.05
        assert config.ranging_run_gap == 1

    def test_missing_section(self, tmp_path: Path) -> None:
        config_file = tmp_path / "analysis.yaml"
        config_file.write_text("other: 1\n")

        assert load_market_pattern_config(config_file) == DEFAULT_MARKET_PATTERN_CONFIG

    def test_unknown_keys_warn(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="src.config"):
            config = market_pattern_config_from_dict({"bias_threshold": 0.3, "colour": "red"})

        assert config.bias_threshold == 0.3
        assert "colour" in caplog.text

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_MARKET_PATTERN_CONFIG.bias_threshold = 0.5
