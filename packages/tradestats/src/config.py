"""Configuration loading utilities.

This module loads the YAML files that tune the market-pattern
interpretation thresholds (see ``conf/analysis.yaml``).
"""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarketPatternConfig:
    """Thresholds for ``interpret_market_patterns``.

    Parameters
    ----------
    bias_threshold : float, default 0.15
        Minimum gap between up-day and down-day shares for a bullish or
        bearish bias. Day trading suits 0.05-0.10, swing trading
        0.15-0.20, position trading 0.25-0.30.
    low_volatility_neutral : float, default 0.2
        Share of neutral days above which volatility is low.
    high_volatility_neutral : float, default 0.1
        Share of neutral days below which volatility is high.
    ranging_run_gap : int, default 1
        Largest gap between the longest up and down runs that still
        counts as a ranging market.
    """

    bias_threshold: float = 0.15
    low_volatility_neutral: float = 0.2
    high_volatility_neutral: float = 0.1
    ranging_run_gap: int = 1


DEFAULT_MARKET_PATTERN_CONFIG = MarketPatternConfig()


def load_config(path: str | Path) -> dict[str, Any]:
    """
    Load a YAML configuration file.

    Parameters
    ----------
    path : str | Path
        Path to the YAML configuration file.

    Returns
    -------
    dict[str, Any]
        Configuration dictionary, empty for an empty file.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist.
    yaml.YAMLError
        If the YAML is malformed.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r") as f:
        config = yaml.safe_load(f)

    return config if config is not None else {}


def get_nested(config: dict[str, Any], *keys: str, default: Any = None) -> Any:
    """
    Get a nested value from a configuration dictionary.

    Examples
    --------
    >>> cfg = {"market_patterns": {"bias_threshold": 0.1}}
    >>> get_nested(cfg, "market_patterns", "bias_threshold")
    0.1
    >>> get_nested(cfg, "market_patterns", "missing", default=0.15)
    0.15
    """
    result = config
    for key in keys:
        if isinstance(result, dict) and key in result:
            result = result[key]
        else:
            return default
    return result


def market_pattern_config_from_dict(section: dict[str, Any] | None) -> MarketPatternConfig:
    """Build a MarketPatternConfig from a mapping, ignoring unknown keys."""
    section = section or {}
    known = {f.name for f in fields(MarketPatternConfig)}
    unknown = set(section) - known
    if unknown:
        logger.warning("Ignoring unknown market_patterns keys: %s", sorted(unknown))
    return MarketPatternConfig(**{k: v for k, v in section.items() if k in known})


def load_market_pattern_config(path: str | Path) -> MarketPatternConfig:
    """
    Load market-pattern thresholds from the ``market_patterns`` section.

    Missing keys keep their defaults.

    Examples
    --------
    >>> cfg = load_market_pattern_config("conf/analysis.yaml")
    >>> cfg.bias_threshold
    0.15
    """
    config = load_config(path)
    return market_pattern_config_from_dict(get_nested(config, "market_patterns", default={}))
