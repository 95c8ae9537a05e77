from __future__ import annotations

"""Risk of Ruin and Kelly sizing.

This module provides the fixed-fractional Risk of Ruin estimate and a
detailed variant that folds in the Kelly criterion and the observed
losing streak.

Arithmetic runs on numpy floats so degenerate inputs (zero reward
ratio, zero risk per trade) yield inf/NaN rather than raising.
"""

import logging
from typing import Any

import numpy as np

from ..formatting import percent, to_fixed
from ..parsing import parse_risk_reward

logger = logging.getLogger(__name__)

CERTAIN_RUIN = "100%"
NEGLIGIBLE_RUIN = "<1%"

# Capital expressed in units of risk per trade
_CAPITAL_UNITS = 100.0

# (upper bound on risk of ruin, status), checked in order
_RISK_STATUSES = (
    (0.01, "Minimal Risk"),
    (0.25, "Low Risk"),
    (0.50, "Moderate Risk"),
    (0.75, "High Risk"),
)
_EXTREME_RISK = "Extreme Risk"


def _base_risk_of_ruin(
    win_probability: np.float64,
    reward_ratio: np.float64,
    risk_per_trade: np.float64,
) -> np.float64:
    """((1 - p) / p * 1 / X) ** (100 / risk)."""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        a = (1 - win_probability) / win_probability
        b = 1 / reward_ratio
        return np.power(a * b, _CAPITAL_UNITS / risk_per_trade)


def _has_edge(win_probability: float, reward_ratio: float) -> bool:
    return bool(win_probability >= 0.5 and reward_ratio >= 1)


def calculate_risk_of_ruin(
    win_rate: float,
    risk_reward_ratio: str,
    risk_per_trade: float,
) -> str:
    """
    Risk of Ruin under fixed position sizing.

    RoR = ((1 - p) / p * 1 / X) ** (100 / risk_per_trade)

    Parameters
    ----------
    win_rate : float
        Win rate in percent (75 for 75%).
    risk_reward_ratio : str
        ``"1:X"`` ratio.
    risk_per_trade : float
        Percent of capital risked per trade.

    Returns
    -------
    str
        ``"100%"`` when p < 0.5 or X < 1 (ruin is certain), ``"<1%"`` when
        RoR < 0.01, else the percentage with 2 decimals.

    Examples
    --------
    >>> calculate_risk_of_ruin(75, "1:1.95", 2)
    '<1%'
    >>> calculate_risk_of_ruin(45, "1:1.95", 2)
    '100%'
    """
    p = np.float64(win_rate) / 100
    reward = np.float64(parse_risk_reward(risk_reward_ratio))

    if not _has_edge(p, reward):
        return CERTAIN_RUIN

    ror = _base_risk_of_ruin(p, reward, np.float64(risk_per_trade))
    return NEGLIGIBLE_RUIN if ror < 0.01 else percent(ror, 2)


def kelly_fraction(win_probability: float, reward_ratio: float) -> float:
    """
    Kelly criterion fraction of capital.

    k = (p * X - (1 - p)) / X

    Parameters
    ----------
    win_probability : float
        Win probability as a decimal.
    reward_ratio : float
        Reward multiple X.

    Returns
    -------
    float
        Optimal fraction; negative when the strategy has no edge.
    """
    p = np.float64(win_probability)
    with np.errstate(divide="ignore", invalid="ignore"):
        return float((p * reward_ratio - (1 - p)) / np.float64(reward_ratio))


def drawdown_factor(max_consecutive_losses: float, risk_per_trade: float) -> float:
    """exp(-L * f) with f the risk per trade as a decimal."""
    return float(np.exp(-max_consecutive_losses * (risk_per_trade / 100)))


def _risk_status(risk_of_ruin: float) -> str:
    for ceiling, status in _RISK_STATUSES:
        if risk_of_ruin < ceiling:
            return status
    return _EXTREME_RISK


def _risk_description(risk_of_ruin: float, kelly: float, reward_ratio: float) -> str:
    if kelly > 0 and risk_of_ruin < 0.25:
        return (
            "Positive expectancy with sustainable risk levels. "
            f"Edge preserved with {to_fixed(reward_ratio, 2)}x reward ratio."
        )
    if kelly > 0:
        return "Positive expectancy but high risk of drawdown. Consider reducing position size."
    if risk_of_ruin > 0.75:
        return "High probability of capital depletion. Strategy needs revision."
    return "Mixed risk profile. Monitor performance closely and adjust risk parameters."


def _trade_recommendation(risk_of_ruin: float, kelly: float, current_risk: float) -> str:
    optimal_risk = (kelly / 2 if kelly > 0 else 0.0) * 100

    if risk_of_ruin < 0.1 and kelly > 0:
        return (
            "Current strategy is well-optimized. "
            f"Consider {to_fixed(optimal_risk, 1)}% risk per trade."
        )
    if current_risk > optimal_risk:
        return (
            f"Consider reducing risk per trade to {to_fixed(optimal_risk, 1)}% "
            "for better capital preservation."
        )
    return "Review strategy parameters. Current risk level may not be sustainable."


def calculate_detailed_risk_of_ruin(
    win_rate: float,
    risk_reward_ratio: str,
    risk_per_trade: float,
    max_consecutive_losses: float,
) -> dict[str, Any]:
    """
    Risk of Ruin adjusted for Kelly sizing and the worst losing streak.

    With an edge (p >= 0.5 and X >= 1) the base Risk of Ruin is scaled by
    ``1 - exp(-L * f)``; without one it is ``1 - exp(-(1 - p * X) * L)``.

    Parameters
    ----------
    win_rate : float
        Win rate in percent (61.5 for 61.5%).
    risk_reward_ratio : str
        ``"1:X"`` ratio.
    risk_per_trade : float
        Percent of capital risked per trade.
    max_consecutive_losses : float
        Longest observed losing streak.

    Returns
    -------
    dict[str, Any]
        ``riskOfRuin``, ``survivalProbability``, ``riskStatus``,
        ``metrics`` (kelly, half-Kelly recommended risk, drawdown factor)
        and ``interpretation`` (status, description, recommendation).
        Percentages carry 2 decimals.

    Examples
    --------
    >>> result = calculate_detailed_risk_of_ruin(61.5, "1:1.70", 2, 2)
    >>> result["riskStatus"], result["metrics"]["kellyPercentage"]
    ('Minimal Risk', '38.85%')
    """
    p = np.float64(win_rate) / 100
    reward = np.float64(parse_risk_reward(risk_reward_ratio))

    kelly = kelly_fraction(p, reward)
    drawdown = drawdown_factor(max_consecutive_losses, risk_per_trade)

    if _has_edge(p, reward):
        base = _base_risk_of_ruin(p, reward, np.float64(risk_per_trade))
        risk_of_ruin = float(base * (1 - drawdown))
    else:
        negative_edge = 1 - p * reward
        risk_of_ruin = float(1 - np.exp(-negative_edge * max_consecutive_losses))

    survival = 1 - risk_of_ruin
    recommended_risk = (kelly / 2 if kelly > 0 else 0.0) * 100
    status = _risk_status(risk_of_ruin)

    logger.debug(
        "Detailed RoR: p=%.4f X=%.4f kelly=%.4f ror=%.6f status=%s",
        p, reward, kelly, risk_of_ruin, status,
    )

    return {
        "riskOfRuin": percent(risk_of_ruin, 2),
        "survivalProbability": percent(survival, 2),
        "riskStatus": status,
        "metrics": {
            "kellyPercentage": percent(kelly, 2),
            "recommendedRiskPerTrade": f"{to_fixed(recommended_risk, 2)}%",
            "drawdownRisk": percent(drawdown, 2),
        },
        "interpretation": {
            "status": status,
            "description": _risk_description(risk_of_ruin, kelly, float(reward)),
            "recommendation": _trade_recommendation(risk_of_ruin, kelly, risk_per_trade),
        },
    }
