"""Trade performance metrics.

Implements: calculate_success_rate, calculate_profit_metrics,
calculate_expected_value, determine_probability_status.
"""
from __future__ import annotations

from typing import Any

from ..formatting import ratio_label, to_fixed
from ..parsing import parse_float, parse_risk_reward

PROFITABLE = "Profitable"
BREAK_EVEN = "Break Even"
NOT_PROFITABLE = "Not Profitable"

# Win rate (%) needed to be profitable, by risk/reward bucket
_WIN_RATE_THRESHOLDS = ((1.0, 55.0), (2.0, 45.0))
_WIN_RATE_THRESHOLD_WIDE = 35.0
_BREAK_EVEN_BAND = 5.0


def calculate_success_rate(profitable_trades: float, total_trades: float) -> str | int:
    """Percentage of profitable trades.

    Parameters
    ----------
    profitable_trades : float
        Number of winning trades.
    total_trades : float
        Number of trades.

    Returns
    -------
    str | int
        Percentage with one decimal, e.g. ``"75.0"``. The integer 0 when
        there are no trades.
    """
    if total_trades == 0:
        return 0
    return to_fixed(profitable_trades / total_trades * 100, 1)


def calculate_profit_metrics(
    total_profit: float,
    profit_count: int,
    total_loss: float,
    loss_count: int,
) -> dict[str, Any]:
    """Average profit, average loss and the realised risk/reward.

    Parameters
    ----------
    total_profit : float
        Sum of winning trades.
    profit_count : int
        Number of winning trades.
    total_loss : float
        Sum of losing trades (negative).
    loss_count : int
        Number of losing trades.

    Returns
    -------
    dict[str, Any]
        ``avgProfit`` and ``avgLoss`` as 2-decimal strings (0 when the
        count is 0) and ``riskReward`` as ``"1:X"`` with
        X = |avgLoss| / avgProfit, or ``"N/A"`` when there is no loss.

    Examples
    --------
    >>> calculate_profit_metrics(1000, 10, -500, 5)
    {'avgProfit': '100.00', 'avgLoss': '-100.00', 'riskReward': '1:1.00'}
    """
    avg_profit = to_fixed(total_profit / profit_count, 2) if profit_count > 0 else 0
    avg_loss = to_fixed(total_loss / loss_count, 2) if loss_count > 0 else 0

    # Ratio is taken between the rounded averages that are reported
    loss_size = abs(float(avg_loss))
    if loss_size > 0:
        profit_size = float(avg_profit)
        reward = loss_size / profit_size if profit_size != 0 else float("inf")
        risk_reward = ratio_label(reward)
    else:
        risk_reward = "N/A"

    return {"avgProfit": avg_profit, "avgLoss": avg_loss, "riskReward": risk_reward}


def calculate_expected_value(win_rate: float, risk_reward_ratio: str) -> float:
    """Expected value per unit risked.

    EV = win_rate * reward - (1 - win_rate) * 1

    Parameters
    ----------
    win_rate : float
        Win rate as a decimal (0.75 for 75%).
    risk_reward_ratio : str
        ``"1:X"`` ratio.

    Returns
    -------
    float
        Positive for a winning strategy.
    """
    reward = parse_risk_reward(risk_reward_ratio)
    return win_rate * reward - (1 - win_rate) * 1


def _win_rate_threshold(risk_reward: float) -> float:
    for ceiling, threshold in _WIN_RATE_THRESHOLDS:
        if risk_reward <= ceiling:
            return threshold
    return _WIN_RATE_THRESHOLD_WIDE


def determine_probability_status(success_rate: float | str, risk_reward: float) -> str:
    """Classify a strategy from its win rate and risk/reward.

    Win rate needed: 55% when RR <= 1, 45% when RR <= 2, 35% above.
    Within 5 points under the threshold counts as break even.

    Parameters
    ----------
    success_rate : float | str
        Win rate in percent; numeric strings are accepted.
    risk_reward : float
        Reward multiple, e.g. 1.95.

    Returns
    -------
    str
        "Profitable", "Break Even" or "Not Profitable".
    """
    threshold = _win_rate_threshold(risk_reward)
    rate = parse_float(success_rate)
    if rate >= threshold:
        return PROFITABLE
    if rate >= threshold - _BREAK_EVEN_BAND:
        return BREAK_EVEN
    return NOT_PROFITABLE
