"""
Business Projections

Compound growth, present value and NPV for periodic cash flows.
"""

from typing import Sequence

import numpy as np


def calculate_compound_growth(
    initial_value: float, growth_rate: float, periods: float
) -> float:
    """Future value of ``initial_value`` compounding at ``growth_rate`` per period."""
    return initial_value * (1 + growth_rate) ** periods


def calculate_present_value(
    future_value: float, discount_rate: float, periods: float
) -> float:
    """Discount ``future_value`` back ``periods`` periods."""
    return future_value / (1 + discount_rate) ** periods


def calculate_npv(
    cash_flows: Sequence[float],
    discount_rate: float,
    initial_investment: float = 0.0,
) -> float:
    """
    Calculate NPV (Net Present Value) of cash flows.

    Matches Excel's NPV() function: the first cash flow is discounted one full
    period. The undiscounted initial investment is subtracted afterwards.

    Args:
        cash_flows: Cash flows for periods 1..n
        discount_rate: Discount rate per period (e.g., 0.10 for 10%)
        initial_investment: Time-zero outlay (positive number)

    Returns:
        NPV value
    """
    flows = np.asarray(cash_flows, dtype=float)
    periods = np.arange(1, len(flows) + 1)
    discounted = flows / (1 + discount_rate) ** periods
    return float(discounted.sum()) - initial_investment
