"""
Common business financial ratios.

A zero denominator yields 0 rather than raising.
"""


def calculate_roi(gain: float, cost: float) -> float:
    """Return on Investment: (gain - cost) / cost."""
    if cost == 0:
        return 0.0
    return (gain - cost) / cost


def calculate_roe(net_income: float, shareholder_equity: float) -> float:
    """Return on Equity."""
    if shareholder_equity == 0:
        return 0.0
    return net_income / shareholder_equity


def calculate_current_ratio(current_assets: float, current_liabilities: float) -> float:
    """Current assets over current liabilities."""
    if current_liabilities == 0:
        return 0.0
    return current_assets / current_liabilities
