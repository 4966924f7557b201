"""
Financial Calculation Engine

Core calculation modules for real estate investment analysis.
All calculations are pure functions of their arguments and the rule set.
"""

from dealkit.calculations import (
    appreciation,
    cash_flow,
    costs,
    dates,
    formatting,
    investment,
    loans,
    projections,
    ratios,
    returns,
    solver,
)

__all__ = [
    "appreciation",
    "cash_flow",
    "costs",
    "dates",
    "formatting",
    "investment",
    "loans",
    "projections",
    "ratios",
    "returns",
    "solver",
]
