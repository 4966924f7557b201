"""
Cash-on-Cash Return Calculations
"""

from typing import Optional

from dealkit.calculations.loans import calculate_pmt
from dealkit.rules import RealEstateRules, get_rules


def calculate_cocr(annual_cash_flow: float, down_payment: float) -> float:
    """
    Calculate Cash-on-Cash Return.

    Args:
        annual_cash_flow: Annual cash flow after debt service
        down_payment: Cash invested

    Returns:
        COCR as decimal, 0 when nothing was invested
    """
    if not down_payment:
        return 0.0
    return annual_cash_flow / down_payment


def calculate_cocr_scenario(
    property_price: float,
    annual_noi: float,
    down_payment_percent: float,
    interest_rate: Optional[float] = None,
    amortization_years: Optional[int] = None,
    rules: Optional[RealEstateRules] = None,
) -> float:
    """
    Calculate COCR for a single-loan down payment scenario.

    Args:
        property_price: Property price
        annual_noi: Annual Net Operating Income
        down_payment_percent: Down payment as decimal (e.g., 0.15 for 15%)
        interest_rate: Annual rate as decimal; defaults to the DSCR loan rate
        amortization_years: Defaults to the standard amortization term
        rules: Business rules for the defaults

    Returns:
        COCR as decimal
    """
    if interest_rate is None or amortization_years is None:
        financing = (rules or get_rules()).financing
        if interest_rate is None:
            interest_rate = financing.dscr_interest_rate
        if amortization_years is None:
            amortization_years = financing.standard_amortization_years

    down_payment = property_price * down_payment_percent
    loan_amount = property_price * (1 - down_payment_percent)
    monthly_payment = calculate_pmt(loan_amount, interest_rate, amortization_years)
    annual_debt_service = monthly_payment * 12
    annual_cash_flow = annual_noi - annual_debt_service

    return calculate_cocr(annual_cash_flow, down_payment)


def calculate_cocr_15(
    property_price: float,
    annual_noi: float,
    interest_rate: Optional[float] = None,
    amortization_years: Optional[int] = None,
    rules: Optional[RealEstateRules] = None,
) -> float:
    """COCR with 15% down."""
    return calculate_cocr_scenario(
        property_price, annual_noi, 0.15, interest_rate, amortization_years, rules
    )


def calculate_cocr_30(
    property_price: float,
    annual_noi: float,
    interest_rate: Optional[float] = None,
    amortization_years: Optional[int] = None,
    rules: Optional[RealEstateRules] = None,
) -> float:
    """COCR with 30% down."""
    return calculate_cocr_scenario(
        property_price, annual_noi, 0.30, interest_rate, amortization_years, rules
    )
