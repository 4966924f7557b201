"""
Cash Flow Calculations
"""

from dealkit.calculations.loans import calculate_pmt


def calculate_cash_flow(
    monthly_noi: float,
    loan_amount: float,
    interest_rate: float,
    amortization_years: int,
) -> float:
    """
    Calculate monthly cash flow after debt service.

    Args:
        monthly_noi: Monthly Net Operating Income
        loan_amount: Loan principal
        interest_rate: Annual interest rate as decimal
        amortization_years: Amortization period in years

    Returns:
        Monthly cash flow
    """
    monthly_payment = calculate_pmt(loan_amount, interest_rate, amortization_years)
    return monthly_noi - monthly_payment


def calculate_cash_flow_yield(annual_cash_flow: float, property_price: float) -> float:
    """Annual cash flow as a fraction of price (0 when price is missing)."""
    if not property_price:
        return 0.0
    return annual_cash_flow / property_price


def calculate_cap_rate(annual_noi: float, property_price: float) -> float:
    """Cap rate = NOI / price (0 when price is missing)."""
    if not property_price:
        return 0.0
    return annual_noi / property_price
