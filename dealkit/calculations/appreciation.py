"""
Appreciation and Refinance Calculations
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AppreciationResult:
    future_value: float
    refi_amount: float
    total_owing: float
    cash_out_after_refi: float


def calculate_appreciation(
    current_price: float,
    appreciation_rate: float,
    years: float,
    balloon_balance: float = 0.0,
    dscr_balance: float = 0.0,
    refi_percent: float = 0.70,
) -> AppreciationResult:
    """
    Project property value and cash-out from a refinance.

    Args:
        current_price: Current property price
        appreciation_rate: Annual appreciation rate as decimal
        years: Holding period in years
        balloon_balance: Seller financing balance outstanding at refinance
        dscr_balance: DSCR loan balance outstanding at refinance
        refi_percent: Loan-to-value of the new loan as decimal

    Returns:
        AppreciationResult
    """
    future_value = current_price * (1 + appreciation_rate) ** years
    refi_amount = future_value * refi_percent
    total_owing = balloon_balance + dscr_balance

    return AppreciationResult(
        future_value=future_value,
        refi_amount=refi_amount,
        total_owing=total_owing,
        cash_out_after_refi=refi_amount - total_owing,
    )
