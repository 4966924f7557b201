"""
Loan Calculations

Closed-form loan payment, remaining balance and lifetime interest,
matching Excel's PMT() conventions for monthly payments.
"""


def calculate_pmt(principal: float, annual_rate: float, years: float) -> float:
    """
    Calculate monthly payment for a fully amortizing loan.

    Matches Excel's PMT() function (sign flipped to positive).

    Args:
        principal: Loan principal amount
        annual_rate: Annual interest rate as decimal (e.g., 0.075 for 7.5%)
        years: Loan term in years, must be > 0

    Returns:
        Monthly payment amount
    """
    num_payments = years * 12

    if annual_rate == 0:
        return principal / num_payments

    monthly_rate = annual_rate / 12
    growth = (1 + monthly_rate) ** num_payments

    return principal * (monthly_rate * growth) / (growth - 1)


def calculate_remaining_balance(
    principal: float,
    annual_rate: float,
    total_years: float,
    years_paid: float,
) -> float:
    """
    Calculate balance still owed after ``years_paid`` years of payments.

    Args:
        principal: Original loan amount
        annual_rate: Annual interest rate as decimal
        total_years: Total loan term in years
        years_paid: Years of payments already made

    Returns:
        Remaining balance, never below zero
    """
    if annual_rate == 0:
        monthly_principal = principal / (total_years * 12)
        total_paid = monthly_principal * years_paid * 12
        return max(0.0, principal - total_paid)

    monthly_rate = annual_rate / 12
    total_growth = (1 + monthly_rate) ** (total_years * 12)
    paid_growth = (1 + monthly_rate) ** (years_paid * 12)

    balance = principal * (total_growth - paid_growth) / (total_growth - 1)

    # Floating drift can leave a tiny negative at term
    return max(0.0, balance)


# Balloon payments are the remaining balance at the balloon date
calculate_balloon_balance = calculate_remaining_balance


def calculate_interest_over_time(
    principal: float, annual_rate: float, years: float
) -> float:
    """Calculate total interest paid over the life of the loan."""
    monthly_payment = calculate_pmt(principal, annual_rate, years)
    total_paid = monthly_payment * years * 12
    return total_paid - principal
