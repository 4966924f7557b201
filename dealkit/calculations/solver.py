"""
Target Cash-on-Cash Price Solver

Finds the asking price at which a deal reaches a target cash-on-cash return.
COCR depends on price through both the debt service and the down payment, so
there is no closed-form inverse; the price is found iteratively.

Two methods are available:

- ``damped`` (default): multiplicative damped fixed-point iteration seeded at
  a 6% cap rate. Prices above ``noi * 50`` snap back to ``noi * 20``.
- ``bisection``: bracketed search on ``[minimum price, noi * 50]``, relying on
  COCR falling as price rises when NOI is positive.

Neither method raises when the search fails to converge; the plain solver
returns its last estimate, and the ``_with_status`` variant reports whether
the tolerance was met.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from dealkit.calculations.investment import (
    InvestmentParameters,
    calculate_investment_analysis,
)
from dealkit.rules import RealEstateRules, get_rules

logger = logging.getLogger(__name__)

DAMPED = "damped"
BISECTION = "bisection"


@dataclass(frozen=True)
class PriceSolution:
    """Outcome of a price search."""

    price: float
    converged: bool
    iterations: int
    achieved_cocr: float
    method: str


class _CocrAtPrice:
    """Evaluates the analysis pipeline at a price for a fixed deal structure."""

    def __init__(
        self,
        noi: float,
        down_payment_percent: Optional[float],
        dscr_percent: Optional[float],
        seller_financing_percent: Optional[float],
        rules: RealEstateRules,
    ):
        self.noi = noi
        self.down_payment_percent = down_payment_percent
        self.dscr_percent = dscr_percent
        self.seller_financing_percent = seller_financing_percent
        self.rules = rules

    def __call__(self, price: float) -> float:
        params = InvestmentParameters(
            asking_price=price,
            noi=self.noi,
            down_payment_percent=self.down_payment_percent,
            dscr_percent=self.dscr_percent,
            seller_financing_percent=self.seller_financing_percent,
        )
        return calculate_investment_analysis(params, self.rules).cash_on_cash_return


def _solve_damped(
    cocr_at: _CocrAtPrice, noi: float, target_cocr: float, rules: RealEstateRules
) -> PriceSolution:
    solver = rules.solver
    min_price = rules.validation.price_minimum

    price = noi / solver.seed_cap_rate

    for iteration in range(1, solver.max_iterations + 1):
        achieved = cocr_at(price)
        difference = achieved - target_cocr

        logger.debug(
            "damped iteration %d: price=%.2f cocr=%.5f diff=%.5f",
            iteration,
            price,
            achieved,
            difference,
        )

        if abs(difference) < solver.tolerance:
            return PriceSolution(price, True, iteration, achieved, DAMPED)

        adjustment = abs(difference * solver.damping)
        if difference > 0:
            price = price * (1 + adjustment)
        else:
            price = price * (1 - adjustment)

        if price < min_price:
            price = min_price
        if price > noi * solver.max_price_noi_multiple:
            price = noi * solver.overflow_price_noi_multiple

    return PriceSolution(price, False, solver.max_iterations, cocr_at(price), DAMPED)


def _solve_bisection(
    cocr_at: _CocrAtPrice, noi: float, target_cocr: float, rules: RealEstateRules
) -> PriceSolution:
    solver = rules.solver
    low = rules.validation.price_minimum
    high = noi * solver.max_price_noi_multiple

    if high <= low:
        # No bracket to search; NOI too small for the price bounds
        return PriceSolution(low, False, 0, cocr_at(low), BISECTION)

    for iteration in range(1, solver.max_iterations + 1):
        mid = (low + high) / 2
        achieved = cocr_at(mid)
        difference = achieved - target_cocr

        logger.debug(
            "bisection iteration %d: bracket=[%.2f, %.2f] cocr=%.5f",
            iteration,
            low,
            high,
            achieved,
        )

        if abs(difference) < solver.tolerance:
            return PriceSolution(mid, True, iteration, achieved, BISECTION)

        # Return too high means the price can rise
        if difference > 0:
            low = mid
        else:
            high = mid

    mid = (low + high) / 2
    return PriceSolution(mid, False, solver.max_iterations, cocr_at(mid), BISECTION)


def solve_price_for_target_cocr_with_status(
    noi: float,
    target_cocr: float,
    down_payment_percent: Optional[float] = None,
    dscr_percent: Optional[float] = None,
    seller_financing_percent: Optional[float] = None,
    rules: Optional[RealEstateRules] = None,
    method: str = DAMPED,
) -> PriceSolution:
    """
    Search for the price that yields ``target_cocr``, reporting convergence.

    Args:
        noi: Annual net operating income
        target_cocr: Target cash-on-cash return as decimal (e.g., 0.15)
        down_payment_percent: Down payment, 0-100
        dscr_percent: DSCR loan share of price, 0-100
        seller_financing_percent: Seller financing share of price, 0-100
        rules: Business rules
        method: 'damped' or 'bisection'

    Returns:
        PriceSolution with the price and whether the tolerance was met

    Raises:
        ValueError: If the method is unknown
    """
    rules = rules or get_rules()
    cocr_at = _CocrAtPrice(
        noi, down_payment_percent, dscr_percent, seller_financing_percent, rules
    )

    if method == DAMPED:
        solution = _solve_damped(cocr_at, noi, target_cocr, rules)
    elif method == BISECTION:
        solution = _solve_bisection(cocr_at, noi, target_cocr, rules)
    else:
        raise ValueError(f"Unknown solver method: {method}")

    if not solution.converged:
        logger.warning(
            "Price search (%s) did not reach target COCR %.4f after %d iterations; "
            "returning price %.2f with COCR %.4f",
            method,
            target_cocr,
            solution.iterations,
            solution.price,
            solution.achieved_cocr,
        )

    return solution


def solve_price_for_target_cocr(
    noi: float,
    target_cocr: float,
    down_payment_percent: Optional[float] = None,
    dscr_percent: Optional[float] = None,
    seller_financing_percent: Optional[float] = None,
    rules: Optional[RealEstateRules] = None,
    method: str = DAMPED,
) -> float:
    """
    Calculate the price needed to achieve a target cash-on-cash return.

    Never raises for numeric input: if the search does not converge the last
    estimate is returned as-is. Use
    :func:`solve_price_for_target_cocr_with_status` to tell the two apart.
    """
    return solve_price_for_target_cocr_with_status(
        noi,
        target_cocr,
        down_payment_percent=down_payment_percent,
        dscr_percent=dscr_percent,
        seller_financing_percent=seller_financing_percent,
        rules=rules,
        method=method,
    ).price


def calculate_price_for_15_percent_cocr(
    noi: float, rules: Optional[RealEstateRules] = None
) -> float:
    """Price needed for the configured 15% COCR target with default financing."""
    rules = rules or get_rules()
    return solve_price_for_target_cocr(
        noi, rules.returns.target_cocr_15_percent, rules=rules
    )


def calculate_price_for_30_percent_cocr(
    noi: float, rules: Optional[RealEstateRules] = None
) -> float:
    """Price needed for the configured 30% COCR target with default financing."""
    rules = rules or get_rules()
    return solve_price_for_target_cocr(
        noi, rules.returns.target_cocr_30_percent, rules=rules
    )
