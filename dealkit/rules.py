"""
Real Estate Business Rules

Immutable rule sets consumed by every calculation entry point. Functions take
an optional ``rules`` argument; when omitted they use the cached default built
from settings, so tests and callers with different rule sets never share
mutable state.
"""

from dataclasses import dataclass, field
from functools import lru_cache

from dealkit.config import Settings, get_settings


@dataclass(frozen=True)
class FinancingRules:
    """Financing structure. Percentages are 0-100, rates are decimals."""

    default_down_payment_percent: float = 60
    default_dscr_percent: float = 70
    default_seller_financing_percent: float = 40
    dscr_interest_rate: float = 0.075
    seller_financing_rate: float = 0.0
    standard_amortization_years: int = 30


@dataclass(frozen=True)
class CostRules:
    """Transaction cost percentages, as decimals of the asking price."""

    assignment_fee_percent: float = 0.05
    net_to_buyer_base_percent: float = 0.10
    transaction_cost_percent: float = 0.0625
    additional_cost_percent: float = 0.03


@dataclass(frozen=True)
class AssistedLivingIncome:
    revenue_per_bedroom_per_month: float = 1500
    months_per_year: int = 12


@dataclass(frozen=True)
class ShortTermRentalIncome:
    net_income_after_expenses_percent: float = 0.55
    fallback_gross_yield_estimate: float = 0.10  # used when no STR data


@dataclass(frozen=True)
class PropertyIncomeRules:
    assisted_living: AssistedLivingIncome = field(default_factory=AssistedLivingIncome)
    short_term_rental: ShortTermRentalIncome = field(default_factory=ShortTermRentalIncome)


@dataclass(frozen=True)
class ReturnTargets:
    target_cocr_15_percent: float = 0.15
    target_cocr_30_percent: float = 0.30


@dataclass(frozen=True)
class DefaultAssumptions:
    bedroom_count: int = 10
    cap_rate_percent: float = 0.05
    property_type: str = "multifamily"


@dataclass(frozen=True)
class ValidationRules:
    price_minimum: float = 10_000
    price_maximum: float = 100_000_000
    cap_rate_minimum: float = 0.001
    cap_rate_maximum: float = 1.0
    percentage_minimum: float = 0
    percentage_maximum: float = 100


@dataclass(frozen=True)
class SolverRules:
    """
    Parameters of the target-COCR price search.

    A price above ``noi * max_price_noi_multiple`` snaps to
    ``noi * overflow_price_noi_multiple``, not to the bound itself.
    """

    seed_cap_rate: float = 0.06
    tolerance: float = 0.001
    max_iterations: int = 50
    damping: float = 0.5
    max_price_noi_multiple: float = 50
    overflow_price_noi_multiple: float = 20


@dataclass(frozen=True)
class RealEstateRules:
    """Complete business-rule set."""

    financing: FinancingRules = field(default_factory=FinancingRules)
    costs: CostRules = field(default_factory=CostRules)
    property_income: PropertyIncomeRules = field(default_factory=PropertyIncomeRules)
    returns: ReturnTargets = field(default_factory=ReturnTargets)
    defaults: DefaultAssumptions = field(default_factory=DefaultAssumptions)
    validation: ValidationRules = field(default_factory=ValidationRules)
    solver: SolverRules = field(default_factory=SolverRules)


DEFAULT_RULES = RealEstateRules()


def rules_from_settings(settings: Settings) -> RealEstateRules:
    """Build a rule set, applying any overrides present in settings."""
    return RealEstateRules(
        financing=FinancingRules(
            default_down_payment_percent=settings.default_down_payment_percent,
            default_dscr_percent=settings.default_dscr_percent,
            default_seller_financing_percent=settings.default_seller_financing_percent,
            dscr_interest_rate=settings.dscr_interest_rate,
            seller_financing_rate=settings.seller_financing_rate,
            standard_amortization_years=settings.standard_amortization_years,
        ),
        costs=CostRules(
            assignment_fee_percent=settings.assignment_fee_percent,
            net_to_buyer_base_percent=settings.net_to_buyer_base_percent,
            transaction_cost_percent=settings.transaction_cost_percent,
            additional_cost_percent=settings.additional_cost_percent,
        ),
        property_income=PropertyIncomeRules(
            assisted_living=AssistedLivingIncome(
                revenue_per_bedroom_per_month=settings.assisted_living_revenue_per_bedroom,
            ),
            short_term_rental=ShortTermRentalIncome(
                net_income_after_expenses_percent=settings.str_net_income_percent,
                fallback_gross_yield_estimate=settings.str_fallback_gross_yield,
            ),
        ),
        defaults=DefaultAssumptions(
            bedroom_count=settings.default_bedroom_count,
            cap_rate_percent=settings.default_cap_rate,
            property_type=settings.default_property_type,
        ),
        solver=SolverRules(
            tolerance=settings.solver_tolerance,
            max_iterations=settings.solver_max_iterations,
        ),
    )


@lru_cache()
def get_rules() -> RealEstateRules:
    """Get the cached default rule set."""
    return rules_from_settings(get_settings())
