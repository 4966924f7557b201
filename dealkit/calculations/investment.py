"""
Investment Analysis

Computes the full deal metrics bundle (NOI, cash flow, cash-on-cash return,
transaction costs) for a price under a DSCR loan plus seller-financing
structure. All functions are pure; results are recomputed on every call.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from dealkit.calculations.formatting import format_currency, format_percentage
from dealkit.calculations.loans import calculate_pmt
from dealkit.extraction.text import DEFAULT_BEDROOMS, extract_bedrooms
from dealkit.rules import RealEstateRules, get_rules


class PropertyType(str, Enum):
    """Property types with their own NOI model."""

    MULTIFAMILY = "multifamily"
    ASSISTED = "assisted"
    SHORT_TERM_RENTAL = "str"


@dataclass(frozen=True)
class InvestmentParameters:
    """
    Inputs to the investment analysis.

    Percentages are 0-100 and need not sum to 100. Omitted percentages take
    the financing defaults of the rule set in use.
    """

    asking_price: float
    noi: float  # Annual net operating income
    down_payment_percent: Optional[float] = None
    dscr_percent: Optional[float] = None
    seller_financing_percent: Optional[float] = None


@dataclass(frozen=True)
class InvestmentAnalysisResult:
    """Derived deal metrics. Monthly figures are per month, the rest annual."""

    # Income
    noi: float
    monthly_noi: float
    monthly_cash_flow: float
    annual_cash_flow: float

    # Investments & loans
    asking_price: float
    down_payment: float
    dscr_loan_amount: float
    seller_financing_amount: float
    cash_invested: float

    # Payments
    dscr_payment: float
    seller_financing_payment: float

    # Costs
    assignment_fee: float
    transaction_costs: float
    additional_costs: float
    net_to_buyer: float

    # Returns
    cash_on_cash_return: float

    # Percentages used
    down_payment_percent: float
    dscr_percent: float
    seller_financing_percent: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def _or_default(value: Optional[float], default: float) -> float:
    return default if value is None else value


def calculate_investment_analysis(
    params: InvestmentParameters,
    rules: Optional[RealEstateRules] = None,
) -> InvestmentAnalysisResult:
    """
    Calculate complete investment metrics for a deal.

    Args:
        params: Price, NOI and financing split
        rules: Business rules (defaults to the configured rule set)

    Returns:
        InvestmentAnalysisResult. Invalid numbers (NaN) propagate into the
        outputs instead of raising.
    """
    rules = rules or get_rules()
    financing = rules.financing
    costs = rules.costs

    asking_price = params.asking_price
    noi = params.noi
    down_payment_percent = _or_default(
        params.down_payment_percent, financing.default_down_payment_percent
    )
    dscr_percent = _or_default(params.dscr_percent, financing.default_dscr_percent)
    seller_financing_percent = _or_default(
        params.seller_financing_percent, financing.default_seller_financing_percent
    )

    monthly_noi = noi / 12

    down_payment = asking_price * (down_payment_percent / 100)
    dscr_loan_amount = asking_price * (dscr_percent / 100)
    seller_financing_amount = asking_price * (seller_financing_percent / 100)

    dscr_payment = calculate_pmt(
        dscr_loan_amount,
        financing.dscr_interest_rate,
        financing.standard_amortization_years,
    )
    seller_financing_payment = calculate_pmt(
        seller_financing_amount,
        financing.seller_financing_rate,
        financing.standard_amortization_years,
    )

    monthly_cash_flow = monthly_noi - (dscr_payment + seller_financing_payment)
    annual_cash_flow = monthly_cash_flow * 12

    assignment_fee = asking_price * costs.assignment_fee_percent
    transaction_costs = asking_price * costs.transaction_cost_percent
    # Additional costs apply to the part of the price not covered by the DSCR loan
    additional_costs = costs.additional_cost_percent * (asking_price - dscr_loan_amount)
    net_to_buyer = (
        asking_price * costs.net_to_buyer_base_percent
        - transaction_costs
        - additional_costs
    )

    cash_invested = down_payment
    cash_on_cash_return = annual_cash_flow / cash_invested if cash_invested > 0 else 0

    return InvestmentAnalysisResult(
        noi=noi,
        monthly_noi=monthly_noi,
        monthly_cash_flow=monthly_cash_flow,
        annual_cash_flow=annual_cash_flow,
        asking_price=asking_price,
        down_payment=down_payment,
        dscr_loan_amount=dscr_loan_amount,
        seller_financing_amount=seller_financing_amount,
        cash_invested=cash_invested,
        dscr_payment=dscr_payment,
        seller_financing_payment=seller_financing_payment,
        assignment_fee=assignment_fee,
        transaction_costs=transaction_costs,
        additional_costs=additional_costs,
        net_to_buyer=net_to_buyer,
        cash_on_cash_return=cash_on_cash_return,
        down_payment_percent=down_payment_percent,
        dscr_percent=dscr_percent,
        seller_financing_percent=seller_financing_percent,
    )


def calculate_formatted_investment_analysis(
    params: InvestmentParameters,
    rules: Optional[RealEstateRules] = None,
) -> Dict[str, Any]:
    """Investment analysis rendered for display, with raw values alongside."""
    analysis = calculate_investment_analysis(params, rules)

    return {
        "noi": format_currency(analysis.noi),
        "down": format_currency(analysis.down_payment),
        "net_to_buyer": format_currency(analysis.net_to_buyer),
        "seller_fi": format_currency(analysis.seller_financing_amount),
        "dscr": format_currency(analysis.dscr_payment, True),
        "jv_payment": format_currency(analysis.seller_financing_payment, True),
        "cash_flow": format_currency(analysis.monthly_cash_flow, True),
        "assignment": format_currency(analysis.assignment_fee),
        "cocr": format_percentage(analysis.cash_on_cash_return),
        "raw_cash_flow": analysis.monthly_cash_flow,
        "raw_price": analysis.asking_price,
        "raw_noi": analysis.noi,
        "raw_cocr": analysis.cash_on_cash_return,
    }


def calculate_cocr_with_30_percent_down(
    asking_price: float,
    noi: float,
    rules: Optional[RealEstateRules] = None,
) -> float:
    """Cash-on-cash return with 30% down and the default loan split."""
    analysis = calculate_investment_analysis(
        InvestmentParameters(asking_price=asking_price, noi=noi, down_payment_percent=30),
        rules,
    )
    return analysis.cash_on_cash_return


def _check_bounds(
    asking_price: float, cap_rate: float, rules: RealEstateRules
) -> List[str]:
    validation = rules.validation
    errors = []

    if not (validation.price_minimum <= asking_price <= validation.price_maximum):
        errors.append(
            f"Price must be between ${validation.price_minimum:,.0f} "
            f"and ${validation.price_maximum:,.0f}"
        )

    if not (validation.cap_rate_minimum <= cap_rate <= validation.cap_rate_maximum):
        errors.append(
            f"Cap rate must be between {validation.cap_rate_minimum * 100:g}% "
            f"and {validation.cap_rate_maximum * 100:g}%"
        )

    return errors


def calculate_noi_by_property_type(
    asking_price: float,
    cap_rate: Optional[float],
    property_type: Optional[str] = None,
    bedroom_count: Optional[int] = None,
    str_gross_income: Optional[float] = None,
    listing_text: Optional[str] = None,
    rules: Optional[RealEstateRules] = None,
) -> float:
    """
    Calculate annual NOI using the income model for the property type.

    Args:
        asking_price: Property asking price
        cap_rate: Cap rate as decimal (multifamily model); None uses the
            configured default cap rate
        property_type: 'multifamily', 'assisted' or 'str' (default from rules);
            unknown types use the multifamily model
        bedroom_count: Bedrooms for assisted living; read from
            ``listing_text`` when not given
        str_gross_income: Annual gross short-term-rental income if known
        listing_text: Listing text to extract bedrooms from
        rules: Business rules

    Returns:
        Annual NOI

    Raises:
        ValueError: If price or cap rate is outside the configured bounds
    """
    rules = rules or get_rules()
    if cap_rate is None:
        cap_rate = rules.defaults.cap_rate_percent
    if property_type is None:
        property_type = rules.defaults.property_type

    errors = _check_bounds(asking_price, cap_rate, rules)
    if errors:
        raise ValueError(errors[0])

    if property_type == PropertyType.ASSISTED:
        # A count of 0 falls through to the next source
        extracted = extract_bedrooms(listing_text) if listing_text else None
        bedrooms = bedroom_count or extracted or rules.defaults.bedroom_count
        income = rules.property_income.assisted_living
        return bedrooms * income.revenue_per_bedroom_per_month * income.months_per_year

    if property_type == PropertyType.SHORT_TERM_RENTAL:
        income = rules.property_income.short_term_rental
        if str_gross_income and str_gross_income > 0:
            return str_gross_income * income.net_income_after_expenses_percent

        estimated_gross_income = asking_price * income.fallback_gross_yield_estimate
        return estimated_gross_income * income.net_income_after_expenses_percent

    return asking_price * cap_rate


def extract_bedrooms_with_default(
    text: str, rules: Optional[RealEstateRules] = None
) -> int:
    """Extract bedrooms, substituting the configured default for the extractor's."""
    rules = rules or get_rules()
    extracted = extract_bedrooms(text)

    if extracted == DEFAULT_BEDROOMS:
        return rules.defaults.bedroom_count

    return extracted


def validate_property_analysis_inputs(
    asking_price: Optional[float],
    cap_rate: Optional[float],
    noi: Optional[float] = None,
    down_payment_percent: Optional[float] = None,
    dscr_percent: Optional[float] = None,
    seller_financing_percent: Optional[float] = None,
    rules: Optional[RealEstateRules] = None,
) -> List[str]:
    """
    Validate analysis inputs.

    Returns:
        List of error messages, empty if valid
    """
    rules = rules or get_rules()
    validation = rules.validation
    errors = []

    bounds = _check_bounds(asking_price or 0, cap_rate or 0, rules)
    errors.extend(bounds)

    # A zero NOI counts as "not supplied"
    if noi and noi <= 0:
        errors.append("NOI must be positive")

    percentages = {
        "Down payment": down_payment_percent,
        "DSCR": dscr_percent,
        "Seller financing": seller_financing_percent,
    }
    for label, value in percentages.items():
        if value is None:
            continue
        if not (validation.percentage_minimum <= value <= validation.percentage_maximum):
            errors.append(
                f"{label} percentage must be between "
                f"{validation.percentage_minimum:g}% and {validation.percentage_maximum:g}%"
            )

    return errors
