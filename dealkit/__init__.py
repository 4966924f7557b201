"""
dealkit: real estate deal analysis toolkit.

Loan math, investment analysis, the target-COCR price solver, business
projections, formatters and listing text extraction.
"""

import logging

from dealkit.rules import (
    DEFAULT_RULES,
    RealEstateRules,
    get_rules,
    rules_from_settings,
)
from dealkit.calculations.loans import (
    calculate_balloon_balance,
    calculate_interest_over_time,
    calculate_pmt,
    calculate_remaining_balance,
)
from dealkit.calculations.formatting import (
    format_currency,
    format_number,
    format_percentage,
    format_price_value,
)
from dealkit.calculations.investment import (
    InvestmentAnalysisResult,
    InvestmentParameters,
    PropertyType,
    calculate_cocr_with_30_percent_down,
    calculate_formatted_investment_analysis,
    calculate_investment_analysis,
    calculate_noi_by_property_type,
    extract_bedrooms_with_default,
    validate_property_analysis_inputs,
)
from dealkit.calculations.solver import (
    PriceSolution,
    calculate_price_for_15_percent_cocr,
    calculate_price_for_30_percent_cocr,
    solve_price_for_target_cocr,
    solve_price_for_target_cocr_with_status,
)
from dealkit.calculations.returns import (
    calculate_cocr,
    calculate_cocr_15,
    calculate_cocr_30,
    calculate_cocr_scenario,
)
from dealkit.calculations.cash_flow import (
    calculate_cap_rate,
    calculate_cash_flow,
    calculate_cash_flow_yield,
)
from dealkit.calculations.costs import CostConstants, calculate_net_to_buyer
from dealkit.calculations.appreciation import calculate_appreciation
from dealkit.calculations.projections import (
    calculate_compound_growth,
    calculate_npv,
    calculate_present_value,
)
from dealkit.calculations.ratios import (
    calculate_current_ratio,
    calculate_roe,
    calculate_roi,
)
from dealkit.calculations.dates import calculate_dom, calculate_time_difference
from dealkit.extraction import (
    extract_bedrooms,
    extract_email,
    extract_phone_number,
    extract_price,
    validate_date,
    validate_email,
    validate_phone_number,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Rules
    "DEFAULT_RULES",
    "RealEstateRules",
    "get_rules",
    "rules_from_settings",
    # Loans
    "calculate_balloon_balance",
    "calculate_interest_over_time",
    "calculate_pmt",
    "calculate_remaining_balance",
    # Formatting
    "format_currency",
    "format_number",
    "format_percentage",
    "format_price_value",
    # Investment analysis
    "InvestmentAnalysisResult",
    "InvestmentParameters",
    "PropertyType",
    "calculate_cocr_with_30_percent_down",
    "calculate_formatted_investment_analysis",
    "calculate_investment_analysis",
    "calculate_noi_by_property_type",
    "extract_bedrooms_with_default",
    "validate_property_analysis_inputs",
    # Price solver
    "PriceSolution",
    "calculate_price_for_15_percent_cocr",
    "calculate_price_for_30_percent_cocr",
    "solve_price_for_target_cocr",
    "solve_price_for_target_cocr_with_status",
    # Returns, cash flow, costs, appreciation
    "calculate_cocr",
    "calculate_cocr_15",
    "calculate_cocr_30",
    "calculate_cocr_scenario",
    "calculate_cap_rate",
    "calculate_cash_flow",
    "calculate_cash_flow_yield",
    "CostConstants",
    "calculate_net_to_buyer",
    "calculate_appreciation",
    # Business
    "calculate_compound_growth",
    "calculate_npv",
    "calculate_present_value",
    "calculate_current_ratio",
    "calculate_roe",
    "calculate_roi",
    # Dates
    "calculate_dom",
    "calculate_time_difference",
    # Extraction & validation
    "extract_bedrooms",
    "extract_email",
    "extract_phone_number",
    "extract_price",
    "validate_date",
    "validate_email",
    "validate_phone_number",
]
