"""
Transaction Cost Calculations

Itemizes the cash a buyer needs at closing: down payment plus commissions,
closing, bridge financing, rehab and assignment costs.
"""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class CostConstants:
    """Cost rates as decimals of the property price."""

    seller_agent_commission: float = 0.025
    buyer_agent_commission: float = 0.0
    closing: float = 0.0125
    bridge: float = 0.03
    rehab: float = 0.0
    assignment_fee: float = 0.03


@dataclass(frozen=True)
class NetToBuyerBreakdown:
    """Itemized costs. ``net_to_buyer`` is the down payment plus all costs."""

    down_payment: float
    seller_commission: float
    buyer_commission: float
    closing_costs: float
    bridge_costs: float
    rehab_costs: float
    assignment_costs: float
    total_costs: float
    net_to_buyer: float

    @property
    def breakdown(self) -> Dict[str, float]:
        """Line items keyed by display label."""
        return {
            "Down Payment": self.down_payment,
            "Seller Commission": self.seller_commission,
            "Buyer Commission": self.buyer_commission,
            "Closing Costs": self.closing_costs,
            "Bridge Loan": self.bridge_costs,
            "Rehab": self.rehab_costs,
            "Assignment Fee": self.assignment_costs,
        }


def calculate_net_to_buyer(
    property_price: float,
    down_payment_percent: float,
    constants: Optional[CostConstants] = None,
) -> NetToBuyerBreakdown:
    """
    Calculate net cash to buyer with all associated costs.

    Args:
        property_price: Property price
        down_payment_percent: Down payment as decimal (e.g., 0.25 for 25%)
        constants: Cost rates; defaults to CostConstants()

    Returns:
        NetToBuyerBreakdown
    """
    constants = constants or CostConstants()

    down_payment = property_price * down_payment_percent
    seller_commission = property_price * constants.seller_agent_commission
    buyer_commission = property_price * constants.buyer_agent_commission
    closing_costs = property_price * constants.closing
    bridge_costs = property_price * constants.bridge
    rehab_costs = property_price * constants.rehab
    assignment_costs = property_price * constants.assignment_fee

    total_costs = (
        seller_commission
        + buyer_commission
        + closing_costs
        + bridge_costs
        + rehab_costs
        + assignment_costs
    )

    return NetToBuyerBreakdown(
        down_payment=down_payment,
        seller_commission=seller_commission,
        buyer_commission=buyer_commission,
        closing_costs=closing_costs,
        bridge_costs=bridge_costs,
        rehab_costs=rehab_costs,
        assignment_costs=assignment_costs,
        total_costs=total_costs,
        net_to_buyer=down_payment + total_costs,
    )
