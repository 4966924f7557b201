"""
Tests for the closed-form financial calculations.
"""

import pytest

from dealkit.calculations.appreciation import calculate_appreciation
from dealkit.calculations.cash_flow import (
    calculate_cap_rate,
    calculate_cash_flow,
    calculate_cash_flow_yield,
)
from dealkit.calculations.costs import CostConstants, calculate_net_to_buyer
from dealkit.calculations.loans import (
    calculate_balloon_balance,
    calculate_interest_over_time,
    calculate_pmt,
    calculate_remaining_balance,
)
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
from dealkit.calculations.returns import (
    calculate_cocr,
    calculate_cocr_15,
    calculate_cocr_30,
    calculate_cocr_scenario,
)
from dealkit.rules import FinancingRules, RealEstateRules


class TestLoanCalculations:
    """Test loan payment primitives."""

    def test_calculate_pmt(self):
        """Test monthly payment calculation."""
        # $300K loan at 6% for 30 years
        payment = calculate_pmt(300000, 0.06, 30)
        assert payment == pytest.approx(1798.65, abs=0.01)

    def test_calculate_pmt_zero_interest(self):
        """Zero rate is straight-line principal."""
        assert calculate_pmt(360000, 0, 30) == 1000

    def test_dscr_loan_payment(self):
        """$700K DSCR loan at 7.5% is about $4,895/month."""
        payment = calculate_pmt(1_000_000 * 0.70, 0.075, 30)
        assert 4800 < payment < 4900

    @pytest.mark.parametrize(
        "principal,rate,years",
        [
            (100000, 0.0, 30),
            (250000, 0.045, 15),
            (700000, 0.075, 30),
            (50000, 0.12, 5),
            (1, 0.03, 1),
        ],
    )
    def test_total_payments_cover_principal(self, principal, rate, years):
        """Total payments are never less than principal for non-negative rates."""
        payment = calculate_pmt(principal, rate, years)
        assert payment * years * 12 >= principal * (1 - 1e-12)

    def test_zero_years_is_caller_error(self):
        """A zero term is not guarded."""
        with pytest.raises(ZeroDivisionError):
            calculate_pmt(100000, 0.05, 0)
        with pytest.raises(ZeroDivisionError):
            calculate_pmt(100000, 0, 0)

    def test_calculate_remaining_balance(self):
        """Balance after 5 years of a 30-year loan."""
        balance = calculate_remaining_balance(300000, 0.06, 30, 5)
        assert 250000 < balance < 300000

    @pytest.mark.parametrize("rate,years", [(0.06, 30), (0.075, 10), (0.0, 20)])
    def test_fully_amortized_balance_is_zero(self, rate, years):
        """Balance at term is zero."""
        balance = calculate_remaining_balance(400000, rate, years, years)
        assert balance == pytest.approx(0.0, abs=1e-6)

    def test_remaining_balance_zero_rate(self):
        """Zero rate balance declines linearly."""
        assert calculate_remaining_balance(360000, 0, 30, 10) == pytest.approx(240000)

    def test_remaining_balance_never_negative(self):
        """Paying past term clamps at zero."""
        assert calculate_remaining_balance(100000, 0.05, 10, 12) == 0.0
        assert calculate_remaining_balance(100000, 0, 10, 12) == 0.0

    def test_balloon_balance_alias(self):
        """Balloon balance is the remaining balance."""
        assert calculate_balloon_balance is calculate_remaining_balance

    def test_calculate_interest_over_time(self):
        """Interest on a 30-year 6% loan exceeds the principal."""
        interest = calculate_interest_over_time(300000, 0.06, 30)
        expected = calculate_pmt(300000, 0.06, 30) * 360 - 300000
        assert interest == pytest.approx(expected)
        assert interest > 300000

    def test_interest_over_time_zero_rate(self):
        """No interest at a zero rate."""
        assert calculate_interest_over_time(120000, 0, 10) == pytest.approx(0.0, abs=1e-6)


class TestProjections:
    """Test business projection functions."""

    def test_calculate_compound_growth(self):
        result = calculate_compound_growth(100000, 0.05, 10)
        assert result == pytest.approx(162889.46, abs=0.01)

    def test_calculate_present_value(self):
        result = calculate_present_value(162889.46, 0.05, 10)
        assert result == pytest.approx(100000, abs=0.01)

    def test_calculate_npv(self):
        """First cash flow is discounted one period."""
        cash_flows = [10000, 15000, 20000, 25000, 30000]
        npv = calculate_npv(cash_flows, 0.10, 50000)

        expected = sum(cf / 1.10 ** (i + 1) for i, cf in enumerate(cash_flows)) - 50000
        assert npv == pytest.approx(expected)
        assert npv > 0

    def test_calculate_npv_no_cash_flows(self):
        """Empty cash flows leave only the initial investment."""
        assert calculate_npv([], 0.08, 1000) == pytest.approx(-1000)

    def test_npv_returns_python_float(self):
        assert isinstance(calculate_npv([100, 100], 0.05), float)


class TestRatios:
    """Test business ratios."""

    def test_calculate_roi(self):
        assert calculate_roi(150000, 100000) == 0.5

    def test_calculate_roe(self):
        assert calculate_roe(50000, 500000) == 0.1

    def test_calculate_current_ratio(self):
        assert calculate_current_ratio(200000, 100000) == 2.0

    def test_zero_denominators(self):
        """Zero denominators return 0 instead of raising."""
        assert calculate_roi(100000, 0) == 0
        assert calculate_roe(50000, 0) == 0
        assert calculate_current_ratio(100000, 0) == 0


class TestCashFlows:
    """Test cash flow and cap rate helpers."""

    def test_calculate_cap_rate(self):
        assert calculate_cap_rate(60000, 1000000) == 0.06

    def test_calculate_cash_flow(self):
        """$5K monthly NOI against a $700K loan."""
        cash_flow = calculate_cash_flow(5000, 700000, 0.075, 30)
        assert cash_flow == pytest.approx(5000 - calculate_pmt(700000, 0.075, 30))
        assert 100 < cash_flow < 110

    def test_calculate_cash_flow_yield(self):
        assert calculate_cash_flow_yield(12000, 1000000) == 0.012

    def test_missing_price(self):
        """Zero or missing price yields 0."""
        assert calculate_cap_rate(60000, 0) == 0
        assert calculate_cap_rate(60000, None) == 0
        assert calculate_cash_flow_yield(12000, 0) == 0


class TestReturns:
    """Test cash-on-cash return helpers."""

    def test_calculate_cocr(self):
        assert calculate_cocr(15000, 200000) == 0.075

    def test_calculate_cocr_zero_down(self):
        """No division by zero."""
        assert calculate_cocr(15000, 0) == 0
        assert calculate_cocr(-15000, 0) == 0

    def test_cocr_scenario_matches_formula(self):
        """Custom rate and term."""
        result = calculate_cocr_scenario(1000000, 60000, 0.25, 0.08, 25)
        debt_service = calculate_pmt(750000, 0.08, 25) * 12
        assert result == pytest.approx((60000 - debt_service) / 250000)

    def test_cocr_30_beats_cocr_15(self):
        """More equity means less debt service at this price."""
        cocr_15 = calculate_cocr_15(1000000, 60000, 0.075, 30)
        cocr_30 = calculate_cocr_30(1000000, 60000, 0.075, 30)
        assert cocr_15 > -0.1
        assert cocr_30 > cocr_15

    def test_scenario_defaults_from_rules(self):
        """Omitted rate and term come from the DSCR financing rules."""
        explicit = calculate_cocr_30(1000000, 60000, 0.075, 30)
        assert calculate_cocr_30(1000000, 60000) == pytest.approx(explicit)

        interest_free = RealEstateRules(financing=FinancingRules(dscr_interest_rate=0.0))
        result = calculate_cocr_30(1000000, 60000, rules=interest_free)
        assert result == pytest.approx((60000 - 700000 / 30) / 300000)


class TestCosts:
    """Test transaction cost breakdown."""

    def test_calculate_net_to_buyer(self):
        result = calculate_net_to_buyer(1000000, 0.25)

        assert result.down_payment == 250000
        assert result.total_costs == pytest.approx(97500)
        assert result.net_to_buyer == pytest.approx(347500)
        assert result.net_to_buyer > 250000

        breakdown = result.breakdown
        assert breakdown["Down Payment"] == 250000
        assert "Seller Commission" in breakdown
        assert "Closing Costs" in breakdown
        assert len(breakdown) == 7

    def test_custom_constants(self):
        constants = CostConstants(seller_agent_commission=0.03, closing=0.015, bridge=0.04)
        result = calculate_net_to_buyer(1000000, 0.25, constants)

        assert result.seller_commission == pytest.approx(30000)
        assert result.closing_costs == pytest.approx(15000)
        assert result.bridge_costs == pytest.approx(40000)
        # Unspecified constants keep their defaults
        assert result.assignment_costs == pytest.approx(30000)


class TestAppreciation:
    """Test appreciation and refinance projections."""

    def test_calculate_appreciation(self):
        result = calculate_appreciation(1000000, 0.03, 5, 100000, 50000)

        assert result.future_value == pytest.approx(1000000 * 1.03 ** 5)
        assert result.future_value > 1000000
        assert result.total_owing == 150000
        assert result.refi_amount == pytest.approx(result.future_value * 0.70)
        assert result.cash_out_after_refi == pytest.approx(result.refi_amount - 150000)

    def test_zero_balances(self):
        result = calculate_appreciation(1000000, 0.03, 5)
        assert result.total_owing == 0
        assert result.cash_out_after_refi > 0


class TestIntegration:
    """Several metrics for the same property."""

    @pytest.mark.integration
    def test_complete_real_estate_scenario(self):
        price = 1000000
        noi = 60000

        cap_rate = calculate_cap_rate(noi, price)
        net_to_buyer = calculate_net_to_buyer(price, 0.25)
        cocr_30 = calculate_cocr_30(price, noi)
        appreciation = calculate_appreciation(price, 0.03, 5)

        assert cap_rate == pytest.approx(0.06, abs=0.005)
        assert net_to_buyer.net_to_buyer > 250000
        assert -1 < cocr_30 < 1
        assert appreciation.future_value > price

    @pytest.mark.integration
    def test_balloon_feeds_appreciation(self):
        """Refinance after 5 years pays off both loans."""
        dscr_balance = calculate_remaining_balance(700000, 0.075, 30, 5)
        balloon = calculate_balloon_balance(400000, 0.0, 30, 5)
        result = calculate_appreciation(1000000, 0.04, 5, balloon, dscr_balance)

        assert balloon == pytest.approx(400000 - 400000 / 6)
        assert result.total_owing == pytest.approx(balloon + dscr_balance)
        assert result.cash_out_after_refi < result.refi_amount
