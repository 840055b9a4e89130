"""
Return Metrics

Combines the pro forma and mortgage blocks into going-in cash flow,
coverage and rule-of-thumb screening ratios.
"""

from app.calculations.amortization import calculate_dscr
from app.calculations.models import (
    MortgageCalcs,
    ProFormaAnalysis,
    RentalInputs,
    Returns,
)


def calculate_cash_on_cash(cash_flow: float, initial_investment: float) -> float:
    """Cash flow as a percentage of cash invested. 0 with no investment."""
    if initial_investment <= 0:
        return 0.0
    return cash_flow / initial_investment * 100


def calculate_one_percent_rule(gross_monthly_rent: float, purchase_price: float) -> float:
    """Monthly rent as a percentage of purchase price. Passes at >= 1."""
    if purchase_price <= 0:
        return 0.0
    return gross_monthly_rent / purchase_price * 100


def calculate_fifty_percent_rule(
    annual_operating_expenses: float, gross_annual_rent: float
) -> float:
    """Operating expenses as a percentage of gross rent. Passes at <= 50."""
    if gross_annual_rent <= 0:
        return 0.0
    return annual_operating_expenses / gross_annual_rent * 100


def calculate_returns(
    pro_forma: ProFormaAnalysis, mortgage: MortgageCalcs, inputs: RentalInputs
) -> Returns:
    """Build the returns block."""
    monthly_cash_flow = pro_forma.monthly_noi - mortgage.monthly_pi
    annual_cash_flow = monthly_cash_flow * 12

    return Returns(
        monthly_cash_flow=monthly_cash_flow,
        annual_cash_flow=annual_cash_flow,
        cash_on_cash_roi=calculate_cash_on_cash(
            annual_cash_flow, mortgage.initial_investment
        ),
        dscr=calculate_dscr(pro_forma.annual_noi, mortgage.annual_debt_service),
        one_percent_rule=calculate_one_percent_rule(
            pro_forma.gross_monthly_rent, inputs.purchase_price
        ),
        fifty_percent_rule=calculate_fifty_percent_rule(
            pro_forma.annual_operating_expenses, pro_forma.gross_annual_rent
        ),
    )
