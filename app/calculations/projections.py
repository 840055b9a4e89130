"""
Yearly Projections

Simulates the investment year by year: income and expense escalation,
loan amortization, depreciation, income tax and the economics of a
hypothetical sale at the end of each year.

The simulation is a fold over years. Each year takes the previous
ProjectionState and produces a YearlyData row plus the next state.
"""

import math
import logging
from dataclasses import dataclass, replace
from typing import List, Tuple

from app.calculations.amortization import amortize_year
from app.calculations.models import (
    MortgageCalcs,
    ProFormaAnalysis,
    RentalInputs,
    YearlyData,
)
from app.calculations.proforma import calculate_cap_rate
from app.calculations.returns import calculate_cash_on_cash

logger = logging.getLogger(__name__)

# Always show at least this many years, even for shorter loans
MIN_PROJECTION_YEARS = 30


@dataclass(frozen=True)
class ProjectionState:
    """Values carried from one projection year to the next."""

    property_value: float
    rental_income: float
    remaining_loan_balance: float
    property_tax: float
    insurance: float
    hoa: float
    utilities: float


def projection_horizon(loan_term_years: float) -> int:
    """Number of years to project: the loan term, but never under 30."""
    return int(math.floor(max(loan_term_years, MIN_PROJECTION_YEARS)))


def initial_state(
    inputs: RentalInputs, pro_forma: ProFormaAnalysis, mortgage: MortgageCalcs
) -> ProjectionState:
    """State at the start of year 1, with all expense lines annualized."""
    return ProjectionState(
        property_value=inputs.purchase_price,
        rental_income=pro_forma.gross_annual_rent,
        remaining_loan_balance=mortgage.loan_amount,
        property_tax=inputs.property_tax_year,
        insurance=inputs.insurance_month * 12,
        hoa=inputs.hoa_month * 12,
        utilities=inputs.monthly_utilities * 12,
    )


def escalate(state: ProjectionState, inputs: RentalInputs) -> ProjectionState:
    """
    Apply one year of growth.

    Property tax grows with the general expense rate; insurance and
    utilities have their own rates.
    """
    expense_factor = 1 + inputs.expense_increase_percent / 100

    return replace(
        state,
        property_value=state.property_value * (1 + inputs.appreciation_percent / 100),
        rental_income=state.rental_income * (1 + inputs.rent_increase_percent / 100),
        property_tax=state.property_tax * expense_factor,
        insurance=state.insurance * (1 + inputs.insurance_increase_percent / 100),
        hoa=state.hoa * expense_factor,
        utilities=state.utilities * (1 + inputs.utilities_increase_percent / 100),
    )


def annual_operating_expenses(state: ProjectionState, inputs: RentalInputs) -> float:
    """Fixed expense lines plus reserves computed on the current rent."""
    vacancy = state.rental_income * (inputs.vacancy_percent / 100)
    maintenance = state.rental_income * (inputs.maintenance_percent / 100)
    mgmt = state.rental_income * (inputs.property_mgmt_percent / 100)

    return (
        state.property_tax
        + state.insurance
        + state.utilities
        + state.hoa
        + vacancy
        + maintenance
        + mgmt
    )


def annual_depreciation(inputs: RentalInputs) -> float:
    """
    Straight-line depreciation per year.

    The full purchase price is depreciated; land value is not
    separated out.
    """
    if inputs.depreciation_years <= 0:
        return 0.0
    return inputs.purchase_price / inputs.depreciation_years


def calculate_sale_profit(
    inputs: RentalInputs,
    year: int,
    property_value: float,
    remaining_loan_balance: float,
) -> float:
    """
    Net profit if the property were sold at the end of the given year.

    Proceeds are reduced by sales costs, the loan payoff and capital
    gains tax on the gain over the depreciated basis.
    """
    depreciation = annual_depreciation(inputs)
    sales_cost = property_value * (inputs.sales_cost_percent / 100)
    accumulated_depreciation = depreciation * min(year, inputs.depreciation_years)
    adjusted_basis = (
        inputs.purchase_price + inputs.initial_improvements - accumulated_depreciation
    )

    capital_gain = property_value - adjusted_basis - sales_cost
    capital_gains_tax = (
        capital_gain * (inputs.capital_gains_rate_percent / 100)
        if capital_gain > 0
        else 0.0
    )

    return property_value - remaining_loan_balance - sales_cost - capital_gains_tax


def project_year(
    year: int,
    state: ProjectionState,
    inputs: RentalInputs,
    mortgage: MortgageCalcs,
) -> Tuple[YearlyData, ProjectionState]:
    """
    Calculate a single projection year.

    Args:
        year: Projection year (1-based)
        state: State carried over from the previous year
        inputs: Calculation inputs
        mortgage: Mortgage block (fixed payment and initial investment)

    Returns:
        Tuple of (row for this year, state to carry into next year)
    """
    if year > 1:
        state = escalate(state, inputs)

    operating_expenses = annual_operating_expenses(state, inputs)

    interest_paid, principal_paid, remaining_balance = amortize_year(
        state.remaining_loan_balance,
        mortgage.monthly_pi,
        inputs.interest_rate_percent / 100 / 12,
    )
    state = replace(state, remaining_loan_balance=remaining_balance)

    noi = state.rental_income - operating_expenses
    debt_service = interest_paid + principal_paid
    pre_tax_cash_flow = noi - debt_service

    depreciation = (
        annual_depreciation(inputs) if year <= inputs.depreciation_years else 0.0
    )
    taxable_income = noi - interest_paid - depreciation
    tax_liability = (
        taxable_income * (inputs.income_tax_rate_percent / 100)
        if taxable_income > 0
        else 0.0
    )
    post_tax_cash_flow = pre_tax_cash_flow - tax_liability

    initial_investment = mortgage.initial_investment

    row = YearlyData(
        year=year,
        property_value=state.property_value,
        rental_income=state.rental_income,
        operating_expenses=operating_expenses,
        noi=noi,
        debt_service=debt_service,
        interest_paid=interest_paid,
        principal_paid=principal_paid,
        remaining_loan_balance=remaining_balance,
        pre_tax_cash_flow=pre_tax_cash_flow,
        depreciation=depreciation,
        taxable_income=taxable_income,
        tax_liability=tax_liability,
        post_tax_cash_flow=post_tax_cash_flow,
        total_profit_on_sale=calculate_sale_profit(
            inputs, year, state.property_value, remaining_balance
        ),
        cap_rate_on_value=calculate_cap_rate(noi, state.property_value),
        cash_on_cash_pre_tax=calculate_cash_on_cash(
            pre_tax_cash_flow, initial_investment
        ),
        roi_pre_tax=calculate_cash_on_cash(
            pre_tax_cash_flow + principal_paid, initial_investment
        ),
        cash_on_cash_post_tax=calculate_cash_on_cash(
            post_tax_cash_flow, initial_investment
        ),
        roi_post_tax=calculate_cash_on_cash(
            post_tax_cash_flow + principal_paid, initial_investment
        ),
    )

    return row, state


def generate_yearly_projections(
    inputs: RentalInputs, pro_forma: ProFormaAnalysis, mortgage: MortgageCalcs
) -> List[YearlyData]:
    """
    Generate the full yearly projection table.

    Runs from year 1 through max(loan term, 30). The sequence is never
    truncated; choosing which years to display is up to the caller.
    """
    horizon = projection_horizon(inputs.loan_term_years)
    logger.debug(
        f"Projecting {horizon} years, monthly payment {mortgage.monthly_pi:.2f}"
    )

    projections = []
    state = initial_state(inputs, pro_forma, mortgage)

    for year in range(1, horizon + 1):
        row, state = project_year(year, state, inputs, mortgage)
        projections.append(row)

    return projections
