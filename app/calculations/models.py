"""
Calculation Data Model

Input and result containers passed between the calculation modules.
All rates are whole-number percentages (6.75 means 6.75%).
"""

from typing import List, Optional, Tuple
from dataclasses import dataclass, field


@dataclass(frozen=True)
class PropertyInfo:
    """Descriptive property details. Not used in any calculation."""

    property_type: str = ""
    street: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    sqft: float = 0.0


@dataclass(frozen=True)
class Unit:
    """A single rentable unit."""

    id: int
    beds: float = 0.0
    baths: float = 0.0
    rent: Optional[float] = None  # Monthly rent


@dataclass(frozen=True)
class RentalInputs:
    """Snapshot of every input needed for one calculation run."""

    property_info: PropertyInfo = field(default_factory=PropertyInfo)
    units: Tuple[Unit, ...] = ()

    # Acquisition
    purchase_price: float = 0.0
    closing_cost: float = 0.0
    initial_improvements: float = 0.0

    # Financing
    down_payment_percent: float = 0.0
    interest_rate_percent: float = 0.0
    loan_term_years: float = 0.0

    # Operations
    property_tax_year: float = 0.0
    insurance_month: float = 0.0
    property_mgmt_percent: float = 0.0
    vacancy_percent: float = 0.0
    maintenance_percent: float = 0.0
    hoa_month: float = 0.0
    sewer_month: float = 0.0
    garbage_month: float = 0.0
    water_month: float = 0.0
    gas_month: float = 0.0
    electric_month: float = 0.0

    # Long-term assumptions
    appreciation_percent: float = 0.0
    rent_increase_percent: float = 0.0
    expense_increase_percent: float = 0.0
    insurance_increase_percent: float = 0.0
    utilities_increase_percent: float = 0.0
    sales_cost_percent: float = 0.0
    income_tax_rate_percent: float = 0.0
    capital_gains_rate_percent: float = 0.0
    depreciation_years: float = 0.0

    @property
    def monthly_utilities(self) -> float:
        """Sum of the five monthly utility lines."""
        return (
            self.sewer_month
            + self.garbage_month
            + self.water_month
            + self.gas_month
            + self.electric_month
        )


@dataclass(frozen=True)
class ProFormaAnalysis:
    gross_monthly_rent: float
    gross_annual_rent: float
    monthly_operating_expenses: float
    annual_operating_expenses: float
    monthly_noi: float
    annual_noi: float
    cap_rate: float


@dataclass(frozen=True)
class MortgageCalcs:
    down_payment_amount: float
    loan_amount: float
    initial_investment: float
    monthly_pi: float
    annual_debt_service: float


@dataclass(frozen=True)
class Returns:
    monthly_cash_flow: float
    annual_cash_flow: float
    cash_on_cash_roi: float
    dscr: float  # float("inf") when there is no debt service
    one_percent_rule: float
    fifty_percent_rule: float

    @property
    def passes_one_percent_rule(self) -> bool:
        return self.one_percent_rule >= 1

    @property
    def passes_fifty_percent_rule(self) -> bool:
        return self.fifty_percent_rule <= 50


@dataclass(frozen=True)
class YearlyData:
    """One row of the yearly projection table."""

    year: int
    property_value: float
    rental_income: float
    operating_expenses: float
    noi: float
    debt_service: float
    interest_paid: float
    principal_paid: float
    remaining_loan_balance: float
    pre_tax_cash_flow: float
    depreciation: float
    taxable_income: float
    tax_liability: float
    post_tax_cash_flow: float
    total_profit_on_sale: float
    cap_rate_on_value: float
    cash_on_cash_pre_tax: float
    roi_pre_tax: float
    cash_on_cash_post_tax: float
    roi_post_tax: float


@dataclass(frozen=True)
class CalculatedData:
    """Everything derived from a RentalInputs snapshot."""

    pro_forma: ProFormaAnalysis
    mortgage: MortgageCalcs
    returns: Returns
    yearly_projections: List[YearlyData]
