"""
Financial calculation API endpoints.

These endpoints accept inputs and return calculated results.
Used by the calculator UI for real-time updates.
"""

import math
import logging
from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from app.config import get_settings
from app.calculations import amortization
from app.calculations.engine import calculate_all_metrics, select_display_years
from app.calculations.models import PropertyInfo, RentalInputs, Unit

logger = logging.getLogger(__name__)

router = APIRouter()


class PropertyInfoInput(BaseModel):
    """Descriptive property details."""

    property_type: str = "House"
    street: str = "123 Main St"
    city: str = "Anytown"
    state: str = "CA"
    zip_code: str = "90210"
    sqft: float = Field(1500, ge=0)


class UnitInput(BaseModel):
    """A single rentable unit."""

    id: int
    beds: float = Field(0, ge=0)
    baths: float = Field(0, ge=0)
    rent: Optional[float] = Field(None, ge=0)


class RentalInput(BaseModel):
    """
    Input for the rental property calculation.

    Defaults describe a single-family rental bought for $300k.
    Percentages are whole numbers (6.75 means 6.75%).
    """

    property_info: PropertyInfoInput = Field(default_factory=PropertyInfoInput)
    units: List[UnitInput] = Field(
        default_factory=lambda: [UnitInput(id=1, beds=3, baths=2, rent=4000)],
        min_length=1,
    )

    # Acquisition
    purchase_price: float = Field(300000, ge=0)
    closing_cost: float = Field(6000, ge=0)
    initial_improvements: float = Field(0, ge=0)

    # Financing
    down_payment_percent: float = 20
    interest_rate_percent: float = 6.75
    loan_term_years: float = Field(30, ge=0, le=100)

    # Operations
    property_tax_year: float = Field(7000, ge=0)
    insurance_month: float = Field(150, ge=0)
    property_mgmt_percent: float = 0
    vacancy_percent: float = 5
    maintenance_percent: float = 10
    hoa_month: float = Field(50, ge=0)
    sewer_month: float = Field(0, ge=0)
    garbage_month: float = Field(0, ge=0)
    water_month: float = Field(0, ge=0)
    gas_month: float = Field(0, ge=0)
    electric_month: float = Field(0, ge=0)

    # Long-term assumptions
    appreciation_percent: float = 2
    rent_increase_percent: float = 2
    expense_increase_percent: float = 2
    insurance_increase_percent: float = 2
    utilities_increase_percent: float = 2
    sales_cost_percent: float = 8
    income_tax_rate_percent: float = 22
    capital_gains_rate_percent: float = 15
    depreciation_years: float = Field(27.5, ge=0)

    def to_inputs(self) -> RentalInputs:
        """Convert to the immutable snapshot used by the calculation engine."""
        fields = self.model_dump(exclude={"property_info", "units"})
        return RentalInputs(
            property_info=PropertyInfo(**self.property_info.model_dump()),
            units=tuple(Unit(**unit.model_dump()) for unit in self.units),
            **fields,
        )


class ProFormaResult(BaseModel):
    """Stabilized income and expense figures."""

    model_config = ConfigDict(from_attributes=True)

    gross_monthly_rent: float
    gross_annual_rent: float
    monthly_operating_expenses: float
    annual_operating_expenses: float
    monthly_noi: float
    annual_noi: float
    cap_rate: float


class MortgageResult(BaseModel):
    """Financing figures."""

    model_config = ConfigDict(from_attributes=True)

    down_payment_amount: float
    loan_amount: float
    initial_investment: float
    monthly_pi: float
    annual_debt_service: float


class ReturnsResult(BaseModel):
    """Going-in return metrics. DSCR is null when there is no debt."""

    monthly_cash_flow: float
    annual_cash_flow: float
    cash_on_cash_roi: float
    dscr: Optional[float] = None
    debt_free: bool
    one_percent_rule: float
    passes_one_percent_rule: bool
    fifty_percent_rule: float
    passes_fifty_percent_rule: bool


class YearlyResult(BaseModel):
    """One row of the yearly projection."""

    model_config = ConfigDict(from_attributes=True)

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


class RentalResponse(BaseModel):
    """Response with all calculated metrics."""

    pro_forma: ProFormaResult
    mortgage: MortgageResult
    returns: ReturnsResult
    yearly_projections: List[YearlyResult]


@router.post("/rental", response_model=RentalResponse)
async def calculate_rental(inputs: RentalInput, display_only: bool = False):
    """
    Calculate pro forma, mortgage, returns and yearly projections.

    With display_only, only the configured display years are returned.
    """
    results = calculate_all_metrics(inputs.to_inputs())
    returns = results.returns

    # JSON has no infinity; a debt-free purchase reports dscr as null
    debt_free = math.isinf(returns.dscr)
    if debt_free:
        logger.debug("No debt service; reporting DSCR as null")

    projections = results.yearly_projections
    if display_only:
        projections = select_display_years(projections, get_settings().display_years)

    return RentalResponse(
        pro_forma=ProFormaResult.model_validate(results.pro_forma),
        mortgage=MortgageResult.model_validate(results.mortgage),
        returns=ReturnsResult(
            monthly_cash_flow=returns.monthly_cash_flow,
            annual_cash_flow=returns.annual_cash_flow,
            cash_on_cash_roi=returns.cash_on_cash_roi,
            dscr=None if debt_free else returns.dscr,
            debt_free=debt_free,
            one_percent_rule=returns.one_percent_rule,
            passes_one_percent_rule=returns.passes_one_percent_rule,
            fifty_percent_rule=returns.fifty_percent_rule,
            passes_fifty_percent_rule=returns.passes_fifty_percent_rule,
        ),
        yearly_projections=[YearlyResult.model_validate(row) for row in projections],
    )


class AmortizationInput(BaseModel):
    """Input for amortization calculation."""

    principal: float = Field(ge=0)
    interest_rate_percent: float
    amortization_years: float = Field(ge=0, le=100)
    total_months: Optional[int] = Field(None, ge=0, le=1200)


@router.post("/amortization")
async def calculate_amortization(inputs: AmortizationInput):
    """Generate a monthly loan amortization schedule with annual totals."""
    amortization_months = inputs.amortization_years * 12
    total_months = inputs.total_months
    if total_months is None:
        total_months = int(math.ceil(amortization_months))

    schedule = amortization.generate_amortization_schedule(
        principal=inputs.principal,
        annual_rate=inputs.interest_rate_percent / 100,
        amortization_months=amortization_months,
        total_months=total_months,
    )

    return {
        "schedule": schedule,
        "annual": amortization.annualize_schedule(schedule),
        "total_interest": amortization.calculate_total_interest(schedule),
        "total_principal": sum(row["principal"] for row in schedule),
    }
