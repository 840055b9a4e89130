"""
Pro Forma Calculations

Derives stabilized monthly and annual income, operating expenses,
NOI and going-in cap rate from the raw inputs.
"""

from typing import Iterable

from app.calculations.models import ProFormaAnalysis, RentalInputs, Unit


def calculate_gross_monthly_rent(units: Iterable[Unit]) -> float:
    """Total monthly rent across all units. Units without rent count as 0."""
    return sum((unit.rent or 0.0 for unit in units), 0.0)


def calculate_monthly_operating_expenses(
    inputs: RentalInputs, gross_monthly_rent: float
) -> float:
    """
    Calculate monthly operating expenses.

    Includes taxes, insurance, rent-based reserves (vacancy, maintenance,
    management), HOA and utilities. Debt service is NOT an operating expense.

    Args:
        inputs: Calculation inputs
        gross_monthly_rent: Total monthly rent for all units

    Returns:
        Monthly operating expenses
    """
    monthly_vacancy = gross_monthly_rent * (inputs.vacancy_percent / 100)
    monthly_maintenance = gross_monthly_rent * (inputs.maintenance_percent / 100)
    monthly_mgmt = gross_monthly_rent * (inputs.property_mgmt_percent / 100)
    monthly_taxes = inputs.property_tax_year / 12

    return (
        monthly_taxes
        + inputs.insurance_month
        + monthly_vacancy
        + monthly_maintenance
        + monthly_mgmt
        + inputs.hoa_month
        + inputs.monthly_utilities
    )


def calculate_cap_rate(annual_noi: float, value: float) -> float:
    """Cap rate as a percentage. Returns 0 for a non-positive value."""
    if value <= 0:
        return 0.0
    return annual_noi / value * 100


def calculate_pro_forma(inputs: RentalInputs) -> ProFormaAnalysis:
    """Build the pro forma block for the given inputs."""
    gross_monthly_rent = calculate_gross_monthly_rent(inputs.units)
    monthly_operating_expenses = calculate_monthly_operating_expenses(
        inputs, gross_monthly_rent
    )
    monthly_noi = gross_monthly_rent - monthly_operating_expenses
    annual_noi = monthly_noi * 12

    return ProFormaAnalysis(
        gross_monthly_rent=gross_monthly_rent,
        gross_annual_rent=gross_monthly_rent * 12,
        monthly_operating_expenses=monthly_operating_expenses,
        annual_operating_expenses=monthly_operating_expenses * 12,
        monthly_noi=monthly_noi,
        annual_noi=annual_noi,
        cap_rate=calculate_cap_rate(annual_noi, inputs.purchase_price),
    )
