"""
Calculation Orchestrator

Runs the pro forma, mortgage, returns and projection calculations in
order and assembles the complete result.
"""

from typing import Iterable, List

from app.calculations.models import CalculatedData, RentalInputs, YearlyData
from app.calculations.mortgage import calculate_mortgage
from app.calculations.proforma import calculate_pro_forma
from app.calculations.projections import generate_yearly_projections
from app.calculations.returns import calculate_returns

DEFAULT_DISPLAY_YEARS = (1, 2, 3, 5, 10, 15, 20, 30)


def calculate_all_metrics(inputs: RentalInputs) -> CalculatedData:
    """
    Calculate every derived metric for a set of inputs.

    Pure function: identical inputs always produce identical results,
    and nothing is carried over between calls.
    """
    pro_forma = calculate_pro_forma(inputs)
    mortgage = calculate_mortgage(inputs)
    returns = calculate_returns(pro_forma, mortgage, inputs)
    yearly_projections = generate_yearly_projections(inputs, pro_forma, mortgage)

    return CalculatedData(
        pro_forma=pro_forma,
        mortgage=mortgage,
        returns=returns,
        yearly_projections=yearly_projections,
    )


compute = calculate_all_metrics


def select_display_years(
    projections: List[YearlyData], years: Iterable[int] = DEFAULT_DISPLAY_YEARS
) -> List[YearlyData]:
    """Pick the rows for the given years, keeping projection order."""
    wanted = set(years)
    return [row for row in projections if row.year in wanted]
