"""
Mortgage Calculations

Derives down payment, loan amount, cash invested at closing and
debt service from the financing inputs.
"""

from app.calculations.amortization import calculate_payment
from app.calculations.models import MortgageCalcs, RentalInputs


def calculate_mortgage(inputs: RentalInputs) -> MortgageCalcs:
    """
    Build the mortgage block for the given inputs.

    Initial investment is the cash required at closing: down payment,
    closing costs and initial improvements.
    """
    down_payment_amount = inputs.purchase_price * (inputs.down_payment_percent / 100)
    loan_amount = inputs.purchase_price - down_payment_amount
    initial_investment = (
        down_payment_amount + inputs.closing_cost + inputs.initial_improvements
    )

    monthly_pi = calculate_payment(
        loan_amount,
        inputs.interest_rate_percent / 100,
        inputs.loan_term_years * 12,
    )

    return MortgageCalcs(
        down_payment_amount=down_payment_amount,
        loan_amount=loan_amount,
        initial_investment=initial_investment,
        monthly_pi=monthly_pi,
        annual_debt_service=monthly_pi * 12,
    )
