"""
Loan Amortization Calculations

Implements fixed-rate loan payment and amortization calculations,
matching Excel's PMT function for the monthly payment.
"""

import math
import logging
from typing import List, Dict, Tuple

logger = logging.getLogger(__name__)


def calculate_payment(
    principal: float, annual_rate: float, amortization_months: float
) -> float:
    """
    Calculate monthly loan payment.

    Matches Excel's PMT() function. A zero or negative rate amortizes
    straight-line with no interest.

    Args:
        principal: Loan principal amount
        annual_rate: Annual interest rate as decimal (e.g., 0.0675 for 6.75%)
        amortization_months: Total amortization period in months

    Returns:
        Monthly payment amount, or 0 when the formula has no finite result
    """
    if amortization_months <= 0:
        return 0.0

    if annual_rate <= 0:
        return principal / amortization_months

    monthly_rate = annual_rate / 12

    try:
        growth = (1 + monthly_rate) ** amortization_months
        payment = principal * monthly_rate * growth / (growth - 1)
    except (OverflowError, ZeroDivisionError):
        return 0.0

    return payment if math.isfinite(payment) else 0.0


def amortize_year(
    balance: float, payment: float, monthly_rate: float, months: int = 12
) -> Tuple[float, float, float]:
    """
    Run one year of monthly payments against a loan balance.

    If the payment cannot cover a month's interest, negative amortization
    is not modeled: the year's interest is taken as payment * months, no
    principal is repaid and the balance is left unchanged.

    Args:
        balance: Loan balance at the start of the year
        payment: Fixed monthly payment
        monthly_rate: Monthly interest rate as decimal
        months: Number of monthly payments to simulate

    Returns:
        Tuple of (interest paid, principal paid, ending balance)
    """
    if balance <= 0 or payment <= 0:
        return 0.0, 0.0, max(0.0, balance)

    starting_balance = balance
    total_interest = 0.0
    total_principal = 0.0

    for _ in range(months):
        interest = balance * monthly_rate

        if payment < interest:
            logger.warning(
                f"Payment {payment:.2f} does not cover monthly interest "
                f"{interest:.2f}; no principal repaid this year"
            )
            return payment * months, 0.0, starting_balance

        principal_pmt = min(payment - interest, balance)
        total_interest += interest
        total_principal += principal_pmt
        balance -= principal_pmt

        if balance <= 0:
            break

    return total_interest, total_principal, max(0.0, balance)


def generate_amortization_schedule(
    principal: float,
    annual_rate: float,
    amortization_months: float,
    total_months: int = 360,
) -> List[Dict]:
    """
    Generate a monthly amortization schedule for a fixed-rate loan.

    Args:
        principal: Loan principal amount
        annual_rate: Annual interest rate as decimal
        amortization_months: Amortization period in months
        total_months: Number of months to schedule

    Returns:
        List of amortization rows, ending early once the loan is paid off
    """
    schedule = []
    balance = principal
    monthly_rate = annual_rate / 12
    payment = calculate_payment(principal, annual_rate, amortization_months)

    for period in range(1, total_months + 1):
        if balance <= 0 or payment <= 0:
            break

        interest, principal_pmt, ending_balance = amortize_year(
            balance, payment, monthly_rate, months=1
        )

        schedule.append(
            {
                "period": period,
                "beginning_balance": round(balance, 2),
                "payment": round(interest + principal_pmt, 2),
                "interest": round(interest, 2),
                "principal": round(principal_pmt, 2),
                "ending_balance": round(ending_balance, 2),
            }
        )

        balance = ending_balance

    return schedule


def annualize_schedule(schedule: List[Dict]) -> List[Dict]:
    """Roll a monthly amortization schedule up into annual totals."""
    annual_data = []

    for row in schedule:
        year = (row["period"] - 1) // 12 + 1

        if not annual_data or annual_data[-1]["year"] != year:
            annual_data.append(
                {"year": year, "payment": 0.0, "interest": 0.0, "principal": 0.0}
            )

        totals = annual_data[-1]
        totals["payment"] += row["payment"]
        totals["interest"] += row["interest"]
        totals["principal"] += row["principal"]
        totals["ending_balance"] = row["ending_balance"]

    for year in annual_data:
        for key in ("payment", "interest", "principal"):
            year[key] = round(year[key], 2)

    return annual_data


def calculate_total_interest(schedule: List[Dict]) -> float:
    """Calculate total interest paid over the schedule."""
    return sum(row["interest"] for row in schedule)


def calculate_dscr(noi: float, debt_service: float) -> float:
    """
    Calculate Debt Service Coverage Ratio (DSCR).

    Args:
        noi: Net Operating Income for the period
        debt_service: Debt service for the period

    Returns:
        DSCR ratio, or infinity when there is no debt service
    """
    if debt_service <= 0:
        return float("inf")
    return noi / debt_service
