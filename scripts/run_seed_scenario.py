"""
Run the default single-family rental scenario and print the results.
Uses the same defaults as the calculator API.
"""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.api.calculations import RentalInput
from app.calculations.engine import calculate_all_metrics, select_display_years
from app.config import get_settings


def main():
    inputs = RentalInput().to_inputs()
    results = calculate_all_metrics(inputs)

    pro_forma = results.pro_forma
    mortgage = results.mortgage
    returns = results.returns

    print(f"Purchase price:      ${inputs.purchase_price:,.0f}")
    print(f"Loan amount:         ${mortgage.loan_amount:,.0f}")
    print(f"Initial investment:  ${mortgage.initial_investment:,.0f}")
    print(f"Monthly P&I:         ${mortgage.monthly_pi:,.2f}")
    print(f"Monthly NOI:         ${pro_forma.monthly_noi:,.2f}")
    print(f"Monthly cash flow:   ${returns.monthly_cash_flow:,.2f}")
    print(f"Cap rate:            {pro_forma.cap_rate:.2f}%")
    print(f"Cash-on-cash ROI:    {returns.cash_on_cash_roi:.2f}%")
    print(f"DSCR:                {returns.dscr:.2f}")
    print(
        f"1% rule:             {returns.one_percent_rule:.2f}% "
        f"({'pass' if returns.passes_one_percent_rule else 'fail'})"
    )
    print(
        f"50% rule:            {returns.fifty_percent_rule:.2f}% "
        f"({'pass' if returns.passes_fifty_percent_rule else 'fail'})"
    )

    print(
        f"\n{'Year':>4} {'Value':>12} {'NOI':>10} {'Pre-tax CF':>11} "
        f"{'Post-tax CF':>12} {'Balance':>12} {'Sale profit':>12}"
    )
    rows = select_display_years(results.yearly_projections, get_settings().display_years)
    for row in rows:
        print(
            f"{row.year:>4} {row.property_value:>12,.0f} {row.noi:>10,.0f} "
            f"{row.pre_tax_cash_flow:>11,.0f} {row.post_tax_cash_flow:>12,.0f} "
            f"{row.remaining_loan_balance:>12,.0f} {row.total_profit_on_sale:>12,.0f}"
        )


if __name__ == "__main__":
    main()
