"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.calculations.models import PropertyInfo, RentalInputs, Unit


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "integration: marks integration tests")


@pytest.fixture
def seed_inputs():
    """Single-family rental: $300k, 20% down, 6.75% for 30 years, $4,000 rent."""
    return RentalInputs(
        property_info=PropertyInfo(
            property_type="House",
            street="123 Main St",
            city="Anytown",
            state="CA",
            zip_code="90210",
            sqft=1500,
        ),
        units=(Unit(id=1, beds=3, baths=2, rent=4000),),
        purchase_price=300000,
        closing_cost=6000,
        initial_improvements=0,
        down_payment_percent=20,
        interest_rate_percent=6.75,
        loan_term_years=30,
        property_tax_year=7000,
        insurance_month=150,
        property_mgmt_percent=0,
        vacancy_percent=5,
        maintenance_percent=10,
        hoa_month=50,
        appreciation_percent=2,
        rent_increase_percent=2,
        expense_increase_percent=2,
        insurance_increase_percent=2,
        utilities_increase_percent=2,
        sales_cost_percent=8,
        income_tax_rate_percent=22,
        capital_gains_rate_percent=15,
        depreciation_years=27.5,
    )
