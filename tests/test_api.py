"""
Tests for the calculation API endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from app.main import app


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


class TestHealth:
    """Test service endpoints."""

    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestRentalCalculation:
    """Test the full rental calculation endpoint."""

    def test_defaults(self, client):
        """An empty body runs the default $300k scenario."""
        response = client.post("/api/calculate/rental", json={})
        assert response.status_code == 200

        data = response.json()
        assert data["mortgage"]["loan_amount"] == pytest.approx(240000)
        assert data["mortgage"]["monthly_pi"] == pytest.approx(1556.64, abs=0.02)
        assert data["pro_forma"]["monthly_noi"] == pytest.approx(2616.67, abs=0.01)
        assert data["pro_forma"]["cap_rate"] == pytest.approx(10.47, abs=0.01)
        assert data["returns"]["monthly_cash_flow"] == pytest.approx(1060.03, abs=0.02)
        assert data["returns"]["debt_free"] is False
        assert data["returns"]["passes_one_percent_rule"] is True
        assert data["returns"]["passes_fifty_percent_rule"] is True
        assert len(data["yearly_projections"]) == 30

    def test_display_only(self, client):
        response = client.post(
            "/api/calculate/rental", params={"display_only": True}, json={}
        )
        assert response.status_code == 200
        years = [row["year"] for row in response.json()["yearly_projections"]]
        assert years == [1, 2, 3, 5, 10, 15, 20, 30]

    def test_multiple_units(self, client):
        payload = {
            "units": [
                {"id": 1, "beds": 2, "baths": 1, "rent": 1500},
                {"id": 2, "beds": 2, "baths": 1, "rent": 1600},
                {"id": 3, "beds": 1, "baths": 1},
            ],
            "loan_term_years": 40,
        }
        response = client.post("/api/calculate/rental", json=payload)
        assert response.status_code == 200

        data = response.json()
        assert data["pro_forma"]["gross_monthly_rent"] == pytest.approx(3100)
        assert len(data["yearly_projections"]) == 40

    def test_all_cash_purchase_reports_null_dscr(self, client):
        response = client.post(
            "/api/calculate/rental", json={"down_payment_percent": 100}
        )
        assert response.status_code == 200

        returns = response.json()["returns"]
        assert returns["dscr"] is None
        assert returns["debt_free"] is True

    def test_requires_a_unit(self, client):
        response = client.post("/api/calculate/rental", json={"units": []})
        assert response.status_code == 422

    def test_rejects_negative_price(self, client):
        response = client.post("/api/calculate/rental", json={"purchase_price": -1})
        assert response.status_code == 422

    def test_rejects_oversized_loan_term(self, client):
        """Loan terms are capped at 100 years."""
        response = client.post(
            "/api/calculate/rental", json={"loan_term_years": 200000}
        )
        assert response.status_code == 422

    def test_accepts_longest_loan_term(self, client):
        response = client.post("/api/calculate/rental", json={"loan_term_years": 100})
        assert response.status_code == 200
        assert len(response.json()["yearly_projections"]) == 100


class TestAmortizationEndpoint:
    """Test the amortization schedule endpoint."""

    def test_schedule(self, client):
        response = client.post(
            "/api/calculate/amortization",
            json={
                "principal": 100000,
                "interest_rate_percent": 6,
                "amortization_years": 5,
            },
        )
        assert response.status_code == 200

        data = response.json()
        assert len(data["schedule"]) == 60
        assert len(data["annual"]) == 5
        assert data["schedule"][-1]["ending_balance"] < 1
        assert data["total_principal"] == pytest.approx(100000, abs=1)
        assert data["total_interest"] > 0

    def test_schedule_months_limit(self, client):
        response = client.post(
            "/api/calculate/amortization",
            json={
                "principal": 240000,
                "interest_rate_percent": 6.75,
                "amortization_years": 30,
                "total_months": 24,
            },
        )
        assert response.status_code == 200
        assert len(response.json()["schedule"]) == 24
        assert len(response.json()["annual"]) == 2

    def test_rejects_oversized_amortization(self, client):
        """Amortization is capped at 100 years and 1200 scheduled months."""
        response = client.post(
            "/api/calculate/amortization",
            json={
                "principal": 1000000,
                "interest_rate_percent": 0,
                "amortization_years": 100000,
            },
        )
        assert response.status_code == 422

        response = client.post(
            "/api/calculate/amortization",
            json={
                "principal": 1000000,
                "interest_rate_percent": 6,
                "amortization_years": 30,
                "total_months": 1201,
            },
        )
        assert response.status_code == 422
