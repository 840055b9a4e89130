"""
Financial Calculation Engine

Core calculation modules for rental property investment analysis.
Every calculation is a pure function of its inputs.
"""

from app.calculations import amortization, proforma, mortgage, returns, projections
from app.calculations.engine import calculate_all_metrics, compute

__all__ = [
    "amortization",
    "proforma",
    "mortgage",
    "returns",
    "projections",
    "calculate_all_metrics",
    "compute",
]
