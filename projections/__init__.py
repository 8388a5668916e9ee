"""
Projection formulas: compound growth, SIP future value, PF retirement corpus.
"""

from .growth import (
    PROJECTION_YEARS,
    compound_future_value,
    growth_curve,
    projection_table,
    sip_future_value,
)
from .retirement import PFRetirementProjection, project_pf_retirement

__all__ = [
    "PROJECTION_YEARS",
    "compound_future_value",
    "growth_curve",
    "projection_table",
    "sip_future_value",
    "PFRetirementProjection",
    "project_pf_retirement",
]
