"""
Closed-form growth formulas used by every projection in the app.

Rates are annual percentages (11 means 11%). Negative rates are valid and
model decline; nothing here validates or clamps its inputs.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
import pandas as pd

# Horizons (years) shown on the investment screens
PROJECTION_YEARS = (1, 3, 5, 10)


def _unbounded(amount: float) -> float:
    return math.copysign(math.inf, amount) if amount else 0.0


def compound_future_value(
    principal: float,
    annual_rate_percent: float,
    years: float,
    compounds_per_year: int = 1,
) -> float:
    """
    principal * (1 + r/m)^(m*years), with r = annual_rate_percent / 100.

    A growth factor beyond float range gives an infinite value carrying the
    sign of the principal.
    """
    rate = annual_rate_percent / 100
    try:
        factor = (1 + rate / compounds_per_year) ** (compounds_per_year * years)
    except OverflowError:
        return _unbounded(principal)
    return principal * factor


def sip_future_value(
    installment: float,
    annual_rate_percent: float,
    years: float,
    installments_per_year: int = 12,
) -> float:
    """
    Future value of a systematic investment plan (recurring fixed installment).

    Installments are paid at the START of each period (annuity-due), hence the
    trailing (1 + i) factor. With a zero or negative periodic rate the series
    degrades to plain accumulation: installment * number of installments.
    Overflow gives an infinite value with the sign of the installment.
    """
    total_installments = years * installments_per_year
    periodic_rate = annual_rate_percent / 100 / installments_per_year

    if periodic_rate <= 0:
        return installment * total_installments

    try:
        growth = ((1 + periodic_rate) ** total_installments - 1) / periodic_rate
    except OverflowError:
        return _unbounded(installment)
    return installment * growth * (1 + periodic_rate)


def growth_curve(principal: float, annual_rate_percent: float, years: int) -> np.ndarray:
    """Year-end values of a yearly-compounded principal for year 0..years."""
    t = np.arange(int(years) + 1, dtype=float)
    return principal * np.power(1.0 + annual_rate_percent / 100.0, t)


def projection_table(
    principal: float,
    monthly_installment: float,
    annual_rate_percent: float,
    *,
    horizons: Sequence[int] = PROJECTION_YEARS,
) -> pd.DataFrame:
    """
    Lump sum + monthly SIP projected over each horizon.

    Returns
    -------
    DataFrame with one row per horizon:
        years, lump_sum_value, sip_value, total_value, total_contributed
    """
    rows = []
    for years in horizons:
        lump = compound_future_value(principal, annual_rate_percent, years)
        sip = sip_future_value(monthly_installment, annual_rate_percent, years)
        rows.append({
            "years": int(years),
            "lump_sum_value": float(lump),
            "sip_value": float(sip),
            "total_value": float(lump + sip),
            "total_contributed": float(principal + monthly_installment * 12 * years),
        })
    return pd.DataFrame(
        rows,
        columns=["years", "lump_sum_value", "sip_value", "total_value", "total_contributed"],
    )
