import math

import numpy as np
import pytest

from projections.growth import (
    PROJECTION_YEARS,
    compound_future_value,
    growth_curve,
    projection_table,
    sip_future_value,
)


@pytest.mark.parametrize("principal, rate", [(1000, 10), (2500.5, -4), (0, 11), (-300, 7)])
def test_compound_zero_years_is_identity(principal, rate):
    assert compound_future_value(principal, rate, 0) == principal


def test_compound_one_year_at_ten_percent():
    assert compound_future_value(1000, 10, 1) == pytest.approx(1100)


def test_compound_zero_rate_no_growth():
    assert compound_future_value(1000, 0, 5) == 1000


def test_compound_negative_rate_declines():
    assert compound_future_value(1000, -10, 2) == pytest.approx(810)


def test_compound_monthly_compounding():
    assert compound_future_value(1000, 12, 1, compounds_per_year=12) == pytest.approx(1000 * 1.01 ** 12)


def test_sip_zero_rate_is_plain_accumulation():
    assert sip_future_value(1000, 0, 5, 12) == 60000


def test_sip_negative_rate_is_plain_accumulation():
    assert sip_future_value(500, -6, 2) == 500 * 24


def test_sip_positive_rate_exceeds_contributions():
    assert sip_future_value(1000, 12, 1, 12) > 1000 * 12


def test_sip_is_annuity_due():
    i = 0.12 / 12
    ordinary = 1000 * ((1 + i) ** 12 - 1) / i
    assert sip_future_value(1000, 12, 1) == pytest.approx(ordinary * (1 + i))
    assert sip_future_value(1000, 12, 1) > ordinary


def test_extreme_rates_overflow_to_infinity():
    assert compound_future_value(100, 1e6, 200) == math.inf
    assert compound_future_value(-100, 1e6, 200) == -math.inf
    assert compound_future_value(0, 1e6, 200) == 0.0
    assert sip_future_value(100, 1e6, 10) == math.inf
    assert sip_future_value(0, 1e6, 10) == 0.0


def test_growth_curve_matches_compound():
    curve = growth_curve(1000, 10, 3)
    assert isinstance(curve, np.ndarray)
    assert len(curve) == 4
    assert curve[0] == pytest.approx(1000)
    assert curve[3] == pytest.approx(compound_future_value(1000, 10, 3))


def test_projection_table_rows_per_horizon():
    table = projection_table(10000, 500, 11)
    assert list(table["years"]) == list(PROJECTION_YEARS)
    row = table.set_index("years").loc[5]
    assert row["lump_sum_value"] == pytest.approx(compound_future_value(10000, 11, 5))
    assert row["sip_value"] == pytest.approx(sip_future_value(500, 11, 5))
    assert row["total_value"] == pytest.approx(row["lump_sum_value"] + row["sip_value"])
    assert row["total_contributed"] == pytest.approx(10000 + 500 * 60)


def test_projection_table_custom_horizons():
    table = projection_table(0, 0, 8, horizons=(2,))
    assert len(table) == 1
    assert table.iloc[0]["total_value"] == 0
