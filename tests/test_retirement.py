import pytest

from core.config import PF_DEFAULT_CURRENT_AGE, PF_INTEREST_RATE
from projections.retirement import project_pf_retirement


def test_projection_by_age():
    proj = project_pf_retirement([
        {"type": "pf", "currentValue": "1000", "pfCurrentCompany": "500",
         "pfPreviousCompany": "500", "pfCurrentAge": "40"},
    ])
    assert proj.has_pf
    assert proj.interest_rate == PF_INTEREST_RATE
    assert proj.principal == pytest.approx(2000)
    assert proj.current_age == pytest.approx(40)
    assert set(proj.by_age) == {50, 55, 60}
    assert proj.by_age[50] == pytest.approx(2000 * 1.0825 ** 10)
    assert proj.by_age[55] == pytest.approx(2000 * 1.0825 ** 15)
    assert proj.by_age[60] == pytest.approx(2000 * 1.0825 ** 20)


def test_age_is_value_weighted():
    proj = project_pf_retirement([
        {"type": "pf", "currentValue": "1000", "pfCurrentAge": "30"},
        {"type": "pf", "currentValue": "3000", "pfCurrentAge": "50"},
    ])
    assert proj.current_age == pytest.approx(45)


def test_past_retirement_age_does_not_shrink():
    proj = project_pf_retirement([{"type": "pf", "currentValue": "1000", "pfCurrentAge": "58"}])
    assert proj.by_age[50] == pytest.approx(1000)
    assert proj.by_age[55] == pytest.approx(1000)
    assert proj.by_age[60] == pytest.approx(1000 * 1.0825 ** 2)


def test_default_age_without_current_value():
    proj = project_pf_retirement([{"type": "pf", "pfCurrentCompany": "100"}])
    assert proj.current_age == PF_DEFAULT_CURRENT_AGE
    assert proj.by_age[50] == pytest.approx(100 * 1.0825 ** 20)


def test_non_pf_holdings_ignored():
    proj = project_pf_retirement([{"type": "stock", "currentValue": "5000"}])
    assert not proj.has_pf
    assert proj.principal == 0
    assert all(v == 0 for v in proj.by_age.values())


def test_to_dict_keys():
    d = project_pf_retirement([{"type": "pf", "currentValue": "10"}]).to_dict()
    assert set(d["pfRetirementProjection"]) == {"age50", "age55", "age60"}
    assert d["pfInterestRate"] == PF_INTEREST_RATE
