"""
Provident fund (PF) retirement projection.

The PF corpus is everything recorded against "pf" investments: their current
value plus the current-company and previous-company contribution amounts.
It grows at a fixed statutory rate until each target retirement age. The
holder's age is the current-value-weighted average of the recorded PF ages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Sequence

from core.config import PF_DEFAULT_CURRENT_AGE, PF_INTEREST_RATE, PF_RETIREMENT_AGES
from core.schema import Investment, InvestmentType, coerce_records

from .growth import compound_future_value


@dataclass(frozen=True)
class PFRetirementProjection:
    interest_rate: float
    principal: float
    current_company_total: float
    previous_company_total: float
    current_age: float
    by_age: Dict[int, float] = field(default_factory=dict)

    @property
    def has_pf(self) -> bool:
        return self.principal > 0

    def to_dict(self) -> dict:
        return {
            "pfInterestRate": self.interest_rate,
            "pfPrincipal": self.principal,
            "pfCurrentCompanyTotal": self.current_company_total,
            "pfPreviousCompanyTotal": self.previous_company_total,
            "pfInferredCurrentAge": self.current_age,
            "pfRetirementProjection": {f"age{age}": value for age, value in self.by_age.items()},
        }


def project_pf_retirement(
    investments: Iterable[Any],
    *,
    interest_rate: float = PF_INTEREST_RATE,
    retirement_ages: Sequence[int] = PF_RETIREMENT_AGES,
) -> PFRetirementProjection:
    pf = [
        inv for inv in coerce_records(Investment, investments)
        if inv.type == InvestmentType.PF.value
    ]

    current_total = sum(inv.current_value for inv in pf)
    current_company = sum(inv.pf_current_company for inv in pf)
    previous_company = sum(inv.pf_previous_company for inv in pf)
    principal = current_total + current_company + previous_company

    if current_total > 0:
        current_age = sum(inv.current_value * inv.pf_current_age for inv in pf) / current_total
    else:
        current_age = PF_DEFAULT_CURRENT_AGE

    by_age = {}
    for age in retirement_ages:
        years = max(0.0, age - current_age)
        by_age[int(age)] = compound_future_value(principal, interest_rate, years)

    return PFRetirementProjection(
        interest_rate=interest_rate,
        principal=float(principal),
        current_company_total=float(current_company),
        previous_company_total=float(previous_company),
        current_age=float(current_age),
        by_age=by_age,
    )
