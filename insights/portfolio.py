"""
Portfolio summary: value, cost basis and gain across all holdings.

Cost basis for PF holdings is the sum of the current-company and
previous-company contributions; when neither was recorded the current value
stands in (so the holding shows no gain). Every other holding uses
shares * average cost.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List

import pandas as pd

from core.schema import Investment, InvestmentType, coerce_records


def cost_basis(investment: Investment) -> float:
    if investment.type == InvestmentType.PF.value:
        contribution = investment.pf_current_company + investment.pf_previous_company
        return contribution if contribution > 0 else investment.current_value
    return investment.shares * investment.avg_cost


def _gain_percent(gain: float, cost: float) -> float:
    return (gain / cost) * 100 if cost > 0 else 0.0


@dataclass(frozen=True)
class PortfolioSummary:
    holdings: List[Investment] = field(default_factory=list)
    total_value: float = 0.0
    total_cost: float = 0.0

    @property
    def total_gain(self) -> float:
        return self.total_value - self.total_cost

    @property
    def total_gain_percent(self) -> float:
        return _gain_percent(self.total_gain, self.total_cost)

    def to_dataframe(self) -> pd.DataFrame:
        """One row per holding, ready for display."""
        rows = []
        for inv in self.holdings:
            cost = cost_basis(inv)
            gain = inv.current_value - cost
            rows.append({
                "name": inv.name or inv.symbol or inv.type,
                "type": inv.type,
                "current_value": inv.current_value,
                "cost_basis": cost,
                "gain": gain,
                "gain_pct": _gain_percent(gain, cost),
            })
        return pd.DataFrame(
            rows, columns=["name", "type", "current_value", "cost_basis", "gain", "gain_pct"]
        )


def summarize_portfolio(investments: Iterable[Any]) -> PortfolioSummary:
    holdings = coerce_records(Investment, investments)
    return PortfolioSummary(
        holdings=holdings,
        total_value=float(sum(inv.current_value for inv in holdings)),
        total_cost=float(sum(cost_basis(inv) for inv in holdings)),
    )
