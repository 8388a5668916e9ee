"""
Financial health score (0-100).

  Savings rate        up to 40 points
  Investment ratio    up to 30 points  (investments / annual income)
  Monthly cash flow   up to 20 points
  Emergency cushion   up to 10 points  (6 months of cash flow vs expenses)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class HealthReport:
    score: int
    components: Dict[str, int] = field(default_factory=dict)

    @property
    def label(self) -> str:
        if self.score >= 80:
            return "Excellent"
        if self.score >= 60:
            return "Good"
        if self.score >= 40:
            return "Fair"
        return "Needs Improvement"

    @property
    def advice(self) -> str:
        if self.score >= 80:
            return "Outstanding! You're on track for financial independence."
        if self.score >= 60:
            return "Good progress! Consider increasing your savings rate."
        if self.score >= 40:
            return "Fair start. Focus on building emergency fund and investments."
        return "Time to take action! Start with a budget and emergency fund."


def _savings_points(savings_rate: float) -> int:
    if savings_rate >= 20:
        return 40
    if savings_rate >= 15:
        return 30
    if savings_rate >= 10:
        return 20
    if savings_rate >= 5:
        return 10
    return 0


def _investment_ratio(total_investments: float, monthly_income: float) -> float:
    annual_income = monthly_income * 12
    if annual_income > 0:
        return total_investments / annual_income
    # no income: any investment at all counts as fully covered
    return float("inf") if total_investments > 0 else 0.0


def _investment_points(ratio: float) -> int:
    if ratio >= 1:
        return 30
    if ratio >= 0.5:
        return 20
    if ratio >= 0.25:
        return 10
    return 0


def _cash_flow_points(cash_flow: float, monthly_income: float) -> int:
    if cash_flow > monthly_income * 0.3:
        return 20
    if cash_flow > monthly_income * 0.2:
        return 15
    if cash_flow > monthly_income * 0.1:
        return 10
    if cash_flow > 0:
        return 5
    return 0


def _emergency_points(cash_flow: float, monthly_expenses: float) -> int:
    cushion = cash_flow * 6
    if cushion > monthly_expenses * 6:
        return 10
    if cushion > monthly_expenses * 3:
        return 5
    return 0


def financial_health_score(
    *,
    savings_rate: float,
    monthly_income: float,
    monthly_expenses: float,
    total_investments: float,
) -> HealthReport:
    cash_flow = monthly_income - monthly_expenses
    components = {
        "savings_rate": _savings_points(savings_rate),
        "investments": _investment_points(_investment_ratio(total_investments, monthly_income)),
        "cash_flow": _cash_flow_points(cash_flow, monthly_income),
        "emergency_fund": _emergency_points(cash_flow, monthly_expenses),
    }
    return HealthReport(score=sum(components.values()), components=components)
