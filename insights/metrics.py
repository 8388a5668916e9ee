"""
Insight metrics: one pass over a snapshot of the user's records.

Given transactions, bills, investments and recurring incomes plus the rate
assumptions, derive monthly cash flow, savings potential, net-worth
projections at 1/5/10 years, a bill payoff timeline, the two-bucket risk
split, and an illustrative 10-year SIP corpus.

Behaviors that look odd but are intentional:
  - Expense transactions are summed over the WHOLE history supplied, not
    just the current month.
  - Only unpaid bills (pending, overdue, anything not "paid") count.
  - Invested assets compound at the nominal return; the annual savings
    surplus compounds yearly at the real return (expected - inflation).
  - Investment types outside both risk buckets (etf, bond, real-estate)
    are counted in total_invested_assets but in neither bucket.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from typing import Any, Iterable, Mapping, Optional, Union

from core.config import (
    DEBT_REPAYMENT_SAVINGS_SHARE,
    NET_WORTH_HORIZONS,
    SIP_ILLUSTRATION_YEARS,
    InsightAssumptions,
)
from core.schema import (
    EQUITY_LIKE_TYPES,
    STABLE_TYPES,
    Bill,
    Income,
    Investment,
    Transaction,
    coerce_records,
)
from projections.growth import compound_future_value, sip_future_value

logger = logging.getLogger(__name__)

AssumptionsLike = Union[InsightAssumptions, Mapping[str, Any], None]


@dataclass(frozen=True)
class ProjectedNetWorth:
    one: float
    five: float
    ten: float


@dataclass(frozen=True)
class RiskExposureSummary:
    equity_like_assets: float
    stable_assets: float


@dataclass(frozen=True)
class InsightMetrics:
    total_invested_assets: float
    monthly_income: float
    monthly_expenses: float
    monthly_savings_potential: float
    projected_net_worth: ProjectedNetWorth
    expected_debt_reduction_timeline_months: int
    risk_exposure_summary: RiskExposureSummary
    sip_corpus_example: float

    def to_dict(self) -> dict:
        """Render with the field names the web client consumes."""
        return {
            "totalInvestedAssets": self.total_invested_assets,
            "monthlyIncome": self.monthly_income,
            "monthlyExpenses": self.monthly_expenses,
            "monthlySavingsPotential": self.monthly_savings_potential,
            "projectedNetWorth": asdict(self.projected_net_worth),
            "expectedDebtReductionTimelineMonths": self.expected_debt_reduction_timeline_months,
            "riskExposureSummary": {
                "equityLikeAssets": self.risk_exposure_summary.equity_like_assets,
                "stableAssets": self.risk_exposure_summary.stable_assets,
            },
            "sipCorpusExample": self.sip_corpus_example,
        }


def resolve_assumptions(assumptions: AssumptionsLike) -> InsightAssumptions:
    if isinstance(assumptions, InsightAssumptions):
        return assumptions
    return InsightAssumptions.from_mapping(assumptions)


def project_net_worth(
    invested_assets: float,
    monthly_savings: float,
    assumptions: InsightAssumptions,
    years: float,
) -> float:
    """Assets at the nominal return plus a year's savings surplus at the real return."""
    assets = compound_future_value(invested_assets, assumptions.expected_return, years)
    savings = compound_future_value(monthly_savings * 12, assumptions.real_return, years)
    return assets + savings


def debt_reduction_timeline_months(monthly_bills: float, monthly_savings: float) -> int:
    """Months to clear a year of outstanding bills with 40% of monthly savings."""
    if monthly_bills <= 0:
        return 0
    monthly_paydown = max(monthly_savings * DEBT_REPAYMENT_SAVINGS_SHARE, 1)
    return int(math.ceil((monthly_bills * 12) / monthly_paydown))


def summarize_risk_exposure(investments: Iterable[Investment]) -> RiskExposureSummary:
    equity = 0.0
    stable = 0.0
    for inv in investments:
        if inv.type in EQUITY_LIKE_TYPES:
            equity += inv.current_value
        elif inv.type in STABLE_TYPES:
            stable += inv.current_value
    return RiskExposureSummary(equity_like_assets=equity, stable_assets=stable)


def calculate_insight_metrics(
    *,
    investments: Optional[Iterable[Any]] = None,
    bills: Optional[Iterable[Any]] = None,
    transactions: Optional[Iterable[Any]] = None,
    incomes: Optional[Iterable[Any]] = None,
    assumptions: AssumptionsLike = None,
) -> InsightMetrics:
    """
    Compute the insight metrics for one snapshot of records.

    Parameters
    ----------
    investments, bills, transactions, incomes : iterables
        core.schema records or plain mappings (camelCase or snake_case keys).
        Malformed amounts count as 0. Inputs are never mutated.
    assumptions : InsightAssumptions, mapping, or None
        Annual percentages. None means the defaults (11 / 5 / 6).

    Returns
    -------
    InsightMetrics (immutable). Empty inputs give all-zero metrics.
    """
    investments = coerce_records(Investment, investments)
    bills = coerce_records(Bill, bills)
    transactions = coerce_records(Transaction, transactions)
    incomes = coerce_records(Income, incomes)
    rates = resolve_assumptions(assumptions)

    total_invested_assets = float(sum(inv.current_value for inv in investments))
    monthly_income = float(sum(i.amount for i in incomes))

    expense_transactions = float(sum(t.amount for t in transactions if t.is_expense))
    monthly_bills = float(sum(b.amount for b in bills if not b.is_paid))

    monthly_expenses = expense_transactions + monthly_bills
    monthly_savings_potential = max(monthly_income - monthly_expenses, 0.0)

    one, five, ten = (
        project_net_worth(total_invested_assets, monthly_savings_potential, rates, h)
        for h in NET_WORTH_HORIZONS
    )

    metrics = InsightMetrics(
        total_invested_assets=total_invested_assets,
        monthly_income=monthly_income,
        monthly_expenses=monthly_expenses,
        monthly_savings_potential=monthly_savings_potential,
        projected_net_worth=ProjectedNetWorth(one=one, five=five, ten=ten),
        expected_debt_reduction_timeline_months=debt_reduction_timeline_months(
            monthly_bills, monthly_savings_potential
        ),
        risk_exposure_summary=summarize_risk_exposure(investments),
        sip_corpus_example=sip_future_value(
            monthly_savings_potential, rates.expected_return, SIP_ILLUSTRATION_YEARS
        ),
    )

    logger.debug(
        "insight metrics: %d investments, %d bills, %d transactions, %d incomes -> "
        "income=%.2f expenses=%.2f savings=%.2f",
        len(investments), len(bills), len(transactions), len(incomes),
        monthly_income, monthly_expenses, monthly_savings_potential,
    )
    return metrics
