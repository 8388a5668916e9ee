"""
Dashboard overview totals.

These follow the dashboard's own accounting, which differs from the insight
metrics on purpose: income counts active income records plus income-type
transactions, and expenses count every bill regardless of status.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional

from core.config import DEFAULT_BILL_CATEGORY, RECOMMENDED_INVESTMENT_SHARE
from core.schema import Bill, Income, Investment, Transaction, coerce_records


@dataclass(frozen=True)
class DashboardSummary:
    income_from_records: float
    income_from_transactions: float
    transaction_expenses: float
    bill_expenses: float
    total_investments: float
    category_breakdown: Dict[str, float] = field(default_factory=dict)

    @property
    def total_income(self) -> float:
        return self.income_from_records + self.income_from_transactions

    @property
    def total_expenses(self) -> float:
        return self.transaction_expenses + self.bill_expenses

    @property
    def current_savings(self) -> float:
        return self.total_income - self.total_expenses

    @property
    def total_balance(self) -> float:
        return self.current_savings + self.total_investments

    @property
    def savings_rate(self) -> float:
        """Savings as a percentage of income; 0 when there is no income."""
        if self.total_income <= 0:
            return 0.0
        return self.current_savings / self.total_income * 100

    @property
    def projected_annual_savings(self) -> float:
        return self.current_savings * 12

    @property
    def recommended_investment_amount(self) -> float:
        return self.current_savings * RECOMMENDED_INVESTMENT_SHARE

    def to_dict(self) -> dict:
        return {
            "totalBalance": self.total_balance,
            "monthlyIncome": self.total_income,
            "monthlyExpenses": self.total_expenses,
            "incomeFromRecords": self.income_from_records,
            "incomeFromTransactions": self.income_from_transactions,
            "transactionExpenses": self.transaction_expenses,
            "billExpenses": self.bill_expenses,
            "savingsRate": self.savings_rate,
            "projectedAnnualSavings": self.projected_annual_savings,
            "recommendedInvestmentAmount": self.recommended_investment_amount,
            "categoryBreakdown": dict(self.category_breakdown),
            "totalInvestments": self.total_investments,
        }


def category_breakdown(
    transactions: Iterable[Transaction],
    bills: Iterable[Bill],
) -> Dict[str, float]:
    """Expense totals per category; bills without a category go under DEFAULT_BILL_CATEGORY."""
    totals: Dict[str, float] = {}
    for t in transactions:
        if t.is_expense:
            key = t.category or "Other"
            totals[key] = totals.get(key, 0.0) + t.amount
    for b in bills:
        key = b.category.strip() if b.category and b.category.strip() else DEFAULT_BILL_CATEGORY
        totals[key] = totals.get(key, 0.0) + b.amount
    return totals


def summarize_dashboard(
    *,
    transactions: Optional[Iterable[Any]] = None,
    bills: Optional[Iterable[Any]] = None,
    incomes: Optional[Iterable[Any]] = None,
    investments: Optional[Iterable[Any]] = None,
) -> DashboardSummary:
    transactions = coerce_records(Transaction, transactions)
    bills = coerce_records(Bill, bills)
    incomes = coerce_records(Income, incomes)
    investments = coerce_records(Investment, investments)

    return DashboardSummary(
        income_from_records=float(sum(i.amount for i in incomes if i.is_active)),
        income_from_transactions=float(sum(t.amount for t in transactions if t.is_income)),
        transaction_expenses=float(sum(t.amount for t in transactions if t.is_expense)),
        bill_expenses=float(sum(b.amount for b in bills)),
        total_investments=float(sum(inv.current_value for inv in investments)),
        category_breakdown=category_breakdown(transactions, bills),
    )
