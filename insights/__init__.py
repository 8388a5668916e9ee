"""
Insights: metrics, portfolio summary, dashboard totals, and health score.
"""

from .dashboard import DashboardSummary, summarize_dashboard
from .health import HealthReport, financial_health_score
from .metrics import InsightMetrics, ProjectedNetWorth, RiskExposureSummary, calculate_insight_metrics
from .portfolio import PortfolioSummary, summarize_portfolio

__all__ = [
    "DashboardSummary",
    "summarize_dashboard",
    "HealthReport",
    "financial_health_score",
    "InsightMetrics",
    "ProjectedNetWorth",
    "RiskExposureSummary",
    "calculate_insight_metrics",
    "PortfolioSummary",
    "summarize_portfolio",
]
