"""
FinTrack Insights: Personal Finance Dashboard
==============================================

Upload record exports (transactions, bills, investments, incomes), tune the
rate assumptions, and see:
  1. Cash flow and savings potential
  2. Net worth projection at 1 / 5 / 10 years
  3. Risk exposure split, portfolio gains, PF retirement corpus
  4. Dashboard totals and a financial health score

Run: streamlit run app/streamlit_app.py   (or: fintrack-dashboard)
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Dict, List

import altair as alt
import pandas as pd
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import NET_WORTH_HORIZONS, ConfigError, InsightAssumptions, load_assumptions_from_env
from core.schema import RECORD_MODELS

from data_prep.loader import RecordSnapshot, import_transactions_csv, load_records
from data_prep.validators import validate_snapshot

from projections.growth import growth_curve, projection_table
from projections.retirement import project_pf_retirement

from insights.dashboard import summarize_dashboard
from insights.health import financial_health_score
from insights.metrics import calculate_insight_metrics
from insights.portfolio import summarize_portfolio

logging.basicConfig(
    level=os.environ.get("FINTRACK_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("fintrack.app")

UPLOAD_TYPES = ["csv", "xlsx", "xls", "json"]


# ---------------------------------------------------------------------------
# Formatting / chart helpers
# ---------------------------------------------------------------------------
def _fmt_money(val):
    """Format an amount with thousands separators, no decimals."""
    return f"{val:,.0f}"


def _fmt_pct(val):
    """Format a percentage already expressed in percent units."""
    return f"{val:.1f}%"


def _plot_bars(df, *, x, y, title, y_title, height=280, sort=None):
    if not isinstance(df, pd.DataFrame) or len(df) == 0:
        st.info("No data to plot.")
        return
    chart = (
        alt.Chart(df).mark_bar()
        .encode(
            x=alt.X(f"{x}:N", title=None, sort=sort),
            y=alt.Y(f"{y}:Q", title=y_title, axis=alt.Axis(format=",.0f")),
            tooltip=[x, alt.Tooltip(f"{y}:Q", format=",.2f")],
        )
        .properties(title=title, height=height)
    )
    st.altair_chart(chart, use_container_width=True)


def _plot_growth(df, *, title, height=280):
    if len(df) == 0:
        return
    long = df.melt(id_vars=["year"], var_name="series", value_name="value")
    chart = (
        alt.Chart(long).mark_line(point=True)
        .encode(
            x=alt.X("year:O", title="Year"),
            y=alt.Y("value:Q", title="Value", axis=alt.Axis(format=",.0f")),
            color=alt.Color("series:N", title="Series"),
        )
        .properties(title=title, height=height)
    )
    st.altair_chart(chart, use_container_width=True)


def _plot_donut(df, *, category, value, title, height=260):
    if len(df) == 0 or df[value].sum() <= 0:
        st.info("No investments to split.")
        return
    chart = (
        alt.Chart(df).mark_arc(innerRadius=60)
        .encode(
            theta=alt.Theta(f"{value}:Q"),
            color=alt.Color(f"{category}:N", title=None),
            tooltip=[category, alt.Tooltip(f"{value}:Q", format=",.2f")],
        )
        .properties(title=title, height=height)
    )
    st.altair_chart(chart, use_container_width=True)


# ---------------------------------------------------------------------------
# Loading helpers
# ---------------------------------------------------------------------------
def _load_uploads(uploads: Dict[str, object], statement) -> RecordSnapshot:
    loaded: Dict[str, List] = {}
    for kind, upload in uploads.items():
        if upload is None:
            continue
        try:
            loaded[kind] = load_records(upload, kind)
        except ValueError as e:
            st.error(f"Could not load {kind} from {upload.name}: {e}")
    snapshot = RecordSnapshot(**loaded)

    if statement is not None:
        try:
            result = import_transactions_csv(statement)
        except ValueError as e:
            st.error(f"Could not import bank statement {statement.name}: {e}")
            return snapshot
        snapshot.transactions = list(snapshot.transactions) + result.transactions
        st.sidebar.caption(
            f"Bank statement: imported {result.imported} of {result.total} rows"
            + (f" ({result.skipped} skipped)" if result.skipped else "")
        )
    return snapshot


# ═══════════════════════════════════════════════════════════════════════════
# PAGE CONFIG
# ═══════════════════════════════════════════════════════════════════════════
st.set_page_config(page_title="FinTrack Insights", layout="wide")
st.title("FinTrack Insights")
st.caption("Unified view of savings, investments, PF growth, and bill obligations.")

# ═══════════════════════════════════════════════════════════════════════════
# SIDEBAR: Assumptions + Records
# ═══════════════════════════════════════════════════════════════════════════
try:
    env_defaults = load_assumptions_from_env()
except ConfigError as e:
    st.warning(f"Ignoring environment assumptions: {e}")
    env_defaults = InsightAssumptions()

with st.sidebar:
    st.header("Assumptions")
    expected_return = st.number_input(
        "Expected return (% / yr)", value=float(env_defaults.expected_return), step=0.5
    )
    inflation = st.number_input("Inflation (% / yr)", value=float(env_defaults.inflation), step=0.5)
    expense_growth = st.number_input(
        "Expense growth (% / yr)", value=float(env_defaults.expense_growth), step=0.5,
        help="Shown for reference; not used by the projections.",
    )

    st.header("Records")
    uploads = {
        kind: st.file_uploader(kind.capitalize(), type=UPLOAD_TYPES, key=f"upload_{kind}")
        for kind in RECORD_MODELS
    }
    statement = st.file_uploader("Bank statement CSV", type=["csv"], key="upload_statement")

assumptions = InsightAssumptions(
    expected_return=expected_return,
    inflation=inflation,
    expense_growth=expense_growth,
)

snapshot = _load_uploads(uploads, statement)
if snapshot.is_empty:
    st.info("Add salary, expenses, bills and investment details to generate insights.")
    st.stop()

vr = validate_snapshot(**snapshot.as_kwargs())
if not vr.is_valid:
    st.error("Record validation failed:\n" + vr.summary())
elif vr.warnings:
    with st.expander(f"Data warnings ({len(vr.warnings)})", expanded=False):
        st.text(vr.summary())

metrics = calculate_insight_metrics(**snapshot.as_kwargs(), assumptions=assumptions)
logger.info("rendering insights for %s", assumptions)

# ═══════════════════════════════════════════════════════════════════════════
# CASH FLOW
# ═══════════════════════════════════════════════════════════════════════════
k1, k2, k3, k4 = st.columns(4)
k1.metric("Monthly Income", _fmt_money(metrics.monthly_income))
k2.metric("Monthly Expenses", _fmt_money(metrics.monthly_expenses))
k3.metric("Savings Potential", _fmt_money(metrics.monthly_savings_potential))
k4.metric("Invested Assets", _fmt_money(metrics.total_invested_assets))

if metrics.expected_debt_reduction_timeline_months > 0:
    st.caption(
        f"Outstanding bills clear in about {metrics.expected_debt_reduction_timeline_months} "
        f"months using 40% of monthly savings potential."
    )

# ═══════════════════════════════════════════════════════════════════════════
# NET WORTH PROJECTION
# ═══════════════════════════════════════════════════════════════════════════
st.divider()
st.subheader("Future Wealth Projection")
st.caption(
    f"Assets grow at {assumptions.expected_return:.1f}%; the annual savings surplus grows at the "
    f"real rate of {assumptions.real_return:.1f}% (after {assumptions.inflation:.1f}% inflation)."
)

nw = metrics.projected_net_worth
nw_df = pd.DataFrame({
    "horizon": [f"{h} yr" for h in NET_WORTH_HORIZONS],
    "net_worth": [nw.one, nw.five, nw.ten],
})
left, right = st.columns(2)
with left:
    _plot_bars(nw_df, x="horizon", y="net_worth", title="Projected Net Worth",
               y_title="Net worth", sort=list(nw_df["horizon"]))
with right:
    horizon = max(NET_WORTH_HORIZONS)
    curve = pd.DataFrame({
        "year": range(horizon + 1),
        "invested assets": growth_curve(metrics.total_invested_assets, assumptions.expected_return, horizon),
        "annual savings": growth_curve(metrics.monthly_savings_potential * 12, assumptions.real_return, horizon),
    })
    _plot_growth(curve, title="Growth Curve")

st.metric("10-year SIP corpus (investing full savings potential monthly)",
          _fmt_money(metrics.sip_corpus_example))

with st.expander("Projection table (lump sum + monthly SIP)", expanded=False):
    table = projection_table(
        metrics.total_invested_assets,
        metrics.monthly_savings_potential,
        assumptions.expected_return,
    )
    st.dataframe(table.round(2), use_container_width=True, hide_index=True)

# ═══════════════════════════════════════════════════════════════════════════
# INVESTMENTS
# ═══════════════════════════════════════════════════════════════════════════
st.divider()
st.subheader("Investments")

risk = metrics.risk_exposure_summary
unbucketed = metrics.total_invested_assets - risk.equity_like_assets - risk.stable_assets
risk_df = pd.DataFrame({
    "bucket": ["Equity-like", "Stable", "Unclassified"],
    "value": [risk.equity_like_assets, risk.stable_assets, unbucketed],
})
portfolio = summarize_portfolio(snapshot.investments)

left, right = st.columns([1, 2])
with left:
    _plot_donut(risk_df, category="bucket", value="value", title="Risk Exposure")
with right:
    p1, p2, p3 = st.columns(3)
    p1.metric("Portfolio Value", _fmt_money(portfolio.total_value))
    p2.metric("Cost Basis", _fmt_money(portfolio.total_cost))
    p3.metric("Gain", _fmt_money(portfolio.total_gain), _fmt_pct(portfolio.total_gain_percent))
    st.dataframe(portfolio.to_dataframe().round(2), use_container_width=True, hide_index=True)

pf = project_pf_retirement(snapshot.investments)
st.markdown("**PF Retirement Projection**")
if pf.has_pf:
    st.caption(
        f"Projected using a fixed PF interest rate of {pf.interest_rate}% from an inferred "
        f"current age of {pf.current_age:.0f}."
    )
    cols = st.columns(len(pf.by_age))
    for col, (age, value) in zip(cols, pf.by_age.items()):
        col.metric(f"At age {age}", _fmt_money(value))
else:
    st.info("Add PF investment entries with current/previous company amounts to view the projection.")

# ═══════════════════════════════════════════════════════════════════════════
# DASHBOARD TOTALS + HEALTH
# ═══════════════════════════════════════════════════════════════════════════
st.divider()
st.subheader("Financial Health")

dash = summarize_dashboard(**snapshot.as_kwargs())
health = financial_health_score(
    savings_rate=dash.savings_rate,
    monthly_income=dash.total_income,
    monthly_expenses=dash.total_expenses,
    total_investments=dash.total_investments,
)

left, right = st.columns([1, 2])
with left:
    st.metric("Health Score", f"{health.score}/100", health.label, delta_color="off")
    st.progress(health.score / 100)
    st.caption(health.advice)
    st.metric("Savings Rate", _fmt_pct(dash.savings_rate))
    st.metric("Recommended Monthly Investment", _fmt_money(dash.recommended_investment_amount))
with right:
    breakdown = pd.DataFrame(
        sorted(dash.category_breakdown.items(), key=lambda kv: kv[1], reverse=True),
        columns=["category", "amount"],
    )
    _plot_bars(breakdown, x="category", y="amount", title="Spending by Category",
               y_title="Amount", sort="-y")

with st.expander("Score components", expanded=False):
    st.dataframe(
        pd.DataFrame(list(health.components.items()), columns=["component", "points"]),
        use_container_width=True, hide_index=True,
    )
