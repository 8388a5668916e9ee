"""
Core package: record schema, projection assumptions, and numeric helpers.
No calculations live here.
"""

from .config import DEFAULT_ASSUMPTIONS, ConfigError, InsightAssumptions, load_assumptions_from_env
from .schema import (
    Bill,
    BillStatus,
    Income,
    Investment,
    InvestmentType,
    RiskBucket,
    Transaction,
    TransactionType,
    coerce_records,
    risk_bucket,
)
from .utils import require_columns, to_number

__all__ = [
    "DEFAULT_ASSUMPTIONS",
    "ConfigError",
    "InsightAssumptions",
    "load_assumptions_from_env",
    "Bill",
    "BillStatus",
    "Income",
    "Investment",
    "InvestmentType",
    "RiskBucket",
    "Transaction",
    "TransactionType",
    "coerce_records",
    "risk_bucket",
    "require_columns",
    "to_number",
]
