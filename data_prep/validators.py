"""
Data quality checks for record snapshots before they are shown as insights.

The calculations themselves never reject input (bad amounts count as 0,
unknown types fall into no bucket). These checks surface what was silently
absorbed so the user can fix their data:
- Missing required columns
- Missing / unparseable / negative amounts
- Transaction types and bill statuses outside the known values
- Investment types that belong to neither risk bucket
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional

import pandas as pd
from pydantic import BaseModel

from core.schema import (
    EQUITY_LIKE_TYPES,
    MONEY_COLUMNS,
    RECORD_COLUMNS,
    STABLE_TYPES,
    BillStatus,
    InvestmentType,
    TransactionType,
    model_for,
)
from core.utils import sum_amounts

from .loader import canonicalize_columns


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a snapshot."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def extend(self, other: "ValidationResult", *, prefix: str = "") -> None:
        self.errors.extend(prefix + e for e in other.errors)
        self.warnings.extend(prefix + w for w in other.warnings)

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def _to_frame(rows: Any) -> pd.DataFrame:
    if isinstance(rows, pd.DataFrame):
        return canonicalize_columns(rows)
    items = []
    for row in rows or []:
        if isinstance(row, BaseModel):
            items.append(row.model_dump(by_alias=True))
        else:
            items.append(dict(row))
    return canonicalize_columns(pd.DataFrame(items))


def _categorical(series: pd.Series) -> pd.Series:
    return series.fillna("").astype(str).str.lower()


def _counts(values: pd.Series) -> str:
    return ", ".join(f"{k!r} x{v}" for k, v in values.value_counts().items())


def _check_money(df: pd.DataFrame, kind: str, result: ValidationResult) -> None:
    for col in MONEY_COLUMNS[kind]:
        if col not in df.columns:
            continue
        raw = df[col]
        present = raw.notna() & (raw.astype(str).str.strip() != "")
        numeric = pd.to_numeric(raw.where(present), errors="coerce")
        n_missing = int((~present).sum())
        n_bad = int((present & numeric.isna()).sum())
        n_neg = int((numeric < 0).sum())
        if n_missing > 0 and col in RECORD_COLUMNS[kind]:
            result.warnings.append(f"{n_missing} rows have no {col} (counted as 0).")
        if n_bad > 0:
            fallback = sum_amounts(raw[present & numeric.isna()])
            result.warnings.append(
                f"{n_bad} rows have unparseable {col} (read as {fallback:,.2f} in total)."
            )
        if n_neg > 0:
            if kind == "transactions":
                result.warnings.append(
                    f"{n_neg} rows have negative {col}; direction is set by type, not sign."
                )
            else:
                result.warnings.append(f"{n_neg} rows have negative {col}.")


def validate_records(kind: str, rows: Any) -> ValidationResult:
    """
    Run all checks on one kind of record.

    `rows` may be a DataFrame, an iterable of mappings, or core.schema records.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    model_for(kind)
    result = ValidationResult()
    df = _to_frame(rows)
    if df.empty:
        return result

    missing = [c for c in RECORD_COLUMNS[kind] if c not in df.columns]
    if missing:
        result.errors.append(f"Missing required columns: {missing}")
        return result

    _check_money(df, kind, result)

    if kind == "transactions":
        types = _categorical(df["type"])
        unknown = types[~types.isin([t.value for t in TransactionType])]
        if len(unknown) > 0:
            result.warnings.append(
                f"{len(unknown)} transactions have an unknown type ({_counts(unknown)}); "
                f"they count as neither income nor expense."
            )

    elif kind == "bills":
        statuses = _categorical(df["status"])
        unknown = statuses[~statuses.isin([s.value for s in BillStatus])]
        if len(unknown) > 0:
            result.warnings.append(
                f"{len(unknown)} bills have an unknown status ({_counts(unknown)}); "
                f"they are treated as unpaid."
            )

    elif kind == "investments":
        types = _categorical(df["type"])
        unknown = types[~types.isin([t.value for t in InvestmentType])]
        if len(unknown) > 0:
            result.warnings.append(
                f"{len(unknown)} investments have an unknown type ({_counts(unknown)})."
            )
        unbucketed = ~types.isin(EQUITY_LIKE_TYPES | STABLE_TYPES)
        if unbucketed.any():
            value = sum_amounts(df.loc[unbucketed, "currentValue"])
            result.warnings.append(
                f"{int(unbucketed.sum())} investments ({_counts(types[unbucketed])}) worth "
                f"{value:,.2f} are in neither the equity-like nor the stable risk bucket."
            )

    return result


def validate_snapshot(
    *,
    transactions: Optional[Iterable[Any]] = None,
    bills: Optional[Iterable[Any]] = None,
    investments: Optional[Iterable[Any]] = None,
    incomes: Optional[Iterable[Any]] = None,
) -> ValidationResult:
    result = ValidationResult()
    for kind, rows in (
        ("transactions", transactions),
        ("bills", bills),
        ("investments", investments),
        ("incomes", incomes),
    ):
        if rows is None:
            continue
        result.extend(validate_records(kind, rows), prefix=f"{kind}: ")
    return result
