"""
Load record snapshots from exported files, and import bank-statement CSVs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import pandas as pd

from core.schema import (
    RECORD_COLUMNS,
    Bill,
    Income,
    Investment,
    Transaction,
    model_for,
    parse_record_date,
)
from core.utils import require_columns

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

SUPPORTED_SUFFIXES = (".csv", ".xlsx", ".xls", ".json")

_COLUMN_ALIASES: Dict[str, str] = {
    "value": "currentValue",
    "current": "currentValue",
    "avgPrice": "avgCost",
    "averageCost": "avgCost",
    "active": "isActive",
    "recurring": "isRecurring",
}

# Positional layout of the bank-statement import (first line is a header)
TRANSACTION_IMPORT_COLUMNS = ("date", "description", "amount", "category", "type", "paymentMethod")


def _camel(name: str) -> str:
    text = str(name).strip().replace(" ", "_").replace("-", "_")
    if "_" in text:
        head, *rest = [p for p in text.lower().split("_") if p]
        return head + "".join(p.capitalize() for p in rest)
    return text[:1].lower() + text[1:]


def canonicalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy with headers normalized to the camelCase record field names."""
    ren = {}
    for c in df.columns:
        camel = _camel(c)
        ren[c] = _COLUMN_ALIASES.get(camel, camel)
    return df.rename(columns=ren)


def _suffix_of(source: Any) -> str:
    name = getattr(source, "name", source)
    return Path(str(name)).suffix.lower()


def read_frame(source: Any, *, suffix: Optional[str] = None) -> pd.DataFrame:
    """
    Read a CSV / Excel / JSON export into a DataFrame of text values.

    `source` may be a path or a file-like object with a ``name`` (e.g. an
    uploaded file); pass `suffix` when the name carries no extension.
    """
    suffix = (suffix or _suffix_of(source)).lower()
    if suffix == ".csv":
        return pd.read_csv(source, dtype=str, skipinitialspace=True)
    if suffix in (".xlsx", ".xls"):
        return pd.read_excel(source, dtype=str)
    if suffix == ".json":
        return pd.read_json(source, dtype=False, convert_dates=False)
    raise ValueError(f"Unsupported file type {suffix!r}; expected one of {SUPPORTED_SUFFIXES}")


def records_from_frame(frame: pd.DataFrame, kind: str) -> List[Any]:
    """Validate each row of `frame` into the record model for `kind`."""
    model = model_for(kind)
    df = canonicalize_columns(frame)
    require_columns(df, RECORD_COLUMNS[kind])
    clean = df.astype(object).where(df.notna(), None)
    return [model.model_validate(row) for row in clean.to_dict(orient="records")]


def load_records(source: Any, kind: str, *, suffix: Optional[str] = None) -> List[Any]:
    records = records_from_frame(read_frame(source, suffix=suffix), kind)
    logger.info("loaded %d %s from %s", len(records), kind, getattr(source, "name", source))
    return records


@dataclass
class RecordSnapshot:
    """Everything the insight calculations read, as one bundle."""
    transactions: List[Transaction] = field(default_factory=list)
    bills: List[Bill] = field(default_factory=list)
    investments: List[Investment] = field(default_factory=list)
    incomes: List[Income] = field(default_factory=list)

    def as_kwargs(self) -> Dict[str, list]:
        return {
            "transactions": self.transactions,
            "bills": self.bills,
            "investments": self.investments,
            "incomes": self.incomes,
        }

    @property
    def is_empty(self) -> bool:
        return not any(self.as_kwargs().values())


def load_snapshot(sources: Mapping[str, Any]) -> RecordSnapshot:
    """
    Load several record files at once.

    `sources` maps a record kind (transactions, bills, investments, incomes)
    to a path or uploaded file. Kinds left out stay empty.
    """
    loaded = {kind: load_records(src, kind) for kind, src in sources.items() if src is not None}
    return RecordSnapshot(**loaded)


@dataclass
class ImportResult:
    transactions: List[Transaction] = field(default_factory=list)
    total: int = 0

    @property
    def imported(self) -> int:
        return len(self.transactions)

    @property
    def skipped(self) -> int:
        return self.total - self.imported


def _cell(value: Any) -> Optional[str]:
    if value is None or pd.isna(value):
        return None
    text = str(value).strip()
    return text or None


def import_transactions_csv(source: Any) -> ImportResult:
    """
    Import a bank-statement CSV.

    The first line is a header and is ignored; columns are read by position:
    date, description, amount, category, type, payment method. Category,
    type and payment method default to "Other", "expense" and "Unknown".
    DD-MM-YYYY dates are accepted. Rows without a date, description or
    amount are skipped but still counted in `total`.
    A file pandas cannot tokenize raises ValueError.
    """
    try:
        frame = pd.read_csv(
            source,
            header=None,
            skiprows=1,
            names=list(TRANSACTION_IMPORT_COLUMNS),
            index_col=False,
            dtype=str,
            skipinitialspace=True,
        )
    except pd.errors.EmptyDataError:
        return ImportResult()
    except pd.errors.ParserError as e:
        raise ValueError(f"Malformed bank statement: {e}") from e

    result = ImportResult(total=len(frame))
    for row in frame.to_dict(orient="records"):
        cells = {k: _cell(v) for k, v in row.items()}
        if cells["date"] is None or cells["description"] is None or cells["amount"] is None:
            logger.debug("skipping import row without date/description/amount: %s", cells)
            continue
        parsed_date = parse_record_date(cells["date"])
        result.transactions.append(
            Transaction(
                date=parsed_date,
                description=cells["description"],
                amount=cells["amount"],
                category=cells["category"] or "Other",
                type=cells["type"] or "expense",
                payment_method=cells["paymentMethod"] or "Unknown",
            )
        )

    logger.info("imported %d of %d transaction rows", result.imported, result.total)
    return result
