"""
Record schema for the finance snapshots fed into the insight calculations.

Records arrive from the REST API (camelCase JSON with amounts as decimal
strings) or from file imports. Every monetary field is normalized at this
boundary with to_number(), so a malformed amount becomes 0.0 instead of an
error. Categorical fields are lower-cased (not trimmed) but never rejected: an
unknown investment type is kept as-is and simply lands in no risk bucket.
Descriptive fields the calculations never read are just as lenient: text that
is not a string or number becomes None, unreadable yes/no flags take their
default.
"""

from __future__ import annotations

import datetime as dt
import re
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple, Type, TypeVar

from dateutil import parser as date_parser
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from .utils import to_number


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class BillStatus(str, Enum):
    PAID = "paid"
    PENDING = "pending"
    OVERDUE = "overdue"


class InvestmentType(str, Enum):
    PF = "pf"
    MUTUAL_FUND = "mutual-fund"
    STOCK = "stock"
    FD = "fd"
    CRYPTO = "crypto"
    GOLD = "gold"
    OTHER = "other"
    ETF = "etf"
    BOND = "bond"
    REAL_ESTATE = "real-estate"


class RiskBucket(str, Enum):
    EQUITY_LIKE = "equity_like"
    STABLE = "stable"


EQUITY_LIKE_TYPES: FrozenSet[str] = frozenset({"stock", "mutual-fund", "crypto"})
# etf, bond and real-estate are deliberately absent from both buckets
STABLE_TYPES: FrozenSet[str] = frozenset({"fd", "gold", "pf", "other"})

_DAY_FIRST_DATE = re.compile(r"^\d{2}-\d{2}-\d{4}$")
_TRUE_WORDS = frozenset({"true", "t", "yes", "y", "on", "1"})
_FALSE_WORDS = frozenset({"false", "f", "no", "n", "off", "0"})


def risk_bucket(investment_type: Any) -> Optional[RiskBucket]:
    """Map an investment type to its risk bucket, or None when it has none."""
    key = _categorical(investment_type)
    if key in EQUITY_LIKE_TYPES:
        return RiskBucket.EQUITY_LIKE
    if key in STABLE_TYPES:
        return RiskBucket.STABLE
    return None


def _categorical(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        value = value.value
    return str(value).lower()


def optional_text(value: Any) -> Optional[str]:
    """Keep strings and numbers as text; anything else (dicts, lists, ...) becomes None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, (str, int, float, Decimal)):
        return str(value)
    return None


def parse_flag(value: Any, default: bool) -> bool:
    """Read a yes/no field leniently; unrecognized values fall back to `default`."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        key = value.strip().lower()
        if key in _TRUE_WORDS:
            return True
        if key in _FALSE_WORDS:
            return False
    return default


def parse_record_date(value: Any) -> Optional[dt.date]:
    """Parse ISO or DD-MM-YYYY dates. Unparseable input yields None."""
    if value is None or value == "":
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    text = str(value).strip()
    try:
        if _DAY_FIRST_DATE.match(text):
            return date_parser.parse(text, dayfirst=True).date()
        return date_parser.isoparse(text).date()
    except (ValueError, OverflowError):
        return None


class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
        frozen=True,
    )


class Transaction(_Record):
    type: str = ""
    amount: float = 0.0
    category: Optional[str] = None
    date: Optional[dt.date] = None
    description: Optional[str] = None
    payment_method: Optional[str] = None

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, v: Any) -> float:
        return to_number(v)

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v: Any) -> str:
        return _categorical(v)

    @field_validator("category", "description", "payment_method", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Optional[str]:
        return optional_text(v)

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> Optional[dt.date]:
        return parse_record_date(v)

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE.value

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME.value


class Bill(_Record):
    name: Optional[str] = None
    amount: float = 0.0
    status: str = ""
    category: Optional[str] = None
    due_date: Optional[dt.date] = None
    is_recurring: bool = False

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, v: Any) -> float:
        return to_number(v)

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, v: Any) -> str:
        return _categorical(v)

    @field_validator("due_date", mode="before")
    @classmethod
    def parse_due_date(cls, v: Any) -> Optional[dt.date]:
        return parse_record_date(v)

    @field_validator("name", "category", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Optional[str]:
        return optional_text(v)

    @field_validator("is_recurring", mode="before")
    @classmethod
    def coerce_recurring(cls, v: Any) -> bool:
        return parse_flag(v, default=False)

    @property
    def is_paid(self) -> bool:
        return self.status == BillStatus.PAID.value


class Investment(_Record):
    type: str = ""
    current_value: float = 0.0
    name: Optional[str] = None
    symbol: Optional[str] = None
    shares: float = 0.0
    avg_cost: float = 0.0
    pf_current_company: float = 0.0
    pf_previous_company: float = 0.0
    pf_current_age: float = 0.0

    @field_validator(
        "current_value",
        "shares",
        "avg_cost",
        "pf_current_company",
        "pf_previous_company",
        "pf_current_age",
        mode="before",
    )
    @classmethod
    def coerce_numbers(cls, v: Any) -> float:
        return to_number(v)

    @field_validator("name", "symbol", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Optional[str]:
        return optional_text(v)

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v: Any) -> str:
        return _categorical(v)

    @property
    def kind(self) -> Optional[InvestmentType]:
        """The recognized investment type, or None for a free-form type string."""
        try:
            return InvestmentType(self.type)
        except ValueError:
            return None

    @property
    def risk_bucket(self) -> Optional[RiskBucket]:
        return risk_bucket(self.type)


class Income(_Record):
    amount: float = 0.0
    source: Optional[str] = None
    frequency: Optional[str] = None
    is_active: bool = True

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, v: Any) -> float:
        return to_number(v)

    @field_validator("source", "frequency", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Optional[str]:
        return optional_text(v)

    @field_validator("is_active", mode="before")
    @classmethod
    def coerce_active(cls, v: Any) -> bool:
        return parse_flag(v, default=True)


RecordT = TypeVar("RecordT", bound=_Record)


def coerce_records(model: Type[RecordT], items: Optional[Iterable[Any]]) -> List[RecordT]:
    """Validate mappings into `model` instances; instances pass through untouched."""
    if items is None:
        return []
    out: List[RecordT] = []
    for item in items:
        if isinstance(item, model):
            out.append(item)
        else:
            out.append(model.model_validate(item))
    return out


RECORD_MODELS: Dict[str, Type[_Record]] = {
    "transactions": Transaction,
    "bills": Bill,
    "investments": Investment,
    "incomes": Income,
}

# Columns (camelCase) a record file must carry for each kind
RECORD_COLUMNS: Dict[str, Tuple[str, ...]] = {
    "transactions": ("type", "amount"),
    "bills": ("amount", "status"),
    "investments": ("type", "currentValue"),
    "incomes": ("amount",),
}

# Monetary columns per kind, checked by the validators
MONEY_COLUMNS: Dict[str, Tuple[str, ...]] = {
    "transactions": ("amount",),
    "bills": ("amount",),
    "investments": ("currentValue", "shares", "avgCost", "pfCurrentCompany", "pfPreviousCompany"),
    "incomes": ("amount",),
}


def model_for(kind: str) -> Type[_Record]:
    try:
        return RECORD_MODELS[kind]
    except KeyError:
        raise ValueError(
            f"Unknown record kind {kind!r}; expected one of {sorted(RECORD_MODELS)}"
        ) from None
