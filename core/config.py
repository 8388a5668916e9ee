"""
Projection assumptions and the fixed constants the insight calculations use.

Assumptions are user-editable rate inputs (percent per year). They are passed
explicitly into every calculation; nothing here is global mutable state.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional, Tuple

from .utils import to_number

# Net worth is projected at these horizons (years)
NET_WORTH_HORIZONS: Tuple[int, int, int] = (1, 5, 10)

SIP_ILLUSTRATION_YEARS: int = 10

# Share of monthly savings potential assumed to go toward clearing bills
DEBT_REPAYMENT_SAVINGS_SHARE: float = 0.4

# Provident fund
PF_INTEREST_RATE: float = 8.25
PF_RETIREMENT_AGES: Tuple[int, int, int] = (50, 55, 60)
PF_DEFAULT_CURRENT_AGE: float = 30.0

RECOMMENDED_INVESTMENT_SHARE: float = 0.3
DEFAULT_BILL_CATEGORY: str = "Bills & Utilities"

ENV_PREFIX = "FINTRACK_"


class ConfigError(ValueError):
    """Raised when configuration values cannot be interpreted."""


@dataclass(frozen=True)
class InsightAssumptions:
    expected_return: float = 11.0
    inflation: float = 5.0
    # collected and displayed, but not used by any projection formula
    expense_growth: float = 6.0

    @property
    def real_return(self) -> float:
        """Inflation-adjusted annual return (percent)."""
        return self.expected_return - self.inflation

    def with_overrides(self, **changes: Any) -> "InsightAssumptions":
        return replace(self, **{k: to_number(v) for k, v in changes.items()})

    @classmethod
    def from_mapping(cls, values: Optional[Mapping[str, Any]]) -> "InsightAssumptions":
        """
        Build assumptions from a loose mapping (e.g. a JSON body or form state).

        Accepts camelCase (``expectedReturn``) or snake_case keys. Absent keys
        keep their defaults; present values are coerced with to_number().
        """
        if not values:
            return cls()
        aliases = {
            "expected_return": ("expected_return", "expectedReturn"),
            "inflation": ("inflation",),
            "expense_growth": ("expense_growth", "expenseGrowth"),
        }
        found = {}
        for field_name, keys in aliases.items():
            for key in keys:
                if key in values:
                    found[field_name] = to_number(values[key])
                    break
        return cls(**found)

    def to_dict(self) -> dict:
        return {
            "expectedReturn": self.expected_return,
            "inflation": self.inflation,
            "expenseGrowth": self.expense_growth,
        }


DEFAULT_ASSUMPTIONS = InsightAssumptions()


def _env_float(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = environ.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigError(f"{ENV_PREFIX + name} must be numeric, got {raw!r}") from exc


def load_assumptions_from_env(environ: Optional[Mapping[str, str]] = None) -> InsightAssumptions:
    """
    Read default assumptions from FINTRACK_EXPECTED_RETURN, FINTRACK_INFLATION
    and FINTRACK_EXPENSE_GROWTH. Unset variables keep the built-in defaults.
    """
    env = os.environ if environ is None else environ
    return InsightAssumptions(
        expected_return=_env_float(env, "EXPECTED_RETURN", DEFAULT_ASSUMPTIONS.expected_return),
        inflation=_env_float(env, "INFLATION", DEFAULT_ASSUMPTIONS.inflation),
        expense_growth=_env_float(env, "EXPENSE_GROWTH", DEFAULT_ASSUMPTIONS.expense_growth),
    )
