"""Pytest configuration: make the top-level packages importable from a source checkout."""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def sample_snapshot():
    """The worked example: one salary, one expense, one pending bill, one fund."""
    return {
        "incomes": [{"amount": "5000"}],
        "transactions": [{"type": "expense", "amount": "2000", "category": "Food"}],
        "bills": [{"name": "Rent", "amount": "300", "status": "pending"}],
        "investments": [{"type": "mutual-fund", "currentValue": "10000"}],
    }
