import pandas as pd
import pytest

from core.schema import Investment, Transaction
from data_prep.validators import ValidationResult, validate_records, validate_snapshot


def test_clean_records_pass():
    result = validate_records("transactions", [{"type": "expense", "amount": "10"}])
    assert result.is_valid
    assert result.warnings == []
    assert result.summary() == "✓ All checks passed."


def test_empty_input_passes():
    assert validate_records("bills", []).is_valid
    assert validate_records("bills", pd.DataFrame()).is_valid


def test_unknown_kind_raises():
    with pytest.raises(ValueError):
        validate_records("loans", [])


def test_missing_required_columns_is_an_error():
    result = validate_records("transactions", pd.DataFrame({"amount": ["1"]}))
    assert not result.is_valid
    assert "type" in result.errors[0]


def test_money_warnings():
    result = validate_records("transactions", [
        {"type": "expense", "amount": "abc"},
        {"type": "expense", "amount": None},
        {"type": "expense", "amount": "-5"},
    ])
    assert result.is_valid
    text = " ".join(result.warnings)
    assert "unparseable amount" in text
    assert "no amount" in text
    assert "negative amount" in text


def test_unknown_transaction_type_and_bill_status():
    tx = validate_records("transactions", [{"type": "transfer", "amount": "1"}])
    assert any("unknown type" in w for w in tx.warnings)
    bills = validate_records("bills", [{"amount": "1", "status": "late"}])
    assert any("unknown status" in w for w in bills.warnings)


def test_unbucketed_investments_warn():
    result = validate_records("investments", [
        {"type": "etf", "currentValue": "100"},
        {"type": "stock", "currentValue": "50"},
    ])
    assert len(result.warnings) == 1
    assert "100.00" in result.warnings[0]
    assert "neither" in result.warnings[0]


def test_unknown_investment_type_also_unbucketed():
    result = validate_records("investments", [{"type": "art", "currentValue": "10"}])
    assert len(result.warnings) == 2


def test_accepts_model_instances():
    result = validate_records("investments", [Investment(type="fd", current_value=10)])
    assert result.is_valid
    assert result.warnings == []
    assert validate_records("transactions", [Transaction(type="expense", amount=3)]).is_valid


def test_snapshot_prefixes_kind():
    result = validate_snapshot(
        transactions=[{"type": "expense", "amount": "1"}],
        bills=[{"amount": "1", "status": "late"}],
    )
    assert result.is_valid
    assert result.warnings[0].startswith("bills: ")


def test_summary_lists_errors_and_warnings():
    r = ValidationResult(errors=["bad"], warnings=["meh"])
    assert "ERRORS (1)" in r.summary()
    assert "✗ bad" in r.summary()
    assert "⚠ meh" in r.summary()


def test_untrimmed_transaction_type_is_flagged():
    result = validate_records("transactions", [{"type": "expense ", "amount": "1"}])
    assert any("unknown type" in w for w in result.warnings)
