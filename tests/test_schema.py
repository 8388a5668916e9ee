import datetime as dt

import pytest
from pydantic import ValidationError

from core.schema import (
    Bill,
    Income,
    Investment,
    InvestmentType,
    RiskBucket,
    Transaction,
    coerce_records,
    model_for,
    parse_record_date,
    risk_bucket,
)


def test_transaction_normalizes_amount_and_type():
    t = Transaction.model_validate({"type": "Expense", "amount": "12.50", "date": "2024-03-05"})
    assert t.amount == 12.5
    assert t.is_expense
    assert not t.is_income
    assert t.date == dt.date(2024, 3, 5)


def test_transaction_bad_amount_is_zero():
    t = Transaction.model_validate({"type": "expense", "amount": "n/a"})
    assert t.amount == 0.0


def test_day_first_dates():
    assert parse_record_date("05-03-2024") == dt.date(2024, 3, 5)
    assert parse_record_date("not a date") is None
    assert parse_record_date(None) is None


def test_investment_camel_case_aliases():
    inv = Investment.model_validate(
        {"type": "PF", "currentValue": "1000", "pfCurrentCompany": "200", "pfCurrentAge": "35"}
    )
    assert inv.current_value == 1000.0
    assert inv.pf_current_company == 200.0
    assert inv.pf_current_age == 35.0
    assert inv.kind is InvestmentType.PF
    assert inv.risk_bucket is RiskBucket.STABLE


def test_investment_snake_case_names_also_work():
    inv = Investment(type="stock", current_value="50")
    assert inv.current_value == 50.0


def test_unknown_investment_type_is_kept():
    inv = Investment.model_validate({"type": "Art", "currentValue": "10"})
    assert inv.type == "art"
    assert inv.kind is None
    assert inv.risk_bucket is None


@pytest.mark.parametrize(
    "kind, bucket",
    [
        ("stock", RiskBucket.EQUITY_LIKE),
        ("mutual-fund", RiskBucket.EQUITY_LIKE),
        ("crypto", RiskBucket.EQUITY_LIKE),
        ("fd", RiskBucket.STABLE),
        ("gold", RiskBucket.STABLE),
        ("pf", RiskBucket.STABLE),
        ("other", RiskBucket.STABLE),
        ("etf", None),
        ("bond", None),
        ("real-estate", None),
        (InvestmentType.STOCK, RiskBucket.EQUITY_LIKE),
    ],
)
def test_risk_bucket(kind, bucket):
    assert risk_bucket(kind) is bucket


def test_bill_paid_status_case_insensitive():
    assert Bill.model_validate({"amount": "1", "status": "PAID"}).is_paid
    assert not Bill.model_validate({"amount": "1", "status": "overdue"}).is_paid
    assert not Bill.model_validate({"amount": "1"}).is_paid


def test_income_defaults_active():
    assert Income.model_validate({"amount": "10", "isActive": None}).is_active
    assert not Income.model_validate({"amount": "10", "isActive": False}).is_active


def test_records_are_immutable():
    t = Transaction(type="expense", amount=1)
    with pytest.raises(ValidationError):
        t.amount = 2


def test_coerce_records_passes_instances_through():
    existing = Income(amount=5)
    out = coerce_records(Income, [existing, {"amount": "7"}])
    assert out[0] is existing
    assert out[1].amount == 7.0
    assert coerce_records(Income, None) == []


def test_model_for_unknown_kind():
    assert model_for("bills") is Bill
    with pytest.raises(ValueError, match="Unknown record kind"):
        model_for("loans")


def test_descriptive_fields_never_reject_odd_values():
    bill = Bill.model_validate(
        {"amount": "300", "status": "pending", "isRecurring": "monthly", "name": ["Rent"]}
    )
    assert bill.amount == 300.0
    assert bill.is_recurring is False
    assert bill.name is None

    t = Transaction.model_validate(
        {"type": "expense", "amount": "5", "description": {"memo": "x"}, "category": 42}
    )
    assert t.description is None
    assert t.category == "42"

    inv = Investment.model_validate({"type": "stock", "currentValue": "1", "symbol": {"x": 1}})
    assert inv.symbol is None


@pytest.mark.parametrize(
    "raw, expected",
    [("yes", True), ("FALSE", False), (0, False), (1, True), ("sometimes", True), ({}, True)],
)
def test_income_active_flag_is_lenient(raw, expected):
    assert Income.model_validate({"amount": "1", "isActive": raw}).is_active is expected


def test_categorical_values_are_lowercased_not_trimmed():
    assert Transaction.model_validate({"type": "EXPENSE", "amount": "1"}).is_expense
    assert not Transaction.model_validate({"type": " expense", "amount": "1"}).is_expense
    assert not Bill.model_validate({"amount": "1", "status": "paid "}).is_paid
    assert risk_bucket(" stock") is None
