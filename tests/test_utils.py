from decimal import Decimal

import pandas as pd
import pytest

from core.utils import require_columns, sum_amounts, to_number


@pytest.mark.parametrize("value", [None, "", "abc", "   ", "-", ".", "nan", "Infinity", True, False])
def test_to_number_unparseable_is_zero(value):
    assert to_number(value) == 0.0


@pytest.mark.parametrize(
    "value, expected",
    [
        ("12.5", 12.5),
        ("-3", -3.0),
        ("0", 0.0),
        ("  42 ", 42.0),
        ("7kg", 7.0),
        (".5", 0.5),
        ("1e3", 1000.0),
        (15, 15.0),
        (2.25, 2.25),
        (Decimal("10.10"), 10.1),
    ],
)
def test_to_number_parses_leading_decimal(value, expected):
    assert to_number(value) == pytest.approx(expected)


def test_to_number_non_finite_numbers_are_zero():
    assert to_number(float("nan")) == 0.0
    assert to_number(float("inf")) == 0.0


def test_to_number_out_of_range_values_are_zero():
    assert to_number(10 ** 400) == 0.0
    assert to_number(-(10 ** 400)) == 0.0
    assert to_number(Decimal("sNaN")) == 0.0
    assert to_number("1e400") == 0.0


def test_sum_amounts_skips_garbage():
    assert sum_amounts(["10", None, "x", 5]) == pytest.approx(15.0)


def test_require_columns_lists_missing():
    df = pd.DataFrame({"amount": [1]})
    require_columns(df, ["amount"])
    with pytest.raises(ValueError, match="status"):
        require_columns(df, ["amount", "status"])
