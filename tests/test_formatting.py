from __future__ import annotations

from utils.formatting import PLACEHOLDER, format_currency, format_number, format_percent


def test_currency_uses_spanish_grouping():
    assert format_currency(1_500_000) == "1.500.000 €"
    assert format_currency(999.6) == "1.000 €"
    assert format_currency(-1500.0) == "-1.500 €"


def test_number_and_percent():
    assert format_number(1234.5) == "1.234,5"
    assert format_number(1.25) == "1,25"
    assert format_number(-0.001) == "0"
    assert format_percent(0.1234) == "12,34 %"
    assert format_percent(0.5) == "50 %"


def test_absent_renders_placeholder():
    assert format_currency(None) == PLACEHOLDER
    assert format_percent(None) == PLACEHOLDER
    assert format_number(float("nan")) == PLACEHOLDER
