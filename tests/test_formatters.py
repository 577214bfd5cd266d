from utils.formatters import (
    format_currency,
    format_range,
    format_hours,
    format_amount_input,
    format_hours_input,
    to_japanese_reading,
)


def test_japanese_reading():
    """Numbers are grouped by 10,000 with 万/億/兆 units"""
    assert to_japanese_reading(300000) == "30万"
    assert to_japanese_reading(12345678) == "1234万5678"
    assert to_japanese_reading(100000001) == "1億1"
    assert to_japanese_reading(2000000000000) == "2兆"
    assert to_japanese_reading(999) == "999"
    assert to_japanese_reading(-50000) == "5万"
    assert to_japanese_reading(0) == ""


def test_japanese_reading_drops_groups_beyond_cho():
    assert to_japanese_reading(10 ** 16 + 5) == "5"


def test_format_currency():
    assert format_currency(360000) == "￥360,000"
    assert format_currency(1894.7368) == "￥1,895"
    assert format_currency(2.5) == "￥3"
    assert format_currency(1234.5, decimals=1) == "￥1,234.5"
    assert format_currency(-1000) == "-￥1,000"


def test_format_range():
    assert format_range(360000, 620000) == "￥360,000 〜 ￥620,000"


def test_format_hours():
    assert format_hours(190) == "190.0"
    assert format_hours(180.0) == "180.0"


def test_input_display_values():
    assert format_amount_input(300000) == "300,000"
    assert format_amount_input(0) == ""
    assert format_hours_input(20) == "20"
    assert format_hours_input(0) == ""


def test_format_currency_beyond_default_precision():
    """Amounts wider than 28 digits still format exactly"""
    assert format_currency(10 ** 27) == f"￥1{',000' * 9}"
    assert format_currency(10 ** 28) == f"￥10{',000' * 9}"
    assert format_currency(-(10 ** 40) - 1) == f"-￥10{',000' * 12},001"
    assert format_currency(1e300).startswith("￥1,000,")
    assert format_currency(12345.675, decimals=2) == "￥12,345.68"
