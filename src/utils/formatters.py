from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Union
from config.settings import CURRENCY_SYMBOL, RANGE_SEPARATOR

Number = Union[int, float, Decimal]

JAPANESE_UNITS = ["", "万", "億", "兆"]


def format_currency(amount: Number, decimals: int = 0, symbol: str = CURRENCY_SYMBOL) -> str:
    """Format currency amount in ja-JP yen style, e.g. ￥360,000"""
    quantum = Decimal(1).scaleb(-decimals)
    value = Decimal(amount) if isinstance(amount, (int, Decimal)) else Decimal(str(amount))
    with localcontext() as ctx:
        # enough digits for the integer part plus the requested decimals
        ctx.prec = max(ctx.prec, value.adjusted() + decimals + 2)
        value = value.quantize(quantum, rounding=ROUND_HALF_UP)
        sign = "-" if value < 0 else ""
        return f"{sign}{symbol}{abs(value):,.{decimals}f}"


def format_range(minimum: Number, maximum: Number, decimals: int = 0) -> str:
    """Format a min/max pair of amounts"""
    return f"{format_currency(minimum, decimals)}{RANGE_SEPARATOR}{format_currency(maximum, decimals)}"


def format_hours(hours: Number) -> str:
    """Format working hours with one decimal"""
    return f"{Decimal(str(hours)).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)}"


def format_amount_input(value: int) -> str:
    """Display value of an amount field; 0 shows as empty"""
    return f"{value:,}" if value else ""


def format_hours_input(value: int) -> str:
    """Display value of an hours field; 0 shows as empty"""
    return str(value) if value else ""


def to_japanese_reading(num: Number) -> str:
    """Read a number in groups of 10,000, e.g. 12345678 -> 1234万5678

    Groups of zero are skipped and anything beyond 兆 is dropped.
    """
    if not num:
        return ""
    n = abs(int(num))
    parts = []
    for unit in JAPANESE_UNITS:
        if n <= 0:
            break
        part = n % 10000
        if part > 0:
            parts.insert(0, f"{part}{unit}")
        n //= 10000
    return "".join(parts)
