"""Display formatting for money and percentages."""

from decimal import Decimal, ROUND_HALF_UP


def format_decimal_br(value: Decimal) -> str:
    """Two decimals with a comma separator, e.g. 1234.5 -> "1234,50"."""
    quantized = Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{quantized:.2f}".replace(".", ",")


def format_brl(value: Decimal) -> str:
    """Format as Brazilian reais, e.g. "R$ 1234,50"."""
    return f"R$ {format_decimal_br(value)}"


def format_percent(value) -> str:
    """Format a percentage with up to one decimal, e.g. "12.5%"."""
    if isinstance(value, int):
        return f"{value}%"
    quantized = Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    if quantized == quantized.to_integral_value():
        return f"{int(quantized)}%"
    return f"{quantized}%"
