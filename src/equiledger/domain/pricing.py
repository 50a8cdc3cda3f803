"""Derived display pricing: original price, discount and installments."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

Number = Union[Decimal, int, float, str]

HUNDRED = Decimal("100")
SYNTHETIC_MARKUP = Decimal("1.35")
MAX_DISCOUNT_PERCENT = 99
DEFAULT_INTEREST_FREE_INSTALLMENTS = 3


def to_decimal(value: Number) -> Decimal:
    """Convert a number to Decimal without binary float artifacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_percent(value: Decimal) -> int:
    """Round a percentage to the nearest integer, halves away from zero."""
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def clamp_discount(discount_percent: Optional[Number]) -> Optional[int]:
    """Clamp a discount percentage into [0, 99]; None stays None."""
    if discount_percent is None:
        return None
    value = round_percent(to_decimal(discount_percent))
    return max(0, min(MAX_DISCOUNT_PERCENT, value))


def derive_price(
    current: Number,
    original: Optional[Number] = None,
    discount_percent: Optional[Number] = None,
) -> tuple[Decimal, int]:
    """Derive the "was" price and discount shown next to the current price.

    Priority:
        1. An original price above the current price: discount is computed from it.
        2. A positive discount percentage: original price is computed from it.
        3. Neither: a synthetic original of current * 1.35 is shown.

    Callers clamp discount_percent to [0, 99] beforehand (see clamp_discount).

    Returns:
        Tuple of (display_original, display_discount_percent)
    """
    current = to_decimal(current)

    if original is not None and to_decimal(original) > current:
        original = to_decimal(original)
        discount = round_percent(HUNDRED * (original - current) / original)
        return original, discount

    if discount_percent is not None and to_decimal(discount_percent) > 0:
        discount = to_decimal(discount_percent)
        display_original = current / (1 - discount / HUNDRED)
        return display_original, _as_int_if_whole(discount)

    display_original = current * SYNTHETIC_MARKUP
    if display_original == 0:
        return display_original, 0
    discount = round_percent(HUNDRED * (display_original - current) / display_original)
    return display_original, discount


def has_discount_signal(
    current: Number, original: Optional[Number] = None, discount_percent: Optional[Number] = None
) -> bool:
    """True when derive_price would use a real original price or discount."""
    if original is not None and to_decimal(original) > to_decimal(current):
        return True
    return discount_percent is not None and to_decimal(discount_percent) > 0


def installment_value(price: Number, interest_free_count: Optional[int]) -> Decimal:
    """Value of each interest-free installment; counts below 1 are treated as 1."""
    return to_decimal(price) / max(1, interest_free_count or 0)


def _as_int_if_whole(value: Decimal):
    # Discounts are stored as integer percentages; keep fractional input intact.
    if value == value.to_integral_value():
        return int(value)
    return value
