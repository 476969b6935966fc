"""
Price composition for configured products.

Prices are Decimals rounded to cents. Only call these on a selection that
passed ``core.violations.validate``; ``core.checkout.commit_line_item``
enforces that order.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from core.selection import Selection

CENTS = Decimal("0.01")

Amount = Union[Decimal, int, float, str]


def to_decimal(value: Amount) -> Decimal:
    """Convert an amount to Decimal without float representation noise."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize(amount: Decimal) -> Decimal:
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def resolve_base_price(price: Amount, promotional_price: Optional[Amount] = None) -> Decimal:
    """
    Pick the unit price a product is sold for before options.

    The promotional price wins when it is set, positive and lower than the
    list price.
    """
    list_price = to_decimal(price)
    if promotional_price is None:
        return quantize(list_price)

    promo = to_decimal(promotional_price)
    if Decimal("0") < promo < list_price:
        return quantize(promo)
    return quantize(list_price)


def compute_unit_price(base_unit_price: Amount, selection: Selection) -> Decimal:
    """Base unit price plus the additional price of every selected option."""
    return quantize(to_decimal(base_unit_price) + selection.options_total())


def compute_total_price(base_unit_price: Amount, selection: Selection, quantity: int) -> Decimal:
    """
    Total for a line: ``quantity * (base_unit_price + sum of option deltas)``.

    Raises:
        ValueError: If quantity is not a positive integer.
    """
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise ValueError(f"quantity must be a positive integer, got {quantity!r}")
    return quantize(compute_unit_price(base_unit_price, selection) * quantity)


def build_line_item_description(base_description: str, selection: Selection) -> str:
    """
    Append the selected option names, in the order they were picked.

    "Pizza" with Bacon and Cheese becomes "Pizza (Bacon, Cheese)".
    """
    names = selection.names()
    if not names:
        return base_description
    return f"{base_description} ({', '.join(names)})"
