"""
Commit protocol: turn a configured product into a cart line item.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional

from core.catalog import Catalog
from core.checkout.cart import Cart, LineItem
from core.pricing import (
    build_line_item_description,
    compute_total_price,
    compute_unit_price,
    resolve_base_price,
)
from core.selection import Selection, resolve_selection
from core.violations import SelectionViolation, ViolationDetector
from data.models.product import Product
from utils.logging import setup_logger

logger = setup_logger(__name__)


@dataclass
class CommitResult:
    """
    Outcome of a commit attempt.

    Exactly one of ``line_item`` and ``violations`` is meaningful: a refused
    commit carries the violations and no price.
    """

    success: bool
    line_item: Optional[LineItem] = None
    total_price: Optional[Decimal] = None
    cart_entry_id: Optional[str] = None
    violations: List[SelectionViolation] = field(default_factory=list)

    @property
    def messages(self) -> List[str]:
        return [v.message for v in self.violations]

    @property
    def error(self) -> Optional[str]:
        """All violation messages joined for display, or None on success."""
        return "; ".join(self.messages) if self.violations else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "line_item": self.line_item.to_dict() if self.line_item else None,
            "total_price": self.total_price,
            "cart_entry_id": self.cart_entry_id,
            "violations": [v.to_dict() for v in self.violations],
            "error": self.error,
        }


def commit_line_item(
    catalog: Catalog,
    selection: Selection,
    product: Product,
    quantity: int = 1,
    cart: Optional[Cart] = None,
    observations: str = "",
) -> CommitResult:
    """
    Validate a selection and, only when it is valid, price it and emit it.

    Args:
        catalog: Catalog of the product.
        selection: The customer's selection.
        product: The product being configured (list and promotional price).
        quantity: Number of units.
        cart: Cart receiving the line item. When None the priced line item
            is only returned.
        observations: Free-text notes from the customer ("no onions").

    Returns:
        CommitResult: Refused with violations, or successful with the line item.

    Raises:
        NotFoundError: If a picked option is not part of the catalog.
        OptionUnavailableError: If a picked option is marked unavailable.
    """
    selection = resolve_selection(catalog, selection)
    violations = ViolationDetector(catalog).detect_violations(selection)
    if violations:
        logger.info(
            f"Commit refused for product '{product.id}': {len(violations)} violation(s)"
        )
        return CommitResult(success=False, violations=violations)

    base_unit_price = resolve_base_price(product.price, product.promotional_price)
    total_price = compute_total_price(base_unit_price, selection, quantity)

    line_item = LineItem(
        product_id=product.id,
        description=build_line_item_description(product.name, selection),
        unit_price=compute_unit_price(base_unit_price, selection),
        quantity=quantity,
        selection=list(selection),
        observations=observations or "",
    )

    cart_entry_id = cart.add_line_item(line_item) if cart is not None else None
    logger.info(
        f"Committed {quantity}x '{line_item.description}' for {total_price}"
    )
    return CommitResult(
        success=True,
        line_item=line_item,
        total_price=total_price,
        cart_entry_id=cart_entry_id,
    )
