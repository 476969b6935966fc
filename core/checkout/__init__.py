"""
Commit of configured products into the cart.
"""

from core.checkout.cart import Cart, CartEntry, InMemoryCart, LineItem
from core.checkout.commit import CommitResult, commit_line_item

__all__ = [
    "Cart",
    "CartEntry",
    "InMemoryCart",
    "LineItem",
    "CommitResult",
    "commit_line_item",
]
