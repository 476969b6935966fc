"""
Cart collaborator receiving committed line items.
"""

import itertools
import threading
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from core.selection import SelectedOption
from utils.logging import setup_logger

logger = setup_logger(__name__)


class LineItem(BaseModel):
    """
    A priced, configured product ready to be added to a cart.
    """

    product_id: str
    description: str
    unit_price: Decimal
    quantity: int = Field(..., ge=1)
    selection: List[SelectedOption] = Field(default_factory=list)
    observations: str = ""

    @property
    def total(self) -> Decimal:
        return self.unit_price * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        return {
            "product_id": self.product_id,
            "description": self.description,
            "unit_price": self.unit_price,
            "quantity": self.quantity,
            "total": self.total,
            "selection": [s._asdict() for s in self.selection],
            "observations": self.observations,
        }

    def merge_key(self) -> Tuple[Any, ...]:
        """Lines with the same key are the same dish and can be merged."""
        picks = tuple(sorted((s.group_id, s.option_id) for s in self.selection))
        return (self.product_id, self.observations.strip(), picks)


class CartEntry(BaseModel):
    """A line item stored in a cart under its own id."""

    id: str
    item: LineItem


class Cart(ABC):
    """
    Interface of the cart the engine hands committed line items to.
    """

    @abstractmethod
    def add_line_item(self, item: LineItem) -> str:
        """
        Add a line item.

        Args:
            item: The committed line item.

        Returns:
            str: Id of the cart entry holding the item.
        """
        pass


class InMemoryCart(Cart):
    """
    Process-local cart.

    Adding a line identical to an existing one (same product, observations
    and options) increases that entry's quantity instead of adding a row.
    """

    def __init__(self):
        self._entries: List[CartEntry] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def add_line_item(self, item: LineItem) -> str:
        with self._lock:
            key = item.merge_key()
            for index, entry in enumerate(self._entries):
                if entry.item.merge_key() == key:
                    merged = entry.item.model_copy(
                        update={"quantity": entry.item.quantity + item.quantity}
                    )
                    self._entries[index] = CartEntry(id=entry.id, item=merged)
                    logger.info(
                        f"Merged {item.quantity}x '{item.description}' into cart entry {entry.id}"
                    )
                    return entry.id

            entry_id = f"{item.product_id}-{next(self._ids)}"
            self._entries.append(CartEntry(id=entry_id, item=item))
            logger.info(f"Added {item.quantity}x '{item.description}' to cart as {entry_id}")
            return entry_id

    def get(self, entry_id: str) -> Optional[CartEntry]:
        with self._lock:
            for entry in self._entries:
                if entry.id == entry_id:
                    return entry
        return None

    def remove(self, entry_id: str) -> bool:
        with self._lock:
            before = len(self._entries)
            self._entries = [e for e in self._entries if e.id != entry_id]
            return len(self._entries) < before

    def update_quantity(self, entry_id: str, quantity: int) -> bool:
        """Set an entry's quantity; zero or less removes the entry."""
        if quantity <= 0:
            return self.remove(entry_id)

        with self._lock:
            for index, entry in enumerate(self._entries):
                if entry.id == entry_id:
                    self._entries[index] = CartEntry(
                        id=entry.id, item=entry.item.model_copy(update={"quantity": quantity})
                    )
                    return True
        return False

    def clear(self) -> None:
        with self._lock:
            self._entries = []

    @property
    def entries(self) -> List[CartEntry]:
        with self._lock:
            return list(self._entries)

    @property
    def total(self) -> Decimal:
        return sum((e.item.total for e in self.entries), Decimal("0"))

    @property
    def item_count(self) -> int:
        return sum(e.item.quantity for e in self.entries)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entries": [{"id": e.id, **e.item.to_dict()} for e in self.entries],
            "total": self.total,
            "item_count": self.item_count,
        }
