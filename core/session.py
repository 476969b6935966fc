"""
One "configure this product" interaction.
"""

from typing import Iterable, List, Optional, Tuple

from core.catalog import Catalog
from core.checkout import Cart, CommitResult, commit_line_item
from core.selection import (
    CAP_POLICY_IGNORE,
    EMPTY_SELECTION,
    Selection,
    deselect,
    select,
    toggle,
)
from core.violations import SelectionViolation, ViolationDetector
from data.models.product import Product

ACTION_SELECT = "select"
ACTION_DESELECT = "deselect"
ACTION_TOGGLE = "toggle"
ACTION_CLEAR = "clear"
ACTIONS = (ACTION_SELECT, ACTION_DESELECT, ACTION_TOGGLE, ACTION_CLEAR)


class SelectionSession:
    """
    Holds the catalog and current selection for one product being configured.

    The session owns nothing shared: a new one is created whenever a
    configuration view opens and discarded on commit or cancel.
    """

    def __init__(
        self,
        product: Product,
        catalog: Catalog,
        cap_policy: str = CAP_POLICY_IGNORE,
    ):
        self.product = product
        self.catalog = catalog
        self.cap_policy = cap_policy
        self.selection: Selection = EMPTY_SELECTION
        self._detector = ViolationDetector(catalog)

    def select(self, group_id: str, option_id: str) -> Selection:
        self.selection = select(
            self.catalog, self.selection, group_id, option_id, self.cap_policy
        )
        return self.selection

    def deselect(self, group_id: str, option_id: str) -> Selection:
        self.selection = deselect(self.selection, group_id, option_id)
        return self.selection

    def toggle(self, group_id: str, option_id: str) -> Selection:
        self.selection = toggle(
            self.catalog, self.selection, group_id, option_id, self.cap_policy
        )
        return self.selection

    def clear(self) -> Selection:
        self.selection = EMPTY_SELECTION
        return self.selection

    def apply(self, action: str, group_id: Optional[str] = None, option_id: Optional[str] = None) -> Selection:
        """
        Apply one named action.

        Raises:
            ValueError: For an unknown action or missing ids.
        """
        if action == ACTION_CLEAR:
            return self.clear()
        if action not in ACTIONS:
            raise ValueError(f"Action must be one of: {', '.join(ACTIONS)}")
        if not group_id or not option_id:
            raise ValueError(f"Action '{action}' needs both group_id and option_id")
        return getattr(self, action)(group_id, option_id)

    def apply_all(self, actions: Iterable[Tuple[str, Optional[str], Optional[str]]]) -> Selection:
        for action, group_id, option_id in actions:
            self.apply(action, group_id, option_id)
        return self.selection

    def violations(self) -> List[SelectionViolation]:
        return self._detector.detect_violations(self.selection)

    def is_valid(self) -> bool:
        return not self.violations()

    def commit(
        self,
        quantity: int = 1,
        cart: Optional[Cart] = None,
        observations: str = "",
    ) -> CommitResult:
        """Validate, price and emit the current selection."""
        return commit_line_item(
            self.catalog,
            self.selection,
            self.product,
            quantity=quantity,
            cart=cart,
            observations=observations,
        )
