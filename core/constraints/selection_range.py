"""
Minimum and maximum selection count constraints.
"""

from typing import Optional

from core.constraints.base import Constraint, SelectionViolation
from core.selection import Selection
from utils.logging import setup_logger

logger = setup_logger(__name__)


class MinSelectionsConstraint(Constraint):
    """
    Constraint ensuring a group has at least ``min_selections`` picks.
    """

    constraint_type = "min_selections"

    def applies(self) -> bool:
        return self.group.min_selections > 0

    def check_violations(self, selection: Selection) -> Optional[SelectionViolation]:
        count = selection.count_for_group(self.group.id)
        if count >= self.group.min_selections:
            return None
        return self._violation(
            expected_value=self.group.min_selections,
            actual_value=count,
            message=(
                f"'{self.group.name}' requires at least "
                f"{self.group.min_selections} selection(s)"
            ),
        )


class MaxSelectionsConstraint(Constraint):
    """
    Constraint ensuring a group has no more than ``max_selections`` picks.

    The selection functions already refuse picks past the cap, but a
    selection rebuilt from stored data (or a catalog edited meanwhile) can
    still exceed it, so the commit gate checks again.
    """

    constraint_type = "max_selections"

    def applies(self) -> bool:
        return self.group.max_selections > 0

    def check_violations(self, selection: Selection) -> Optional[SelectionViolation]:
        count = selection.count_for_group(self.group.id)
        if count <= self.group.max_selections:
            return None
        logger.warning(
            f"Group '{self.group.id}' has {count} selections, cap is {self.group.max_selections}"
        )
        return self._violation(
            expected_value=self.group.max_selections,
            actual_value=count,
            message=(
                f"'{self.group.name}' allows at most "
                f"{self.group.max_selections} selection(s)"
            ),
        )
