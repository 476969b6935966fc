"""
Base constraint class for option group selection rules.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from core.selection import Selection
from data.models.option_group import OptionGroup


@dataclass(frozen=True)
class SelectionViolation:
    """
    One broken selection-count rule for one option group.
    """

    group_id: str
    group_name: str
    constraint_type: str
    expected_value: Any
    actual_value: int
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class Constraint(ABC):
    """
    Base class for all selection constraints.

    A constraint looks at a single option group and the current selection
    and reports at most one violation for that group.
    """

    constraint_type = "base"

    def __init__(self, group: OptionGroup):
        """
        Initialize the constraint for a group.

        Args:
            group: The option group this constraint checks.
        """
        self.group = group

    @abstractmethod
    def applies(self) -> bool:
        """Whether the group's configuration activates this rule at all."""

    @abstractmethod
    def check_violations(self, selection: Selection) -> Optional[SelectionViolation]:
        """
        Check the selection against this constraint.

        Args:
            selection: The current selection.

        Returns:
            Optional[SelectionViolation]: The violation, or None when satisfied.
        """

    def _violation(self, expected_value: Any, actual_value: int, message: str) -> SelectionViolation:
        return SelectionViolation(
            group_id=self.group.id,
            group_name=self.group.name,
            constraint_type=self.constraint_type,
            expected_value=expected_value,
            actual_value=actual_value,
            message=message,
        )
