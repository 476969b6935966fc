"""
Required group constraint implementation.
"""

from typing import Optional

from core.constraints.base import Constraint, SelectionViolation
from core.selection import Selection


class RequiredSelectionConstraint(Constraint):
    """
    A group flagged as required needs at least one selection, whatever its
    min_selections says.
    """

    constraint_type = "required"

    def applies(self) -> bool:
        return self.group.required

    def check_violations(self, selection: Selection) -> Optional[SelectionViolation]:
        count = selection.count_for_group(self.group.id)
        if count > 0:
            return None
        return self._violation(
            expected_value=1,
            actual_value=count,
            message=f"Select at least one option from '{self.group.name}'",
        )
