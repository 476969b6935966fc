"""
Selection constraints for option groups.
"""

from core.constraints.base import Constraint, SelectionViolation
from core.constraints.required import RequiredSelectionConstraint
from core.constraints.selection_range import (
    MaxSelectionsConstraint,
    MinSelectionsConstraint,
)

__all__ = [
    "Constraint",
    "SelectionViolation",
    "RequiredSelectionConstraint",
    "MinSelectionsConstraint",
    "MaxSelectionsConstraint",
]
