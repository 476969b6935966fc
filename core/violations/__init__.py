"""
Selection violation detection.
"""

from core.constraints.base import SelectionViolation
from core.violations.violation import CONSTRAINT_TYPES, ViolationDetector, validate

__all__ = ["CONSTRAINT_TYPES", "SelectionViolation", "ViolationDetector", "validate"]
