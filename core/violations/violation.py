"""
Violation detection for option selections.
"""

from typing import Any, Dict, List, Optional

from core.catalog import Catalog
from core.constraints.base import Constraint, SelectionViolation
from core.constraints.required import RequiredSelectionConstraint
from core.constraints.selection_range import (
    MaxSelectionsConstraint,
    MinSelectionsConstraint,
)
from core.selection import Selection
from utils.logging import setup_logger

logger = setup_logger(__name__)

# Checked in this order within each group
CONSTRAINT_CLASSES = (
    RequiredSelectionConstraint,
    MinSelectionsConstraint,
    MaxSelectionsConstraint,
)

CONSTRAINT_TYPES = [cls.constraint_type for cls in CONSTRAINT_CLASSES]


class ViolationDetector:
    """
    Checks a selection against every group rule of a catalog.

    Every rule of every group is evaluated, in catalog order, so the caller
    can show all problems at once instead of one per attempt.
    """

    def __init__(self, catalog: Catalog):
        """
        Initialize the violation detector.

        Args:
            catalog: Catalog of the product being configured.
        """
        self.catalog = catalog
        self.constraints = self._build_constraints()

    def _build_constraints(self) -> Dict[str, List[Constraint]]:
        """
        Build the active constraints for each group.

        Returns:
            Dict[str, List[Constraint]]: Group id to its constraints, in catalog order.
        """
        constraints: Dict[str, List[Constraint]] = {}
        for group in self.catalog:
            constraints[group.id] = [
                constraint
                for constraint in (cls(group) for cls in CONSTRAINT_CLASSES)
                if constraint.applies()
            ]

        logger.debug(
            f"Built {sum(len(c) for c in constraints.values())} constraints "
            f"for {len(constraints)} option groups"
        )
        return constraints

    def detect_violations(
        self,
        selection: Selection,
        constraint_types: Optional[List[str]] = None,
    ) -> List[SelectionViolation]:
        """
        Detect violations of the group rules.

        Args:
            selection: The selection to check.
            constraint_types: Optional list of constraint types to check. If None, checks all.

        Returns:
            List[SelectionViolation]: Violations in catalog order; empty when valid.
        """
        if constraint_types is not None:
            unknown = set(constraint_types) - set(CONSTRAINT_TYPES)
            for constraint_type in sorted(unknown):
                logger.warning(f"Unknown constraint type: {constraint_type}")

        violations: List[SelectionViolation] = []
        for group_constraints in self.constraints.values():
            for constraint in group_constraints:
                if constraint_types is not None and constraint.constraint_type not in constraint_types:
                    continue
                violation = constraint.check_violations(selection)
                if violation is not None:
                    violations.append(violation)

        if violations:
            logger.info(f"Detected {len(violations)} selection violations")
        return violations

    @staticmethod
    def get_violations_summary(violations: List[SelectionViolation]) -> Dict[str, Any]:
        """
        Generate a summary of violations.

        Args:
            violations: Violations returned by detect_violations.

        Returns:
            Dict[str, Any]: Summary of violations.
        """
        violation_types: Dict[str, int] = {}
        for violation in violations:
            violation_types[violation.constraint_type] = (
                violation_types.get(violation.constraint_type, 0) + 1
            )

        return {
            "total_violations": len(violations),
            "groups_with_violations": len({v.group_id for v in violations}),
            "violation_types": violation_types,
        }


def validate(catalog: Catalog, selection: Selection) -> List[str]:
    """
    Decide whether a selection may be committed.

    Args:
        catalog: Catalog of the product.
        selection: Current selection.

    Returns:
        List[str]: Human-readable violation messages; empty means valid.
    """
    return [v.message for v in ViolationDetector(catalog).detect_violations(selection)]
