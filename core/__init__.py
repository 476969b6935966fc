"""
Core module for the menu options engine.

This module contains the option catalog, the selection state machine,
violation detection and price composition.
"""

from core.catalog import Catalog
from core.selection import Selection
from core.violations import ViolationDetector, validate

__all__ = ["Catalog", "Selection", "ViolationDetector", "validate"]
