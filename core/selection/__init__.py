"""
Selection state machine for configurable products.
"""

from core.selection.selection import (
    CAP_POLICY_IGNORE,
    CAP_POLICY_REJECT,
    EMPTY_SELECTION,
    SelectedOption,
    Selection,
    clear,
    deselect,
    resolve_selection,
    select,
    toggle,
)

__all__ = [
    "CAP_POLICY_IGNORE",
    "CAP_POLICY_REJECT",
    "EMPTY_SELECTION",
    "SelectedOption",
    "Selection",
    "clear",
    "deselect",
    "resolve_selection",
    "select",
    "toggle",
]
