"""
Utility helpers for the menu options engine.
"""

from utils.logging import setup_logger

__all__ = ["setup_logger"]
