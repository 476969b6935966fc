"""
Data models for the menu options engine.
"""

from data.models.product import Product
from data.models.option_group import Option, OptionGroup

__all__ = ["Product", "Option", "OptionGroup"]
