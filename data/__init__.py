"""
Data module for the menu options engine.

Loaders live in ``data.loader``, ``data.local_loader`` and
``data.supabase_loader``; use ``data.factory.get_data_loader`` to pick one.
"""

from data.models import Option, OptionGroup, Product

__all__ = ["Option", "OptionGroup", "Product"]
