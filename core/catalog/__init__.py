"""
Option catalog for a single product.
"""

from core.catalog.catalog import Catalog

__all__ = ["Catalog"]
