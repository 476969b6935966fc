"""
API module for the menu options engine.
"""

from api.routes import cart_router, catalog_router, selection_router

__all__ = ["cart_router", "catalog_router", "selection_router"]
