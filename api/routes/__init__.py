"""
API routes for the menu options engine.
"""

from api.routes.cart import router as cart_router
from api.routes.catalog import router as catalog_router
from api.routes.selection import router as selection_router

__all__ = ["cart_router", "catalog_router", "selection_router"]
