"""
API routes for the in-memory cart.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_cart
from api.models.catalog import CartResponse
from core.checkout import InMemoryCart
from utils.logging import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/cart", tags=["cart"])


@router.get("", response_model=CartResponse)
async def get_cart_contents(cart: InMemoryCart = Depends(get_cart)):
    """
    Return the cart entries and totals.
    """
    return {"success": True, **cart.to_dict()}


@router.delete("", response_model=CartResponse)
async def clear_cart(cart: InMemoryCart = Depends(get_cart)):
    """
    Remove every entry from the cart.
    """
    cart.clear()
    logger.info("Cart cleared")
    return {"success": True, **cart.to_dict()}
