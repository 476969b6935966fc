"""
API routes for product option catalogs.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_selection_session
from api.models.catalog import CatalogResponse
from core.pricing import resolve_base_price
from core.session import SelectionSession
from utils.logging import setup_logger

logger = setup_logger(__name__)

router = APIRouter(
    prefix="/products",
    tags=["catalog"],
    responses={404: {"description": "Product not found"}},
)


@router.get("/{product_id}/options", response_model=CatalogResponse)
async def get_product_options(
    product_id: str,
    session: SelectionSession = Depends(get_selection_session),
):
    """
    Return a product with its option groups and options in display order.
    """
    product = session.product
    logger.info(f"Serving {len(session.catalog)} option groups for product '{product_id}'")

    return {
        "success": True,
        "product_id": product.id,
        "name": product.name,
        "description": product.description,
        "price": product.price,
        "promotional_price": product.promotional_price,
        "base_price": resolve_base_price(product.price, product.promotional_price),
        "groups": [
            {**group.model_dump(), "exclusive": group.is_exclusive}
            for group in session.catalog
        ],
    }
