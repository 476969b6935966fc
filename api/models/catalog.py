"""
API models for product option catalogs and the cart.
"""

from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel

from api.models.selection import LineItemModel


class OptionModel(BaseModel):
    id: str
    name: str
    additional_price: Decimal
    available: bool
    display_order: int


class OptionGroupModel(BaseModel):
    id: str
    name: str
    min_selections: int
    max_selections: int
    required: bool
    display_order: int
    exclusive: bool
    options: List[OptionModel] = []


class CatalogResponse(BaseModel):
    """
    Model for a product with its option catalog.
    """

    success: bool
    product_id: str
    name: str
    description: str = ""
    price: Decimal
    promotional_price: Optional[Decimal] = None
    base_price: Decimal
    groups: List[OptionGroupModel] = []


class CartEntryModel(LineItemModel):
    id: str


class CartResponse(BaseModel):
    """
    Model for the cart contents.
    """

    success: bool
    entries: List[CartEntryModel] = []
    total: Decimal
    item_count: int
