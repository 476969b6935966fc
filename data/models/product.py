"""
Product data model for the menu options engine.
"""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator

from data.models.option_group import parse_amount, parse_identifier, _is_blank


class Product(BaseModel):
    """
    Model for a product sold in the delivery storefront.
    """

    id: str
    name: str
    description: str = ""
    price: Decimal
    promotional_price: Optional[Decimal] = None
    available: bool = True

    @field_validator("id", mode="before")
    @classmethod
    def validate_identifier(cls, v):
        """Coerce ids to strings."""
        return parse_identifier(v)

    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, v):
        """List prices are non-negative amounts."""
        amount = parse_amount(v)
        if amount < 0:
            raise ValueError("price must not be negative")
        return amount

    @field_validator("promotional_price", mode="before")
    @classmethod
    def validate_promotional_price(cls, v):
        """A blank or zero promotional price means no promotion."""
        if _is_blank(v):
            return None
        amount = parse_amount(v)
        if amount <= 0:
            return None
        return amount

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, v):
        return "" if _is_blank(v) else v

    @field_validator("available", mode="before")
    @classmethod
    def validate_available(cls, v):
        return True if _is_blank(v) else v

    model_config = ConfigDict(extra="ignore")
