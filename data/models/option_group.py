"""
Option group data models for the menu options engine.
"""

import math
from decimal import Decimal, InvalidOperation
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


def _is_blank(v) -> bool:
    """True for None, empty strings and NaN cells coming from pandas."""
    if v is None:
        return True
    if isinstance(v, str) and not v.strip():
        return True
    return isinstance(v, float) and math.isnan(v)


def parse_identifier(v):
    """Ids may arrive as ints from CSV files or UUIDs from Supabase."""
    if _is_blank(v):
        return None
    if isinstance(v, float) and v.is_integer():
        v = int(v)
    return str(v)


def parse_amount(v) -> Decimal:
    """Parse a money amount into a Decimal, treating blanks as zero."""
    if _is_blank(v):
        return Decimal("0")
    if isinstance(v, Decimal):
        return v
    try:
        # str() first so 1.1 does not become 1.100000000000000088817841970012523
        return Decimal(str(v).strip().replace(",", "."))
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {v!r}")


def parse_count(v) -> int:
    if _is_blank(v):
        return 0
    return int(float(v))


class Option(BaseModel):
    """
    A single choice inside an option group, e.g. "Bacon (+2.00)".
    """

    id: str
    name: str
    additional_price: Decimal = Decimal("0")
    available: bool = True
    display_order: int = 0
    option_group_id: Optional[str] = None

    @field_validator("id", "option_group_id", mode="before")
    @classmethod
    def validate_identifier(cls, v):
        """Coerce ids to strings."""
        return parse_identifier(v)

    @field_validator("additional_price", mode="before")
    @classmethod
    def validate_additional_price(cls, v):
        """Additional prices are non-negative amounts."""
        amount = parse_amount(v)
        if amount < 0:
            raise ValueError("additional_price must not be negative")
        return amount

    @field_validator("display_order", mode="before")
    @classmethod
    def validate_display_order(cls, v):
        return parse_count(v)

    @field_validator("available", mode="before")
    @classmethod
    def validate_available(cls, v):
        return True if _is_blank(v) else v

    # Data store rows carry timestamps and other columns
    model_config = ConfigDict(extra="ignore", frozen=True)


class OptionGroup(BaseModel):
    """
    A named set of options attached to a product, e.g. "Size" or "Toppings".

    ``max_selections`` drives the selection mode: 1 means exclusive choice
    (radio button), a larger value caps a multi-select group and 0 leaves
    the group uncapped.
    """

    id: str
    name: str
    min_selections: int = 0
    max_selections: int = 0
    required: bool = False
    display_order: int = 0
    product_id: Optional[str] = None
    options: List[Option] = Field(default_factory=list)

    @field_validator("id", "product_id", mode="before")
    @classmethod
    def validate_identifier(cls, v):
        """Coerce ids to strings."""
        return parse_identifier(v)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        """Group names are shown to customers and must not be empty."""
        if not v or not v.strip():
            raise ValueError("Option group name must not be empty")
        return v

    @field_validator("min_selections", "max_selections", mode="before")
    @classmethod
    def validate_selection_count(cls, v):
        """Selection counts are non-negative integers; blanks mean 0."""
        count = parse_count(v)
        if count < 0:
            raise ValueError("Selection counts must not be negative")
        return count

    @field_validator("display_order", mode="before")
    @classmethod
    def validate_display_order(cls, v):
        return parse_count(v)

    @field_validator("required", mode="before")
    @classmethod
    def validate_required(cls, v):
        return False if _is_blank(v) else v

    @property
    def is_exclusive(self) -> bool:
        """True when choosing an option replaces the previous one."""
        return self.max_selections == 1

    model_config = ConfigDict(extra="ignore", frozen=True)
