from __future__ import annotations

from typing import Any, Dict, List, Optional

import pandas as pd
import pytest

from core.catalog import Catalog
from core.errors import DataUnavailableError
from data.loader import DataLoader
from data.models import Option, OptionGroup, Product


def make_group(
    group_id: str,
    name: str,
    options: List[tuple],
    min_selections: int = 0,
    max_selections: int = 0,
    required: bool = False,
    display_order: int = 0,
) -> OptionGroup:
    return OptionGroup(
        id=group_id,
        name=name,
        min_selections=min_selections,
        max_selections=max_selections,
        required=required,
        display_order=display_order,
        options=[
            Option(
                id=opt[0],
                name=opt[1],
                additional_price=opt[2],
                available=opt[3] if len(opt) > 3 else True,
                display_order=i,
            )
            for i, opt in enumerate(options)
        ],
    )


@pytest.fixture
def pizza_catalog() -> Catalog:
    size = make_group(
        "size",
        "Size",
        [("p", "P", "0"), ("m", "M", "3.00"), ("g", "G", "6.00")],
        min_selections=1,
        max_selections=1,
        required=True,
        display_order=1,
    )
    toppings = make_group(
        "toppings",
        "Toppings",
        [("bacon", "Bacon", "2.00"), ("cheese", "Cheese", "1.50"), ("egg", "Egg", "2.00")],
        max_selections=2,
        display_order=2,
    )
    return Catalog([size, toppings], product_id="pizza")


@pytest.fixture
def pizza_product() -> Product:
    return Product(id="pizza", name="Pizza", description="Thin crust", price="10.00")


PRODUCT_ROWS: List[Dict[str, Any]] = [
    {"id": "pizza", "name": "Pizza", "description": "Thin crust", "price": 10.0, "promotional_price": None},
    {"id": "burger", "name": "Burger", "description": "", "price": 20.0, "promotional_price": 18.5},
]

GROUP_ROWS: List[Dict[str, Any]] = [
    {"id": "toppings", "product_id": "pizza", "name": "Toppings", "min_selections": 0, "max_selections": 2, "required": False, "display_order": 2},
    {"id": "size", "product_id": "pizza", "name": "Size", "min_selections": 1, "max_selections": 1, "required": True, "display_order": 1},
    {"id": "extras", "product_id": "burger", "name": "Extras", "min_selections": 0, "max_selections": 0, "required": False, "display_order": 1},
]

OPTION_ROWS: List[Dict[str, Any]] = [
    {"id": "p", "option_group_id": "size", "name": "P", "additional_price": 0.0, "available": True, "display_order": 1},
    {"id": "m", "option_group_id": "size", "name": "M", "additional_price": 3.0, "available": True, "display_order": 2},
    {"id": "g", "option_group_id": "size", "name": "G", "additional_price": 6.0, "available": True, "display_order": 3},
    {"id": "bacon", "option_group_id": "toppings", "name": "Bacon", "additional_price": 2.0, "available": True, "display_order": 1},
    {"id": "cheese", "option_group_id": "toppings", "name": "Cheese", "additional_price": 1.5, "available": True, "display_order": 2},
    {"id": "egg", "option_group_id": "toppings", "name": "Egg", "additional_price": 2.0, "available": False, "display_order": 3},
    {"id": "fries", "option_group_id": "extras", "name": "Fries", "additional_price": 4.0, "available": True, "display_order": 1},
]


class StubLoader(DataLoader):
    """In-memory loader serving fixed rows."""

    def __init__(
        self,
        products: Optional[List[Dict[str, Any]]] = None,
        groups: Optional[List[Dict[str, Any]]] = None,
        options: Optional[List[Dict[str, Any]]] = None,
        fail: bool = False,
    ):
        self.products = PRODUCT_ROWS if products is None else products
        self.groups = GROUP_ROWS if groups is None else groups
        self.options = OPTION_ROWS if options is None else options
        self.fail = fail

    def get_products(self, product_ids=None) -> pd.DataFrame:
        if self.fail:
            raise DataUnavailableError("store offline")
        rows = [p for p in self.products if not product_ids or p["id"] in product_ids]
        return pd.DataFrame(rows)

    def get_option_groups(self, product_id) -> pd.DataFrame:
        if self.fail:
            raise DataUnavailableError("store offline")
        return pd.DataFrame([g for g in self.groups if g["product_id"] == product_id])

    def get_options(self, group_ids) -> pd.DataFrame:
        return pd.DataFrame([o for o in self.options if o["option_group_id"] in group_ids])


@pytest.fixture
def stub_loader() -> StubLoader:
    return StubLoader()
