import warnings
from decimal import Decimal

import pytest
from pydantic import PydanticDeprecatedSince20, ValidationError

from api.models.selection import SelectionAction
from core.catalog import Catalog
from core.checkout import InMemoryCart, LineItem
from data.models import Option, OptionGroup, Product
from tests.conftest import make_group


@pytest.fixture
def no_deprecated_pydantic():
    with warnings.catch_warnings():
        warnings.simplefilter("error", PydanticDeprecatedSince20)
        yield


def test_models_coerce_store_rows():
    option = Option(id=7.0, name="Bacon", additional_price=" 2,50 ", available=None, display_order="3")
    assert option.id == "7"
    assert option.additional_price == Decimal("2.50")
    assert option.available is True
    assert option.display_order == 3

    product = Product(id="p", name="Pizza", price=10, promotional_price=0, description=None)
    assert product.promotional_price is None
    assert product.description == ""


def test_models_reject_negative_values():
    with pytest.raises(ValidationError):
        Option(id="x", name="X", additional_price=-1)
    with pytest.raises(ValidationError):
        OptionGroup(id="g", name="G", max_selections=-1)
    with pytest.raises(ValidationError):
        OptionGroup(id="g", name="  ")


def test_option_group_is_frozen():
    group = make_group("size", "Size", [("p", "P", "0")], max_selections=1)
    with pytest.raises(ValidationError):
        group.name = "Other"


def test_model_operations_use_current_pydantic_api(no_deprecated_pydantic):
    group = make_group("toppings", "Toppings", [("b", "Bacon", "2"), ("a", "Cheese", "1")])
    catalog = Catalog([group])
    assert catalog.to_dict()["groups"][0]["options"][0]["name"] == "Bacon"

    cart = InMemoryCart()
    item = LineItem(product_id="pizza", description="Pizza", unit_price=Decimal("10"), quantity=1)
    entry_id = cart.add_line_item(item)
    cart.add_line_item(item)
    cart.update_quantity(entry_id, 5)
    assert cart.item_count == 5


def test_selection_action_requires_ids_unless_clearing(no_deprecated_pydantic):
    assert SelectionAction(action="clear").option_id is None
    assert SelectionAction(group_id="size", option_id="m").action == "select"
    with pytest.raises(ValidationError):
        SelectionAction(action="select", group_id="size")
    with pytest.raises(ValidationError):
        SelectionAction(action="toggle", option_id="m")
