from decimal import Decimal

from core.catalog import Catalog
from core.selection import EMPTY_SELECTION, SelectedOption, Selection, select
from core.violations import ViolationDetector, validate
from tests.conftest import make_group


def test_empty_selection_reports_required_and_minimum(pizza_catalog):
    messages = validate(pizza_catalog, EMPTY_SELECTION)

    assert messages == [
        "Select at least one option from 'Size'",
        "'Size' requires at least 1 selection(s)",
    ]


def test_valid_selection_has_no_violations(pizza_catalog):
    selection = select(pizza_catalog, EMPTY_SELECTION, "size", "m")
    selection = select(pizza_catalog, selection, "toppings", "bacon")
    assert validate(pizza_catalog, selection) == []


def test_every_failing_group_is_reported():
    base = make_group(
        "base", "Base", [("acai", "Acai", "0")], min_selections=1, max_selections=1, required=True
    )
    fruits = make_group(
        "fruits",
        "Fruits",
        [("banana", "Banana", "1"), ("kiwi", "Kiwi", "2"), ("mango", "Mango", "2")],
        min_selections=2,
        max_selections=3,
        display_order=1,
    )
    catalog = Catalog([base, fruits])
    selection = select(catalog, EMPTY_SELECTION, "fruits", "banana")

    violations = ViolationDetector(catalog).detect_violations(selection)

    assert {v.group_id for v in violations} == {"base", "fruits"}
    fruit_violation = [v for v in violations if v.group_id == "fruits"][0]
    assert fruit_violation.constraint_type == "min_selections"
    assert fruit_violation.expected_value == 2
    assert fruit_violation.actual_value == 1
    assert fruit_violation.message == "'Fruits' requires at least 2 selection(s)"


def test_required_group_without_minimum():
    sauce = make_group("sauce", "Sauce", [("bbq", "BBQ", "0")], required=True)
    catalog = Catalog([sauce])

    violations = ViolationDetector(catalog).detect_violations(EMPTY_SELECTION)

    assert [v.constraint_type for v in violations] == ["required"]


def test_selection_over_cap_is_reported(pizza_catalog):
    # Built directly, as if restored from stored data
    selection = Selection(
        [
            SelectedOption("size", "m", "M", Decimal("3")),
            SelectedOption("toppings", "bacon", "Bacon", Decimal("2")),
            SelectedOption("toppings", "cheese", "Cheese", Decimal("1.5")),
            SelectedOption("toppings", "egg", "Egg", Decimal("2")),
        ]
    )

    assert validate(pizza_catalog, selection) == ["'Toppings' allows at most 2 selection(s)"]


def test_constraint_type_filter(pizza_catalog):
    detector = ViolationDetector(pizza_catalog)

    violations = detector.detect_violations(EMPTY_SELECTION, constraint_types=["required"])

    assert [v.constraint_type for v in violations] == ["required"]


def test_violations_summary(pizza_catalog):
    violations = ViolationDetector(pizza_catalog).detect_violations(EMPTY_SELECTION)

    summary = ViolationDetector.get_violations_summary(violations)

    assert summary == {
        "total_violations": 2,
        "groups_with_violations": 1,
        "violation_types": {"required": 1, "min_selections": 1},
    }


def test_violation_to_dict(pizza_catalog):
    violation = ViolationDetector(pizza_catalog).detect_violations(EMPTY_SELECTION)[0]
    assert violation.to_dict() == {
        "group_id": "size",
        "group_name": "Size",
        "constraint_type": "required",
        "expected_value": 1,
        "actual_value": 0,
        "message": "Select at least one option from 'Size'",
    }


def test_two_failing_groups_give_exactly_two_messages():
    sauce = make_group("sauce", "Sauce", [("bbq", "BBQ", "0")], required=True)
    fruits = make_group(
        "fruits",
        "Fruits",
        [("banana", "Banana", "1"), ("kiwi", "Kiwi", "2")],
        min_selections=2,
        display_order=1,
    )
    catalog = Catalog([sauce, fruits])
    selection = select(catalog, EMPTY_SELECTION, "fruits", "banana")

    messages = validate(catalog, selection)

    assert len(messages) == 2
    assert messages == [
        "Select at least one option from 'Sauce'",
        "'Fruits' requires at least 2 selection(s)",
    ]
