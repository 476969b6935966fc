"""
Selection state for configuring one product.

A ``Selection`` is an immutable value; ``select``, ``deselect`` and ``clear``
return a new value instead of mutating the old one. Group caps are enforced
here, at the moment of selection. Minimum and required rules are only
checked when the customer commits (see ``core.violations``).
"""

from decimal import Decimal
from typing import Iterable, Iterator, List, NamedTuple, Tuple

from core.catalog import Catalog
from core.errors import GroupCapReachedError, OptionUnavailableError
from utils.logging import setup_logger

logger = setup_logger(__name__)

CAP_POLICY_IGNORE = "ignore"
CAP_POLICY_REJECT = "reject"
CAP_POLICIES = (CAP_POLICY_IGNORE, CAP_POLICY_REJECT)


class SelectedOption(NamedTuple):
    """One chosen option, carrying the name and price it had when chosen."""

    group_id: str
    option_id: str
    name: str
    additional_price: Decimal


class Selection:
    """
    Ordered set of selected options.

    Order is the order in which the customer picked the options; no two
    entries share the same (group_id, option_id).
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[SelectedOption] = ()):
        unique: List[SelectedOption] = []
        seen = set()
        for item in items:
            key = (item.group_id, item.option_id)
            if key in seen:
                continue
            seen.add(key)
            unique.append(item)
        self._items: Tuple[SelectedOption, ...] = tuple(unique)

    @property
    def items(self) -> Tuple[SelectedOption, ...]:
        return self._items

    def __iter__(self) -> Iterator[SelectedOption]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Selection):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        picks = ", ".join(f"{i.group_id}:{i.option_id}" for i in self._items)
        return f"Selection([{picks}])"

    def contains(self, group_id: str, option_id: str) -> bool:
        return any(
            i.group_id == group_id and i.option_id == option_id for i in self._items
        )

    def count_for_group(self, group_id: str) -> int:
        return sum(1 for i in self._items if i.group_id == group_id)

    def for_group(self, group_id: str) -> Tuple[SelectedOption, ...]:
        return tuple(i for i in self._items if i.group_id == group_id)

    def names(self) -> List[str]:
        return [i.name for i in self._items]

    def options_total(self) -> Decimal:
        """Sum of the additional prices of every selected option."""
        return sum((i.additional_price for i in self._items), Decimal("0"))

    def to_list(self) -> List[dict]:
        return [i._asdict() for i in self._items]


EMPTY_SELECTION = Selection()


def select(
    catalog: Catalog,
    selection: Selection,
    group_id: str,
    option_id: str,
    cap_policy: str = CAP_POLICY_IGNORE,
) -> Selection:
    """
    Select an option and return the resulting selection.

    Args:
        catalog: Catalog the ids refer to.
        selection: Current selection.
        group_id: Id of the option group.
        option_id: Id of the option inside that group.
        cap_policy: What to do when a capped multi-select group is full:
            "ignore" returns the selection unchanged, "reject" raises.

    Returns:
        Selection: The new selection (the same object on a no-op).

    Raises:
        NotFoundError: If the group or option does not exist.
        OptionUnavailableError: If the option is marked unavailable.
        GroupCapReachedError: If the group is full and cap_policy is "reject".
    """
    if cap_policy not in CAP_POLICIES:
        raise ValueError(f"cap_policy must be one of: {', '.join(CAP_POLICIES)}")

    group = catalog.get_group(group_id)
    option = catalog.get_option(group_id, option_id)

    if not option.available:
        raise OptionUnavailableError(group_id, option_id)

    if selection.contains(group_id, option_id):
        return selection

    picked = SelectedOption(group.id, option.id, option.name, option.additional_price)

    # Exclusive groups swap the current choice instead of hitting the cap
    if group.is_exclusive:
        kept = [i for i in selection if i.group_id != group_id]
        return Selection(kept + [picked])

    current_group_count = selection.count_for_group(group_id)
    if group.max_selections > 0 and current_group_count >= group.max_selections:
        if cap_policy == CAP_POLICY_REJECT:
            raise GroupCapReachedError(group.id, group.name, group.max_selections)
        logger.debug(
            f"Ignoring '{option_id}': group '{group_id}' already has "
            f"{current_group_count}/{group.max_selections} selections"
        )
        return selection

    return Selection(list(selection) + [picked])


def deselect(selection: Selection, group_id: str, option_id: str) -> Selection:
    """
    Remove an option from the selection. Unknown or unselected ids are a no-op.
    """
    if not selection.contains(group_id, option_id):
        return selection
    return Selection(
        i for i in selection if not (i.group_id == group_id and i.option_id == option_id)
    )


def clear() -> Selection:
    """Return an empty selection."""
    return EMPTY_SELECTION


def resolve_selection(catalog: Catalog, selection: Selection) -> Selection:
    """
    Rebuild a selection from the catalog's own options.

    Names and prices come from the catalog, so a selection restored from
    stored data or sent by a client cannot carry stale or invented values.

    Raises:
        NotFoundError: If a picked group or option is not in the catalog.
        OptionUnavailableError: If a picked option is marked unavailable.
    """
    resolved = []
    for item in selection:
        option = catalog.get_option(item.group_id, item.option_id)
        if not option.available:
            raise OptionUnavailableError(item.group_id, item.option_id)
        resolved.append(
            SelectedOption(item.group_id, option.id, option.name, option.additional_price)
        )
    return Selection(resolved)


def toggle(
    catalog: Catalog,
    selection: Selection,
    group_id: str,
    option_id: str,
    cap_policy: str = CAP_POLICY_IGNORE,
) -> Selection:
    """
    Click semantics of the storefront: a second click on a checkbox removes it.

    Exclusive groups keep radio-button behaviour, so clicking the chosen
    option again leaves it selected.
    """
    group = catalog.get_group(group_id)
    if selection.contains(group_id, option_id) and not group.is_exclusive:
        return deselect(selection, group_id, option_id)
    return select(catalog, selection, group_id, option_id, cap_policy)
