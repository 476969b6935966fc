"""
Read-only view over the option groups configured for one product.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from core.errors import NotFoundError
from data.models.option_group import Option, OptionGroup


class Catalog:
    """
    Immutable, ordered list of option groups for a single product.

    Groups and their options are kept in display order. Lookups are keyed by
    group id and by (group id, option id), so an option id that exists in a
    different group does not resolve.
    """

    def __init__(self, groups: Iterable[OptionGroup], product_id: Optional[str] = None):
        ordered = sorted(groups, key=lambda g: g.display_order)
        self._groups: Tuple[OptionGroup, ...] = tuple(
            group.model_copy(
                update={"options": sorted(group.options, key=lambda o: o.display_order)}
            )
            for group in ordered
        )
        self.product_id = product_id

        self._by_id: Dict[str, OptionGroup] = {}
        self._options: Dict[Tuple[str, str], Option] = {}
        for group in self._groups:
            if group.id in self._by_id:
                raise ValueError(f"Duplicate option group id '{group.id}'")
            self._by_id[group.id] = group
            for option in group.options:
                key = (group.id, option.id)
                if key in self._options:
                    raise ValueError(
                        f"Duplicate option id '{option.id}' in group '{group.id}'"
                    )
                self._options[key] = option

    @property
    def groups(self) -> Tuple[OptionGroup, ...]:
        return self._groups

    def __iter__(self) -> Iterator[OptionGroup]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def get_group(self, group_id: str) -> OptionGroup:
        """
        Get an option group by id.

        Raises:
            NotFoundError: If the catalog has no such group.
        """
        try:
            return self._by_id[group_id]
        except KeyError:
            raise NotFoundError("option group", group_id, self._scope()) from None

    def get_option(self, group_id: str, option_id: str) -> Option:
        """
        Get an option by its owning group and its own id.

        Raises:
            NotFoundError: If the group is missing, or the option does not
                belong to that group.
        """
        group = self.get_group(group_id)
        try:
            return self._options[(group.id, option_id)]
        except KeyError:
            raise NotFoundError("option", option_id, f"group '{group_id}'") from None

    def group_ids(self) -> List[str]:
        return [group.id for group in self._groups]

    def _scope(self) -> str:
        return f"catalog for product '{self.product_id}'" if self.product_id else "catalog"

    def to_dict(self) -> Dict:
        """Serializable representation used by the API and the CLI."""
        return {
            "product_id": self.product_id,
            "groups": [group.model_dump() for group in self._groups],
        }
