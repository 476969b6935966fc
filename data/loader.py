"""
Base data loader interface for the menu options engine.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import pandas as pd
from pydantic import ValidationError

from core.catalog import Catalog
from core.errors import DataUnavailableError, NotFoundError
from data.models.option_group import Option, OptionGroup
from data.models.product import Product
from utils.logging import setup_logger

logger = setup_logger(__name__)

PRODUCT_COLUMNS = ["id", "name", "description", "price", "promotional_price", "available"]
OPTION_GROUP_COLUMNS = [
    "id",
    "product_id",
    "name",
    "min_selections",
    "max_selections",
    "required",
    "display_order",
]
OPTION_COLUMNS = [
    "id",
    "option_group_id",
    "name",
    "additional_price",
    "available",
    "display_order",
]


def _records(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """DataFrame rows as dicts with NaN replaced by None."""
    if df.empty:
        return []
    return df.astype(object).where(pd.notna(df), None).to_dict(orient="records")


class DataLoader(ABC):
    """
    Abstract base class for data loaders.

    Subclasses fetch raw tables; this class turns them into a Product and a
    Catalog. Fetch failures surface as DataUnavailableError.
    """

    @abstractmethod
    def get_products(self, product_ids: Optional[List[str]] = None) -> pd.DataFrame:
        """
        Fetch products.

        Args:
            product_ids: Optional list of product IDs to fetch. If None, fetches all products.

        Returns:
            pd.DataFrame: DataFrame containing product data.
        """
        pass

    @abstractmethod
    def get_option_groups(self, product_id: str) -> pd.DataFrame:
        """
        Fetch the option groups attached to a product.

        Args:
            product_id: Product whose groups to fetch.

        Returns:
            pd.DataFrame: DataFrame containing option group data.
        """
        pass

    @abstractmethod
    def get_options(self, group_ids: List[str]) -> pd.DataFrame:
        """
        Fetch the options belonging to the given groups.

        Args:
            group_ids: Option group IDs.

        Returns:
            pd.DataFrame: DataFrame containing option data.
        """
        pass

    def get_product(self, product_id: str) -> Product:
        """
        Fetch a single product.

        Raises:
            NotFoundError: If no product has this id.
            DataUnavailableError: If the stored row is unusable.
        """
        records = _records(self.get_products([product_id]))
        if not records:
            raise NotFoundError("product", product_id)

        try:
            return Product(**records[0])
        except ValidationError as e:
            logger.error(f"Invalid product row for '{product_id}': {e}")
            raise DataUnavailableError(f"Product '{product_id}' has invalid data") from e

    def load_catalog(self, product_id: str) -> Catalog:
        """
        Load the option catalog of a product.

        A product without option groups gets an empty catalog.

        Args:
            product_id: Product to load.

        Returns:
            Catalog: Option groups with their options, in display order.

        Raises:
            DataUnavailableError: If the data store fails or returns invalid rows.
        """
        df_groups = self.get_option_groups(product_id)
        group_rows = _records(df_groups)
        group_ids = [str(row["id"]) for row in group_rows if row.get("id") is not None]

        options_by_group: Dict[str, List[Option]] = {gid: [] for gid in group_ids}
        try:
            if group_ids:
                for row in _records(self.get_options(group_ids)):
                    option = Option(**row)
                    if option.option_group_id in options_by_group:
                        options_by_group[option.option_group_id].append(option)

            groups = [
                OptionGroup(**{**row, "options": options_by_group.get(str(row["id"]), [])})
                for row in group_rows
            ]
            catalog = Catalog(groups, product_id=product_id)
        except (ValidationError, ValueError) as e:
            logger.error(f"Invalid option data for product '{product_id}': {e}")
            raise DataUnavailableError(
                f"Option catalog for product '{product_id}' has invalid data"
            ) from e

        logger.info(
            f"Loaded catalog for product '{product_id}': {len(groups)} groups, "
            f"{sum(len(g.options) for g in groups)} options"
        )
        return catalog
