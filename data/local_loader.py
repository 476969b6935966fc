"""
Local CSV data loader for the menu options engine.
"""

from typing import List, Optional

import pandas as pd

from core.errors import DataUnavailableError
from data.loader import (
    DataLoader,
    OPTION_COLUMNS,
    OPTION_GROUP_COLUMNS,
    PRODUCT_COLUMNS,
)
from data.local.file_system import FileSystem
from utils.logging import setup_logger
from utils.parameters import (
    ensure_boolean_columns,
    ensure_numeric_columns,
    normalize_empty_collection,
    normalize_column_names,
)

logger = setup_logger(__name__)


class LocalCSVLoader(DataLoader):
    """
    Loader class for fetching data from local CSV files.

    Expects ``products.csv``, ``option_groups.csv`` and ``options.csv`` in the
    configured data directory, with the same columns as the Supabase tables.
    """

    def __init__(self, file_system: Optional[FileSystem] = None):
        """
        Initialize the local CSV loader.

        Args:
            file_system: File system helper; defaults to the configured data path.
        """
        self.file_system = file_system or FileSystem()

        self.products_path = self.file_system.get_file_path("products")
        self.option_groups_path = self.file_system.get_file_path("option_groups")
        self.options_path = self.file_system.get_file_path("options")

        for path, name in [
            (self.products_path, "products"),
            (self.option_groups_path, "option_groups"),
            (self.options_path, "options"),
        ]:
            if not path.exists():
                logger.warning(f"Local data file '{name}.csv' not found at '{path}'")

    def _read_csv(self, path, name: str, expected_columns: List[str]) -> pd.DataFrame:
        try:
            df = pd.read_csv(
                path,
                quotechar='"',
                escapechar="\\",
                skipinitialspace=True,
                na_values=["", "NA", "N/A", "null"],
                keep_default_na=True,
                dtype={"id": str, "product_id": str, "option_group_id": str},
            )
        except FileNotFoundError as e:
            logger.error(f"Local data file '{name}.csv' not found at '{path}'")
            raise DataUnavailableError(f"Local data file '{name}.csv' is missing") from e
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
            logger.error(f"Error loading {name} from CSV: {e}", exc_info=True)
            raise DataUnavailableError(f"Local data file '{name}.csv' is unreadable") from e

        logger.debug(f"Loaded {len(df)} rows from {name}.csv")
        return normalize_column_names(df, expected_columns)

    def get_products(self, product_ids: Optional[List[str]] = None) -> pd.DataFrame:
        """
        Fetch products from local CSV.

        Args:
            product_ids: Optional list of product IDs to fetch. If None, fetches all products.

        Returns:
            pd.DataFrame: DataFrame containing product data.
        """
        df_products = self._read_csv(self.products_path, "products", PRODUCT_COLUMNS)
        df_products = ensure_numeric_columns(df_products, ["price", "promotional_price"])
        df_products = ensure_boolean_columns(df_products, ["available"], default=True)

        product_ids = normalize_empty_collection(product_ids)
        if product_ids is not None and "id" in df_products.columns:
            df_products = df_products[df_products["id"].isin([str(p) for p in product_ids])]
            logger.debug(f"Filtered to {len(df_products)} products")

        return df_products

    def get_option_groups(self, product_id: str) -> pd.DataFrame:
        """
        Fetch option groups of a product from local CSV.

        Args:
            product_id: Product whose groups to fetch.

        Returns:
            pd.DataFrame: Option groups sorted by display_order.
        """
        df_groups = self._read_csv(
            self.option_groups_path, "option_groups", OPTION_GROUP_COLUMNS
        )
        df_groups = ensure_numeric_columns(
            df_groups, ["min_selections", "max_selections", "display_order"]
        )
        df_groups = ensure_boolean_columns(df_groups, ["required"], default=False)

        if "product_id" in df_groups.columns:
            df_groups = df_groups[df_groups["product_id"] == str(product_id)]

        if "display_order" in df_groups.columns:
            df_groups = df_groups.sort_values("display_order", kind="stable")

        logger.info(f"Found {len(df_groups)} option groups for product '{product_id}'")
        return df_groups

    def get_options(self, group_ids: List[str]) -> pd.DataFrame:
        """
        Fetch options of the given groups from local CSV.

        Args:
            group_ids: Option group IDs.

        Returns:
            pd.DataFrame: Options sorted by display_order.
        """
        df_options = self._read_csv(self.options_path, "options", OPTION_COLUMNS)
        df_options = ensure_numeric_columns(df_options, ["additional_price", "display_order"])
        df_options = ensure_boolean_columns(df_options, ["available"], default=True)

        if "option_group_id" in df_options.columns:
            df_options = df_options[
                df_options["option_group_id"].isin([str(g) for g in group_ids])
            ]

        if "display_order" in df_options.columns:
            df_options = df_options.sort_values("display_order", kind="stable")

        return df_options
