"""
Supabase data loader for the menu options engine.
"""

from typing import Any, Dict, List, Optional

import pandas as pd
from supabase import Client, create_client

from config.config import config
from core.errors import DataUnavailableError
from data.loader import DataLoader
from utils.logging import setup_logger
from utils.parameters import normalize_empty_collection

logger = setup_logger(__name__)


class SupabaseLoader(DataLoader):
    """
    Loader class for fetching products and option catalogs from Supabase.
    """

    def __init__(self, client: Optional[Client] = None, tables: Optional[Dict[str, str]] = None):
        """
        Initialize the Supabase loader.

        Args:
            client: Ready Supabase client. When None one is created from config.
            tables: Table name overrides (keys: products, option_groups, options).
        """
        supabase_config = config.get_supabase_config()

        if client is None:
            if not supabase_config:
                raise DataUnavailableError("Supabase credentials are not configured")
            client = create_client(supabase_config["url"], supabase_config["key"])

        self.client = client
        self.tables = {
            "products": "products",
            "option_groups": "product_option_groups",
            "options": "product_options",
        }
        if supabase_config:
            self.tables.update(supabase_config["tables"])
        if tables:
            self.tables.update(tables)

    def _execute(self, name: str, query) -> List[Dict[str, Any]]:
        try:
            response = query.execute()
        except Exception as e:
            logger.error(f"Error fetching {name} from Supabase: {e}", exc_info=True)
            raise DataUnavailableError(f"Could not load {name} from Supabase") from e

        rows = response.data or []
        logger.debug(f"Fetched {len(rows)} {name} rows from Supabase")
        return rows

    def get_products(self, product_ids: Optional[List[str]] = None) -> pd.DataFrame:
        """
        Fetch products from Supabase.

        Args:
            product_ids: Optional list of product IDs to fetch. If None, fetches all products.

        Returns:
            pd.DataFrame: DataFrame containing product data.
        """
        query = self.client.table(self.tables["products"]).select("*")
        product_ids = normalize_empty_collection(product_ids)
        if product_ids is not None:
            query = query.in_("id", product_ids)
        return pd.DataFrame(self._execute("products", query))

    def get_option_groups(self, product_id: str) -> pd.DataFrame:
        """
        Fetch the option groups of a product, in display order.
        """
        query = (
            self.client.table(self.tables["option_groups"])
            .select("*")
            .eq("product_id", product_id)
            .order("display_order")
        )
        return pd.DataFrame(self._execute("option groups", query))

    def get_options(self, group_ids: List[str]) -> pd.DataFrame:
        """
        Fetch the options of the given groups, in display order.
        """
        if not group_ids:
            return pd.DataFrame()

        query = (
            self.client.table(self.tables["options"])
            .select("*")
            .in_("option_group_id", group_ids)
            .order("display_order")
        )
        return pd.DataFrame(self._execute("options", query))
