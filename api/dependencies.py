"""
Dependency injection for the API.
"""

from fastapi import Depends

from config.config import config
from core.checkout import InMemoryCart
from core.session import SelectionSession
from data.factory import get_data_loader
from data.loader import DataLoader
from utils.logging import setup_logger

logger = setup_logger(__name__)

_cart = InMemoryCart()


def get_loader() -> DataLoader:
    """
    Dependency provider for the configured data loader.
    """
    return get_data_loader()


def get_cart() -> InMemoryCart:
    """
    Dependency provider for the process-wide cart.
    """
    return _cart


def get_cap_policy() -> str:
    return config.get_selection_config()["cap_policy"]


def get_selection_session(
    product_id: str,
    loader: DataLoader = Depends(get_loader),
    cap_policy: str = Depends(get_cap_policy),
) -> SelectionSession:
    """
    Dependency provider creating a fresh selection session for the product
    in the request path.

    Raises:
        NotFoundError: If the product does not exist.
        DataUnavailableError: If the catalog cannot be loaded.
    """
    product = loader.get_product(product_id)
    catalog = loader.load_catalog(product_id)
    logger.debug(f"Opened selection session for product '{product_id}'")
    return SelectionSession(product, catalog, cap_policy=cap_policy)
