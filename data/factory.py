"""
Factory for creating the appropriate data loader based on configuration.
"""

from config.config import config
from utils.logging import setup_logger
from data.loader import DataLoader
from data.local_loader import LocalCSVLoader

logger = setup_logger(__name__)


def get_data_loader() -> DataLoader:
    """
    Get the appropriate data loader based on configuration.

    Returns:
        DataLoader: The data loader instance (SupabaseLoader or LocalCSVLoader).
    """
    data_source_config = config.get_data_source_config()

    if data_source_config["use_local"]:
        logger.debug("Using local CSV data loader")
        return LocalCSVLoader()

    supabase_config = config.get_supabase_config()
    if not supabase_config:
        logger.warning(
            "Supabase credentials not configured, falling back to local CSV data loader"
        )
        return LocalCSVLoader()

    from data.supabase_loader import SupabaseLoader

    logger.debug("Using Supabase data loader")
    return SupabaseLoader()
