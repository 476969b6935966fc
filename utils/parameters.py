"""
Parameter normalization utilities.
"""

from typing import TypeVar, Optional, List, Collection
import pandas as pd
from utils.logging import setup_logger

logger = setup_logger(__name__)


T = TypeVar("T")

TRUE_VALUES = {"true", "t", "1", "yes", "y", "sim"}
FALSE_VALUES = {"false", "f", "0", "no", "n", "nao", "não"}


def normalize_empty_collection(value: Optional[Collection[T]]) -> Optional[Collection[T]]:
    """
    Normalize a parameter value, treating empty collections as None.

    Args:
        value: A collection parameter (list, dict, set, etc.) or None

    Returns:
        The original collection if it has items, None if it's empty or None
    """
    if value is None or len(value) == 0:
        return None
    return value


def ensure_numeric_columns(df: pd.DataFrame, numeric_columns: List[str]) -> pd.DataFrame:
    """
    Ensure specified columns in a DataFrame are numeric.

    Args:
        df: The DataFrame to process
        numeric_columns: List of column names that should be numeric

    Returns:
        DataFrame with numeric columns converted to appropriate types
    """
    if df.empty:
        return df

    df_copy = df.copy()

    for col in numeric_columns:
        if col in df_copy.columns:
            original_missing = df_copy[col].isna().sum()
            df_copy[col] = pd.to_numeric(df_copy[col], errors="coerce")

            failed = df_copy[col].isna().sum() - original_missing
            if failed > 0:
                logger.warning(f"Column '{col}' had {failed} values that couldn't be converted to numeric")

    return df_copy


def _to_bool(value, default: bool):
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0

    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    logger.warning(f"Unrecognised boolean value '{value}', using {default}")
    return default


def ensure_boolean_columns(
    df: pd.DataFrame, boolean_columns: List[str], default: bool = False
) -> pd.DataFrame:
    """
    Ensure specified columns in a DataFrame hold real booleans.

    CSV exports and spreadsheet edits tend to carry "TRUE", "sim", 1 or
    blank cells; blanks become ``default``.

    Args:
        df: The DataFrame to process
        boolean_columns: List of column names that should be boolean
        default: Value used for missing cells

    Returns:
        DataFrame with boolean columns converted
    """
    if df.empty:
        return df

    df_copy = df.copy()
    for col in boolean_columns:
        if col in df_copy.columns:
            df_copy[col] = df_copy[col].apply(lambda v: _to_bool(v, default)).astype(bool)

    return df_copy


def normalize_column_names(df: pd.DataFrame, expected_columns: List[str]) -> pd.DataFrame:
    """
    Rename columns that match an expected name case-insensitively.

    Args:
        df: The DataFrame to process
        expected_columns: Canonical column names

    Returns:
        DataFrame with canonical column names
    """
    column_mapping = {}
    for expected_col in expected_columns:
        for actual_col in df.columns:
            if expected_col.lower() == str(actual_col).strip().lower() and expected_col != actual_col:
                column_mapping[actual_col] = expected_col
                break

    if column_mapping:
        logger.info(f"Renaming columns: {column_mapping}")
        return df.rename(columns=column_mapping)
    return df
