"""
File system utilities for the local CSV data files.
"""

from pathlib import Path
from typing import List, Optional, Union

from config.config import config


class FileSystem:
    """
    File system utilities for working with local data files.
    """

    def __init__(self, data_path: Optional[Union[str, Path]] = None):
        """
        Args:
            data_path: Data directory; defaults to ``data_source.local_data_path``.
        """
        self._data_path = Path(data_path) if data_path is not None else None

    def get_data_path(self) -> Path:
        """
        Get the data directory path.

        Returns:
            Path: Path to data directory.
        """
        if self._data_path is not None:
            return self._data_path
        return Path(config.get("data_source.local_data_path", "data/local"))

    def get_file_path(self, filename: str) -> Path:
        """
        Get the full path to a data file.

        Args:
            filename: Name of the file (with or without extension).

        Returns:
            Path: Full path to the file.
        """
        if not filename.endswith(".csv"):
            filename = f"{filename}.csv"

        return self.get_data_path() / filename

    def exists(self, filename: str) -> bool:
        return self.get_file_path(filename).exists()

    def list_files(self) -> List[str]:
        """
        List all CSV files in the data directory.

        Returns:
            list: List of CSV filenames.
        """
        data_path = self.get_data_path()

        if not data_path.exists():
            return []

        return sorted(f.name for f in data_path.glob("*.csv"))
