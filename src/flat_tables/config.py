"""Configuration for locating the active database file."""

from pathlib import Path

from pydantic_settings import BaseSettings

from flat_tables.database import DatabaseFile


class Config(BaseSettings):
    """Which database file operations act on.

    Settings may be given as ``FLAT_TABLES_DATA_DIR`` and
    ``FLAT_TABLES_FILE_NAME`` environment variables or in a ``.env`` file.
    """

    data_dir: Path = Path("data")
    file_name: str = "database.json"

    model_config = {
        "env_prefix": "FLAT_TABLES_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def file_location(self) -> Path:
        return self.data_dir / self.file_name

    def set_file_location(self, file_name: str) -> str:
        """Make ``file_name`` inside ``data_dir`` the active file.

        Returns:
            The new active file location.
        """
        self.file_name = file_name
        return str(self.file_location)

    def open(self) -> DatabaseFile:
        """Return the active database file."""
        return DatabaseFile(self.file_location)
