"""Media Catalog Configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings

from mediacatalog.utils.storage import StorageError

COLLECTIONS = ("users", "albums", "photos")


class Settings(BaseSettings):
    # Paths
    data_dir: Path = Path.cwd()
    users_file: str = "users.json"
    albums_file: str = "albums.json"
    photos_file: str = "photos.json"

    # Writes
    atomic_writes: bool = True  # temp file + rename
    json_indent: int = 2

    # Logging
    log_level: str = "WARNING"

    model_config = {"env_prefix": "CATALOG_"}

    def collection_path(self, kind: str) -> Path:
        """Resolve the JSON file backing a collection."""
        if kind not in COLLECTIONS:
            raise StorageError(f"Unknown collection: {kind}")
        return self.data_dir / getattr(self, f"{kind}_file")


settings = Settings()
