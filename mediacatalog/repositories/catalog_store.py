"""Flat-file persistence for users, albums and photos.

Every operation re-reads the whole collection and mutations rewrite it in
full. Nothing is cached between calls.
"""

import copy
import logging
from abc import ABC, abstractmethod
from typing import Iterable, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from mediacatalog.config import COLLECTIONS, Settings
from mediacatalog.models.album import Album
from mediacatalog.models.photo import Photo
from mediacatalog.models.user import User
from mediacatalog.utils.storage import StorageError, read_json, write_json

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def _to_model(model: type[RecordT], record: dict, kind: str) -> RecordT:
    try:
        return model.model_validate(record)
    except ValidationError as e:
        raise StorageError(f"Malformed {kind} record {record.get('id')!r}: {e}") from e


class CatalogStore(ABC):
    """Whole-collection access shared by every backing store.

    Subclasses provide read_collection/write_collection; all lookups and
    mutations are linear scans built on those two primitives.
    """

    @abstractmethod
    def read_collection(self, kind: str) -> list[dict]:
        """Return every raw record of a collection. Raises StorageError."""

    @abstractmethod
    def write_collection(self, kind: str, records: list[dict]) -> None:
        """Replace a collection with records. Raises StorageError."""

    # --- Users ---

    def find_user_by_username(self, username: str) -> Optional[User]:
        for record in self.read_collection("users"):
            if record.get("username") == username:
                return _to_model(User, record, "users")
        return None

    # --- Albums ---

    def list_albums(self) -> list[Album]:
        return [_to_model(Album, r, "albums") for r in self.read_collection("albums")]

    def find_album_by_id(self, album_id: int) -> Optional[Album]:
        for record in self.read_collection("albums"):
            if record.get("id") == album_id:
                return _to_model(Album, record, "albums")
        return None

    def find_album_by_name(self, name: str) -> Optional[Album]:
        """Case-insensitive match on the full album name."""
        wanted = name.lower()
        for record in self.read_collection("albums"):
            stored = record.get("name")
            if isinstance(stored, str) and stored.lower() == wanted:
                return _to_model(Album, record, "albums")
        return None

    # --- Photos ---

    def list_photos(self) -> list[Photo]:
        return [_to_model(Photo, r, "photos") for r in self.read_collection("photos")]

    def find_photo_by_id(self, photo_id: int) -> Optional[Photo]:
        for record in self.read_collection("photos"):
            if record.get("id") == photo_id:
                return _to_model(Photo, record, "photos")
        return None

    def list_photos_in_album(self, album_id: int) -> list[Photo]:
        """Photos listing album_id in their albums field, in collection order."""
        return [
            _to_model(Photo, r, "photos")
            for r in self.read_collection("photos")
            if isinstance(r.get("albums"), list) and album_id in r["albums"]
        ]

    def save_all_photos(self, photos: Iterable[Photo]) -> None:
        self.write_collection("photos", [p.model_dump(exclude_unset=True) for p in photos])

    def update_photo_fields(self, photo_id: int, title: str, description: str) -> bool:
        """Overwrite title/description of the first photo with photo_id.

        Returns False (and writes nothing) when no photo matches.
        """
        photos = self.read_collection("photos")
        for record in photos:
            if record.get("id") == photo_id:
                record["title"] = title
                record["description"] = description
                break
        else:
            return False
        self.write_collection("photos", photos)
        logger.debug("Updated details of photo %s", photo_id)
        return True

    def append_tag(self, photo_id: int, tag: str) -> bool:
        """Append tag to the first photo with photo_id. No duplicate check."""
        photos = self.read_collection("photos")
        for record in photos:
            if record.get("id") == photo_id:
                if not isinstance(record.get("tags"), list):
                    record["tags"] = []
                record["tags"].append(tag)
                break
        else:
            return False
        self.write_collection("photos", photos)
        logger.debug("Appended tag %r to photo %s", tag, photo_id)
        return True


def _check_records(kind: str, data: object, source: object) -> list[dict]:
    if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
        raise StorageError(f"{source}: expected a JSON array of {kind} objects")
    return data


class JsonCatalogStore(CatalogStore):
    """Collections stored as JSON arrays under settings.data_dir."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def read_collection(self, kind: str) -> list[dict]:
        path = self.settings.collection_path(kind)
        logger.debug("Reading %s from %s", kind, path)
        return _check_records(kind, read_json(path), path)

    def write_collection(self, kind: str, records: list[dict]) -> None:
        path = self.settings.collection_path(kind)
        write_json(
            path,
            records,
            indent=self.settings.json_indent,
            atomic=self.settings.atomic_writes,
        )
        logger.debug("Wrote %d %s record(s) to %s", len(records), kind, path)


class MemoryCatalogStore(CatalogStore):
    """Collections held in memory; reads hand out copies like a fresh file read."""

    def __init__(self, collections: Optional[dict[str, list[dict]]] = None):
        collections = collections or {}
        self._data = {kind: copy.deepcopy(collections.get(kind, [])) for kind in COLLECTIONS}

    def read_collection(self, kind: str) -> list[dict]:
        if kind not in self._data:
            raise StorageError(f"Unknown collection: {kind}")
        return _check_records(kind, copy.deepcopy(self._data[kind]), f"<memory:{kind}>")

    def write_collection(self, kind: str, records: list[dict]) -> None:
        if kind not in self._data:
            raise StorageError(f"Unknown collection: {kind}")
        self._data[kind] = copy.deepcopy(records)
