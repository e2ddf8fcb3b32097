"""Owner-scoped photo lookup and editing."""

import logging

from mediacatalog.models.photo import Photo
from mediacatalog.repositories.catalog_store import CatalogStore
from mediacatalog.schemas.photo import TagResult, UpdateResult
from mediacatalog.schemas.results import (
    PHOTO_NOT_FOUND,
    Failure,
    access_denied,
    not_found,
    update_failed,
)

logger = logging.getLogger(__name__)


def get_owned_photo(user_id: int, photo_id: int, store: CatalogStore) -> Photo | Failure:
    """Fetch a photo, failing unless user_id owns it.

    Every mutating operation goes through this check first.
    """
    photo = store.find_photo_by_id(photo_id)
    if not photo:
        return not_found(PHOTO_NOT_FOUND)
    if photo.owner != user_id:
        logger.info("User %s denied access to photo %s", user_id, photo_id)
        return access_denied()
    return photo


def update_photo_details(
    user_id: int,
    photo_id: int,
    title: str,
    description: str,
    store: CatalogStore,
) -> UpdateResult:
    """Replace title and description of an owned photo."""
    photo = get_owned_photo(user_id, photo_id, store)
    if isinstance(photo, Failure):
        return UpdateResult(ok=False, error=photo)

    if not store.update_photo_fields(photo_id, title, description):
        logger.warning("Photo %s vanished between fetch and update", photo_id)
        return UpdateResult(ok=False, error=update_failed())
    return UpdateResult(ok=True)


def add_tag(user_id: int, photo_id: int, tag: str, store: CatalogStore) -> TagResult:
    """Add a lowercased tag to an owned photo.

    A tag already present (case-insensitively) is a skip, not an error.
    """
    photo = get_owned_photo(user_id, photo_id, store)
    if isinstance(photo, Failure):
        return TagResult(ok=False, error=photo)

    normalized = str(tag).lower()
    if photo.has_tag(normalized):
        logger.info("Photo %s already tagged %r", photo_id, normalized)
        return TagResult(ok=True, skipped=True)

    if not store.append_tag(photo_id, normalized):
        logger.warning("Photo %s vanished between fetch and tagging", photo_id)
        return TagResult(ok=False, error=update_failed())
    return TagResult(ok=True)
