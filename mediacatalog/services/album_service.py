"""Album lookups scoped to the logged-in user."""

from mediacatalog.repositories.catalog_store import CatalogStore
from mediacatalog.schemas.album import AlbumPhotos
from mediacatalog.schemas.results import ALBUM_NOT_FOUND, Failure, not_found


def get_user_photos_in_album(
    user_id: int, album_name: str, store: CatalogStore
) -> AlbumPhotos | Failure:
    """Resolve an album by name and return only user_id's photos in it."""
    album = store.find_album_by_name(album_name)
    if not album:
        return not_found(ALBUM_NOT_FOUND)
    # Album listing is not owner-scoped; filter here.
    mine = [p for p in store.list_photos_in_album(album.id) if p.owner == user_id]
    return AlbumPhotos(album=album, photos=mine)


def map_album_ids_to_names(album_ids: object, store: CatalogStore) -> list[str]:
    """Album names for album_ids in order, skipping ids that do not resolve."""
    if not isinstance(album_ids, list):
        return []
    names = []
    for album_id in album_ids:
        album = store.find_album_by_id(album_id)
        if album:
            names.append(album.name)
    return names
