import pytest

from mediacatalog.schemas.album import AlbumPhotos
from mediacatalog.schemas.results import ErrorKind, Failure
from mediacatalog.services.album_service import get_user_photos_in_album, map_album_ids_to_names


@pytest.mark.parametrize("name", ["Holidays", "holidays", "VACATIONS"])
def test_unknown_album_is_not_found(store, name):
    result = get_user_photos_in_album(1, name, store)
    assert isinstance(result, Failure)
    assert result.kind == ErrorKind.NOT_FOUND
    assert result.message == "Album not found"


def test_album_photos_are_filtered_to_owner(store):
    result = get_user_photos_in_album(1, "vacation", store)
    assert isinstance(result, AlbumPhotos)
    assert result.album.name == "Vacation"
    assert [p.id for p in result.photos] == [7]

    result = get_user_photos_in_album(2, "VACATION", store)
    assert [p.id for p in result.photos] == [8]


def test_album_without_owned_photos(store):
    result = get_user_photos_in_album(2, "Nature", store)
    assert result.photos == []


def test_owned_subset_matches_album_listing(store):
    for user_id in (1, 2, 3):
        result = get_user_photos_in_album(user_id, "Vacation", store)
        expected = [p for p in store.list_photos_in_album(1) if p.owner == user_id]
        assert result.photos == expected


def test_map_album_ids_to_names_preserves_order_and_skips_unknown(store):
    assert map_album_ids_to_names([3, 99, 1], store) == ["Nature", "Vacation"]
    assert map_album_ids_to_names([], store) == []


def test_map_album_ids_to_names_tolerates_malformed_input(store):
    assert map_album_ids_to_names(None, store) == []
    assert map_album_ids_to_names("2", store) == []
