"""Shared fixtures: a seeded catalog on disk under tmp_path."""

import json

import pytest

from mediacatalog.config import Settings
from mediacatalog.repositories.catalog_store import JsonCatalogStore, MemoryCatalogStore

USERS = [
    {"id": 1, "username": "alice", "password": "wonderland"},
    {"id": 2, "username": "bob", "password": "Builder"},
]

ALBUMS = [
    {"id": 1, "name": "Vacation"},
    {"id": 2, "name": "Family"},
    {"id": 3, "name": "Nature"},
]

PHOTOS = [
    {
        "id": 7,
        "owner": 1,
        "filename": "oak.jpg",
        "title": "Old",
        "description": "An oak",
        "date": "2023-06-05T14:30:00.000Z",
        "albums": [1, 3],
        "tags": ["tree"],
    },
    {
        "id": 8,
        "owner": 2,
        "filename": "beach.jpg",
        "title": "Beach",
        "description": "Sand",
        "date": "2022-01-15T09:00:00.000Z",
        "albums": [1],
        "tags": [],
    },
    {
        "id": 9,
        "owner": 1,
        "filename": "mom.jpg",
        "title": "Mom",
        "description": "Birthday",
        "date": "2021-12-31T23:59:00.000Z",
        "albums": "2",
        "tags": ["family"],
    },
    {
        "id": 10,
        "owner": 1,
        "filename": "lake.jpg",
        "title": "Lake",
        "description": "Still water",
        "date": "2020-08-01T07:15:00.000Z",
        "tags": ["water", "sunrise"],
    },
]


def seed(data_dir, users=USERS, albums=ALBUMS, photos=PHOTOS):
    for name, records in (("users", users), ("albums", albums), ("photos", photos)):
        (data_dir / f"{name}.json").write_text(json.dumps(records, indent=2), encoding="utf-8")


def read_photos(data_dir) -> list[dict]:
    return json.loads((data_dir / "photos.json").read_text(encoding="utf-8"))


@pytest.fixture()
def data_dir(tmp_path):
    seed(tmp_path)
    return tmp_path


@pytest.fixture()
def settings(data_dir):
    return Settings(data_dir=data_dir)


@pytest.fixture()
def store(settings):
    return JsonCatalogStore(settings)


@pytest.fixture()
def memory_store():
    return MemoryCatalogStore({"users": USERS, "albums": ALBUMS, "photos": PHOTOS})
