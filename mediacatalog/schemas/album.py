"""Album query results."""

from pydantic import BaseModel

from mediacatalog.models.album import Album
from mediacatalog.models.photo import Photo


class AlbumPhotos(BaseModel):
    album: Album
    photos: list[Photo]
