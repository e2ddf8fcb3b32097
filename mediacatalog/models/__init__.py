"""Media Catalog record models."""

from mediacatalog.models.user import User, UserView
from mediacatalog.models.album import Album
from mediacatalog.models.photo import Photo

__all__ = [
    "User",
    "UserView",
    "Album",
    "Photo",
]
