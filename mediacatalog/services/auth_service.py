"""Authentication business logic.

Passwords are stored and compared as plaintext; login is a lookup, not a
security boundary.
"""

import logging

from mediacatalog.models.user import UserView
from mediacatalog.repositories.catalog_store import CatalogStore

logger = logging.getLogger(__name__)


def login(username: str, password: str, store: CatalogStore) -> UserView | None:
    """Return the user view for matching credentials, else None.

    Unknown users and wrong passwords fail the same way.
    """
    user = store.find_user_by_username(username)
    if user and user.password == password:
        logger.info("User %s logged in", user.id)
        return UserView(id=user.id, username=user.username)
    logger.info("Login failed for %r", username)
    return None
