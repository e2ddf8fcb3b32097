"""Media Catalog - interactive command-line shell.

Owns all console I/O: login prompt, menu loop, and rendering of the plain
result objects returned by the services.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from mediacatalog.config import Settings, settings
from mediacatalog.models.user import UserView
from mediacatalog.repositories.catalog_store import CatalogStore, JsonCatalogStore
from mediacatalog.schemas.results import PHOTO_NOT_FOUND, is_failure
from mediacatalog.services.album_service import get_user_photos_in_album, map_album_ids_to_names
from mediacatalog.services.auth_service import login
from mediacatalog.services.photo_service import add_tag, get_owned_photo, update_photo_details
from mediacatalog.utils.formatting import format_date, join_values
from mediacatalog.utils.storage import StorageError

logger = logging.getLogger(__name__)

console = Console(highlight=False)


def _error(message: str) -> None:
    console.print(f"!!! {escape(message)}\n")


def _ask_photo_id(question: str) -> Optional[int]:
    raw = Prompt.ask(question)
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def _fetch_owned(user: UserView, question: str, store: CatalogStore):
    """Prompt for a photo id and return the owned photo, or None after reporting."""
    photo_id = _ask_photo_id(question)
    if photo_id is None:
        _error(PHOTO_NOT_FOUND)
        return None
    photo = get_owned_photo(user.id, photo_id, store)
    if is_failure(photo):
        _error(photo.message)
        return None
    return photo


def prompt_reuse(field: str, previous: str) -> str:
    """Ask for a new value; an empty answer keeps the previous one."""
    value = Prompt.ask(f"Enter value for {field}", default=previous, show_default=True)
    return previous if value == "" else value


def _find_photo(user: UserView, store: CatalogStore) -> None:
    photo = _fetch_owned(user, "Photo ID?", store)
    if photo is None:
        return
    albums = map_album_ids_to_names(photo.albums, store)
    console.print(f"Filename: {escape(photo.filename)}")
    console.print(f"   Title: {escape(photo.title or '')}")
    console.print(f"    Date: {escape(format_date(photo.date))}")
    console.print(f"  Albums: {escape(join_values(albums))}")
    console.print(f"    Tags: {escape(join_values(photo.tags))}\n")


def _update_photo(user: UserView, store: CatalogStore) -> None:
    photo = _fetch_owned(user, "Photo ID?", store)
    if photo is None:
        return
    console.print("Press Enter to keep existing values.")
    title = prompt_reuse("title", photo.title or "")
    description = prompt_reuse("description", photo.description or "")
    result = update_photo_details(user.id, photo.id, title, description, store)
    if result.ok:
        console.print("Photo updated\n")
    else:
        _error(result.error.message if result.error else "Problem updating")


def _tag_photo(user: UserView, store: CatalogStore) -> None:
    photo = _fetch_owned(user, "What photo ID to tag?", store)
    if photo is None:
        return
    tag = Prompt.ask(f"What tag to add ({escape(','.join(photo.tags))})?")
    result = add_tag(user.id, photo.id, tag, store)
    if not result.ok:
        _error(result.error.message if result.error else "Problem updating")
    elif result.skipped:
        console.print("Tag already exists (no change)\n")
    else:
        console.print("Updated!\n")


def _album_photos(user: UserView, store: CatalogStore) -> None:
    name = Prompt.ask("Album name?")
    result = get_user_photos_in_album(user.id, name, store)
    if is_failure(result):
        _error(result.message)
        return
    if not result.photos:
        console.print(f"No photos of yours in '{escape(result.album.name)}'\n")
        return

    table = Table(title=escape(result.album.name))
    table.add_column("ID", justify="right")
    table.add_column("Filename")
    table.add_column("Title")
    table.add_column("Date")
    for p in result.photos:
        table.add_row(str(p.id), escape(p.filename), escape(p.title or ""), escape(format_date(p.date or "")))
    console.print(table)


MENU = [
    ("1", "Find Photo (by ID)", _find_photo),
    ("2", "Update Photo Details", _update_photo),
    ("3", "Tag Photo", _tag_photo),
    ("4", "List My Photos in Album", _album_photos),
]
EXIT_CHOICE = "5"

HANDLERS = {key: handler for key, _, handler in MENU}


def run_menu(user: UserView, store: CatalogStore) -> None:
    """Menu loop after login. Returns when the user picks Exit."""
    while True:
        console.print("\n===== Digital Media Catalog =====")
        console.print(f"Logged in as: {escape(user.username)}")
        for key, label, _ in MENU:
            console.print(f"{key}. {label}")
        console.print(f"{EXIT_CHOICE}. Exit")
        choice = Prompt.ask("Your selection>").strip()

        if choice == EXIT_CHOICE:
            break
        handler = HANDLERS.get(choice)
        if handler is None:
            console.print("**** ERROR **** select a valid option")
            continue

        console.print()
        try:
            handler(user, store)
        except StorageError as e:
            logger.error("Storage failure: %s", e)
            _error(f"Storage error: {e}")
    console.print("Goodbye!")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="mediacatalog",
        description="Digital Media Catalog - look up, edit and tag your photos",
    )
    p.add_argument(
        "--data-dir",
        type=Path,
        help="Directory holding users.json, albums.json and photos.json "
        "(default: $CATALOG_DATA_DIR or the current directory)",
    )
    return p


def main(argv: Optional[list[str]] = None, config: Optional[Settings] = None) -> int:
    """Entry point: log in, then run the menu."""
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    config = config or settings
    if args.data_dir is not None:
        config = config.model_copy(update={"data_dir": args.data_dir})

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    store = JsonCatalogStore(config)

    console.print("Welcome to Digital Media Catalog")
    username = Prompt.ask("Username")
    password = Prompt.ask("Password", password=True)
    try:
        user = login(username, password, store)
    except StorageError as e:
        logger.error("Cannot load users: %s", e)
        _error(f"Storage error: {e}")
        return 1
    if not user:
        console.print("Invalid credentials. Exiting.")
        return 1

    run_menu(user, store)
    return 0


if __name__ == "__main__":
    sys.exit(main())
