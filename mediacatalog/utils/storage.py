"""Storage utilities: whole-file JSON reads and rewrites."""

import json
import logging
import os
import shutil
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """A collection file is missing, unreadable, malformed or unwritable."""

    def __init__(self, message: str, path: "Path | None" = None):
        super().__init__(message)
        self.path = path


def read_json(path: Path) -> object:
    """Read and parse a JSON document.

    Raises StorageError if the file is missing, unreadable or not valid JSON.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise StorageError(f"Data file not found: {path}", path) from e
    except OSError as e:
        raise StorageError(f"Cannot read {path}: {e}", path) from e

    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise StorageError(f"Invalid JSON in {path}: {e}", path) from e


def write_json(path: Path, data: object, indent: int = 2, atomic: bool = True) -> None:
    """Serialize data as pretty-printed UTF-8 JSON and replace the file.

    With atomic=True the document is written to a temporary file in the same
    directory and renamed over the target, so a crash never leaves a
    truncated collection behind.
    """
    text = json.dumps(data, ensure_ascii=False, indent=indent)
    try:
        if not atomic:
            path.write_text(text, encoding="utf-8")
            return

        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            if path.exists():
                shutil.copymode(path, tmp_name)  # mkstemp creates 0600
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except OSError as e:
        logger.error("Failed to write %s: %s", path, e)
        raise StorageError(f"Cannot write {path}: {e}", path) from e
