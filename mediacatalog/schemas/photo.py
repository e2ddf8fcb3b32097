"""Photo operation results."""

from typing import Optional

from pydantic import BaseModel

from mediacatalog.schemas.results import Failure


class UpdateResult(BaseModel):
    ok: bool
    error: Optional[Failure] = None


class TagResult(UpdateResult):
    skipped: bool = False
