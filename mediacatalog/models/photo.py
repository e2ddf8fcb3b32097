"""Photo model."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class Photo(BaseModel):
    model_config = ConfigDict(extra="allow")

    # Strict so the ownership check sees the stored value, never a coerced "1" or 1.0.
    id: StrictInt
    owner: StrictInt  # users.id
    filename: str = ""
    title: Optional[str] = ""
    description: Optional[str] = ""
    date: Optional[str] = ""  # ISO-8601
    albums: Any = None  # list of albums.id; may be absent or malformed in seed data
    tags: list[str] = Field(default_factory=list)

    def has_tag(self, tag: str) -> bool:
        wanted = tag.lower()
        return any(t.lower() == wanted for t in self.tags)
