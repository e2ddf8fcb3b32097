"""User models."""

from pydantic import BaseModel


class User(BaseModel):
    id: int
    username: str
    password: str  # plaintext seed data


class UserView(BaseModel):
    """User as handed to callers after login (no password)."""

    id: int
    username: str
