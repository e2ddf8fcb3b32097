"""Failure values returned by the service layer."""

from enum import Enum

from pydantic import BaseModel


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    ACCESS_DENIED = "access_denied"
    STORAGE_ERROR = "storage_error"
    UPDATE_FAILED = "update_failed"


class Failure(BaseModel):
    kind: ErrorKind
    message: str


PHOTO_NOT_FOUND = "Photo not found"
ALBUM_NOT_FOUND = "Album not found"
ACCESS_DENIED = "Access denied (not your photo)"
UPDATE_FAILED = "Problem updating"


def not_found(message: str) -> Failure:
    return Failure(kind=ErrorKind.NOT_FOUND, message=message)


def access_denied(message: str = ACCESS_DENIED) -> Failure:
    return Failure(kind=ErrorKind.ACCESS_DENIED, message=message)


def update_failed(message: str = UPDATE_FAILED) -> Failure:
    return Failure(kind=ErrorKind.UPDATE_FAILED, message=message)


def is_failure(value: object) -> bool:
    return isinstance(value, Failure)
