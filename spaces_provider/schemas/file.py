"""Pydantic schemas for files handed to the provider."""

from typing import Any

from pydantic import BaseModel, Field


class FileDescriptor(BaseModel):
    """
    A file the host wants stored or removed.

    upload() replaces ``hash`` with its digest and sets ``url``; delete()
    reads ``hash`` and ``ext`` back to find the same key.
    """

    hash: str = Field(..., description="Identity seed, replaced by its digest on upload")
    ext: str = Field(..., description="Extension including the leading dot, e.g. .jpg")
    mime: str | None = None
    buffer: bytes | None = None
    stream: Any | None = None  # bytes or a binary file-like object
    url: str | None = None

    model_config = {"extra": "allow", "arbitrary_types_allowed": True}


class StoredObject(BaseModel):
    """Result of a successful upload."""

    key: str
    url: str
    hash: str

    model_config = {"frozen": True}
