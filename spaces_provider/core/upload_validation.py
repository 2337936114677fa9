"""File descriptor validation and payload selection for uploads."""

import mimetypes
from typing import Any

from spaces_provider.exceptions import InputError
from spaces_provider.schemas.file import FileDescriptor

DEFAULT_CONTENT_TYPE = "application/octet-stream"


def validate_descriptor(file: FileDescriptor) -> None:
    """Raise InputError when the descriptor cannot produce a key."""
    # "" is valid for both: an extensionless file, or an arbitrary identity string
    missing = [
        name for name in ("hash", "ext") if not isinstance(getattr(file, name, None), str)
    ]
    if missing:
        raise InputError(
            f"File descriptor is missing {', '.join(missing)}",
            details={name: "required" for name in missing},
        )


def select_payload(file: FileDescriptor) -> Any:
    """Return the stream to upload if there is one, else the raw buffer."""
    if file.stream is not None:
        return file.stream
    if file.buffer is not None:
        return file.buffer
    raise InputError(
        "File descriptor has neither buffer nor stream",
        details={"buffer": "required", "stream": "required"},
    )


def resolve_content_type(file: FileDescriptor) -> str:
    """file.mime, else a guess from the extension, else application/octet-stream."""
    if file.mime and file.mime.strip():
        return file.mime.strip()
    guessed, _ = mimetypes.guess_type(f"file{file.ext or ''}")
    return guessed or DEFAULT_CONTENT_TYPE
