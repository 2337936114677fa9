"""Local filesystem transport."""

import asyncio
import io
import logging
from pathlib import Path
from typing import Any

import aiofiles

from spaces_provider.storage.base import ObjectTransport, PutResult

logger = logging.getLogger(__name__)

DEFAULT_PUBLIC_HOST = "localhost"


class LocalTransport(ObjectTransport):
    """Store objects on local disk under root/bucket/key. Locations are bare host paths."""

    def __init__(self, root: Path | str, public_host: str = DEFAULT_PUBLIC_HOST) -> None:
        self.root = Path(root).resolve()
        self.root.mkdir(parents=True, exist_ok=True)
        self.public_host = public_host.rstrip("/")

    def _path(self, bucket: str, key: str) -> Path:
        """Resolve bucket/key under root, preventing path traversal."""
        relative = f"{bucket}/{key.lstrip('/')}"
        resolved = (self.root / relative).resolve()
        if not resolved.is_relative_to(self.root) or resolved == self.root:
            raise ValueError("Invalid storage key")
        return resolved

    async def put(
        self,
        bucket: str,
        key: str,
        payload: Any,
        content_type: str,
        *,
        acl: str,
        cache_control: str,
    ) -> PutResult:
        path = self._path(bucket, key)
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(payload, (bytes, bytearray, memoryview)):
            payload = io.BytesIO(payload)
        async with aiofiles.open(path, "wb") as f:
            while chunk := await asyncio.to_thread(payload.read, 64 * 1024):
                await f.write(chunk)
        logger.debug("Stored %s (%s) at %s", key, content_type, path)
        return PutResult(key=key, location=f"{self.public_host}/{bucket}/{key}")

    async def delete(self, bucket: str, key: str) -> None:
        path = self._path(bucket, key)
        path.unlink()
        logger.debug("Deleted %s", path)
