"""Abstract object transport."""

from abc import ABC, abstractmethod
from typing import Any, NamedTuple


class PutResult(NamedTuple):
    """Where the transport stored an object."""

    key: str
    location: str


class ObjectTransport(ABC):
    """Interface for the object store the adapter writes to (S3 or local disk)."""

    @abstractmethod
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
        """
        Store payload (bytes or a binary file-like object) at bucket/key.
        The returned location may or may not carry a URL scheme.
        """
        ...

    @abstractmethod
    async def delete(self, bucket: str, key: str) -> None:
        """Remove the object at bucket/key. A missing object is an error."""
        ...
