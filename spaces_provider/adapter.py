"""Upload and delete files through an object transport."""

import logging

from spaces_provider.config import CACHE_CONTROL, PUBLIC_READ_ACL, SpacesConfig
from spaces_provider.core.hashing import digest
from spaces_provider.core.key_url import get_key, get_url
from spaces_provider.core.upload_validation import (
    resolve_content_type,
    select_payload,
    validate_descriptor,
)
from spaces_provider.schemas.file import FileDescriptor, StoredObject
from spaces_provider.storage.base import ObjectTransport

logger = logging.getLogger(__name__)


class StorageAdapter:
    """
    The object the host calls upload()/delete() on.

    Holds only the frozen config and the transport; every call works on its
    own descriptor, so calls may run concurrently.
    """

    def __init__(self, config: SpacesConfig, transport: ObjectTransport) -> None:
        self.config = config
        self.transport = transport

    def key_for(self, file: FileDescriptor) -> str:
        """Storage key for the descriptor's current hash and extension."""
        return get_key(file.hash, file.ext, self.config.directory)

    async def upload(self, file: FileDescriptor) -> StoredObject:
        """
        Store the file and set ``file.url``.

        ``file.hash`` is always replaced by its digest first, even when it
        already looks like one, so uploading the same descriptor twice stores
        it under two different keys.
        """
        validate_descriptor(file)
        payload = select_payload(file)
        file.hash = digest(self.config.hash_algorithm, file.hash)
        key = self.key_for(file)
        result = await self.transport.put(
            self.config.bucket,
            key,
            payload,
            resolve_content_type(file),
            acl=PUBLIC_READ_ACL,
            cache_control=CACHE_CONTROL,
        )
        file.url = get_url(result.location, result.key, self.config.cdn_base_url)
        logger.debug("Uploaded %s -> %s", key, file.url)
        return StoredObject(key=key, url=file.url, hash=file.hash)

    async def delete(self, file: FileDescriptor) -> None:
        """Remove the object stored for ``file``; transport errors propagate."""
        validate_descriptor(file)
        key = self.key_for(file)
        await self.transport.delete(self.config.bucket, key)
        logger.debug("Deleted %s", key)
