"""DigitalOcean Spaces (S3-compatible) upload provider."""

from spaces_provider.adapter import StorageAdapter
from spaces_provider.config import SpacesConfig
from spaces_provider.exceptions import ConfigurationError, InputError, ProviderError
from spaces_provider.schemas.file import FileDescriptor, StoredObject
from spaces_provider.storage.base import ObjectTransport
from spaces_provider.storage.s3_transport import S3Transport

PROVIDER = "do"
NAME = "Digital Ocean Spaces"


def init(options: dict, transport: ObjectTransport | None = None) -> StorageAdapter:
    """
    Build the adapter from the host's options (endpoint, key, secret, space,
    directory, cdn, hash). An S3 transport is created unless one is given.
    """
    config = SpacesConfig.from_options(options)
    if transport is None:
        transport = S3Transport(config)
    return StorageAdapter(config, transport)


__all__ = [
    "PROVIDER",
    "NAME",
    "init",
    "StorageAdapter",
    "SpacesConfig",
    "FileDescriptor",
    "StoredObject",
    "ObjectTransport",
    "S3Transport",
    "ConfigurationError",
    "InputError",
    "ProviderError",
]
