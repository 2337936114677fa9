# Object transports

from spaces_provider.storage.base import ObjectTransport, PutResult
from spaces_provider.storage.local_transport import LocalTransport
from spaces_provider.storage.s3_transport import S3Transport

__all__ = ["ObjectTransport", "PutResult", "LocalTransport", "S3Transport"]
