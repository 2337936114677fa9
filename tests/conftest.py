"""Shared fixtures: provider options, a recording transport and a local transport."""

from unittest.mock import MagicMock

import pytest

from spaces_provider.storage.base import ObjectTransport, PutResult
from spaces_provider.storage.local_transport import LocalTransport


class RecordingTransport(ObjectTransport):
    """In-memory transport that remembers every call."""

    def __init__(self, location_prefix: str = "space.nyc3.digitaloceanspaces.com") -> None:
        self.location_prefix = location_prefix
        self.objects: dict[tuple[str, str], bytes] = {}
        self.puts: list[dict] = []
        self.deletes: list[tuple[str, str]] = []

    async def put(self, bucket, key, payload, content_type, *, acl, cache_control):
        data = payload if isinstance(payload, bytes) else payload.read()
        self.objects[(bucket, key)] = data
        self.puts.append(
            {
                "bucket": bucket,
                "key": key,
                "content_type": content_type,
                "acl": acl,
                "cache_control": cache_control,
            }
        )
        return PutResult(key=key, location=f"{self.location_prefix}/{key}")

    async def delete(self, bucket, key):
        self.deletes.append((bucket, key))
        if (bucket, key) not in self.objects:
            raise FileNotFoundError(key)
        del self.objects[(bucket, key)]


@pytest.fixture
def options():
    return {
        "endpoint": "nyc3.digitaloceanspaces.com",
        "key": "test-key",
        "secret": "test-secret",
        "space": "test-space",
        "directory": "uploads",
        "cdn": "https://cdn.digitalocean.com",
    }


@pytest.fixture
def recording_transport():
    return RecordingTransport()


@pytest.fixture
def local_transport(tmp_path):
    return LocalTransport(tmp_path / "objects", public_host="files.example.com")


@pytest.fixture
def mock_s3_client():
    return MagicMock()
