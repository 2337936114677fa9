"""Tests for the local filesystem transport."""

import io

import pytest

from spaces_provider.storage.local_transport import LocalTransport


async def test_put_writes_bytes_and_returns_bare_location(local_transport, tmp_path):
    result = await local_transport.put(
        "space", "dir/a.txt", b"hello", "text/plain", acl="public-read", cache_control="c"
    )

    assert (tmp_path / "objects" / "space" / "dir" / "a.txt").read_bytes() == b"hello"
    assert result.key == "dir/a.txt"
    assert result.location == "files.example.com/space/dir/a.txt"


async def test_put_reads_streams_in_chunks(local_transport, tmp_path):
    data = b"0123456789" * 20000

    await local_transport.put(
        "space", "big.bin", io.BytesIO(data), "application/octet-stream",
        acl="public-read", cache_control="c",
    )

    assert (tmp_path / "objects" / "space" / "big.bin").read_bytes() == data


async def test_delete_removes_file(local_transport, tmp_path):
    await local_transport.put("space", "a.txt", b"x", "text/plain", acl="a", cache_control="c")

    await local_transport.delete("space", "a.txt")

    assert not (tmp_path / "objects" / "space" / "a.txt").exists()


async def test_delete_missing_raises(local_transport):
    with pytest.raises(FileNotFoundError):
        await local_transport.delete("space", "missing.txt")


async def test_rejects_path_traversal(local_transport):
    with pytest.raises(ValueError, match="Invalid storage key"):
        await local_transport.put(
            "space", "../../escape.txt", b"x", "text/plain", acl="a", cache_control="c"
        )


def test_default_public_host(tmp_path):
    transport = LocalTransport(tmp_path)
    assert transport.public_host == "localhost"


async def test_put_reads_real_file_streams(local_transport, tmp_path):
    source = tmp_path / "source.bin"
    source.write_bytes(b"on disk" * 1000)

    with source.open("rb") as stream:
        await local_transport.put(
            "space", "copy.bin", stream, "application/octet-stream",
            acl="public-read", cache_control="c",
        )

    assert (tmp_path / "objects" / "space" / "copy.bin").read_bytes() == b"on disk" * 1000
