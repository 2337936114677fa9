"""Digest helper used to normalise file identities before they become keys."""

import hashlib


def digest(algorithm: str, value: str) -> str:
    """Hex digest of value (UTF-8 encoded) with the named hashlib algorithm."""
    return hashlib.new(algorithm, value.encode("utf-8")).hexdigest()
