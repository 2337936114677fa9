"""Storage key and public URL derivation.

Keys are built from the (already normalised) file hash, its extension and
the configured directory. URLs come either from the CDN base, when one is
configured, or from the location the transport reported for the upload.
"""

import re
from urllib.parse import SplitResult, urlsplit, urlunsplit

from spaces_provider.exceptions import ConfigurationError

_SCHEME_RE = re.compile(r"^\w+://")


def get_key(hash: str, ext: str, directory: str | None = None) -> str:
    """Return ``directory/hash+ext``, or ``hash+ext`` when no directory is set."""
    filename = f"{hash}{ext}"
    if directory:
        return f"{directory}/{filename}"
    return filename


def has_url_scheme(url: str) -> bool:
    """True when url already starts with a scheme such as ``http://``."""
    return bool(_SCHEME_RE.match(url))


def _parse_cdn_base(cdn_base_url: str) -> SplitResult:
    try:
        parts = urlsplit(cdn_base_url.strip())
        # .port raises on a non-numeric port
        parts.port
    except ValueError as exc:
        raise ConfigurationError(
            f"Invalid CDN base URL: {cdn_base_url!r}", details={"cdn": str(exc)}
        ) from exc
    if not parts.scheme or not parts.netloc:
        raise ConfigurationError(
            f"Invalid CDN base URL: {cdn_base_url!r}",
            details={"cdn": "scheme and host are required"},
        )
    return parts


def get_url(location: str, key: str, cdn_base_url: str | None = None) -> str:
    """
    Public URL for a stored object.

    With a CDN base the result is always ``https``, on the CDN host, with the
    key as path; query and fragment of the base are kept. Without one, the
    transport location is used as is, gaining ``https://`` when it has no
    scheme.
    """
    if cdn_base_url:
        parts = _parse_cdn_base(cdn_base_url)
        path = "/" + key.lstrip("/")
        return urlunsplit(parts._replace(scheme="https", path=path))

    if has_url_scheme(location):
        return location
    return f"https://{location}"
