"""Utilities for producing canonical import URLs and absolute item paths."""

import posixpath

DEFAULT_URL_PREFIX = "item:"


def canonicalize_url(url: str, prefix: str = DEFAULT_URL_PREFIX) -> str:
    """Return the URL with the collection prefix, adding it if needed."""
    if url.startswith(prefix):
        return url
    return f"{prefix}{url}"


def strip_url_prefix(url: str, prefix: str = DEFAULT_URL_PREFIX) -> str:
    """Remove one leading collection prefix from the URL."""
    if prefix and url.startswith(prefix):
        return url[len(prefix) :]
    return url


def absolute_pattern(path: str, origin_identifier: str) -> str:
    """Expand a relative path against the directory of the origin identifier.

    Absolute paths are returned as-is. Relative ones are joined to the
    origin's directory and normalized, so `../x` from `/a/b/c.scss` gives
    `/a/x`.
    """
    if path.startswith("/"):
        return path
    dirname = posixpath.dirname(origin_identifier) or "/"
    return posixpath.normpath(posixpath.join(dirname, path))
