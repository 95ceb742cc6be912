"""Generation of lookup patterns for an import path."""

import posixpath

PARTIAL_PREFIX = "_"
INDEX_NAMES = ("index", "_index")


def _widen(path: str, *, extension_given: bool) -> str:
    """Match any extension unless one was given explicitly."""
    return path if extension_given else f"{path}.*"


def partial_path(path: str) -> str:
    """Prefix the final segment with an underscore: /a/b -> /a/_b."""
    dirname, basename = posixpath.split(path.rstrip("/") or "/")
    return posixpath.join(dirname, f"{PARTIAL_PREFIX}{basename}")


def resolution_candidates(path: str, *, extension_given: bool) -> list[str]:
    """Return the lookup patterns for an absolute path, in query order.

    Order:
    - the path itself
    - the path as a partial (`_` prefixed final segment)
    - without an extension only: `index.*` and `_index.*` inside the path
    """
    candidates = [
        _widen(path, extension_given=extension_given),
        _widen(partial_path(path), extension_given=extension_given),
    ]
    if not extension_given:
        candidates.extend(
            posixpath.join(path, f"{name}.*") for name in INDEX_NAMES
        )
    return candidates
