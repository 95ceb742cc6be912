"""Logic for telling whether an import path names an explicit extension."""

import re

BARE_NAME_RE = re.compile(r"(/|^)[^.]+$")


def has_explicit_extension(path: str) -> bool:
    """Return True unless the path ends in a segment without a dot.

    An empty path has no such segment, so it counts as explicit and is
    only looked up exactly.
    """
    return BARE_NAME_RE.search(path) is None
