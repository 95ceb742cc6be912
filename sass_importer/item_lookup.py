"""Lookup of content items by single-wildcard patterns."""

import logging
import re
from collections.abc import Iterable, Iterator
from typing import Protocol

from sass_importer.content_item import ContentItem

logger = logging.getLogger(__name__)


class ItemLookup(Protocol):
    """Capability to find at most one item matching a pattern."""

    def query(self, pattern: str) -> ContentItem | None:
        """Return the item matching the pattern, or None."""
        ...


def pattern_regex(pattern: str) -> re.Pattern[str]:
    """Compile a pattern where `*` matches any run of non-separator chars."""
    parts = [re.escape(p) for p in pattern.split("*")]
    return re.compile("[^/]*".join(parts) + r"\Z")


class ItemCollection:
    """Read-only, in-memory collection of items implementing ItemLookup."""

    def __init__(self, items: Iterable[ContentItem]) -> None:
        """Index the given items by identifier, keeping insertion order."""
        self._items: dict[str, ContentItem] = {}
        for item in items:
            if item.identifier in self._items:
                logger.warning("Duplicate item identifier: %s", item.identifier)
                continue
            self._items[item.identifier] = item

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ContentItem]:
        return iter(self._items.values())

    def __getitem__(self, pattern: str) -> ContentItem | None:
        return self.query(pattern)

    def query(self, pattern: str) -> ContentItem | None:
        """Return the first item matching the pattern, or None."""
        if "*" not in pattern:
            return self._items.get(pattern)
        for item in self.find_all(pattern):
            return item
        return None

    def find_all(self, pattern: str) -> list[ContentItem]:
        """Return every item matching the pattern, in insertion order."""
        if "*" not in pattern:
            item = self._items.get(pattern)
            return [item] if item else []
        regex = pattern_regex(pattern)
        return [
            item for ident, item in self._items.items() if regex.match(ident)
        ]
