"""Importer handed to the Sass compiler to load stylesheets from items."""

import logging
import threading
from dataclasses import dataclass

from sass_importer.canonicalize_url import DEFAULT_URL_PREFIX, canonicalize_url
from sass_importer.content_item import ContentItem
from sass_importer.import_resolver import resolve_import
from sass_importer.item_lookup import ItemLookup
from sass_importer.lazy_value import LazyValue
from sass_importer.resolution_outcome import ImportResolutionError, OutcomeKind
from sass_importer.syntax_from_ext import Syntax, syntax_from_ext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportedStylesheet:
    """Contents and syntax of an imported stylesheet."""

    contents: str
    syntax: Syntax
    identifier: str


class ItemImporter:
    """Resolves `@use`/`@import` URLs against the item collection."""

    def __init__(
        self,
        items: ItemLookup,
        source_item: ContentItem,
        url_prefix: str = DEFAULT_URL_PREFIX,
    ) -> None:
        """Initialize with the collection and the item being compiled."""
        self.items = items
        self.source_item = source_item
        self.url_prefix = url_prefix
        self._loaded: dict[str, LazyValue[ImportedStylesheet]] = {}
        self._lock = threading.Lock()

    def canonicalize(self, url: str) -> str:
        """Return the canonical URL the compiler should pass to `load`."""
        return canonicalize_url(url, self.url_prefix)

    def load(self, url: str) -> ImportedStylesheet:
        """Return the stylesheet for a canonical URL.

        Raises ImportResolutionError when the URL matches no item or more
        than one. Successful loads are kept for the lifetime of the importer.
        """
        url = self.canonicalize(url)
        with self._lock:
            cell = self._loaded.get(url)
            if cell is None:
                cell = LazyValue(lambda: self._load_uncached(url))
                self._loaded[url] = cell
        try:
            return cell.value()
        except ImportResolutionError:
            with self._lock:
                self._loaded.pop(url, None)
            raise

    def _load_uncached(self, url: str) -> ImportedStylesheet:
        outcome = resolve_import(
            url,
            self.source_item.identifier,
            self.items,
            url_prefix=self.url_prefix,
        )
        if outcome.kind is OutcomeKind.AMBIGUOUS:
            logger.warning(
                "Ambiguous import %s in %s: %s",
                url,
                self.source_item.identifier,
                ", ".join(outcome.conflicts),
            )
        item = outcome.unwrap()
        return ImportedStylesheet(
            contents=item.raw_content,
            syntax=syntax_from_ext(item.ext),
            identifier=item.identifier,
        )
