"""Filter running item content through an external Sass compiler."""

import logging
from typing import Any, Protocol

from sass_importer.canonicalize_url import DEFAULT_URL_PREFIX
from sass_importer.content_item import ContentItem
from sass_importer.item_importer import ItemImporter
from sass_importer.item_lookup import ItemLookup
from sass_importer.syntax_from_ext import Syntax, syntax_from_ext

logger = logging.getLogger(__name__)


class SassCompiler(Protocol):
    """Compiles a stylesheet string, loading imports through the importer."""

    def compile_string(
        self,
        content: str,
        *,
        importer: ItemImporter,
        syntax: Syntax,
        **options: Any,
    ) -> str:
        """Return the compiled CSS."""
        ...


class SassFilter:
    """Compiles the content of one item, resolving imports from the collection."""

    def __init__(
        self,
        items: ItemLookup,
        item: ContentItem,
        compiler: SassCompiler,
        url_prefix: str = DEFAULT_URL_PREFIX,
        default_params: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the filter for the item being compiled."""
        self.items = items
        self.item = item
        self.compiler = compiler
        self.url_prefix = url_prefix
        self.default_params = default_params or {}

    @classmethod
    def from_config(
        cls,
        items: ItemLookup,
        item: ContentItem,
        compiler: SassCompiler,
        config: dict[str, Any],
    ) -> "SassFilter":
        """Build a filter using the `importer` and `filter` config sections."""
        filter_config = config.get("filter", {})
        default_params = {k: v for k, v in filter_config.items() if v is not None}
        importer_config = config.get("importer", {})
        return cls(
            items,
            item,
            compiler,
            url_prefix=importer_config.get("url_prefix", DEFAULT_URL_PREFIX),
            default_params=default_params,
        )

    def run(self, content: str, params: dict[str, Any] | None = None) -> str:
        """Compile content and return the CSS.

        `params["syntax"]` overrides the syntax inferred from the item's
        extension. All other params are passed on to the compiler.
        """
        options = {**self.default_params, **(params or {})}
        syntax_param = options.pop("syntax", None)
        if syntax_param is None:
            syntax = syntax_from_ext(self.item.ext)
        else:
            syntax = Syntax.parse(syntax_param)

        logger.debug("Compiling %s as %s", self.item.identifier, syntax.value)
        importer = ItemImporter(self.items, self.item, self.url_prefix)
        return self.compiler.compile_string(
            content, importer=importer, syntax=syntax, **options
        )
