"""Tests for the Sass filter and the item importer it hands to the compiler."""

import posixpath
import re
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from sass_importer.content_item import ContentItem
from sass_importer.item_importer import ImportedStylesheet, ItemImporter
from sass_importer.item_lookup import ItemCollection
from sass_importer.load_config import load_config
from sass_importer.resolution_outcome import ImportResolutionError, OutcomeKind
from sass_importer.sass_filter import SassFilter
from sass_importer.syntax_from_ext import Syntax

IMPORT_RE = re.compile(r'^@import "([^"]+)";$', re.MULTILINE)


class InliningCompiler:
    """Fake compiler that inlines `@import` lines.

    Relative imports inside an imported stylesheet are joined to its
    canonical URL before being handed to the importer, as Sass does.
    """

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []

    def compile_string(
        self,
        content: str,
        *,
        importer: ItemImporter,
        syntax: Syntax,
        **options: Any,
    ) -> str:
        self.calls.append({"syntax": syntax, **options})
        return self._inline(content, importer, base_url=None)

    def _inline(
        self, content: str, importer: ItemImporter, base_url: str | None
    ) -> str:
        def repl(m: re.Match) -> str:
            url = m.group(1)
            if base_url is not None and not url.startswith("/"):
                base = base_url[len(importer.url_prefix) :]
                url = posixpath.join(posixpath.dirname(base), url)
            canonical = importer.canonicalize(url)
            loaded = importer.load(canonical)
            nested_url = importer.canonicalize(loaded.identifier)
            return self._inline(loaded.contents, importer, nested_url)

        return IMPORT_RE.sub(repl, content)


@pytest.fixture
def items() -> ItemCollection:
    """Collection with a site stylesheet and its imports."""
    return ItemCollection(
        [
            ContentItem("/styles/site.scss", '@import "base";\n@import "grid";'),
            ContentItem("/styles/_base.scss", "body { margin: 0; }"),
            ContentItem("/styles/grid/index.scss", '@import "columns";'),
            ContentItem("/styles/grid/_columns.sass", ".col\n  float: left"),
            ContentItem("/styles/theme.sass", "a\n  color: red"),
            ContentItem("/styles/dup.scss", ""),
            ContentItem("/styles/_dup.scss", ""),
        ]
    )


def site_item(items: ItemCollection) -> ContentItem:
    """Return the site stylesheet item."""
    item = items.query("/styles/site.scss")
    assert item is not None
    return item


def test_run_inlines_imports(items: ItemCollection) -> None:
    """Verify that imports, including nested relative ones, are resolved."""
    compiler = InliningCompiler()
    item = site_item(items)
    out = SassFilter(items, item, compiler).run(item.raw_content)
    assert out == "body { margin: 0; }\n.col\n  float: left"
    assert compiler.calls == [{"syntax": Syntax.SCSS}]


def test_run_infers_indented_syntax(items: ItemCollection) -> None:
    """Verify that the syntax is inferred from the item's extension."""
    compiler = InliningCompiler()
    item = items.query("/styles/theme.sass")
    assert item is not None
    SassFilter(items, item, compiler).run(item.raw_content)
    assert compiler.calls[0]["syntax"] is Syntax.INDENTED


def test_run_syntax_param_overrides(items: ItemCollection) -> None:
    """Verify that an explicit syntax param wins and others pass through."""
    compiler = MagicMock()
    compiler.compile_string.return_value = "css"
    item = site_item(items)
    out = SassFilter(items, item, compiler).run(
        "a {}", {"syntax": "css", "style": "compressed"}
    )
    assert out == "css"
    _, kwargs = compiler.compile_string.call_args
    assert kwargs["syntax"] is Syntax.CSS
    assert kwargs["style"] == "compressed"
    assert isinstance(kwargs["importer"], ItemImporter)


def test_run_unknown_syntax_param(items: ItemCollection) -> None:
    """Verify that an unrecognized syntax option is rejected."""
    with pytest.raises(ValueError, match="Unknown syntax"):
        SassFilter(items, site_item(items), MagicMock()).run("", {"syntax": "less"})


def test_run_unknown_extension(items: ItemCollection) -> None:
    """Verify that items without a known extension compile as UNKNOWN."""
    compiler = MagicMock()
    SassFilter(items, ContentItem("/styles/raw"), compiler).run("")
    _, kwargs = compiler.compile_string.call_args
    assert kwargs["syntax"] is Syntax.UNKNOWN


def test_run_ambiguous_import_fails(items: ItemCollection) -> None:
    """Verify that an ambiguous import aborts the whole compilation."""
    item = ContentItem("/styles/page.scss", '@import "dup";')
    with pytest.raises(ImportResolutionError) as exc_info:
        SassFilter(items, item, InliningCompiler()).run(item.raw_content)
    assert "/styles/dup.scss, /styles/_dup.scss" in str(exc_info.value)
    assert exc_info.value.outcome.kind is OutcomeKind.AMBIGUOUS


def test_run_missing_import_fails(items: ItemCollection) -> None:
    """Verify that a missing import aborts the whole compilation."""
    item = ContentItem("/styles/page.scss", '@import "nope";')
    with pytest.raises(ImportResolutionError, match="/styles/nope"):
        SassFilter(items, item, InliningCompiler()).run(item.raw_content)


def test_from_config(items: ItemCollection, tmp_path: Path) -> None:
    """Verify that config supplies the URL prefix and default params."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(
        "importer:\n  url_prefix: 'site:'\nfilter:\n  syntax: indented\n"
    )
    compiler = MagicMock()
    sass_filter = SassFilter.from_config(
        items, site_item(items), compiler, load_config(str(config_file))
    )
    sass_filter.run("")
    _, kwargs = compiler.compile_string.call_args
    assert kwargs["syntax"] is Syntax.INDENTED
    assert kwargs["importer"].canonicalize("base") == "site:base"


def test_importer_load(items: ItemCollection) -> None:
    """Verify that load returns contents and syntax of the resolved item."""
    importer = ItemImporter(items, site_item(items))
    loaded = importer.load(importer.canonicalize("grid/columns"))
    assert loaded == ImportedStylesheet(
        contents=".col\n  float: left",
        syntax=Syntax.INDENTED,
        identifier="/styles/grid/_columns.sass",
    )


def test_importer_memoizes_loads(items: ItemCollection) -> None:
    """Verify that the same URL is only resolved once per importer."""
    lookup = MagicMock(wraps=items)
    importer = ItemImporter(lookup, site_item(items))
    first = importer.load("item:base")
    calls = lookup.query.call_count
    assert importer.load("base") is first
    assert lookup.query.call_count == calls


def test_importer_does_not_memoize_failures(items: ItemCollection) -> None:
    """Verify that failed loads are retried on the next call."""
    lookup = MagicMock(wraps=items)
    importer = ItemImporter(lookup, site_item(items))
    for _ in range(2):
        with pytest.raises(ImportResolutionError):
            importer.load("nope")
    assert lookup.query.call_count == 8  # noqa: PLR2004
