"""Command line entry point for checking how an import reference resolves."""

import argparse
import logging
import sys

from sass_importer.content_item import ContentItem
from sass_importer.import_resolver import resolve_import
from sass_importer.item_lookup import ItemCollection
from sass_importer.load_config import load_config
from sass_importer.syntax_from_ext import syntax_from_ext


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the resolver CLI."""
    ap = argparse.ArgumentParser(
        description="Resolve a Sass import reference against item identifiers."
    )
    ap.add_argument("reference", help="Reference as written in the stylesheet")
    ap.add_argument(
        "--origin",
        required=True,
        help="Identifier of the importing item, e.g. /styles/site.scss",
    )
    ap.add_argument(
        "--item",
        dest="items",
        action="append",
        default=[],
        help="Identifier of an item in the collection (repeatable)",
    )
    ap.add_argument("--config", help="Path to configuration file")
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log the candidates that are tried",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Resolve the reference and print the matching identifier."""
    args = build_parser().parse_args(argv)
    config = load_config(args.config)

    level = "DEBUG" if args.verbose else config["log_level"]
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    collection = ItemCollection(ContentItem(identifier) for identifier in args.items)
    outcome = resolve_import(
        args.reference,
        args.origin,
        collection,
        url_prefix=config["importer"]["url_prefix"],
    )
    if not outcome.ok or outcome.item is None:
        print(outcome.message(), file=sys.stderr)
        return 1

    item = outcome.item
    print(f"{item.identifier}\t{syntax_from_ext(item.ext).value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
