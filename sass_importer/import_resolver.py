"""Resolution of import references to items of the content collection."""

import logging

from sass_importer.canonicalize_url import (
    DEFAULT_URL_PREFIX,
    absolute_pattern,
    strip_url_prefix,
)
from sass_importer.content_item import ContentItem
from sass_importer.has_explicit_extension import has_explicit_extension
from sass_importer.item_lookup import ItemLookup
from sass_importer.resolution_candidates import resolution_candidates
from sass_importer.resolution_outcome import ResolutionOutcome

logger = logging.getLogger(__name__)


def resolve_import(
    reference: str,
    origin_identifier: str,
    lookup: ItemLookup,
    *,
    url_prefix: str = DEFAULT_URL_PREFIX,
) -> ResolutionOutcome:
    """Resolve a reference made from the origin item to exactly one item.

    Every candidate (regular, partial, and without an extension the two index
    forms) is queried. Two distinct matches are ambiguous even when they come
    from different conventions; no convention takes priority.
    """
    path = strip_url_prefix(reference, url_prefix)
    extension_given = has_explicit_extension(path)
    pattern = absolute_pattern(path, origin_identifier)

    candidates = resolution_candidates(pattern, extension_given=extension_given)
    logger.debug(
        "Resolving %s from %s via %s", reference, origin_identifier, candidates
    )

    found: list[ContentItem] = []
    seen: set[str] = set()
    for candidate in candidates:
        item = lookup.query(candidate)
        if item is None or item.identifier in seen:
            continue
        seen.add(item.identifier)
        found.append(item)

    if not found:
        logger.debug("No item matches %s", pattern)
        return ResolutionOutcome.not_found(path, pattern)
    if len(found) == 1:
        logger.debug("Resolved %s to %s", reference, found[0].identifier)
        return ResolutionOutcome.found(path, pattern, found[0])
    return ResolutionOutcome.ambiguous(
        path, pattern, [item.identifier for item in found]
    )
