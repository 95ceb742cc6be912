"""Data model for representing stored content items."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ContentItem:
    """Represents an item of the content collection (stylesheet, page, etc.)."""

    identifier: str  # Absolute, e.g. /styles/_base.scss
    raw_content: str = ""
    attributes: dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def ext(self) -> str | None:
        """Return the extension of the identifier's final segment, if any."""
        basename = self.identifier.rsplit("/", 1)[-1]
        if "." not in basename:
            return None
        return basename.rsplit(".", 1)[-1]
