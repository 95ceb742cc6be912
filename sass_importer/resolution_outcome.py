"""Data models for import resolution outcomes."""

from dataclasses import dataclass, field
from enum import Enum

from sass_importer.content_item import ContentItem


class OutcomeKind(Enum):
    """Kind of result produced by resolving an import reference."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    AMBIGUOUS = "ambiguous"


class ImportResolutionError(Exception):
    """Raised when an import reference does not resolve to exactly one item."""

    def __init__(self, outcome: "ResolutionOutcome") -> None:
        """Store the failed outcome and build the message from it."""
        super().__init__(outcome.message())
        self.outcome = outcome


@dataclass(frozen=True)
class ResolutionOutcome:
    """Represents the outcome of resolving an import reference."""

    kind: OutcomeKind
    reference: str  # As written by the importing document
    pattern: str  # Absolute path the candidates were built from
    item: ContentItem | None = None
    conflicts: list[str] = field(default_factory=list)

    @classmethod
    def found(
        cls, reference: str, pattern: str, item: ContentItem
    ) -> "ResolutionOutcome":
        """Build a successful outcome."""
        return cls(OutcomeKind.FOUND, reference, pattern, item=item)

    @classmethod
    def not_found(cls, reference: str, pattern: str) -> "ResolutionOutcome":
        """Build an outcome for a reference matching no item."""
        return cls(OutcomeKind.NOT_FOUND, reference, pattern)

    @classmethod
    def ambiguous(
        cls, reference: str, pattern: str, conflicts: list[str]
    ) -> "ResolutionOutcome":
        """Build an outcome for a reference matching several items."""
        return cls(OutcomeKind.AMBIGUOUS, reference, pattern, conflicts=conflicts)

    @property
    def ok(self) -> bool:
        """Whether exactly one item was found."""
        return self.kind is OutcomeKind.FOUND

    def message(self) -> str:
        """Return a human-readable description of the outcome."""
        if self.kind is OutcomeKind.FOUND and self.item is not None:
            return f"Resolved `{self.pattern}` to {self.item.identifier}"
        if self.kind is OutcomeKind.AMBIGUOUS:
            msg = (
                "It is not clear which item to import. "
                f"Multiple items match `{self.pattern}`: {', '.join(self.conflicts)}"
            )
        else:
            msg = f"Could not find an item matching pattern `{self.pattern}`"
        if self.reference != self.pattern:
            msg += f" (imported as `{self.reference}`)"
        return msg

    def unwrap(self) -> ContentItem:
        """Return the resolved item or raise ImportResolutionError."""
        if self.kind is OutcomeKind.FOUND and self.item is not None:
            return self.item
        raise ImportResolutionError(self)
