"""Mapping of stylesheet file extensions to Sass syntaxes."""

from enum import Enum


class Syntax(Enum):
    """Syntax variant of a stylesheet."""

    INDENTED = "indented"
    SCSS = "scss"
    CSS = "css"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: "Syntax | str") -> "Syntax":
        """Return the Syntax for a Syntax or its string value."""
        if isinstance(value, Syntax):
            return value
        if not isinstance(value, str):
            msg = f"Unknown syntax `{value}`"
            raise ValueError(msg)
        try:
            return cls(value.lower())
        except ValueError:
            msg = f"Unknown syntax `{value}`"
            raise ValueError(msg) from None


EXTENSION_SYNTAXES: dict[str, Syntax] = {
    "sass": Syntax.INDENTED,
    "scss": Syntax.SCSS,
    "css": Syntax.CSS,
}


def syntax_from_ext(ext: str | None) -> Syntax:
    """Return the syntax for a file extension, UNKNOWN if unrecognized."""
    if ext is None:
        return Syntax.UNKNOWN
    return EXTENSION_SYNTAXES.get(ext, Syntax.UNKNOWN)
