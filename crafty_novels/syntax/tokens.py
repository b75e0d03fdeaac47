"""The intermediate, format-agnostic representation of a book.

Importers produce a flat list of tokens; exporters consume it. Tokens are
immutable and hold no references to each other.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from crafty_novels.syntax.minecraft import Color, Style, StyleKind


def _kind_name(kind: StyleKind) -> str:
    if isinstance(kind, Color):
        return f"color:{kind.value}"
    if isinstance(kind, Style):
        return kind.value
    return repr(kind)


@dataclass(frozen=True)
class Token:
    """Base class for every token variant.

    Exporters skip subclasses they do not recognise, so new variants can be
    added for new formats without touching existing exporters.
    """

    def describe(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class Text(Token):
    """A run of literal text, unescaped."""

    content: str

    def describe(self) -> str:
        return f"Text({self.content!r})"


@dataclass(frozen=True)
class StyleStart(Token):
    kind: StyleKind

    def describe(self) -> str:
        return f"StyleStart({_kind_name(self.kind)})"


@dataclass(frozen=True)
class StyleEnd(Token):
    kind: StyleKind

    def describe(self) -> str:
        return f"StyleEnd({_kind_name(self.kind)})"


@dataclass(frozen=True)
class PageBreak(Token):
    """Boundary between two pages of the book."""


@dataclass(frozen=True)
class LineBreak(Token):
    """A line ending within a page."""


@dataclass(frozen=True)
class Frontmatter(Token):
    """Metadata about the work, always the first token when present."""

    fields: dict[str, str] = field(default_factory=dict)

    @property
    def title(self) -> str | None:
        return self.fields.get("title")

    @property
    def author(self) -> str | None:
        return self.fields.get("author")

    def describe(self) -> str:
        pairs = ", ".join(f"{k}={v!r}" for k, v in self.fields.items())
        return f"Frontmatter({pairs})"

    # dict fields are unhashable; hash on the sorted items instead
    def __hash__(self) -> int:
        return hash(tuple(sorted(self.fields.items())))
