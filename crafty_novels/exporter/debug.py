"""Plain-text dump of a token sequence, one token per line."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from crafty_novels.exporter.base import BaseExporter, TokenRenderer
from crafty_novels.syntax.tokens import (
    Frontmatter,
    LineBreak,
    PageBreak,
    StyleEnd,
    StyleStart,
    Text,
    Token,
)


class _DebugRenderer(TokenRenderer):
    format_name = "debug"

    def __init__(self, indent: str) -> None:
        self._indent = indent
        self._depth = 0
        self._lines: list[str] = []

    def _line(self, token: Any) -> None:
        self._lines.append(f"{self._indent * self._depth}{token.describe()}")

    def on_frontmatter(self, token: Frontmatter) -> None:
        self._line(token)

    def on_text(self, token: Text) -> None:
        self._line(token)

    def on_style_start(self, token: StyleStart) -> None:
        self._line(token)
        self._depth += 1

    def on_style_end(self, token: StyleEnd, index: int) -> None:
        self._depth = max(self._depth - 1, 0)
        self._line(token)

    def on_page_break(self, token: PageBreak) -> None:
        self._line(token)

    def on_line_break(self, token: LineBreak) -> None:
        self._line(token)

    def on_unknown(self, token: Any, index: int) -> None:
        self._lines.append(f"{self._indent * self._depth}<unknown {token!r}>")

    def finish(self) -> str:
        return "\n".join(self._lines) + ("\n" if self._lines else "")


class DebugExporter(BaseExporter):
    """Human-readable token listing, indented by style depth."""

    format_name = "debug"

    def __init__(self, indent: str = "  ") -> None:
        self.indent = indent

    def create_renderer(self, tokens: Sequence[Token]) -> TokenRenderer:
        return _DebugRenderer(self.indent)
