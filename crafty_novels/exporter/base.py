"""Exporter interface and the shared token dispatch loop."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from crafty_novels.syntax.tokens import (
    Frontmatter,
    LineBreak,
    PageBreak,
    StyleEnd,
    StyleStart,
    Text,
    Token,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Anything that turns a token sequence into output text."""

    format_name: str

    def export(self, tokens: Sequence[Token]) -> str: ...


class TokenRenderer(ABC):
    """Per-call rendering state with one hook per token variant.

    Tokens without a hook go to `on_unknown`, which skips them, so exporters
    keep working when new token variants are added for other formats.
    """

    format_name: str = ""

    def dispatch(self, index: int, token: Any) -> None:
        if isinstance(token, Text):
            self.on_text(token)
        elif isinstance(token, StyleStart):
            self.on_style_start(token)
        elif isinstance(token, StyleEnd):
            self.on_style_end(token, index)
        elif isinstance(token, PageBreak):
            self.on_page_break(token)
        elif isinstance(token, LineBreak):
            self.on_line_break(token)
        elif isinstance(token, Frontmatter):
            self.on_frontmatter(token)
        else:
            self.on_unknown(token, index)

    @abstractmethod
    def on_text(self, token: Text) -> None: ...

    @abstractmethod
    def on_style_start(self, token: StyleStart) -> None: ...

    @abstractmethod
    def on_style_end(self, token: StyleEnd, index: int) -> None: ...

    @abstractmethod
    def on_page_break(self, token: PageBreak) -> None: ...

    @abstractmethod
    def on_line_break(self, token: LineBreak) -> None: ...

    @abstractmethod
    def on_frontmatter(self, token: Frontmatter) -> None: ...

    @abstractmethod
    def finish(self) -> str:
        """Return the complete output once every token has been seen."""
        ...

    def on_unknown(self, token: Any, index: int) -> None:
        logger.debug("%s exporter skipping unsupported token %d: %r", self.format_name, index, token)


class BaseExporter(ABC):
    """Consumes every token in order, exactly once, through a fresh renderer.

    Exporters hold configuration only, so one instance can be shared.
    """

    format_name: str = ""

    def export(self, tokens: Sequence[Token]) -> str:
        renderer = self.create_renderer(tokens)
        for index, token in enumerate(tokens):
            renderer.dispatch(index, token)
        output = renderer.finish()
        logger.debug("%s export: %d tokens -> %d chars", self.format_name, len(tokens), len(output))
        return output

    @abstractmethod
    def create_renderer(self, tokens: Sequence[Token]) -> TokenRenderer: ...
