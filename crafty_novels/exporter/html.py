"""HTML export.

Output is a single document written without line endings::

    <!DOCTYPE html><html lang="en" dir="ltr"><head><meta charset="utf-8" />
    <title>{title}</title><meta name="author" content="{author}" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" /></head>
    <body><article style="white-space:break-spaces">
    <section class="page">...</section>
    </article></body></html>

Inside each page section, text is entity-escaped, line breaks become
``<br />`` and styles map to ``<b>``, ``<i>``, ``<u>``, ``<s>``,
``<code class="obfuscated">`` and ``<span style="color:#RRGGBB">``.
Tags that are open at a page boundary are closed before ``</section>`` and
re-opened in the next page, so the markup stays well-formed.
"""

from __future__ import annotations

import html
import logging
from collections.abc import Sequence

from crafty_novels.config.models import HtmlConfig
from crafty_novels.errors import TokenSequenceError, UnmappedTokenKind
from crafty_novels.exporter.base import BaseExporter, TokenRenderer
from crafty_novels.syntax.minecraft import Color, Style, StyleKind
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

HTML_STYLE_TAGS: dict[Style, tuple[str, str]] = {
    Style.bold: ("<b>", "</b>"),
    Style.italic: ("<i>", "</i>"),
    Style.underline: ("<u>", "</u>"),
    Style.strikethrough: ("<s>", "</s>"),
    Style.obfuscated: ('<code class="obfuscated">', "</code>"),
}

# Frontmatter keys with a dedicated element in <head>.
_KNOWN_METADATA = ("title", "author")


def _escape(text: str) -> str:
    return html.escape(text, quote=True)


def style_tags(kind: StyleKind) -> tuple[str, str]:
    """Opening and closing tag for a style kind."""
    if isinstance(kind, Color):
        return f'<span style="color:{kind.fg}">', "</span>"
    if isinstance(kind, Style) and kind in HTML_STYLE_TAGS:
        return HTML_STYLE_TAGS[kind]
    raise UnmappedTokenKind(kind, "html")


class _HtmlRenderer(TokenRenderer):
    format_name = "html"

    def __init__(self, config: HtmlConfig) -> None:
        self._config = config
        self._metadata: dict[str, str] = {}
        self._body: list[str] = []
        self._open: list[StyleKind] = []
        self._page_open = False
        self._pages = 0

    # -- pages -------------------------------------------------------------

    def _open_page(self) -> None:
        self._body.append(f'<section class="{self._config.page_class}">')
        self._page_open = True
        self._pages += 1
        for kind in self._open:
            self._body.append(style_tags(kind)[0])

    def _close_page(self) -> None:
        for kind in reversed(self._open):
            self._body.append(style_tags(kind)[1])
        self._body.append("</section>")
        self._page_open = False

    def _ensure_page(self) -> None:
        if not self._page_open:
            self._open_page()

    # -- token hooks -------------------------------------------------------

    def on_frontmatter(self, token: Frontmatter) -> None:
        self._metadata.update(token.fields)

    def on_text(self, token: Text) -> None:
        if not token.content:
            return
        self._ensure_page()
        self._body.append(_escape(token.content))

    def on_style_start(self, token: StyleStart) -> None:
        opening, _ = style_tags(token.kind)
        self._ensure_page()
        self._body.append(opening)
        self._open.append(token.kind)

    def on_style_end(self, token: StyleEnd, index: int) -> None:
        if token.kind not in self._open:
            raise TokenSequenceError(f"{token.describe()} closes a style that is not open", index)

        position = len(self._open) - 1 - self._open[::-1].index(token.kind)
        above = self._open[position + 1 :]
        if above:
            logger.debug("overlapping styles at token %d; re-nesting %d tag(s)", index, len(above))

        for kind in reversed(above):
            self._body.append(style_tags(kind)[1])
        self._body.append(style_tags(token.kind)[1])
        del self._open[position:]
        for kind in above:
            self._body.append(style_tags(kind)[0])
            self._open.append(kind)

    def on_page_break(self, token: PageBreak) -> None:
        if self._page_open:
            self._close_page()
        self._open_page()

    def on_line_break(self, token: LineBreak) -> None:
        self._ensure_page()
        self._body.append("<br />")

    def finish(self) -> str:
        if self._page_open:
            self._close_page()
        self._open.clear()
        logger.debug("rendered %d page section(s)", self._pages)
        return "".join([*self._head(), *self._body, "</article></body></html>"])

    def _head(self) -> list[str]:
        cfg = self._config
        parts = [
            "<!DOCTYPE html>",
            f'<html lang="{_escape(cfg.lang)}" dir="{cfg.dir}">',
            '<head><meta charset="utf-8" />',
        ]

        title = self._metadata.get("title")
        if title is not None:
            parts.append(f"<title>{_escape(title)}</title>")
        author = self._metadata.get("author")
        if author is not None:
            parts.append(f'<meta name="author" content="{_escape(author)}" />')

        if cfg.include_extra_metadata:
            for key, value in self._metadata.items():
                if key in _KNOWN_METADATA:
                    continue
                parts.append(f'<meta name="{_escape(key)}" content="{_escape(value)}" />')

        if cfg.viewport:
            parts.append('<meta name="viewport" content="width=device-width, initial-scale=1.0" />')

        parts.append("</head>")
        parts.append(f'<body><article style="white-space:{cfg.white_space}">')
        return parts


class HtmlExporter(BaseExporter):
    """Renders a token sequence as a standalone HTML document."""

    format_name = "html"

    def __init__(self, config: HtmlConfig | None = None) -> None:
        self.config = config or HtmlConfig()

    def create_renderer(self, tokens: Sequence[Token]) -> TokenRenderer:
        return _HtmlRenderer(self.config)
