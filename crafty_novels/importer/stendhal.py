"""Tokenizer for books exported by the Stendhal mod.

Body markup understood here:

- ``#- `` at the start of the body or of a line starts a new page
- ``§`` + format code applies Minecraft formatting (``§l`` bold, ``§c`` red,
  ``§r`` reset, ...)
- ``**``, ``__`` and ``~~`` toggle bold, underline and strikethrough
- ``\\`` escapes the next marker character

Formatting never carries across a line ending.
"""

from __future__ import annotations

import logging

from crafty_novels.importer.frontmatter import parse_frontmatter
from crafty_novels.syntax.minecraft import (
    SECTION_SIGN,
    Color,
    Reset,
    Style,
    StyleKind,
    lookup_format_code,
)
from crafty_novels.syntax.tokens import (
    LineBreak,
    PageBreak,
    StyleEnd,
    StyleStart,
    Text,
    Token,
)

logger = logging.getLogger(__name__)

PAGE_MARKER = "#- "
ESCAPE = "\\"

TOGGLE_MARKERS: dict[str, Style] = {
    "**": Style.bold,
    "__": Style.underline,
    "~~": Style.strikethrough,
}

ESCAPABLE = frozenset({ESCAPE, SECTION_SIGN, "*", "_", "~", "#"})


class _Scanner:
    """Single-use, left-to-right scan over one document body."""

    def __init__(self, text: str, start: int, tokens: list[Token]) -> None:
        self.text = text
        self.pos = start
        self.tokens = tokens
        self._pending: list[str] = []
        self._open: list[StyleKind] = []

    def run(self) -> list[Token]:
        if self.text.startswith(PAGE_MARKER, self.pos):
            self._emit(PageBreak())
            self.pos += len(PAGE_MARKER)

        while self.pos < len(self.text):
            self._step()

        if self._open:
            logger.debug("closing %d style(s) left open at end of document", len(self._open))
        self._close_all()
        self._flush()
        return self.tokens

    # -- scanning ----------------------------------------------------------

    def _step(self) -> None:
        text, pos = self.text, self.pos
        char = text[pos]

        if char in "\r\n":
            self._line_ending()
            return

        if char == SECTION_SIGN:
            code = text[pos + 1 : pos + 2]
            kind = lookup_format_code(code) if code else None
            if kind is not None:
                self._format_code(kind)
                self.pos += 2
                return
            logger.debug("unknown format code %r at offset %d; kept as text", code, pos)

        toggle = TOGGLE_MARKERS.get(text[pos : pos + 2])
        if toggle is not None:
            if toggle in self._open:
                self._close(toggle)
            else:
                self._open_style(toggle)
            self.pos += 2
            return

        if char == ESCAPE:
            escaped = text[pos + 1 : pos + 2]
            if escaped in ESCAPABLE:
                self._pending.append(escaped)
                self.pos += 2
                return

        self._pending.append(char)
        self.pos += 1

    def _line_ending(self) -> None:
        text, pos = self.text, self.pos
        newline = "\r\n" if text.startswith("\r\n", pos) else text[pos]
        after = pos + len(newline)

        self._close_all()
        if text.startswith(PAGE_MARKER, after):
            self._emit(PageBreak())
            self.pos = after + len(PAGE_MARKER)
            return

        # a final line ending terminates the last line rather than adding one
        if after < len(text):
            self._emit(LineBreak())
        self.pos = after

    def _format_code(self, kind: StyleKind | Reset) -> None:
        if isinstance(kind, Reset):
            self._close_all()
        elif isinstance(kind, Color):
            # a colour code clears every active format, as it does in game
            self._close_all()
            self._open_style(kind)
        elif kind not in self._open:
            self._open_style(kind)

    # -- style stack ---------------------------------------------------------

    def _open_style(self, kind: StyleKind) -> None:
        self._emit(StyleStart(kind))
        self._open.append(kind)

    def _close(self, kind: StyleKind) -> None:
        """Close `kind`, keeping the nesting LIFO by re-opening anything above it."""
        index = len(self._open) - 1 - self._open[::-1].index(kind)
        above = self._open[index + 1 :]
        for inner in reversed(above):
            self._emit(StyleEnd(inner))
        self._emit(StyleEnd(kind))
        del self._open[index:]
        for inner in above:
            self._open_style(inner)

    def _close_all(self) -> None:
        while self._open:
            self._emit(StyleEnd(self._open.pop()))

    # -- output ----------------------------------------------------------------

    def _flush(self) -> None:
        if self._pending:
            self.tokens.append(Text("".join(self._pending)))
            self._pending.clear()

    def _emit(self, token: Token) -> None:
        self._flush()
        self.tokens.append(token)


class StendhalImporter:
    """Converts Stendhal export text into a token list."""

    format_name = "stendhal"

    def tokenize(self, text: str) -> list[Token]:
        """Tokenize a whole export. Never raises for any `str` input."""
        tokens: list[Token] = []

        frontmatter, body_start = parse_frontmatter(text)
        if frontmatter is not None:
            tokens.append(frontmatter)

        _Scanner(text, body_start, tokens).run()
        logger.debug("tokenized %d chars into %d tokens", len(text), len(tokens))
        return tokens


def tokenize_string(text: str) -> list[Token]:
    """Shorthand for ``StendhalImporter().tokenize(text)``."""
    return StendhalImporter().tokenize(text)
