"""Runs the import -> export pipeline for a whole book."""

from __future__ import annotations

import logging
from pathlib import Path

from crafty_novels.config.models import CraftyConfig
from crafty_novels.converter.models import ConversionResult
from crafty_novels.exporter import get_exporter
from crafty_novels.importer import get_importer
from crafty_novels.reader import decode_source, load_text
from crafty_novels.syntax.tokens import Frontmatter, PageBreak, Token

logger = logging.getLogger(__name__)


def count_pages(tokens: list[Token]) -> int:
    """Number of pages a token list renders to.

    Content before the first page break counts as a page of its own.
    """
    pages = 0
    has_leading_content = False
    for token in tokens:
        if isinstance(token, PageBreak):
            pages += 1
        elif pages == 0 and not isinstance(token, Frontmatter):
            has_leading_content = True
    return pages + (1 if has_leading_content else 0)


class BookConverter:
    """Converts Stendhal exports into any registered output format."""

    def __init__(self, config: CraftyConfig | None = None, source_format: str = "stendhal") -> None:
        self._config = config or CraftyConfig()
        self._importer = get_importer(source_format)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def tokenize(self, text: str) -> list[Token]:
        return self._importer.tokenize(text)

    def convert_string(
        self, text: str, source: str = "<string>", fmt: str | None = None
    ) -> ConversionResult:
        """Convert already-decoded text."""
        fmt = fmt or self._config.output.default_format
        exporter = get_exporter(fmt, self._config)

        tokens = self.tokenize(text)
        output = exporter.export(tokens)

        frontmatter = tokens[0] if tokens and isinstance(tokens[0], Frontmatter) else None
        result = ConversionResult(
            source_path=source,
            output=output,
            format=fmt,
            title=frontmatter.title if frontmatter else None,
            author=frontmatter.author if frontmatter else None,
            page_count=count_pages(tokens),
            token_count=len(tokens),
        )
        logger.info(
            "converted %s to %s (%d pages, %d tokens)",
            source, fmt, result.page_count, result.token_count,
        )
        return result

    def convert_bytes(
        self, data: bytes, source: str = "<bytes>", fmt: str | None = None
    ) -> ConversionResult:
        """Decode UTF-8 bytes and convert them. Raises DecodeError on bad input."""
        return self.convert_string(decode_source(data, source), source, fmt)

    def convert_file(self, path: str | Path, fmt: str | None = None) -> ConversionResult:
        """Read and convert a file, or stdin when `path` is ``-``."""
        return self.convert_string(load_text(path), str(path), fmt)
