"""Parser for the metadata block at the top of a Stendhal export.

A Stendhal export opens with ``key: value`` lines closed by a ``pages:``
delimiter line::

    title: crafty_novels
    author: RemasteredArch
    pages:
    #- The text of the book
"""

from __future__ import annotations

import logging
import re

from crafty_novels.syntax.tokens import Frontmatter

logger = logging.getLogger(__name__)

PAGES_DELIMITER = "pages:"

_FIELD_RE = re.compile(r"([A-Za-z][\w-]*):[ \t]*(.*)")
_LINE_RE = re.compile(r"([^\r\n]*)(\r\n|\n|\r|$)")


def _lines_with_offsets(text: str):
    """Yield (line, offset_after_line_terminator) pairs."""
    pos = 0
    while pos < len(text):
        match = _LINE_RE.match(text, pos)
        # _LINE_RE always matches, possibly with an empty terminator at end of text
        yield match.group(1), match.end()
        pos = match.end()


def _is_delimiter(line: str) -> bool:
    return line.rstrip() == PAGES_DELIMITER


def parse_frontmatter(text: str) -> tuple[Frontmatter | None, int]:
    """Split the frontmatter block off the start of `text`.

    Returns the Frontmatter token and the offset where the body starts, or
    (None, 0) when there is no block or the block is malformed. Duplicate
    keys keep the last value.
    """
    fields: dict[str, str] = {}
    lines = _lines_with_offsets(text)

    for line, end in lines:
        if _is_delimiter(line):
            if not fields:
                return None, 0
            following = next(lines, None)
            if following is not None and _is_delimiter(following[0]):
                logger.debug("duplicate %r delimiter; treating frontmatter as body", PAGES_DELIMITER)
                return None, 0
            return Frontmatter(fields=fields), end

        match = _FIELD_RE.fullmatch(line.rstrip())
        if match is None:
            if fields:
                logger.debug("frontmatter not closed by %r; treating it as body", PAGES_DELIMITER)
            return None, 0

        fields[match.group(1).lower()] = match.group(2).strip()

    if fields:
        logger.debug("frontmatter runs to end of input; treating it as body")
    return None, 0
