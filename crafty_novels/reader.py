"""Reading export files (or stdin) and decoding them to text."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from crafty_novels.errors import DecodeError

logger = logging.getLogger(__name__)

STDIN = "-"
_BOM = "\ufeff"


def read_source(source: str | Path) -> bytes:
    """Read raw bytes from a file path, or from stdin when `source` is ``-``."""
    if str(source) == STDIN:
        data = sys.stdin.buffer.read()
        logger.debug("read %d bytes from stdin", len(data))
        return data

    path = Path(source)
    data = path.read_bytes()
    logger.debug("read %d bytes from %s", len(data), path)
    return data


def decode_source(data: bytes, source: str = "<bytes>") -> str:
    """Decode strict UTF-8, dropping a leading byte order mark."""
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(source, e) from e
    return text[1:] if text.startswith(_BOM) else text


def load_text(source: str | Path) -> str:
    return decode_source(read_source(source), "stdin" if str(source) == STDIN else str(source))
