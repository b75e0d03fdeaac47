"""DocumentWriter: writes rendered books to disk."""

from __future__ import annotations

import logging
from pathlib import Path

from crafty_novels.config.models import OutputConfig

logger = logging.getLogger(__name__)

# Default file extension per export format.
FORMAT_EXTENSIONS: dict[str, str] = {
    "html": ".html",
    "debug": ".txt",
}


def default_output_path(source: str | Path, fmt: str) -> Path:
    """`book.txt` + html -> `book.html`, next to the source."""
    return Path(source).with_suffix(FORMAT_EXTENSIONS.get(fmt, f".{fmt}"))


class DocumentWriter:
    """Writes rendered output, creating parent directories as needed.

    Refuses to replace an existing file unless `OutputConfig.overwrite` is set.
    """

    def __init__(self, config: OutputConfig | None = None) -> None:
        self.config = config or OutputConfig()

    def write(self, content: str, dest: str | Path, *, dry_run: bool = False) -> Path:
        """Write `content` to `dest`. Returns the (would-be) path."""
        dest = Path(dest)

        if dry_run:
            logger.debug("dry-run: would write %s", dest)
            return dest

        if dest.exists() and not self.config.overwrite:
            raise FileExistsError(f"Refusing to overwrite {dest} (output.overwrite is false)")

        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(content, encoding="utf-8")
        logger.info("wrote %s (%d bytes)", dest, len(content.encode("utf-8")))
        return dest
