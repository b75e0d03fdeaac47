"""Importers: source formats to tokens."""

from crafty_novels.errors import UnknownFormatError
from crafty_novels.importer.base import Importer
from crafty_novels.importer.frontmatter import PAGES_DELIMITER, parse_frontmatter
from crafty_novels.importer.stendhal import StendhalImporter, tokenize_string

_IMPORTER_MAP: dict[str, type[Importer]] = {
    "stendhal": StendhalImporter,
}


def get_importer(name: str) -> Importer:
    """Instantiate the importer registered under `name`."""
    cls = _IMPORTER_MAP.get(name.lower())
    if cls is None:
        raise UnknownFormatError(name, sorted(_IMPORTER_MAP))
    return cls()


def available_importers() -> list[str]:
    return sorted(_IMPORTER_MAP)


__all__ = [
    "Importer",
    "PAGES_DELIMITER",
    "StendhalImporter",
    "available_importers",
    "get_importer",
    "parse_frontmatter",
    "tokenize_string",
]
