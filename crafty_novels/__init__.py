"""crafty_novels: convert Minecraft books exported by Stendhal into HTML."""

__version__ = "0.1.0"

from crafty_novels.converter import BookConverter, ConversionResult
from crafty_novels.errors import (
    CraftyNovelsError,
    DecodeError,
    TokenSequenceError,
    UnknownFormatError,
    UnmappedTokenKind,
)
from crafty_novels.exporter import DebugExporter, Exporter, HtmlExporter, get_exporter
from crafty_novels.importer import StendhalImporter, get_importer, tokenize_string

__all__ = [
    "BookConverter",
    "ConversionResult",
    "CraftyNovelsError",
    "DebugExporter",
    "DecodeError",
    "Exporter",
    "HtmlExporter",
    "StendhalImporter",
    "TokenSequenceError",
    "UnknownFormatError",
    "UnmappedTokenKind",
    "__version__",
    "get_exporter",
    "get_importer",
    "tokenize_string",
]
