"""Syntax definitions: the token model shared by importers and exporters."""

from crafty_novels.syntax.minecraft import (
    FORMAT_CODES,
    RESET,
    SECTION_SIGN,
    Color,
    Reset,
    Rgb,
    Style,
    StyleKind,
    format_code,
    lookup_format_code,
)
from crafty_novels.syntax.tokens import (
    Frontmatter,
    LineBreak,
    PageBreak,
    StyleEnd,
    StyleStart,
    Text,
    Token,
)
from crafty_novels.syntax.validation import validate_tokens

__all__ = [
    "Color",
    "FORMAT_CODES",
    "Frontmatter",
    "LineBreak",
    "PageBreak",
    "RESET",
    "Reset",
    "Rgb",
    "SECTION_SIGN",
    "Style",
    "StyleEnd",
    "StyleKind",
    "StyleStart",
    "Text",
    "Token",
    "format_code",
    "lookup_format_code",
    "validate_tokens",
]
