"""Minecraft: Java Edition text formatting: styles, colours and `§` format codes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

SECTION_SIGN = "§"


class Style(str, Enum):
    """Text decorations that can be toggled independently of colour."""

    bold = "bold"
    italic = "italic"
    underline = "underline"
    strikethrough = "strikethrough"
    # "Magical" text: characters rapidly swap between random glyphs in game.
    obfuscated = "obfuscated"


@dataclass(frozen=True)
class Rgb:
    """A 24-bit RGB colour value."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                raise ValueError(f"RGB channel out of range: {channel}")

    @property
    def hex(self) -> str:
        """`RRGGBB` without the leading `#`."""
        return f"{self.red:02X}{self.green:02X}{self.blue:02X}"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def __str__(self) -> str:
        return f"#{self.hex}"


# code, foreground, background
_COLOR_TABLE: dict[str, tuple[str, tuple[int, int, int], tuple[int, int, int]]] = {
    "black": ("0", (0, 0, 0), (0, 0, 0)),
    "dark_blue": ("1", (0, 0, 170), (0, 0, 42)),
    "dark_green": ("2", (0, 170, 0), (0, 42, 0)),
    "dark_aqua": ("3", (0, 170, 170), (0, 42, 42)),
    "dark_red": ("4", (170, 0, 0), (42, 0, 0)),
    "dark_purple": ("5", (170, 0, 170), (42, 0, 42)),
    "gold": ("6", (255, 170, 0), (42, 42, 0)),
    "gray": ("7", (170, 170, 170), (42, 42, 42)),
    "dark_gray": ("8", (85, 85, 85), (21, 21, 21)),
    "blue": ("9", (85, 85, 255), (21, 21, 63)),
    "green": ("a", (85, 255, 85), (21, 63, 21)),
    "aqua": ("b", (85, 255, 255), (21, 63, 63)),
    "red": ("c", (255, 85, 85), (63, 21, 21)),
    "light_purple": ("d", (255, 85, 255), (63, 21, 63)),
    "yellow": ("e", (255, 255, 85), (63, 63, 21)),
    "white": ("f", (255, 255, 255), (63, 63, 63)),
}


class Color(str, Enum):
    """The sixteen chat colours of Minecraft: Java Edition."""

    black = "black"
    dark_blue = "dark_blue"
    dark_green = "dark_green"
    dark_aqua = "dark_aqua"
    dark_red = "dark_red"
    dark_purple = "dark_purple"
    gold = "gold"
    gray = "gray"
    dark_gray = "dark_gray"
    blue = "blue"
    green = "green"
    aqua = "aqua"
    red = "red"
    light_purple = "light_purple"
    yellow = "yellow"
    white = "white"

    @property
    def code(self) -> str:
        return _COLOR_TABLE[self.value][0]

    @property
    def fg(self) -> Rgb:
        return Rgb(*_COLOR_TABLE[self.value][1])

    @property
    def bg(self) -> Rgb:
        return Rgb(*_COLOR_TABLE[self.value][2])

    def __str__(self) -> str:
        return str(self.fg)


StyleKind = Union[Style, Color]


class Reset:
    """Sentinel for `§r`, which clears every active style and colour."""

    def __repr__(self) -> str:
        return "RESET"


RESET = Reset()

_STYLE_CODES: dict[str, Style] = {
    "k": Style.obfuscated,
    "l": Style.bold,
    "m": Style.strikethrough,
    "n": Style.underline,
    "o": Style.italic,
}

FORMAT_CODES: dict[str, StyleKind | Reset] = {
    **_STYLE_CODES,
    **{color.code: color for color in Color},
    "r": RESET,
}


def lookup_format_code(code: str) -> StyleKind | Reset | None:
    """Resolve the character after `§`. Returns None for unknown codes."""
    return FORMAT_CODES.get(code.lower())


def format_code(kind: StyleKind | Reset) -> str:
    """Inverse of `lookup_format_code`, rendered with its `§` prefix."""
    if isinstance(kind, Reset):
        return f"{SECTION_SIGN}r"
    if isinstance(kind, Color):
        return f"{SECTION_SIGN}{kind.code}"
    for code, style in _STYLE_CODES.items():
        if style is kind:
            return f"{SECTION_SIGN}{code}"
    raise ValueError(f"no format code for {kind!r}")
